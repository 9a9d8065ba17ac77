"""Seller endpoints: registration, login and renaming."""

from __future__ import annotations

from flask import Blueprint, request

from storefront.api.deps import (
    SELLER_ROLE,
    current_account_email,
    issue_access_token,
    json_response,
    require_role,
    seller_service,
    service_errors,
    timing,
)
from storefront.schemas import (
    LoginResultSchema,
    LoginSchema,
    SellerRegisterSchema,
    SellerSchema,
    SellerUpdateSchema,
)
from storefront.services.sellers.dto import SellerLoginIn, SellerRegisterIn, SellerUpdateIn

bp = Blueprint("sellers", __name__, url_prefix="/sellers")

register_schema = SellerRegisterSchema()
login_schema = LoginSchema()
update_schema = SellerUpdateSchema()
seller_schema = SellerSchema()
login_result_schema = LoginResultSchema()


@bp.post("/register")
@timing
def register():
    data = register_schema.load(request.get_json(silent=True) or {})
    service = seller_service()
    with service_errors(service):
        seller = service.register(SellerRegisterIn(**data))
    return json_response({"data": seller_schema.dump(seller)}, status=201)


@bp.post("/login")
@timing
def login():
    """Check seller credentials; the token grants access to product writes."""

    data = login_schema.load(request.get_json(silent=True) or {})
    service = seller_service()
    with service_errors(service):
        result = service.login(SellerLoginIn(**data))
    if not result.matched:
        return json_response({"data": login_result_schema.dump({"matched": False})}, status=401)
    token = issue_access_token(result.id, data["email"], SELLER_ROLE)
    return json_response(
        {"data": login_result_schema.dump({"matched": True, "access_token": token})}
    )


@bp.put("")
@require_role(SELLER_ROLE)
@timing
def update():
    data = update_schema.load(request.get_json(silent=True) or {})
    service = seller_service()
    with service_errors(service):
        seller = service.update(SellerUpdateIn(email=current_account_email(), name=data["name"]))
    return json_response({"data": seller_schema.dump(seller)})
