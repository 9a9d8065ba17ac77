"""Customer endpoints: registration, login, profile update and deletion."""

from __future__ import annotations

from flask import Blueprint, request

from storefront.api.deps import (
    CUSTOMER_ROLE,
    current_account_email,
    customer_service,
    issue_access_token,
    json_response,
    require_role,
    service_errors,
    timing,
)
from storefront.schemas import (
    CustomerRegisterSchema,
    CustomerSchema,
    CustomerUpdateSchema,
    LoginResultSchema,
    LoginSchema,
)
from storefront.services.customers.dto import (
    CustomerDeleteIn,
    CustomerLoginIn,
    CustomerRegisterIn,
    CustomerUpdateIn,
)

bp = Blueprint("customers", __name__, url_prefix="/customers")

register_schema = CustomerRegisterSchema()
login_schema = LoginSchema()
update_schema = CustomerUpdateSchema()
customer_schema = CustomerSchema()
login_result_schema = LoginResultSchema()


@bp.post("/register")
@timing
def register():
    """Register a customer and return its public representation."""

    data = register_schema.load(request.get_json(silent=True) or {})
    service = customer_service()
    with service_errors(service):
        customer = service.register(CustomerRegisterIn(**data))
    return json_response({"data": customer_schema.dump(customer)}, status=201)


@bp.post("/login")
@timing
def login():
    """Check credentials; issue an access token when they match."""

    data = login_schema.load(request.get_json(silent=True) or {})
    service = customer_service()
    with service_errors(service):
        result = service.login(CustomerLoginIn(**data))
    if not result.matched:
        return json_response({"data": login_result_schema.dump({"matched": False})}, status=401)
    token = issue_access_token(result.id, data["email"], CUSTOMER_ROLE)
    body = {"data": login_result_schema.dump({"matched": True, "access_token": token})}
    return json_response(body)


@bp.put("")
@require_role(CUSTOMER_ROLE)
@timing
def update():
    """Replace the display name of the authenticated customer."""

    data = update_schema.load(request.get_json(silent=True) or {})
    service = customer_service()
    with service_errors(service):
        customer = service.update(
            CustomerUpdateIn(email=current_account_email(), name=data["name"])
        )
    return json_response({"data": customer_schema.dump(customer)})


@bp.delete("")
@require_role(CUSTOMER_ROLE)
@timing
def delete():
    """Soft delete the authenticated customer."""

    service = customer_service()
    with service_errors(service):
        service.delete(CustomerDeleteIn(email=current_account_email()))
    return "", 204
