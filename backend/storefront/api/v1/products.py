"""Product catalog endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from storefront.api.deps import (
    SELLER_ROLE,
    current_account_id,
    json_response,
    product_service,
    require_role,
    service_errors,
    timing,
)
from storefront.schemas import (
    ProductCreateSchema,
    ProductListItemSchema,
    ProductSchema,
    ProductUpdateSchema,
)
from storefront.services.products.dto import ProductAddIn, ProductUpdateIn

bp = Blueprint("products", __name__, url_prefix="/products")

create_schema = ProductCreateSchema()
update_schema = ProductUpdateSchema()
product_schema = ProductSchema()
product_list_schema = ProductListItemSchema(many=True)


@bp.get("")
@timing
def list_products():
    """Return every active product ordered by id."""

    service = product_service()
    with service_errors(service):
        items = service.list()
    return json_response({"data": product_list_schema.dump(items)})


@bp.get("/<int:product_id>")
@timing
def get_product(product_id: int):
    service = product_service()
    with service_errors(service):
        product = service.find_by_id(product_id)
    return json_response({"data": product_schema.dump(product)})


@bp.post("")
@require_role(SELLER_ROLE)
@timing
def create_product():
    """Create a product owned by the authenticated seller."""

    data = create_schema.load(request.get_json(silent=True) or {})
    seller_id = current_account_id()
    service = product_service(seller_id)
    with service_errors(service):
        product = service.add(ProductAddIn(seller_id=seller_id, **data))
    return json_response({"data": product_schema.dump(product)}, status=201)


@bp.put("/<int:product_id>")
@require_role(SELLER_ROLE)
@timing
def update_product(product_id: int):
    """Apply a partial update to an active product owned by the caller."""

    data = update_schema.load(request.get_json(silent=True) or {})
    service = product_service(current_account_id())
    with service_errors(service):
        product = service.update(ProductUpdateIn(id=product_id, **data))
    return json_response({"data": product_schema.dump(product)})


@bp.delete("/<int:product_id>")
@require_role(SELLER_ROLE)
@timing
def delete_product(product_id: int):
    service = product_service(current_account_id())
    with service_errors(service):
        service.delete(product_id)
    return "", 204
