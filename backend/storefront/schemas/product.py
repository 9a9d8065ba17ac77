"""Product resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from storefront.models.product import MAX_PRICE, NAME_MAX_LENGTH

PRICE_FIELD = dict(places=2, as_string=True, validate=validate.Range(min=0, max=MAX_PRICE))


class ProductCreateSchema(Schema):
    """Payload for ``POST /products``. The seller is the authenticated account."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=NAME_MAX_LENGTH))
    price = fields.Decimal(required=True, **PRICE_FIELD)
    quantity = fields.Integer(load_default=0, strict=True, validate=validate.Range(min=0))


class ProductUpdateSchema(Schema):
    """Partial update for ``PUT /products/<id>``; omitted fields keep their value."""

    name = fields.String(validate=validate.Length(min=1, max=NAME_MAX_LENGTH))
    price = fields.Decimal(**PRICE_FIELD)
    quantity = fields.Integer(strict=True, validate=validate.Range(min=0))

    @validates_schema
    def require_any(self, data: dict[str, Any], **_: Any) -> None:
        if not data:
            raise ValidationError("At least one of name, price or quantity is required.")


class ProductSchema(Schema):
    """Full representation of a product."""

    id = fields.Integer(required=True)
    seller_id = fields.UUID()
    name = fields.String(required=True)
    price = fields.Decimal(required=True, as_string=True)
    quantity = fields.Integer(required=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(allow_none=True)


class ProductListItemSchema(Schema):
    """Catalog listing entry."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    price = fields.Decimal(required=True, as_string=True)
