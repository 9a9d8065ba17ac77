"""Seller resource schemas. Login reuses :class:`LoginSchema`."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class SellerRegisterSchema(Schema):
    """Payload for ``POST /sellers/register``."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    password = fields.String(
        required=True, load_only=True, validate=validate.Length(min=8, max=128)
    )


class SellerUpdateSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))


class SellerSchema(Schema):
    """Public representation of a seller. Never carries credentials."""

    email = fields.Email(required=True)
    name = fields.String(required=True)
    registered_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(allow_none=True)
