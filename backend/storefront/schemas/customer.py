"""Customer resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class CustomerRegisterSchema(Schema):
    """Payload for ``POST /customers/register``."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    password = fields.String(
        required=True, load_only=True, validate=validate.Length(min=8, max=128)
    )


class LoginSchema(Schema):
    """Credentials submitted to ``POST /customers/login``."""

    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)


class CustomerUpdateSchema(Schema):
    """Payload for ``PUT /customers``; the email comes from the token."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=100))


class CustomerSchema(Schema):
    """Public representation of a customer. Never carries credentials."""

    email = fields.Email(required=True)
    name = fields.String(required=True)
    registered_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(allow_none=True)


class LoginResultSchema(Schema):
    matched = fields.Boolean(required=True)
    access_token = fields.String()
