"""Seller model definition for the storefront."""

from __future__ import annotations

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import validates

from storefront.core.extensions import db

from .account import AccountMixin, validate_email, validate_name


class Seller(AccountMixin, db.Model):
    """
    Merchant account that owns catalog products.

    Sellers log in separately from customers; ``Product.seller_id`` holds the
    id of the seller whose token created the product.
    """

    __tablename__ = "sellers"
    __table_args__ = (UniqueConstraint("email", name="uq_sellers_email"),)

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        return validate_email(value)

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        return validate_name(value)
