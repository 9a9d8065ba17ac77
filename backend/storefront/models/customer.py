"""Customer model definition for the storefront."""

from __future__ import annotations

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import validates

from storefront.core.extensions import db

from .account import AccountMixin, normalize_email, validate_email, validate_name

__all__ = ["Customer", "normalize_email"]


class Customer(AccountMixin, db.Model):
    """Registered buyer identified by email. Columns come from :class:`AccountMixin`."""

    __tablename__ = "customers"
    __table_args__ = (UniqueConstraint("email", name="uq_customers_email"),)

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        return validate_email(value)

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        return validate_name(value)
