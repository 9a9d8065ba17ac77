"""Product model definition for the storefront catalog."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import BigInteger, CheckConstraint, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from storefront.core.extensions import db

from .base import PKMixin, ReprMixin, SoftDeleteMixin, UpdateTimestampMixin

NAME_MAX_LENGTH = 150
#: Largest value a ``Numeric(12, 2)`` price column holds.
MAX_PRICE = Decimal("9999999999.99")


class Product(PKMixin, ReprMixin, UpdateTimestampMixin, SoftDeleteMixin, db.Model):
    """
    Catalog item offered by a seller.

    Fields
    ------
    id : int
        Database-assigned identifier, stable once assigned.
    seller_id : uuid.UUID
        Owning seller. Never changed after creation.
    name : str
        Product name.
    price : Decimal
        Unit price, two decimals, non-negative.
    quantity : int
        Units in stock, non-negative.
    created_at : int
        Creation time in epoch seconds.
    """

    __tablename__ = "products"

    seller_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
    )
