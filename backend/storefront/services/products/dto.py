"""
DTOs for ProductService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductAddIn:
    """
    Input payload to create a product.

    :param seller_id: Owning seller identity.
    :type seller_id: UUID
    :param name: Product name.
    :type name: str
    :param price: Unit price (``>= 0``).
    :type price: Decimal
    :param quantity: Units in stock (``>= 0``).
    :type quantity: int
    """

    seller_id: UUID
    name: str
    price: Decimal
    quantity: int


@dataclass(frozen=True, slots=True)
class ProductUpdateIn:
    """
    Partial update. ``None`` keeps the stored value.

    :param id: Product id.
    :type id: int
    :param name: New name.
    :type name: str | None
    :param price: New price.
    :type price: Decimal | None
    :param quantity: New quantity.
    :type quantity: int | None
    """

    id: int
    name: str | None = None
    price: Decimal | None = None
    quantity: int | None = None


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductAddOut:
    id: int
    seller_id: UUID
    name: str
    price: Decimal
    quantity: int
    created_at: datetime


@dataclass(frozen=True, slots=True)
class ProductFindOut:
    id: int
    seller_id: UUID
    name: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime | None


@dataclass(frozen=True, slots=True)
class ProductUpdateOut:
    id: int
    name: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime | None


@dataclass(frozen=True, slots=True)
class ProductListItemOut:
    id: int
    name: str
    price: Decimal
