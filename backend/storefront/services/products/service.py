"""
ProductService
==============

Application service for the ``Product`` catalog.

Notes
-----
- Validation happens inside the unit of work so a rejected input still
  finalizes the transaction exactly once (as a rollback).
- Deleted products are invisible to listing, lookup and update.
- When the context carries an ``actor_id`` only the owning seller may
  update or delete a product.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from storefront.models.product import MAX_PRICE, NAME_MAX_LENGTH, Product
from storefront.services._shared.base import BaseService
from storefront.services._shared.errors import ForbiddenError, InvalidInputError, NotFoundError
from storefront.services.products._converters import (
    product_to_add_out,
    product_to_find_out,
    product_to_list_item_out,
    product_to_update_out,
)
from storefront.services.products.dto import (
    ProductAddIn,
    ProductAddOut,
    ProductFindOut,
    ProductListItemOut,
    ProductUpdateIn,
    ProductUpdateOut,
)

logger = logging.getLogger(__name__)

PRICE_QUANTUM = Decimal("0.01")


class ProductService(BaseService):
    """Use cases over catalog products."""

    # ------------------------------------------------------------------ #
    # Create
    # ------------------------------------------------------------------ #

    def add(self, dto: ProductAddIn) -> ProductAddOut:
        """
        Insert a product stamped with the current time.

        :param dto: Creation payload.
        :type dto: :class:`ProductAddIn`
        :returns: The stored product including its assigned id.
        :rtype: :class:`ProductAddOut`
        :raises InvalidInputError: On empty name or negative price/quantity.
        """
        with self.rw_uow() as uow:
            if dto.seller_id is None:
                raise InvalidInputError("Seller is required.")
            product = Product(
                seller_id=dto.seller_id,
                name=self._clean_name(dto.name),
                price=self._clean_price(dto.price),
                quantity=self._clean_quantity(dto.quantity),
                created_at=self.now_epoch(),
            )
            persisted = uow.products.add(product)
            out = product_to_add_out(persisted)

        logger.info(
            "Product added",
            extra={"operation": "product.add", "product_id": out.id},
        )
        return out

    # ------------------------------------------------------------------ #
    # Retrieval
    # ------------------------------------------------------------------ #

    def list(self) -> list[ProductListItemOut]:
        """Return every active product ordered by id."""
        with self.rw_uow() as uow:
            return [product_to_list_item_out(row) for row in uow.products.list_active()]

    def find_by_id(self, product_id: int) -> ProductFindOut:
        """
        :raises NotFoundError: If the product is missing or deleted.
        """
        with self.rw_uow() as uow:
            return product_to_find_out(uow.products.find_by_id(product_id))

    # ------------------------------------------------------------------ #
    # Update
    # ------------------------------------------------------------------ #

    def update(self, dto: ProductUpdateIn) -> ProductUpdateOut:
        """
        Apply a partial update; ``None`` fields keep their stored value.

        ``seller_id`` and ``created_at`` never change.

        :raises InvalidInputError: On empty name or negative price/quantity.
        :raises NotFoundError: If the product is missing or deleted.
        :raises ForbiddenError: If the actor does not own the product.
        """
        with self.rw_uow() as uow:
            self._ensure_owner(uow.products.find_by_id(dto.id))
            changes = Product(
                id=dto.id,
                name=None if dto.name is None else self._clean_name(dto.name),
                price=None if dto.price is None else self._clean_price(dto.price),
                quantity=None if dto.quantity is None else self._clean_quantity(dto.quantity),
                updated_at=self.now_epoch(),
            )
            persisted = uow.products.update(changes)
            out = product_to_update_out(persisted)

        logger.info(
            "Product updated",
            extra={"operation": "product.update", "product_id": out.id},
        )
        return out

    # ------------------------------------------------------------------ #
    # Delete
    # ------------------------------------------------------------------ #

    def delete(self, product_id: int) -> None:
        """
        Soft delete a product. Deleting twice is a no-op.

        :raises NotFoundError: If no product ever had that id.
        :raises ForbiddenError: If the actor does not own the product.
        """
        with self.rw_uow() as uow:
            if self.ctx.actor_id is not None:
                try:
                    self._ensure_owner(uow.products.find_by_id(product_id))
                except NotFoundError:
                    # Already deleted or unknown; delete() decides which.
                    pass
            uow.products.delete(self.now_epoch(), product_id)

        logger.info(
            "Product deleted",
            extra={"operation": "product.delete", "product_id": product_id},
        )

    # ------------------------------------------------------------------ #
    # Validation helpers
    # ------------------------------------------------------------------ #

    def _ensure_owner(self, product: Product) -> None:
        actor_id = self.ctx.actor_id
        if actor_id is not None and product.seller_id != actor_id:
            raise ForbiddenError("Product", product.id)

    @staticmethod
    def _clean_name(value: str | None) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError("Product name is required.")
        if len(value.strip()) > NAME_MAX_LENGTH:
            raise InvalidInputError(f"Product name exceeds {NAME_MAX_LENGTH} characters.")
        return value.strip()

    @staticmethod
    def _clean_price(value: Decimal | int | str | None) -> Decimal:
        try:
            price = Decimal(value)  # type: ignore[arg-type]
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise InvalidInputError("Price must be a decimal number.") from exc
        if not price.is_finite() or price < 0:
            raise InvalidInputError("Price must be a non-negative number.")
        try:
            price = price.quantize(PRICE_QUANTUM)
        except InvalidOperation as exc:
            raise InvalidInputError("Price is out of range.") from exc
        if price > MAX_PRICE:
            raise InvalidInputError(f"Price must not exceed {MAX_PRICE}.")
        return price

    @staticmethod
    def _clean_quantity(value: int | None) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError("Quantity must be an integer.")
        if value < 0:
            raise InvalidInputError("Quantity must be non-negative.")
        return value
