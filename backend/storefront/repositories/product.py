"""Product repository: catalog writes and reads keyed by numeric id."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select, update

from storefront.models.product import Product
from storefront.repositories.base import BaseRepository
from storefront.services._shared.errors import NotFoundError


class ProductRepository(BaseRepository[Product]):
    """Persistence-only repository for :class:`Product`.

    Soft-deleted products are invisible to every read and cannot be updated.
    ``seller_id`` and ``created_at`` are never part of an UPDATE.
    """

    model = Product
    entity_name = "Product"

    _updatable = ("name", "price", "quantity")

    def _active(self, product_id: int) -> tuple[Any, ...]:
        return (Product.id == product_id, Product.deleted_at.is_(None))

    def list_active(self) -> list[Product]:
        """Return every active product ordered by id (possibly empty)."""
        stmt = select(Product).where(Product.deleted_at.is_(None)).order_by(Product.id.asc())
        with self.errors():
            return list(self.session.execute(stmt).scalars().all())

    def find_by_id(self, product_id: int) -> Product:
        """Return the active product with ``product_id``.

        :raises NotFoundError: When missing or soft-deleted.
        """
        product = self._reload(*self._active(product_id))
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def update(self, product: Product) -> Product:
        """Apply the supplied name/price/quantity and ``updated_at``.

        Attributes left as ``None`` on the transient ``product`` keep their
        stored value.

        :param product: Transient entity carrying ``id``, ``updated_at`` and
            the fields to change.
        :type product: Product
        :returns: Persisted state after the update.
        :rtype: Product
        :raises NotFoundError: When no active product has that id.
        """
        values: dict[str, Any] = {
            key: getattr(product, key)
            for key in self._updatable
            if getattr(product, key) is not None
        }
        values["updated_at"] = product.updated_at
        stmt = (
            update(Product)
            .where(*self._active(product.id))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self.errors():
            result = self.session.execute(stmt)
        if not result.rowcount:
            raise NotFoundError("Product", product.id)
        persisted = self._reload(*self._active(product.id))
        if persisted is None:  # pragma: no cover - row vanished inside our txn
            raise NotFoundError("Product", product.id)
        return persisted

    def delete(self, deleted_at: int, product_id: int) -> None:
        """Soft delete a product.

        A second delete is a no-op that keeps the first timestamp.

        :raises NotFoundError: When the id never existed.
        """
        stmt = (
            update(Product)
            .where(*self._active(product_id))
            .values(deleted_at=deleted_at)
            .execution_options(synchronize_session=False)
        )
        with self.errors():
            result = self.session.execute(stmt)
            if result.rowcount:
                return
            exists = self.session.execute(
                select(Product.id).where(Product.id == product_id).limit(1)
            ).first()
        if exists is None:
            raise NotFoundError("Product", product_id)
