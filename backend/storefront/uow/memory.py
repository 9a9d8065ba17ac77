"""
In-memory Unit of Work and repositories.

Rows are kept as plain column dictionaries in an :class:`InMemoryStore`.
Each unit of work copies the store on entry, works on the copy and writes it
back only on commit, which gives the same all-or-nothing behaviour as a real
transaction. ``commits``/``rollbacks`` counters let tests assert that exactly
one outcome happened.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from storefront.models.account import AccountMixin, normalize_email
from storefront.models.customer import Customer
from storefront.models.product import Product
from storefront.models.seller import Seller
from storefront.services._shared.errors import (
    ConstraintViolationError,
    NotFoundError,
    StoreUnavailableError,
)
from storefront.uow.base import UnitOfWork

ACCOUNT_COLUMNS = (
    "id",
    "email",
    "name",
    "password_hash",
    "registered_at",
    "updated_at",
    "deleted_at",
)
PRODUCT_COLUMNS = (
    "id",
    "seller_id",
    "name",
    "price",
    "quantity",
    "created_at",
    "updated_at",
    "deleted_at",
)


def _row(entity: Any, columns: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(entity, name, None) for name in columns}


@dataclass(slots=True)
class InMemoryStore:
    """Shared state behind every :class:`InMemoryUnitOfWork`.

    :param customers: Rows keyed by customer id.
    :param sellers: Rows keyed by seller id.
    :param products: Rows keyed by product id.
    :param available: When ``False`` beginning a transaction fails with
        :class:`StoreUnavailableError`, simulating an outage.
    """

    customers: dict[UUID, dict[str, Any]] = field(default_factory=dict)
    sellers: dict[UUID, dict[str, Any]] = field(default_factory=dict)
    products: dict[int, dict[str, Any]] = field(default_factory=dict)
    next_product_id: int = 1
    available: bool = True
    commits: int = 0
    rollbacks: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)

    def snapshot(self) -> dict[str, Any]:
        with self.lock:
            return {
                "customers": copy.deepcopy(self.customers),
                "sellers": copy.deepcopy(self.sellers),
                "products": copy.deepcopy(self.products),
                "next_product_id": self.next_product_id,
            }

    def apply(self, snapshot: dict[str, Any]) -> None:
        with self.lock:
            self.customers = snapshot["customers"]
            self.sellers = snapshot["sellers"]
            self.products = snapshot["products"]
            self.next_product_id = snapshot["next_product_id"]


class InMemoryAccountRepository:
    """Dictionary-backed twin of :class:`~storefront.repositories.account.AccountRepository`."""

    table: str
    model: type[AccountMixin]
    entity_name: str

    def __init__(self, working: dict[str, Any]) -> None:
        self._working = working

    @property
    def _rows(self) -> dict[UUID, dict[str, Any]]:
        return self._working[self.table]

    def _find(self, email: str, *, include_deleted: bool = False) -> dict[str, Any] | None:
        email = normalize_email(email)
        for row in self._rows.values():
            if row["email"] == email and (include_deleted or row["deleted_at"] is None):
                return row
        return None

    def register(self, account):
        if self._find(account.email, include_deleted=True) is not None:
            raise ConstraintViolationError(
                self.entity_name, "duplicate value violates a unique constraint"
            )
        row = _row(account, ACCOUNT_COLUMNS)
        self._rows[row["id"]] = row
        return self.model(**row)

    def login(self, email: str) -> tuple[UUID | None, str]:
        row = self._find(email)
        if row is None:
            return None, ""
        return row["id"], row["password_hash"] or ""

    def update(self, account):
        row = self._find(account.email)
        if row is None:
            raise NotFoundError(self.entity_name, normalize_email(account.email))
        row["name"] = account.name
        row["updated_at"] = account.updated_at
        return self.model(**row)

    def delete(self, email: str, deleted_at: int) -> None:
        row = self._find(email, include_deleted=True)
        if row is None:
            raise NotFoundError(self.entity_name, normalize_email(email))
        if row["deleted_at"] is None:
            row["deleted_at"] = deleted_at


class InMemoryCustomerRepository(InMemoryAccountRepository):
    table = "customers"
    model = Customer
    entity_name = "Customer"


class InMemorySellerRepository(InMemoryAccountRepository):
    table = "sellers"
    model = Seller
    entity_name = "Seller"


class InMemoryProductRepository:
    """Dictionary-backed twin of :class:`~storefront.repositories.ProductRepository`."""

    def __init__(self, working: dict[str, Any]) -> None:
        self._working = working

    @property
    def _rows(self) -> dict[int, dict[str, Any]]:
        return self._working["products"]

    def _active(self, product_id: int) -> dict[str, Any]:
        row = self._rows.get(product_id)
        if row is None or row["deleted_at"] is not None:
            raise NotFoundError("Product", product_id)
        return row

    def add(self, instance: Product) -> Product:
        if instance.price is not None and instance.price < 0:
            raise ConstraintViolationError("Product", "value violates a check constraint")
        if instance.quantity is not None and instance.quantity < 0:
            raise ConstraintViolationError("Product", "value violates a check constraint")
        row = _row(instance, PRODUCT_COLUMNS)
        row["id"] = self._working["next_product_id"]
        self._working["next_product_id"] += 1
        self._rows[row["id"]] = row
        return Product(**row)

    def list_active(self) -> list[Product]:
        return [
            Product(**row)
            for _, row in sorted(self._rows.items())
            if row["deleted_at"] is None
        ]

    def find_by_id(self, product_id: int) -> Product:
        return Product(**self._active(product_id))

    def update(self, product: Product) -> Product:
        row = self._active(product.id)
        for key in ("name", "price", "quantity"):
            value = getattr(product, key)
            if value is not None:
                row[key] = value
        row["updated_at"] = product.updated_at
        return Product(**row)

    def delete(self, deleted_at: int, product_id: int) -> None:
        row = self._rows.get(product_id)
        if row is None:
            raise NotFoundError("Product", product_id)
        if row["deleted_at"] is None:
            row["deleted_at"] = deleted_at


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of Work over an :class:`InMemoryStore` with snapshot isolation."""

    def __init__(self, store: InMemoryStore, *, deadline: float | None = None) -> None:
        super().__init__(deadline=deadline)
        self.store = store
        self._working: dict[str, Any] = {}

    def __enter__(self) -> InMemoryUnitOfWork:
        self._mark_active()
        try:
            self.ensure_within_deadline()
            if not self.store.available:
                raise StoreUnavailableError("In-memory store unavailable")
        except BaseException:
            self.rollback()
            raise
        self._working = self.store.snapshot()
        self.customers = InMemoryCustomerRepository(self._working)
        self.sellers = InMemorySellerRepository(self._working)
        self.products = InMemoryProductRepository(self._working)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.state != "active":
            raise RuntimeError(f"UnitOfWork already finalized (state={self.state}).")
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.ensure_within_deadline()
        except BaseException:
            self.rollback()
            raise
        self.commit()

    def commit(self) -> None:
        self.store.apply(self._working)
        self.store.commits += 1
        self.state = "committed"

    def rollback(self) -> None:
        self._working = {}
        self.store.rollbacks += 1
        self.state = "rolled_back"
