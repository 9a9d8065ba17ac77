"""Repository contracts the services depend on.

Both the SQLAlchemy repositories (:mod:`storefront.repositories`) and the
in-memory doubles (:mod:`storefront.uow.memory`) satisfy these protocols.
Implementations run against an already open transaction and never commit or
roll back.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from storefront.models.customer import Customer
from storefront.models.product import Product
from storefront.models.seller import Seller


class AccountRepositoryPort(Protocol):
    def login(self, email: str) -> tuple[UUID | None, str]: ...
    def delete(self, email: str, deleted_at: int) -> None: ...


class CustomerRepositoryPort(AccountRepositoryPort, Protocol):
    def register(self, account: Customer) -> Customer: ...
    def update(self, account: Customer) -> Customer: ...


class SellerRepositoryPort(AccountRepositoryPort, Protocol):
    def register(self, account: Seller) -> Seller: ...
    def update(self, account: Seller) -> Seller: ...


class ProductRepositoryPort(Protocol):
    def add(self, instance: Product) -> Product: ...
    def list_active(self) -> list[Product]: ...
    def find_by_id(self, product_id: int) -> Product: ...
    def update(self, product: Product) -> Product: ...
    def delete(self, deleted_at: int, product_id: int) -> None: ...
