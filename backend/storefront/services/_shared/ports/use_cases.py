"""Use-case contracts consumed by the HTTP layer.

Every protocol is runtime checkable so wirings can assert that a service
object offers the full operation set.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from storefront.services.customers.dto import (
    CustomerDeleteIn,
    CustomerLoginIn,
    CustomerLoginOut,
    CustomerRegisterIn,
    CustomerRegisterOut,
    CustomerUpdateIn,
    CustomerUpdateOut,
)
from storefront.services.products.dto import (
    ProductAddIn,
    ProductAddOut,
    ProductFindOut,
    ProductListItemOut,
    ProductUpdateIn,
    ProductUpdateOut,
)
from storefront.services.sellers.dto import (
    SellerLoginIn,
    SellerLoginOut,
    SellerRegisterIn,
    SellerRegisterOut,
    SellerUpdateIn,
    SellerUpdateOut,
)


@runtime_checkable
class CustomerUseCases(Protocol):
    def register(self, dto: CustomerRegisterIn) -> CustomerRegisterOut: ...
    def login(self, dto: CustomerLoginIn) -> CustomerLoginOut: ...
    def update(self, dto: CustomerUpdateIn) -> CustomerUpdateOut: ...
    def delete(self, dto: CustomerDeleteIn) -> None: ...


@runtime_checkable
class ProductUseCases(Protocol):
    def add(self, dto: ProductAddIn) -> ProductAddOut: ...
    def list(self) -> list[ProductListItemOut]: ...
    def find_by_id(self, product_id: int) -> ProductFindOut: ...
    def update(self, dto: ProductUpdateIn) -> ProductUpdateOut: ...
    def delete(self, product_id: int) -> None: ...


@runtime_checkable
class SellerUseCases(Protocol):
    def register(self, dto: SellerRegisterIn) -> SellerRegisterOut: ...
    def login(self, dto: SellerLoginIn) -> SellerLoginOut: ...
    def update(self, dto: SellerUpdateIn) -> SellerUpdateOut: ...
