"""Factory Boy definition for :class:`storefront.models.product.Product`."""

from __future__ import annotations

import time
import uuid
from decimal import Decimal

import factory
from storefront.models.product import Product
from tests.factories import BaseFactory


class ProductFactory(BaseFactory):
    class Meta:
        model = Product

    id = None  # let autoincrement handle it
    seller_id = factory.LazyFunction(uuid.uuid4)
    name = factory.Sequence(lambda n: f"Product {n}")
    price = factory.LazyFunction(lambda: Decimal("9.99"))
    quantity = 10
    created_at = factory.LazyFunction(lambda: int(time.time()))
    updated_at = None
    deleted_at = None
