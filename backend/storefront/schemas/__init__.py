"""Convenience exports for application schemas."""

from __future__ import annotations

from .customer import (
    CustomerRegisterSchema,
    CustomerSchema,
    CustomerUpdateSchema,
    LoginResultSchema,
    LoginSchema,
)
from .product import (
    ProductCreateSchema,
    ProductListItemSchema,
    ProductSchema,
    ProductUpdateSchema,
)
from .seller import SellerRegisterSchema, SellerSchema, SellerUpdateSchema

__all__ = [
    "CustomerRegisterSchema",
    "CustomerSchema",
    "CustomerUpdateSchema",
    "LoginResultSchema",
    "LoginSchema",
    "ProductCreateSchema",
    "ProductListItemSchema",
    "ProductSchema",
    "ProductUpdateSchema",
    "SellerRegisterSchema",
    "SellerSchema",
    "SellerUpdateSchema",
]
