"""Idempotent database seed helpers for local development environments.

Customers, sellers and products are created through the application
services so the seeded rows carry real password hashes and the same
timestamps and validation as rows created over HTTP.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.models.product import Product
from storefront.models.seller import Seller
from storefront.services._shared.errors import ConstraintViolationError
from storefront.services.customers import CustomerService
from storefront.services.customers.dto import CustomerRegisterIn
from storefront.services.products import ProductService
from storefront.services.products.dto import ProductAddIn
from storefront.services.sellers import SellerService
from storefront.services.sellers.dto import SellerRegisterIn

LOGGER = logging.getLogger(__name__)

CUSTOMER_FIXTURES: list[dict[str, str]] = [
    {"email": "alex.martinez@example.com", "name": "Alex Martinez", "password": "devPass123!"},
    {"email": "jamie.lee@example.com", "name": "Jamie Lee", "password": "strongPass123"},
    {"email": "sara.kim@example.com", "name": "Sara Kim", "password": "shopMore2024"},
]

SELLER_FIXTURES: list[dict[str, str]] = [
    {"email": "oakworks@example.com", "name": "Oak Works", "password": "sellOak2024!"},
    {"email": "kettle.co@example.com", "name": "Kettle & Co", "password": "brewMore2024"},
]

PRODUCT_FIXTURES: list[dict[str, Any]] = [
    {"seller": "oakworks@example.com", "name": "Walnut desk", "price": "249.00", "quantity": 4},
    {"seller": "oakworks@example.com", "name": "Desk lamp", "price": "39.90", "quantity": 25},
    {"seller": "kettle.co@example.com", "name": "Ceramic mug", "price": "12.50", "quantity": 120},
    {"seller": "kettle.co@example.com", "name": "Tea sampler", "price": "18.00", "quantity": 60},
    {"seller": "oakworks@example.com", "name": "Linen tote", "price": "22.00", "quantity": 0},
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def seed_customers(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Register the demo customers that are not present yet."""
    if verbose:
        LOGGER.info("Seeding customers...")
    service = CustomerService()
    summary: dict[str, dict[str, int]] = {}
    for fixture in CUSTOMER_FIXTURES:
        try:
            service.register(CustomerRegisterIn(**fixture))
            created = True
        except ConstraintViolationError:
            created = False
        _touch(summary, "customers", created)
    return summary


def seed_sellers(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Register the demo sellers that are not present yet."""
    if verbose:
        LOGGER.info("Seeding sellers...")
    service = SellerService()
    summary: dict[str, dict[str, int]] = {}
    for fixture in SELLER_FIXTURES:
        try:
            service.register(SellerRegisterIn(**fixture))
            created = True
        except ConstraintViolationError:
            created = False
        _touch(summary, "sellers", created)
    return summary


def seed_products(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Add demo products for seeded sellers, matching existing rows by name."""
    if verbose:
        LOGGER.info("Seeding products...")
    session = _session(database)
    service = ProductService()
    summary: dict[str, dict[str, int]] = {}
    for fixture in PRODUCT_FIXTURES:
        seller_id = session.execute(
            select(Seller.id).where(
                Seller.email == fixture["seller"], Seller.deleted_at.is_(None)
            )
        ).scalar_one_or_none()
        if seller_id is None:
            raise RuntimeError(f"Seller {fixture['seller']} missing while seeding products")
        existing = session.execute(
            select(Product.id).where(
                Product.seller_id == seller_id,
                Product.name == fixture["name"],
                Product.deleted_at.is_(None),
            )
        ).first()
        session.rollback()
        if existing is None:
            service.add(
                ProductAddIn(
                    seller_id=seller_id,
                    name=fixture["name"],
                    price=Decimal(fixture["price"]),
                    quantity=int(fixture["quantity"]),
                )
            )
        _touch(summary, "products", existing is None)
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders; sellers precede their products."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_customers, seed_sellers, seed_products):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["seed_customers", "seed_sellers", "seed_products", "run_all"]
