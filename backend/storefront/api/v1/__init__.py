"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .customers import bp as customers_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .products import bp as products_bp  # noqa: E402
from .sellers import bp as sellers_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1
    (customers_bp, "/customers"),  # -> /api/v1/customers
    (products_bp, "/products"),
    (sellers_bp, "/sellers"),
]
