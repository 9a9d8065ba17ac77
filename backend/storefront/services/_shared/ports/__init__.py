"""
storefront.services._shared.ports
=================================

Collection of *ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher` — one-way hashing and verification.

- :mod:`repositories`:
    Defines :class:`~.CustomerRepositoryPort`, :class:`~.SellerRepositoryPort`
    and :class:`~.ProductRepositoryPort` — data access bound to one transaction.

- :mod:`use_cases`:
    Defines :class:`~.CustomerUseCases`, :class:`~.SellerUseCases` and
    :class:`~.ProductUseCases` — the operations the HTTP layer may call.

Design Notes
------------
Concrete adapters (SQLAlchemy repositories, Werkzeug hasher, in-memory
doubles) live under ``storefront.repositories``, ``storefront.infra`` and
``storefront.uow``.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .repositories import CustomerRepositoryPort, ProductRepositoryPort, SellerRepositoryPort

__all__ = [
    "PasswordHasher",
    "CustomerRepositoryPort",
    "ProductRepositoryPort",
    "SellerRepositoryPort",
]
