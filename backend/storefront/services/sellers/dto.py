"""
DTOs for SellerService.

Mirrors the customer DTOs; sellers have no delete operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class SellerRegisterIn:
    """
    Input payload for seller registration.

    :param email: Login email (normalized to lowercase+trim).
    :type email: str
    :param name: Shop or display name.
    :type name: str
    :param password: Raw password, hashed by the service before persisting.
    :type password: str
    """

    email: str
    name: str
    password: str


@dataclass(frozen=True, slots=True)
class SellerLoginIn:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class SellerUpdateIn:
    email: str
    name: str


@dataclass(frozen=True, slots=True)
class SellerRegisterOut:
    email: str
    name: str
    registered_at: datetime


@dataclass(frozen=True, slots=True)
class SellerUpdateOut:
    email: str
    name: str
    registered_at: datetime
    updated_at: datetime | None


@dataclass(frozen=True, slots=True)
class SellerLoginOut:
    matched: bool
    id: UUID | None = None
