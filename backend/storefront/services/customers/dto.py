"""
DTOs for CustomerService.

Input DTOs carry what the HTTP layer collected; output DTOs are the response
shapes. No output DTO has a password or hash field.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class CustomerRegisterIn:
    """
    Input payload for customer registration.

    :param email: Login email (normalized to lowercase+trim).
    :type email: str
    :param name: Display name.
    :type name: str
    :param password: Raw password, hashed by the service before persisting.
    :type password: str
    """

    email: str
    name: str
    password: str


@dataclass(frozen=True, slots=True)
class CustomerLoginIn:
    """
    Input DTO for login.

    :param email: Customer email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class CustomerUpdateIn:
    """
    Input DTO for a profile update keyed by email.

    :param email: Email of the customer to update.
    :type email: str
    :param name: New display name.
    :type name: str
    """

    email: str
    name: str


@dataclass(frozen=True, slots=True)
class CustomerDeleteIn:
    """
    Input DTO for a soft delete keyed by email.

    :param email: Email of the customer to delete.
    :type email: str
    """

    email: str


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class CustomerRegisterOut:
    email: str
    name: str
    registered_at: datetime


@dataclass(frozen=True, slots=True)
class CustomerUpdateOut:
    email: str
    name: str
    registered_at: datetime
    updated_at: datetime | None


@dataclass(frozen=True, slots=True)
class CustomerLoginOut:
    """
    Login outcome.

    :param matched: ``True`` only when the customer exists and the password
        verified.
    :type matched: bool
    :param id: Customer id when matched, else ``None``.
    :type id: UUID | None
    """

    matched: bool
    id: UUID | None = None
