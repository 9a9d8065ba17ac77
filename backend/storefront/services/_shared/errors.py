"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic**: they never depend on Flask or
HTTP. Repositories translate driver failures into them at the persistence
boundary and services propagate them unchanged, so callers only ever see one
of the kinds below.

The translation to HTTP responses (RFC 7807) is handled by
``storefront/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories, codecs or services.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when a keyed lookup, update or delete matches no active row.

    :param entity: Entity name (e.g., "Customer").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConstraintViolationError(ServiceError):
    """
    Raised when the store rejects a write on a uniqueness or check constraint.

    :param entity: Entity name (e.g., "Customer").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


@dataclass(slots=True)
class ForbiddenError(ServiceError):
    """
    Raised when the caller acts on a row owned by someone else.

    :param entity: Entity name (e.g., "Product").
    :type entity: str
    :param key: Identifier of the protected row.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} {self.key} belongs to another account"


class StoreUnavailableError(ServiceError):
    """
    Raised when a transaction cannot be acquired or the connection fails
    mid-operation. Never retried internally.
    """

    def __init__(self, message: str = "Store unavailable") -> None:
        super().__init__(message)


class DeadlineExceededError(ServiceError):
    """
    Raised when the caller's deadline expires before the transaction commits.
    """

    def __init__(self, message: str = "Deadline exceeded") -> None:
        super().__init__(message)


class EncodingError(ServiceError):
    """
    Raised when a password cannot be hashed or a stored hash is malformed.

    The message never contains the plaintext or the hash.
    """

    def __init__(self, message: str = "Password encoding failed") -> None:
        super().__init__(message)


class InvalidInputError(ServiceError):
    """
    Raised by service-level validation before any statement is executed.
    """

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)
