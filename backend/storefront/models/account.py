"""Columns and validation shared by customer and seller accounts."""

from __future__ import annotations

import uuid

from sqlalchemy import BigInteger, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import ReprMixin, SoftDeleteMixin, UpdateTimestampMixin


def normalize_email(value: str) -> str:
    """Return the canonical (trimmed, lower-cased) form of an email."""
    return value.strip().lower()


def validate_email(value: str) -> str:
    """
    Normalize and sanity-check an email.

    :param value: Email to normalize.
    :type value: str
    :returns: Normalized email (lowercased/trimmed).
    :rtype: str
    :raises ValueError: If email is missing or malformed.
    """
    if not value or not isinstance(value, str):
        raise ValueError("Email is required.")
    v = normalize_email(value)
    # Minimal sanity check; full validation happens at API layer.
    if "@" not in v or "." not in v.split("@")[-1]:
        raise ValueError("Email format looks invalid.")
    return v


def validate_name(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Name is required.")
    return value.strip()


class AccountMixin(ReprMixin, UpdateTimestampMixin, SoftDeleteMixin):
    """
    Identity, credentials and lifecycle columns of a login account.

    Fields
    ------
    id : uuid.UUID
        Opaque identity generated at registration.
    email : str
        Login email. Stored normalized (lowercase, trimmed). Unique per table.
    name : str
        Display name.
    password_hash : str
        Salted password digest. Never exposed by any response DTO.
    registered_at : int
        Registration time in epoch seconds.
    updated_at : int | None
        Last update in epoch seconds (from mixin).
    deleted_at : int | None
        Soft-delete marker in epoch seconds (from mixin).
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    registered_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
