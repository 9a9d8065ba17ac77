"""Reusable SQLAlchemy mixins shared by domain models (typed 2.0).

Timestamps are stored as integer epoch seconds. Conversion to calendar time
happens only when mapping entities to response DTOs.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column


class UpdateTimestampMixin:
    """Provide the optional ``updated_at`` epoch-seconds column.

    Attributes
    ----------
    updated_at:
        Epoch seconds of the last update, ``None`` until the first update.
    """

    updated_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


class SoftDeleteMixin:
    """Provide the ``deleted_at`` soft-delete marker.

    Rows are never removed; a non-null ``deleted_at`` hides them from every
    repository lookup.
    """

    deleted_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True, index=True)


class PKMixin:
    """Expose an integer surrogate primary key column named ``id``.

    Attributes
    ----------
    id:
        Auto-incrementing integer primary key managed by the database.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        """Return a short and useful string representation.

        :returns: Debug-friendly ``<ClassName id=...>``.
        :rtype: str
        """
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
