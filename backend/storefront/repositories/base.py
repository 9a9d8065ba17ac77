"""Generic repository base and error translation for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by all repositories:
- Access to the session bound to the current Unit of Work.
- Translation of driver failures into the service error taxonomy.
- No business logic, no commit/rollback. Services own transactions.

Design decisions
----------------
* Repositories MUST remain thin and persistence-focused:
  - One primary statement per business action (plus a follow-up read for
    updates).
  - They never call commit/rollback; the Unit of Work decides the outcome.
* Every statement runs inside :func:`translate_db_errors` so callers only
  ever observe :class:`ConstraintViolationError`, :class:`InvalidInputError`
  or :class:`StoreUnavailableError` from the persistence layer.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import select
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    DisconnectionError,
    IntegrityError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session

from storefront.core.extensions import db
from storefront.services._shared.errors import (
    ConstraintViolationError,
    InvalidInputError,
    StoreUnavailableError,
)

E = TypeVar("E")  # SQLAlchemy mapped entity type


def _integrity_detail(exc: IntegrityError) -> str:
    """Return a client-safe summary for an integrity failure."""
    message = str(exc.orig).lower() if exc.orig else ""
    if "unique" in message or "duplicate" in message:
        return "duplicate value violates a unique constraint"
    if "check" in message:
        return "value violates a check constraint"
    if "foreign key" in message:
        return "value violates a referential constraint"
    return "integrity constraint violated"


@contextmanager
def translate_db_errors(entity: str) -> Iterator[None]:
    """Translate SQLAlchemy failures raised inside the block.

    :param entity: Entity name reported on constraint violations.
    :type entity: str
    :raises ConstraintViolationError: On ``IntegrityError``.
    :raises InvalidInputError: On ``DataError`` (value out of range for its column).
    :raises StoreUnavailableError: On connectivity or other driver failures.
    """
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(entity, _integrity_detail(exc)) from exc
    except DataError as exc:
        raise InvalidInputError(f"{entity} value does not fit its column") from exc
    except (DBAPIError, DisconnectionError) as exc:
        raise StoreUnavailableError(f"{entity} store unavailable") from exc
    except SQLAlchemyError as exc:
        raise StoreUnavailableError(f"{entity} store error: {exc.__class__.__name__}") from exc


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define:

    * ``model``: the SQLAlchemy mapped class.
    * ``entity_name``: label used in error messages.

    This class NEVER:

    * opens/commits/rolls back transactions,
    * implements business rules or cross-aggregate coordination.

    Services orchestrate use cases and own transaction boundaries.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]
    entity_name: str = "Entity"

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``storefront.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the active SQLAlchemy session.

        :returns: Active session bound to the current Unit of Work.
        :rtype: :class:`sqlalchemy.orm.Session`
        """
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    def errors(self):
        """Shortcut for :func:`translate_db_errors` bound to this entity."""
        return translate_db_errors(self.entity_name)

    def add(self, instance: E) -> E:
        """Stage a new entity and flush so the INSERT runs immediately.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        with self.errors():
            self.session.add(instance)
            self.session.flush()
        return instance

    def _reload(self, *criteria: Any) -> E | None:
        """Re-read a single row, overwriting any stale identity-map state."""
        stmt = (
            select(self.model)
            .where(*criteria)
            .execution_options(populate_existing=True)
        )
        with self.errors():
            return cast(E | None, self.session.execute(stmt).scalars().first())
