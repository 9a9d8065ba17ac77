"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.orm import Session

from storefront.core.extensions import db
from storefront.repositories import CustomerRepository, ProductRepository, SellerRepository
from storefront.repositories.base import translate_db_errors
from storefront.services._shared.errors import DeadlineExceededError, StoreUnavailableError
from storefront.uow.base import UnitOfWork

log = logging.getLogger(__name__)


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.customers = CustomerRepository(session=self.session)
        self.products = ProductRepository(session=self.session)
        self.sellers = SellerRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session.

    The same session is shared across all repositories for a consistent
    transaction. The Flask-SQLAlchemy session is scoped per thread/app
    context, so concurrent requests never share a transaction.

    Lifecycle
    ---------
    ``__enter__`` (Begin)
        Checks the deadline, then acquires a connection so that a store
        outage surfaces as :class:`StoreUnavailableError` before any
        mutation. On PostgreSQL a ``SET LOCAL statement_timeout`` bounds
        in-flight statements by the remaining deadline.
    ``__exit__`` (Finalize)
        Runs exactly once. Commits when the block raised nothing and the
        deadline still holds; otherwise rolls back. The original exception
        always propagates unchanged.
    """

    def __init__(self, *, deadline: float | None = None, session: Session | None = None) -> None:
        """Initialise the Unit of Work with a shared SQLAlchemy session.

        :param deadline: Optional :func:`time.monotonic` deadline.
        :param session: Session override; defaults to the Flask-scoped one.
        """
        SQLAlchemyRepositoryContainer.__init__(
            self, session=session if session is not None else db.session
        )
        UnitOfWork.__init__(self, deadline=deadline)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        self._mark_active()
        try:
            self.ensure_within_deadline()
            with translate_db_errors("Transaction"):
                conn = self.session.connection()
                self._apply_statement_timeout(conn.dialect.name)
        except BaseException:
            self._finalize_rollback()
            raise
        log.debug("uow.begin")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.state != "active":
            raise RuntimeError(f"UnitOfWork already finalized (state={self.state}).")
        if exc_type is not None:
            self._finalize_rollback()
            return

        try:
            self.ensure_within_deadline()
        except DeadlineExceededError:
            self._finalize_rollback()
            raise

        try:
            self.commit()
        except BaseException:
            self._finalize_rollback()
            raise

    def commit(self) -> None:
        with translate_db_errors("Transaction"):
            self.session.commit()
        self.state = "committed"
        log.debug("uow.commit")

    def rollback(self) -> None:
        with translate_db_errors("Transaction"):
            self.session.rollback()
        self.state = "rolled_back"
        log.debug("uow.rollback")

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _finalize_rollback(self) -> None:
        """Roll back, logging (not raising) a failure so the caller's error wins."""
        try:
            self.rollback()
        except StoreUnavailableError:
            self.state = "rolled_back"
            log.error("uow.rollback_failed", exc_info=True)

    def _apply_statement_timeout(self, dialect: str) -> None:
        remaining = self.remaining_seconds()
        if remaining is None or dialect != "postgresql":
            return
        timeout_ms = max(int(remaining * 1000), 1)
        self.session.execute(text(f"SET LOCAL statement_timeout = {timeout_ms}"))
