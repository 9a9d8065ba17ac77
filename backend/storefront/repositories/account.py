"""Account repository: registration, credential lookup, update and soft delete."""

from __future__ import annotations

from typing import TypeVar
from uuid import UUID

from sqlalchemy import select, update

from storefront.models.account import AccountMixin, normalize_email
from storefront.repositories.base import BaseRepository
from storefront.services._shared.errors import NotFoundError

A = TypeVar("A", bound=AccountMixin)


class AccountRepository(BaseRepository[A]):
    """Persistence-only repository for email-keyed accounts.

    Lookups ignore soft-deleted rows, so an email identifies at most one
    active account. The repository never hashes or verifies passwords.
    """

    def register(self, account: A) -> A:
        """Insert a new account row.

        :param account: Fully built entity (id, hash and timestamp set).
        :returns: The persisted entity.
        :raises ConstraintViolationError: When the email is already taken.
        """
        return self.add(account)

    def login(self, email: str) -> tuple[UUID | None, str]:
        """Return the id and password hash of the active account for ``email``.

        Absence is not an error: ``(None, "")`` is returned when no row
        matches so the caller decides how to interpret it.

        :param email: Login email (normalized here).
        :type email: str
        :returns: ``(id, password_hash)`` or ``(None, "")``.
        :rtype: tuple[UUID | None, str]
        """
        model = self.model
        stmt = select(model.id, model.password_hash).where(
            model.email == normalize_email(email),
            model.deleted_at.is_(None),
        )
        with self.errors():
            row = self.session.execute(stmt).first()
        if row is None:
            return None, ""
        return row.id, row.password_hash or ""

    def update(self, account: A) -> A:
        """Update name and ``updated_at`` by email, then re-read the row.

        :param account: Transient entity carrying ``email``, ``name`` and
            ``updated_at``.
        :returns: Persisted state after the update.
        :raises NotFoundError: When no active account has that email.
        """
        model = self.model
        email = normalize_email(account.email)
        stmt = (
            update(model)
            .where(model.email == email, model.deleted_at.is_(None))
            .values(name=account.name, updated_at=account.updated_at)
            .execution_options(synchronize_session=False)
        )
        with self.errors():
            self.session.execute(stmt)
        persisted = self._reload(model.email == email, model.deleted_at.is_(None))
        if persisted is None:
            raise NotFoundError(self.entity_name, email)
        return persisted

    def delete(self, email: str, deleted_at: int) -> None:
        """Soft delete the account identified by ``email``.

        Deleting an already deleted account is a no-op that keeps the first
        deletion timestamp.

        :raises NotFoundError: When no account (deleted or not) has that email.
        """
        model = self.model
        email = normalize_email(email)
        stmt = (
            update(model)
            .where(model.email == email, model.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
            .execution_options(synchronize_session=False)
        )
        with self.errors():
            result = self.session.execute(stmt)
            if result.rowcount:
                return
            exists = self.session.execute(
                select(model.id).where(model.email == email).limit(1)
            ).first()
        if exists is None:
            raise NotFoundError(self.entity_name, email)
