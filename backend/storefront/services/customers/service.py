"""
CustomerService
===============

Application service for the ``Customer`` aggregate.

Responsibilities
----------------
- Register a customer with a salted password hash.
- Report whether an email/password pair matches an active customer.
- Update the display name of a customer keyed by email.
- Soft delete a customer keyed by email.

Notes
-----
- Every method opens exactly one read-write unit of work; it commits on
  success and rolls back on any error raised inside the block.
- Plaintext passwords and hashes never appear in logs or output DTOs.
"""

from __future__ import annotations

import logging
import uuid

from storefront.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from storefront.models.customer import Customer, normalize_email
from storefront.services._shared.base import BaseService, ServiceContext, UnitOfWorkFactory
from storefront.services._shared.errors import InvalidInputError
from storefront.services._shared.ports import PasswordHasher
from storefront.services.customers._converters import (
    customer_to_register_out,
    customer_to_update_out,
)
from storefront.services.customers.dto import (
    CustomerDeleteIn,
    CustomerLoginIn,
    CustomerLoginOut,
    CustomerRegisterIn,
    CustomerRegisterOut,
    CustomerUpdateIn,
    CustomerUpdateOut,
)

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    """Use cases over customers."""

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        uow_factory: UnitOfWorkFactory | None = None,
        hasher: PasswordHasher | None = None,
    ) -> None:
        super().__init__(ctx=ctx, uow_factory=uow_factory)
        self.hasher: PasswordHasher = hasher or WerkzeugPasswordHasher.from_config()

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: CustomerRegisterIn) -> CustomerRegisterOut:
        """
        Create a customer with a fresh id and registration timestamp.

        :param dto: Registration payload.
        :type dto: :class:`CustomerRegisterIn`
        :returns: Public view of the new customer.
        :rtype: :class:`CustomerRegisterOut`
        :raises InvalidInputError: If email or name are malformed.
        :raises ConstraintViolationError: If the email is already taken.
        :raises EncodingError: If the password cannot be hashed.
        """
        with self.rw_uow() as uow:
            customer = self._build(
                id=uuid.uuid4(),
                email=dto.email,
                name=dto.name,
                registered_at=self.now_epoch(),
            )
            customer.password_hash = self.hasher.hash(dto.password)
            persisted = uow.customers.register(customer)
            out = customer_to_register_out(persisted)
            customer_id = persisted.id

        logger.info(
            "Customer registered",
            extra={"operation": "customer.register", "customer_id": str(customer_id)},
        )
        return out

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: CustomerLoginIn) -> CustomerLoginOut:
        """
        Check a password against the stored hash of an active customer.

        A missing customer and a wrong password both yield ``matched=False``.

        :raises EncodingError: If the stored hash is malformed.
        """
        with self.rw_uow() as uow:
            customer_id, password_hash = uow.customers.login(normalize_email(dto.email or ""))
            matched = bool(password_hash) and self.hasher.verify(password_hash, dto.password)

        logger.info(
            "Customer login",
            extra={"operation": "customer.login", "outcome": "matched" if matched else "rejected"},
        )
        if not matched:
            return CustomerLoginOut(matched=False)
        return CustomerLoginOut(matched=True, id=customer_id)

    # ------------------------------------------------------------------ #
    # Update
    # ------------------------------------------------------------------ #

    def update(self, dto: CustomerUpdateIn) -> CustomerUpdateOut:
        """
        Replace the display name of the active customer with ``dto.email``.

        :raises InvalidInputError: If email or name are malformed.
        :raises NotFoundError: If no active customer has that email.
        """
        with self.rw_uow() as uow:
            customer = self._build(email=dto.email, name=dto.name, updated_at=self.now_epoch())
            persisted = uow.customers.update(customer)
            out = customer_to_update_out(persisted)
            customer_id = persisted.id

        logger.info(
            "Customer updated",
            extra={"operation": "customer.update", "customer_id": str(customer_id)},
        )
        return out

    # ------------------------------------------------------------------ #
    # Delete
    # ------------------------------------------------------------------ #

    def delete(self, dto: CustomerDeleteIn) -> None:
        """
        Soft delete the customer with ``dto.email``.

        Deleting an already deleted customer is a no-op.

        :raises NotFoundError: If the email was never registered.
        """
        with self.rw_uow() as uow:
            if not dto.email or not dto.email.strip():
                raise InvalidInputError("Email is required.")
            uow.customers.delete(normalize_email(dto.email), self.now_epoch())

        logger.info("Customer deleted", extra={"operation": "customer.delete"})

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build(**fields) -> Customer:
        """Construct a transient ``Customer``; model validators run here."""
        try:
            return Customer(**fields)
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
