"""
SellerService
=============

Application service for the ``Seller`` aggregate: registration, credential
check and renaming. A seller's id is what products record as ``seller_id``.
"""

from __future__ import annotations

import logging
import uuid

from storefront.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from storefront.models.account import normalize_email
from storefront.models.seller import Seller
from storefront.services._shared.base import BaseService, ServiceContext, UnitOfWorkFactory
from storefront.services._shared.errors import InvalidInputError
from storefront.services._shared.ports import PasswordHasher
from storefront.services.sellers._converters import seller_to_register_out, seller_to_update_out
from storefront.services.sellers.dto import (
    SellerLoginIn,
    SellerLoginOut,
    SellerRegisterIn,
    SellerRegisterOut,
    SellerUpdateIn,
    SellerUpdateOut,
)

logger = logging.getLogger(__name__)


class SellerService(BaseService):
    """Use cases over sellers."""

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        uow_factory: UnitOfWorkFactory | None = None,
        hasher: PasswordHasher | None = None,
    ) -> None:
        super().__init__(ctx=ctx, uow_factory=uow_factory)
        self.hasher: PasswordHasher = hasher or WerkzeugPasswordHasher.from_config()

    def register(self, dto: SellerRegisterIn) -> SellerRegisterOut:
        """
        Create a seller with a fresh id and registration timestamp.

        :raises InvalidInputError: If email or name are malformed.
        :raises ConstraintViolationError: If the email is already taken.
        :raises EncodingError: If the password cannot be hashed.
        """
        with self.rw_uow() as uow:
            seller = self._build(
                id=uuid.uuid4(),
                email=dto.email,
                name=dto.name,
                registered_at=self.now_epoch(),
            )
            seller.password_hash = self.hasher.hash(dto.password)
            persisted = uow.sellers.register(seller)
            out = seller_to_register_out(persisted)
            seller_id = persisted.id

        logger.info(
            "Seller registered",
            extra={"operation": "seller.register", "seller_id": str(seller_id)},
        )
        return out

    def login(self, dto: SellerLoginIn) -> SellerLoginOut:
        """A missing seller and a wrong password both yield ``matched=False``."""
        with self.rw_uow() as uow:
            seller_id, password_hash = uow.sellers.login(normalize_email(dto.email or ""))
            matched = bool(password_hash) and self.hasher.verify(password_hash, dto.password)

        logger.info(
            "Seller login",
            extra={"operation": "seller.login", "outcome": "matched" if matched else "rejected"},
        )
        if not matched:
            return SellerLoginOut(matched=False)
        return SellerLoginOut(matched=True, id=seller_id)

    def update(self, dto: SellerUpdateIn) -> SellerUpdateOut:
        """
        Replace the name of the active seller with ``dto.email``.

        :raises InvalidInputError: If email or name are malformed.
        :raises NotFoundError: If no active seller has that email.
        """
        with self.rw_uow() as uow:
            seller = self._build(email=dto.email, name=dto.name, updated_at=self.now_epoch())
            persisted = uow.sellers.update(seller)
            out = seller_to_update_out(persisted)
            seller_id = persisted.id

        logger.info(
            "Seller updated",
            extra={"operation": "seller.update", "seller_id": str(seller_id)},
        )
        return out

    @staticmethod
    def _build(**fields) -> Seller:
        try:
            return Seller(**fields)
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
