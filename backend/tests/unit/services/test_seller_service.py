"""SellerService against the SQLAlchemy unit of work."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from storefront.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from storefront.models import Seller
from storefront.services._shared.errors import (
    ConstraintViolationError,
    InvalidInputError,
    NotFoundError,
)
from storefront.services.sellers import SellerService
from storefront.services.sellers.dto import SellerLoginIn, SellerRegisterIn, SellerUpdateIn
from tests.factories.customer import DEFAULT_PASSWORD
from tests.factories.seller import SellerFactory


class TestSellerService:
    """Validate SellerService behaviours for the Seller aggregate."""

    @pytest.fixture()
    def hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    @pytest.fixture()
    def service(self, hasher) -> SellerService:
        return SellerService(hasher=hasher)

    def test_register_persists_hashed_password(self, service, hasher, session):
        """
        GIVEN a registration payload with a mixed-case email
        WHEN the seller registers
        THEN the email is normalized and only a hash of the password is stored.
        """
        out = service.register(
            SellerRegisterIn(email=" Oak@Example.com ", name="Oakworks", password="pw-123456")
        )

        assert (out.email, out.name) == ("oak@example.com", "Oakworks")
        stored = session.execute(
            select(Seller).where(Seller.email == "oak@example.com")
        ).scalar_one()
        assert hasher.verify(stored.password_hash, "pw-123456")

    def test_register_duplicate_email_conflicts(self, service, session):
        SellerFactory(email="dup@example.com")
        session.commit()

        with pytest.raises(ConstraintViolationError):
            service.register(
                SellerRegisterIn(email="dup@example.com", name="Again", password="pw-123456")
            )

    @pytest.mark.parametrize("email,name", [("nope", "Shop"), ("ok@example.com", "")])
    def test_register_rejects_invalid_input(self, service, email, name):
        with pytest.raises(InvalidInputError):
            service.register(SellerRegisterIn(email=email, name=name, password="pw-123456"))

    def test_login_matches_only_the_right_password(self, service):
        seller = SellerFactory(email="kettle@example.com")

        good = service.login(SellerLoginIn(email="kettle@example.com", password=DEFAULT_PASSWORD))
        bad = service.login(SellerLoginIn(email="kettle@example.com", password="wrong-one"))

        assert (good.matched, good.id) == (True, seller.id)
        assert (bad.matched, bad.id) == (False, None)

    def test_update_renames_the_seller(self, service):
        SellerFactory(email="shop@example.com", name="Shop")

        out = service.update(SellerUpdateIn(email="shop@example.com", name="Shop & Co"))

        assert out.name == "Shop & Co"
        assert out.updated_at is not None

    def test_update_unknown_seller_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.update(SellerUpdateIn(email="ghost@example.com", name="Ghost"))
