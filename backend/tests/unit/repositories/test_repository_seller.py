"""Unit tests for SellerRepository."""

from __future__ import annotations

import pytest
from storefront.models import Seller
from storefront.repositories.seller import SellerRepository
from storefront.services._shared.errors import ConstraintViolationError, NotFoundError
from tests.factories.customer import CustomerFactory
from tests.factories.seller import SellerFactory


class TestSellerRepository:
    """Ensure ``SellerRepository`` shares the account persistence rules."""

    @pytest.fixture()
    def repo(self, session):
        return SellerRepository(session=session)

    def test_register_inserts_row(self, repo, session):
        seller = SellerFactory.build(email="oak@example.com")

        stored = repo.register(seller)

        assert stored.id == seller.id
        assert session.get(Seller, seller.id).email == "oak@example.com"

    def test_register_duplicate_email_is_constraint_violation(self, repo, session):
        """
        GIVEN a seller already registered with an email
        WHEN another seller registers with the same email in different case
        THEN ConstraintViolationError names the seller entity.
        """
        SellerFactory(email="dup@example.com")
        session.commit()

        with pytest.raises(ConstraintViolationError) as excinfo:
            repo.register(SellerFactory.build(email="DUP@example.com"))

        assert excinfo.value.entity == "Seller"
        session.rollback()

    def test_customer_email_does_not_block_a_seller(self, repo):
        CustomerFactory(email="both@example.com")

        stored = repo.register(SellerFactory.build(email="both@example.com"))

        assert stored.email == "both@example.com"

    def test_login_returns_id_and_hash(self, repo):
        seller = SellerFactory(email="kettle@example.com")

        assert repo.login(" Kettle@Example.com") == (seller.id, seller.password_hash)
        assert repo.login("nobody@example.com") == (None, "")

    def test_update_changes_name(self, repo):
        seller = SellerFactory(email="shop@example.com", name="Shop")

        updated = repo.update(Seller(email="shop@example.com", name="Shop & Co", updated_at=42))

        assert updated.id == seller.id
        assert (updated.name, updated.updated_at) == ("Shop & Co", 42)

    def test_update_unknown_email_raises_not_found(self, repo):
        with pytest.raises(NotFoundError) as excinfo:
            repo.update(Seller(email="ghost@example.com", name="Ghost", updated_at=1))

        assert excinfo.value.entity == "Seller"
