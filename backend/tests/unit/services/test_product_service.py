"""ProductService against the SQLAlchemy unit of work."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from storefront.services._shared.base import ServiceContext
from storefront.services._shared.errors import ForbiddenError, InvalidInputError, NotFoundError
from storefront.services.products import ProductService
from storefront.services.products.dto import ProductAddIn, ProductUpdateIn
from tests.factories.product import ProductFactory


def _add_in(**overrides) -> ProductAddIn:
    fields = {
        "seller_id": uuid.uuid4(),
        "name": "Desk lamp",
        "price": Decimal("39.90"),
        "quantity": 5,
    }
    fields.update(overrides)
    return ProductAddIn(**fields)


class TestProductService:
    """Validate ProductService behaviours for the catalog."""

    @pytest.fixture()
    def service(self) -> ProductService:
        return ProductService()

    # --------------------------------------------------------------------- #
    # Add
    # --------------------------------------------------------------------- #

    def test_add_returns_stored_product(self, service):
        """
        GIVEN a valid creation payload
        WHEN the product is added
        THEN the stored row gets an id, the seller and an aware timestamp.
        """
        dto = _add_in()

        out = service.add(dto)

        assert out.id is not None
        assert out.seller_id == dto.seller_id
        assert out.price == Decimal("39.90")
        assert out.created_at.tzinfo is not None
        assert service.find_by_id(out.id).name == "Desk lamp"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "  "},
            {"name": "x" * 151},
            {"price": Decimal("-0.01")},
            {"price": Decimal("NaN")},
            {"price": Decimal("10000000000.00")},
            {"price": Decimal("1e30")},
            {"quantity": -1},
            {"quantity": 1.5},
        ],
    )
    def test_add_rejects_invalid_input(self, service, overrides):
        """
        GIVEN a payload with a blank or overlong name, or an out-of-range value
        WHEN the product is added
        THEN InvalidInputError is raised and nothing is stored.
        """
        with pytest.raises(InvalidInputError):
            service.add(_add_in(**overrides))

        assert service.list() == []

    def test_add_accepts_the_largest_storable_price(self, service):
        out = service.add(_add_in(price=Decimal("9999999999.99")))

        assert out.price == Decimal("9999999999.99")

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def test_list_returns_active_products_in_id_order(self, service):
        a = ProductFactory(name="A", price=Decimal("1.00"))
        ProductFactory(name="B", deleted_at=3)
        c = ProductFactory(name="C", price=Decimal("3.00"))

        items = service.list()

        assert [(i.id, i.name, i.price) for i in items] == [
            (a.id, "A", Decimal("1.00")),
            (c.id, "C", Decimal("3.00")),
        ]

    def test_find_by_id_unknown_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.find_by_id(123456)

    # --------------------------------------------------------------------- #
    # Update
    # --------------------------------------------------------------------- #

    def test_update_is_partial(self, service):
        """
        GIVEN a stored product
        WHEN only the quantity is supplied
        THEN name and price keep their values and updated_at is set.
        """
        product = ProductFactory(name="Mug", price=Decimal("5.00"), quantity=9)
        product_id = product.id

        out = service.update(ProductUpdateIn(id=product_id, quantity=3))

        assert (out.name, out.price, out.quantity) == ("Mug", Decimal("5.00"), 3)
        assert out.updated_at is not None

    def test_update_rejects_negative_quantity(self, service, session):
        product = ProductFactory(quantity=9)
        product_id = product.id
        session.commit()

        with pytest.raises(InvalidInputError):
            service.update(ProductUpdateIn(id=product_id, quantity=-4))

        assert service.find_by_id(product_id).quantity == 9

    def test_update_by_another_seller_is_forbidden(self, session):
        """
        GIVEN a product owned by one seller
        WHEN a different seller tries to rename it
        THEN ForbiddenError is raised and the name is unchanged.
        """
        product = ProductFactory(name="Mug")
        product_id = product.id
        session.commit()
        intruder = ProductService(ctx=ServiceContext(actor_id=uuid.uuid4()))

        with pytest.raises(ForbiddenError):
            intruder.update(ProductUpdateIn(id=product_id, name="Taken"))

        assert ProductService().find_by_id(product_id).name == "Mug"

    def test_update_by_the_owner_is_allowed(self):
        product = ProductFactory(name="Mug")
        owner = ProductService(ctx=ServiceContext(actor_id=product.seller_id))

        out = owner.update(ProductUpdateIn(id=product.id, name="Big mug"))

        assert out.name == "Big mug"

    # --------------------------------------------------------------------- #
    # Delete
    # --------------------------------------------------------------------- #

    def test_delete_hides_product_and_is_idempotent(self, service):
        product = ProductFactory()
        product_id = product.id

        service.delete(product_id)
        service.delete(product_id)

        with pytest.raises(NotFoundError):
            service.find_by_id(product_id)
        with pytest.raises(NotFoundError):
            service.update(ProductUpdateIn(id=product_id, name="Back"))

    def test_delete_unknown_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.delete(987654)

    def test_delete_by_another_seller_is_forbidden(self, session):
        product = ProductFactory()
        product_id = product.id
        session.commit()
        intruder = ProductService(ctx=ServiceContext(actor_id=uuid.uuid4()))

        with pytest.raises(ForbiddenError):
            intruder.delete(product_id)

        assert ProductService().find_by_id(product_id).id == product_id

    def test_owner_delete_of_unknown_product_raises_not_found(self):
        owner = ProductService(ctx=ServiceContext(actor_id=uuid.uuid4()))

        with pytest.raises(NotFoundError):
            owner.delete(987654)
