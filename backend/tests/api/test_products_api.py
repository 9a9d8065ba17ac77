"""HTTP tests for the product catalog endpoints."""

from __future__ import annotations

import functools
import time

import pytest
from storefront.api.deps import SELLER_ROLE, UOW_FACTORY_KEY
from storefront.uow import InMemoryStore, InMemoryUnitOfWork
from tests.factories.customer import CustomerFactory
from tests.factories.seller import SellerFactory
from tests.helpers.auth import auth_header

BASE = "/api/v1/products"


@pytest.fixture()
def seller(session):
    """Authorization header and id of a persisted seller."""
    row = SellerFactory(email="seller@example.com")
    session.commit()
    return auth_header(row.id, row.email, SELLER_ROLE), row.id


@pytest.fixture()
def rival(session):
    """Authorization header of a second seller."""
    row = SellerFactory(email="rival@example.com")
    session.commit()
    return auth_header(row.id, row.email, SELLER_ROLE)


@pytest.fixture()
def uow_override(app):
    """Install a unit-of-work factory for the duration of one test."""

    def _install(factory):
        app.extensions[UOW_FACTORY_KEY] = factory

    yield _install
    app.extensions.pop(UOW_FACTORY_KEY, None)


def test_empty_catalog_lists_nothing(client):
    response = client.get(BASE)

    assert response.status_code == 200
    assert response.get_json() == {"data": []}


def test_create_read_update_delete(client, seller):
    headers, seller_id = seller

    created = client.post(
        BASE, json={"name": "Mug", "price": "12.50", "quantity": 3}, headers=headers
    )
    assert created.status_code == 201
    product = created.get_json()["data"]
    assert product["price"] == "12.50"
    assert product["seller_id"] == str(seller_id)
    product_id = product["id"]

    listed = client.get(BASE).get_json()["data"]
    assert listed == [{"id": product_id, "name": "Mug", "price": "12.50"}]

    updated = client.put(f"{BASE}/{product_id}", json={"quantity": 7}, headers=headers)
    assert updated.status_code == 200
    assert updated.get_json()["data"]["quantity"] == 7
    assert updated.get_json()["data"]["name"] == "Mug"

    assert client.delete(f"{BASE}/{product_id}", headers=headers).status_code == 204
    assert client.delete(f"{BASE}/{product_id}", headers=headers).status_code == 204
    assert client.get(f"{BASE}/{product_id}").status_code == 404


def test_create_requires_token(client):
    response = client.post(BASE, json={"name": "Mug", "price": "1.00"})

    assert response.status_code == 401


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Mug", "price": "-1.00"},
        {"name": "", "price": "1.00"},
        {"name": "Mug", "price": "1.00", "quantity": -2},
        {"name": "Mug", "price": "100000000000"},
        {"name": "x" * 151, "price": "1.00"},
    ],
)
def test_create_rejects_invalid_payload(client, seller, payload):
    headers, _ = seller

    response = client.post(BASE, json=payload, headers=headers)

    assert response.status_code == 422


def test_empty_update_is_rejected(client, seller):
    headers, _ = seller

    response = client.put(f"{BASE}/1", json={}, headers=headers)

    assert response.status_code == 422


def test_unknown_product_is_not_found(client):
    response = client.get(f"{BASE}/424242")

    assert response.status_code == 404
    assert response.get_json()["code"] == "not_found"


def test_store_outage_maps_to_503(client, uow_override):
    store = InMemoryStore(available=False)
    uow_override(functools.partial(InMemoryUnitOfWork, store))

    response = client.get(BASE)

    assert response.status_code == 503
    assert response.get_json()["code"] == "service_unavailable"
    assert store.rollbacks == 1


def test_expired_deadline_maps_to_504(client, uow_override):
    store = InMemoryStore()
    uow_override(lambda **_: InMemoryUnitOfWork(store, deadline=time.monotonic() - 1))

    response = client.get(BASE)

    assert response.status_code == 504
    assert response.get_json()["code"] == "gateway_timeout"


def test_customer_token_cannot_create_products(client, session):
    row = CustomerFactory(email="buyer@example.com")
    session.commit()
    headers = auth_header(row.id, row.email)

    response = client.post(BASE, json={"name": "Mug", "price": "1.00"}, headers=headers)

    assert response.status_code == 403
    assert response.get_json()["code"] == "forbidden"


def test_only_the_owning_seller_may_change_a_product(client, seller, rival):
    headers, _ = seller
    created = client.post(BASE, json={"name": "Mug", "price": "2.00"}, headers=headers)
    product_id = created.get_json()["data"]["id"]

    update = client.put(f"{BASE}/{product_id}", json={"name": "Stolen"}, headers=rival)
    delete = client.delete(f"{BASE}/{product_id}", headers=rival)

    assert update.status_code == 403
    assert delete.status_code == 403
    current = client.get(f"{BASE}/{product_id}").get_json()["data"]
    assert current["name"] == "Mug"
