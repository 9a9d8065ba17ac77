"""HTTP tests for the customer endpoints."""

from __future__ import annotations

import pytest
from flask_jwt_extended import decode_token
from storefront.api.deps import CUSTOMER_ROLE, ROLE_CLAIM, SELLER_ROLE
from tests.factories.customer import DEFAULT_PASSWORD, CustomerFactory
from tests.helpers.auth import auth_header

BASE = "/api/v1/customers"


@pytest.fixture()
def customer(session):
    """Persisted customer as ``(id, email)``."""
    row = CustomerFactory(email="shopper@example.com", name="Shopper")
    session.commit()
    return row.id, row.email


def test_register_returns_public_fields(client):
    response = client.post(
        f"{BASE}/register",
        json={"email": "New@Example.com", "name": "New", "password": "longenough"},
    )

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["email"] == "new@example.com"
    assert data["name"] == "New"
    assert data["registered_at"]
    assert "password" not in data and "password_hash" not in data


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "not-an-email", "name": "X", "password": "longenough"},
        {"email": "ok@example.com", "name": "X", "password": "short"},
        {"email": "ok@example.com", "password": "longenough"},
    ],
)
def test_register_validation_errors_are_problem_details(client, payload):
    response = client.post(f"{BASE}/register", json=payload)

    assert response.status_code == 422
    assert response.mimetype == "application/problem+json"
    body = response.get_json()
    assert body["code"] == "validation_error"
    assert body["request_id"]


def test_register_duplicate_email_conflicts(client, customer):
    response = client.post(
        f"{BASE}/register",
        json={"email": "shopper@example.com", "name": "Again", "password": "longenough"},
    )

    assert response.status_code == 409
    assert response.get_json()["code"] == "conflict"


def test_login_issues_token_usable_for_update(client, customer):
    _, email = customer

    login = client.post(f"{BASE}/login", json={"email": email, "password": DEFAULT_PASSWORD})
    assert login.status_code == 200
    data = login.get_json()["data"]
    assert data["matched"] is True

    update = client.put(
        BASE,
        json={"name": "Renamed"},
        headers={"Authorization": f"Bearer {data['access_token']}"},
    )
    assert update.status_code == 200
    assert update.get_json()["data"]["name"] == "Renamed"
    assert update.get_json()["data"]["updated_at"]


def test_login_wrong_password_is_unauthorized(client, customer):
    _, email = customer

    response = client.post(f"{BASE}/login", json={"email": email, "password": "wrong-pass"})

    assert response.status_code == 401
    assert response.get_json()["data"] == {"matched": False}


def test_update_requires_token(client):
    response = client.put(BASE, json={"name": "Anon"})

    assert response.status_code == 401


def test_delete_then_login_and_update_fail(client, customer):
    customer_id, email = customer
    headers = auth_header(customer_id, email)

    assert client.delete(BASE, headers=headers).status_code == 204
    assert client.delete(BASE, headers=headers).status_code == 204

    login = client.post(f"{BASE}/login", json={"email": email, "password": DEFAULT_PASSWORD})
    assert login.status_code == 401
    update = client.put(BASE, json={"name": "Ghost"}, headers=headers)
    assert update.status_code == 404
    assert update.get_json()["code"] == "not_found"


def test_login_token_carries_normalized_email_and_customer_role(client, customer, app):
    customer_id, _ = customer

    login = client.post(
        f"{BASE}/login", json={"email": "Shopper@Example.COM", "password": DEFAULT_PASSWORD}
    )

    assert login.status_code == 200
    with app.app_context():
        claims = decode_token(login.get_json()["data"]["access_token"])
    assert claims["sub"] == str(customer_id)
    assert claims["email"] == "shopper@example.com"
    assert claims[ROLE_CLAIM] == CUSTOMER_ROLE


def test_seller_token_cannot_update_a_customer(client, customer):
    customer_id, email = customer

    response = client.put(
        BASE, json={"name": "Hijack"}, headers=auth_header(customer_id, email, SELLER_ROLE)
    )

    assert response.status_code == 403
