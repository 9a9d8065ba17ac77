"""Service error to HTTP error mapping."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import DataError, IntegrityError, OperationalError
from storefront.core import errors as api_errors
from storefront.repositories.base import translate_db_errors
from storefront.services._shared.base import BaseService
from storefront.services._shared.errors import (
    ConstraintViolationError,
    DeadlineExceededError,
    EncodingError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    StoreUnavailableError,
)


@pytest.mark.parametrize(
    "error,status",
    [
        (NotFoundError("Product", 1), 404),
        (ForbiddenError("Product", 1), 403),
        (ConstraintViolationError("Customer", "duplicate"), 409),
        (InvalidInputError("bad"), 422),
        (StoreUnavailableError(), 503),
        (DeadlineExceededError(), 504),
        (EncodingError("hash is broken"), 500),
    ],
)
def test_translate_exceptions(error, status):
    translated = BaseService().translate_exceptions(error)

    assert isinstance(translated, api_errors.APIError)
    assert translated.status_code == status


def test_encoding_error_message_is_generic():
    translated = BaseService().translate_exceptions(EncodingError("pbkdf2$leaky$hash"))

    assert "leaky" not in translated.message


def test_unrelated_exceptions_pass_through():
    error = KeyError("x")

    assert BaseService().translate_exceptions(error) is error


@pytest.mark.parametrize(
    "raised,expected",
    [
        (
            IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed")),
            ConstraintViolationError,
        ),
        (DataError("INSERT", {}, Exception("numeric field overflow")), InvalidInputError),
        (OperationalError("SELECT 1", {}, Exception("connection refused")), StoreUnavailableError),
    ],
)
def test_driver_errors_are_sorted_into_the_service_taxonomy(raised, expected):
    with pytest.raises(expected) as excinfo, translate_db_errors("Product"):
        raise raised

    assert excinfo.value.__cause__ is raised


def test_out_of_range_value_is_a_client_error_not_an_outage():
    with pytest.raises(InvalidInputError) as excinfo, translate_db_errors("Product"):
        raise DataError("INSERT", {}, Exception("numeric field overflow"))

    translated = BaseService().translate_exceptions(excinfo.value)
    assert translated.status_code == 422
