"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar
from uuid import UUID

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    verify_jwt_in_request,
)

from storefront.core.errors import Forbidden, Unauthorized
from storefront.core.logger import ensure_request_id
from storefront.models.account import normalize_email
from storefront.services._shared.base import BaseService, ServiceContext
from storefront.services._shared.errors import ServiceError
from storefront.services.customers import CustomerService
from storefront.services.products import ProductService
from storefront.services.sellers import SellerService

F = TypeVar("F", bound=Callable[..., Any])
S = TypeVar("S", bound=BaseService)

#: ``app.extensions`` key holding an optional unit-of-work factory override.
UOW_FACTORY_KEY = "storefront.uow_factory"


def service_context(actor_id: UUID | None = None) -> ServiceContext:
    """Build the per-request context: request id, caller and deadline."""

    return ServiceContext.with_timeout(
        current_app.config.get("SERVICE_TIMEOUT_SECONDS"),
        actor_id=actor_id,
        request_id=ensure_request_id(),
    )


def _build(service_cls: type[S], actor_id: UUID | None = None) -> S:
    factory = current_app.extensions.get(UOW_FACTORY_KEY)
    return service_cls(ctx=service_context(actor_id), uow_factory=factory)


def customer_service(actor_id: UUID | None = None) -> CustomerService:
    """Return a :class:`CustomerService` bound to the current request."""

    return _build(CustomerService, actor_id)


def product_service(actor_id: UUID | None = None) -> ProductService:
    """Return a :class:`ProductService` bound to the current request."""

    return _build(ProductService, actor_id)


def seller_service() -> SellerService:
    """Return a :class:`SellerService` bound to the current request."""

    return _build(SellerService)


@contextmanager
def service_errors(service: BaseService) -> Iterator[None]:
    """Re-raise service errors as their HTTP counterparts."""

    try:
        yield
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc


#: Access-token claim naming the kind of account that logged in.
ROLE_CLAIM = "role"
CUSTOMER_ROLE = "customer"
SELLER_ROLE = "seller"


def issue_access_token(account_id: UUID, email: str, role: str) -> str:
    """Create the access token returned by a successful login."""

    return create_access_token(
        identity=str(account_id),
        additional_claims={"email": normalize_email(email), ROLE_CLAIM: role},
    )


def require_role(role: str) -> Callable[[F], F]:
    """Ensure the request carries a valid access token issued to ``role``."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            verify_jwt_in_request(optional=False)
            if get_jwt().get(ROLE_CLAIM) != role:
                raise Forbidden(f"A {role} access token is required")
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def current_account_id() -> UUID:
    """Return the account id carried as the token identity."""

    try:
        return UUID(str(get_jwt_identity()))
    except ValueError as exc:
        raise Unauthorized("Token does not identify an account") from exc


def current_account_email() -> str:
    """Return the ``email`` claim of the verified access token."""

    email = (get_jwt() or {}).get("email")
    if not email:
        raise Unauthorized("Token does not identify an account")
    return str(email)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
