# storefront/services/_shared/base.py
from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

from storefront.core import errors as api_errors
from storefront.services._shared.errors import (
    ConstraintViolationError,
    DeadlineExceededError,
    EncodingError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    ServiceError,
    StoreUnavailableError,
)
from storefront.uow.base import UnitOfWork
from storefront.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

#: Callable producing a fresh unit of work; receives the caller's deadline.
UnitOfWorkFactory = Callable[..., UnitOfWork]


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (auth, request ids, deadline).

    :param actor_id: Authenticated customer identifier.
    :param request_id: Correlation id for logging/tracing.
    :param deadline: :func:`time.monotonic` timestamp after which the
        current transaction must not commit. ``None`` means unbounded.
    """

    actor_id: UUID | None = None
    request_id: str | None = None
    deadline: float | None = None

    @classmethod
    def with_timeout(
        cls,
        seconds: float | None,
        *,
        actor_id: UUID | None = None,
        request_id: str | None = None,
    ) -> ServiceContext:
        """
        Build a context whose deadline is ``seconds`` from now.

        :param seconds: Timeout budget; ``None`` or ``<= 0`` disables it.
        :type seconds: float | None
        """
        deadline = time.monotonic() + seconds if seconds and seconds > 0 else None
        return cls(actor_id=actor_id, request_id=request_id, deadline=deadline)


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide a fresh read-write unit of work per use-case invocation.
    * Provide the clock used for entity timestamps.
    * Centralize error translation to the HTTP taxonomy.

    Notes
    -----
    - Services never touch the global session; always use a Unit of Work.
    - Each public method opens exactly one unit of work, so one invocation
      owns exactly one transaction.
    """

    def __init__(
        self,
        *,
        ctx: ServiceContext | None = None,
        uow_factory: UnitOfWorkFactory | None = None,
    ) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (auth, tracing, deadline).
        :type ctx: ServiceContext | None
        :param uow_factory: Unit-of-work constructor; defaults to
            :class:`SQLAlchemyUnitOfWork`.
        :type uow_factory: UnitOfWorkFactory | None
        """
        self.ctx = ctx or ServiceContext()
        self._uow_factory: UnitOfWorkFactory = uow_factory or SQLAlchemyUnitOfWork

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> UnitOfWork:
        """
        Create a read-write Unit of Work bound to the context deadline.

        :returns: Fresh, not yet entered UoW instance.
        :rtype: UnitOfWork
        """
        return self._uow_factory(deadline=self.ctx.deadline)

    # -------------------------- Clock ---------------------------------------

    def now_epoch(self) -> int:
        """Current time in whole epoch seconds."""
        return int(time.time())

    # -------------------------- Error handling ------------------------------

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ForbiddenError):
            # → 403 Forbidden
            return api_errors.Forbidden(str(exc))

        if isinstance(exc, ConstraintViolationError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, InvalidInputError):
            # → 422 Unprocessable Entity
            return api_errors.APIError(
                message=str(exc),
                status_code=422,
                code="validation_error",
            )

        if isinstance(exc, StoreUnavailableError):
            # → 503 Service Unavailable
            return api_errors.ServiceUnavailable()

        if isinstance(exc, DeadlineExceededError):
            # → 504 Gateway Timeout
            return api_errors.GatewayTimeout()

        if isinstance(exc, EncodingError):
            # → 500, without echoing anything about the credential
            return api_errors.APIError(
                message="Credential processing failed",
                status_code=500,
                code="internal_server_error",
            )

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
