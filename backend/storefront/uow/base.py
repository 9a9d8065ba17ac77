"""
Abstract Unit of Work contracts.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Literal

from storefront.services._shared.errors import DeadlineExceededError
from storefront.services._shared.ports import (
    CustomerRepositoryPort,
    ProductRepositoryPort,
    SellerRepositoryPort,
)

UnitOfWorkState = Literal["new", "active", "committed", "rolled_back"]


class UnitOfWork(ABC):
    """
    Coordinates a transactional boundary for a use-case.

    Responsibilities:
    - Provide access to repositories bound to the same transaction.
    - Commit on success, rollback on error, exactly once per instance.

    Instances are single-use: entering a second time raises ``RuntimeError``.
    ``deadline`` is a :func:`time.monotonic` timestamp; once passed, the
    transaction is rolled back instead of committed.
    """

    customers: CustomerRepositoryPort
    products: ProductRepositoryPort
    sellers: SellerRepositoryPort

    def __init__(self, *, deadline: float | None = None) -> None:
        self.deadline = deadline
        self.state: UnitOfWorkState = "new"

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...

    # ------------------------------------------------------------------ #
    # Shared helpers for concrete implementations
    # ------------------------------------------------------------------ #

    def remaining_seconds(self) -> float | None:
        """Seconds left before the deadline, ``None`` when unbounded."""
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def ensure_within_deadline(self) -> None:
        """Raise :class:`DeadlineExceededError` once the deadline has passed."""
        remaining = self.remaining_seconds()
        if remaining is not None and remaining <= 0:
            raise DeadlineExceededError("Deadline exceeded before the transaction completed.")

    def _mark_active(self) -> None:
        if self.state != "new":
            raise RuntimeError(f"UnitOfWork cannot be entered twice (state={self.state}).")
        self.state = "active"
