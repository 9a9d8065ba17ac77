"""Unit of Work abstractions and concrete implementations.

This package re-exports the SQLAlchemy-backed unit of work used by the
services, the in-memory variant used by tests, and the abstract contracts the
service layer depends on.
"""

from .base import UnitOfWork
from .memory import InMemoryStore, InMemoryUnitOfWork
from .sqlalchemy_uow import SQLAlchemyUnitOfWork

__all__ = [
    "UnitOfWork",
    "SQLAlchemyUnitOfWork",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
