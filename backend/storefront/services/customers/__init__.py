"""Customer use cases."""

from .service import CustomerService

__all__ = ["CustomerService"]
