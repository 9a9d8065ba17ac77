"""Product catalog use cases."""

from .service import ProductService

__all__ = ["ProductService"]
