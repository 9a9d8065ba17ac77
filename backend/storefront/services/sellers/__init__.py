"""Seller use cases."""

from .service import SellerService

__all__ = ["SellerService"]
