from __future__ import annotations

from storefront.models.seller import Seller
from storefront.repositories.account import AccountRepository


class SellerRepository(AccountRepository[Seller]):
    """Seller accounts. Sellers are registered, log in and rename themselves."""

    model = Seller
    entity_name = "Seller"
