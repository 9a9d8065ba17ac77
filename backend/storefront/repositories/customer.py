from __future__ import annotations

from storefront.models.customer import Customer
from storefront.repositories.account import AccountRepository


class CustomerRepository(AccountRepository[Customer]):
    """Customer accounts; every operation comes from :class:`AccountRepository`."""

    model = Customer
    entity_name = "Customer"
