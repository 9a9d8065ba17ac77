from __future__ import annotations

from datetime import datetime
from typing import cast

from storefront.models.customer import Customer
from storefront.services._shared.timestamps import epoch_to_datetime

from .dto import CustomerRegisterOut, CustomerUpdateOut


def customer_to_register_out(row: Customer) -> CustomerRegisterOut:
    return CustomerRegisterOut(
        email=row.email,
        name=row.name,
        registered_at=cast(datetime, epoch_to_datetime(row.registered_at)),
    )


def customer_to_update_out(row: Customer) -> CustomerUpdateOut:
    return CustomerUpdateOut(
        email=row.email,
        name=row.name,
        registered_at=cast(datetime, epoch_to_datetime(row.registered_at)),
        updated_at=epoch_to_datetime(row.updated_at),
    )
