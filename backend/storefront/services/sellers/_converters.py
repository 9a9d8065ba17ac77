from __future__ import annotations

from datetime import datetime
from typing import cast

from storefront.models.seller import Seller
from storefront.services._shared.timestamps import epoch_to_datetime

from .dto import SellerRegisterOut, SellerUpdateOut


def seller_to_register_out(row: Seller) -> SellerRegisterOut:
    return SellerRegisterOut(
        email=row.email,
        name=row.name,
        registered_at=cast(datetime, epoch_to_datetime(row.registered_at)),
    )


def seller_to_update_out(row: Seller) -> SellerUpdateOut:
    return SellerUpdateOut(
        email=row.email,
        name=row.name,
        registered_at=cast(datetime, epoch_to_datetime(row.registered_at)),
        updated_at=epoch_to_datetime(row.updated_at),
    )
