from __future__ import annotations

from datetime import datetime
from typing import cast

from storefront.models.product import Product
from storefront.services._shared.timestamps import epoch_to_datetime

from .dto import ProductAddOut, ProductFindOut, ProductListItemOut, ProductUpdateOut


def product_to_add_out(row: Product) -> ProductAddOut:
    return ProductAddOut(
        id=row.id,
        seller_id=row.seller_id,
        name=row.name,
        price=row.price,
        quantity=row.quantity,
        created_at=cast(datetime, epoch_to_datetime(row.created_at)),
    )


def product_to_find_out(row: Product) -> ProductFindOut:
    return ProductFindOut(
        id=row.id,
        seller_id=row.seller_id,
        name=row.name,
        price=row.price,
        quantity=row.quantity,
        created_at=cast(datetime, epoch_to_datetime(row.created_at)),
        updated_at=epoch_to_datetime(row.updated_at),
    )


def product_to_update_out(row: Product) -> ProductUpdateOut:
    return ProductUpdateOut(
        id=row.id,
        name=row.name,
        price=row.price,
        quantity=row.quantity,
        created_at=cast(datetime, epoch_to_datetime(row.created_at)),
        updated_at=epoch_to_datetime(row.updated_at),
    )


def product_to_list_item_out(row: Product) -> ProductListItemOut:
    """Public helper for the catalog listing (id, name and price only)."""

    return ProductListItemOut(id=row.id, name=row.name, price=row.price)
