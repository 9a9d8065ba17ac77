from storefront.models.customer import Customer
from storefront.models.product import Product
from storefront.models.seller import Seller

__all__ = [
    "Customer",
    "Product",
    "Seller",
]
