from storefront.repositories.customer import CustomerRepository
from storefront.repositories.product import ProductRepository
from storefront.repositories.seller import SellerRepository

__all__ = [
    "CustomerRepository",
    "ProductRepository",
    "SellerRepository",
]
