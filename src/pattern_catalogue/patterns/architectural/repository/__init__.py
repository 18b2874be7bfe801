"""Repository pattern - collection-style storage access behind a service."""
from .products import Product
from .repositories import FileProductRepository, InMemoryProductRepository, ProductRepository
from .service import ProductService

__all__ = [
    "FileProductRepository",
    "InMemoryProductRepository",
    "Product",
    "ProductRepository",
    "ProductService",
]
