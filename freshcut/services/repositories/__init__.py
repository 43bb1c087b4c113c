"""
Repository Pattern for Database Operations

- CategoryRepository: Catalog categories
- ProductRepository: Product catalog lookups
- OrderRepository: Orders
"""
from .category_repo import CategoryRepository
from .product_repo import ProductRepository
from .order_repo import OrderRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
    "OrderRepository",
]
