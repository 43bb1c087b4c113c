"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from freshcut.routers.cart import router as cart_router
from freshcut.routers.catalog import router as catalog_router
from freshcut.routers.orders import router as orders_router
from freshcut.routers.pincode import router as pincode_router

__all__ = [
    "cart_router",
    "catalog_router",
    "orders_router",
    "pincode_router",
]
