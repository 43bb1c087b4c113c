"""
FreshCut Core Module

- cart: cart engine, pricing and storage adapters
- db: Supabase and Redis clients
- services: catalog and orders on Supabase, money helpers
- orders: checkout
- routers: FastAPI endpoints

Imports are lazy so the cart package loads without the HTTP stack.
"""

__all__ = [
    "CartEngine",
    "get_supabase",
    "get_redis",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartEngine":
        from freshcut.cart import CartEngine
        return CartEngine
    elif name == "get_supabase":
        from freshcut.db import get_supabase
        return get_supabase
    elif name == "get_redis":
        from freshcut.db import get_redis
        return get_redis
    raise AttributeError(f"module 'freshcut' has no attribute '{name}'")
