"""
Supabase Database Service

Catalog lookups and order records for the storefront, via repositories.

Usage:
    from freshcut.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    products = await db.get_products(status="live")
"""

import asyncio
from typing import Any, Dict, List, Optional

from supabase._async.client import AsyncClient

from freshcut.db import get_supabase
from freshcut.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from freshcut.services.fallback import fallback_categories, fallback_products
from freshcut.services.models import Category, Order, Product
from freshcut.services.repositories import CategoryRepository, OrderRepository, ProductRepository

logger = get_logger(__name__)


class Database:
    """
    Supabase-backed catalog and orders.

    Catalog reads fall back to a built-in catalog when Supabase is
    unreachable; order writes always propagate their errors.
    """

    def __init__(self, client: AsyncClient):
        """Use Database.create() or init_database() instead."""
        self.client = client
        self._categories_repo = CategoryRepository(self.client)
        self._products_repo = ProductRepository(self.client)
        self._orders_repo = OrderRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory: builds the Supabase client from the environment."""
        client = await get_supabase()
        return cls(client)

    # ==================== CATALOG ====================

    async def get_categories(self) -> List[Category]:
        try:
            categories = await self._categories_repo.get_all()
            logger.debug(f"Fetched {len(categories)} categories")
            return categories
        except Exception as e:
            logger.error(f"Failed to fetch categories, using fallback catalog: {e}")
            return fallback_categories()

    async def get_products(
        self,
        status: Optional[str] = None,
        category_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Product]:
        try:
            products = await self._products_repo.get_all(status=status, category_id=category_id, search=search)
            logger.debug(f"Fetched {len(products)} products")
            return products
        except Exception as e:
            logger.error(
                f"Failed to fetch products (search={sanitize_string_for_logging(search)}), "
                f"using fallback catalog: {e}"
            )
            return fallback_products(status=status, category_id=category_id, search=search)

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        try:
            return await self._products_repo.get_by_id(product_id)
        except Exception as e:
            logger.error(f"Failed to fetch product {sanitize_id_for_logging(product_id)}, using fallback catalog: {e}")
            return next((p for p in fallback_products() if p.id == product_id), None)

    # ==================== ORDERS ====================

    async def create_order(self, order_data: Dict[str, Any], customer_id: Optional[str] = None) -> Order:
        data = {**order_data}
        if customer_id:
            data["customer_id"] = customer_id
        try:
            return await self._orders_repo.create(data)
        except Exception as e:
            logger.error(f"Failed to create order: {e}", exc_info=True)
            raise

    async def get_order(self, order_id: str) -> Optional[Order]:
        return await self._orders_repo.get_by_id(order_id)

    async def get_orders(self, customer_id: Optional[str] = None) -> List[Order]:
        try:
            return await self._orders_repo.get_all(customer_id=customer_id)
        except Exception as e:
            logger.error(f"Failed to fetch orders for {sanitize_id_for_logging(customer_id)}: {e}")
            return []


# ==================== SINGLETON ====================

_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize the database singleton. Call once at startup (lifespan)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton at shutdown."""
    global _db
    if _db is not None:
        _db = None
        logger.info("Supabase client released")


def get_database() -> Database:
    """
    Get database instance (sync accessor).

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError("Database not initialized. Call 'await init_database()' at startup.")
    return _db
