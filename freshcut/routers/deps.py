"""
Shared Dependencies for Routers

Database access, device identification and per-request cart engines.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from weakref import WeakValueDictionary

from fastapi import Depends, Header, HTTPException

from freshcut.cart import CartEngine, CartStorage, RedisCartStorage
from freshcut.errors import ERROR_DEVICE_ID_REQUIRED
from freshcut.orders import CheckoutService
from freshcut.services.database import Database, get_database

# Held only while a request for that device is in flight
_device_locks: "WeakValueDictionary[str, asyncio.Lock]" = WeakValueDictionary()


def get_db() -> Database:
    """Database singleton (initialized in the app lifespan)."""
    return get_database()


def get_device_id(x_device_id: Optional[str] = Header(None)) -> str:
    """The storefront sends a stable per-browser id; carts are keyed on it."""
    device_id = (x_device_id or "").strip()
    if not device_id:
        raise HTTPException(status_code=400, detail=ERROR_DEVICE_ID_REQUIRED)
    return device_id


def _device_lock(device_id: str) -> asyncio.Lock:
    lock = _device_locks.get(device_id)
    if lock is None:
        lock = asyncio.Lock()
        _device_locks[device_id] = lock
    return lock


@asynccontextmanager
async def device_cart(device_id: str, storage: Optional[CartStorage] = None) -> AsyncIterator[CartEngine]:
    """
    One device's cart, from hydration until its writes are flushed.

    Sessions for the same device run one at a time, so overlapping requests
    never load the same record and overwrite each other's changes.
    """
    async with _device_lock(device_id):
        engine = await CartEngine.create(storage if storage is not None else RedisCartStorage(device_id))
        try:
            yield engine
        finally:
            await engine.flush()


async def get_cart_engine(device_id: str = Depends(get_device_id)) -> AsyncIterator[CartEngine]:
    """Hydrated cart engine for the calling device; pending writes are flushed after the handler."""
    async with device_cart(device_id) as engine:
        yield engine


def get_checkout_service(db: Database = Depends(get_db)) -> CheckoutService:
    return CheckoutService(db)
