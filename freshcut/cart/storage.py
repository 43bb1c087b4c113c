"""
Cart persistence adapters.

Every adapter stores one serialized cart under one key and fails soft:
load() returns None on any error, save() and clear() return False.
"""
import asyncio
import uuid
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from freshcut.db import StorageKeys, TTL, get_redis
from freshcut.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class CartStorage(Protocol):
    """Durable key/value store for one serialized cart."""

    key: str

    async def load(self) -> Optional[str]:
        ...

    async def save(self, payload: str) -> bool:
        ...

    async def clear(self) -> bool:
        ...


class MemoryCartStorage:
    """
    In-process storage.

    Pass the same ``store`` dict to several instances to simulate a page reload
    against the same browser storage.
    """

    def __init__(self, store: Optional[Dict[str, str]] = None, key: str = StorageKeys.CART):
        self.store = store if store is not None else {}
        self.key = key

    async def load(self) -> Optional[str]:
        return self.store.get(self.key)

    async def save(self, payload: str) -> bool:
        self.store[self.key] = payload
        return True

    async def clear(self) -> bool:
        self.store.pop(self.key, None)
        return True


class FileCartStorage:
    """JSON file storage for hosts without a browser (kiosk, CLI)."""

    def __init__(self, directory: Union[str, Path], key: str = StorageKeys.CART):
        self.key = key
        self.path = Path(directory) / f"{key}.json"

    def _read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f"{self.path.name}.{uuid.uuid4().hex}.tmp")
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(self.path)

    async def load(self) -> Optional[str]:
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read cart file {self.path}: {e}")
            return None

    async def save(self, payload: str) -> bool:
        try:
            await asyncio.to_thread(self._write, payload)
            return True
        except OSError as e:
            logger.error(f"Failed to write cart file {self.path}: {e}")
            return False

    async def clear(self) -> bool:
        try:
            await asyncio.to_thread(self.path.unlink, missing_ok=True)
            return True
        except OSError as e:
            logger.error(f"Failed to remove cart file {self.path}: {e}")
            return False


class RedisCartStorage:
    """
    Upstash Redis storage, one key per device.

    Abandoned device carts expire after TTL.CART.
    """

    def __init__(self, device_id: str, redis=None, ttl: int = TTL.CART):
        self.device_id = device_id
        self.key = StorageKeys.cart_key(device_id)
        self.ttl = ttl
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis()
        return self._redis

    async def load(self) -> Optional[str]:
        try:
            data = await self.redis.get(self.key)
        except Exception as e:
            logger.error(f"Failed to load cart for device {sanitize_id_for_logging(self.device_id)}: {e}")
            return None
        if data is None:
            return None
        if isinstance(data, bytes):
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning(f"Undecodable cart for device {sanitize_id_for_logging(self.device_id)}")
                return None
        return str(data)

    async def save(self, payload: str) -> bool:
        try:
            await self.redis.set(self.key, payload, ex=self.ttl)
            return True
        except Exception as e:
            logger.error(f"Failed to save cart for device {sanitize_id_for_logging(self.device_id)}: {e}")
            return False

    async def clear(self) -> bool:
        try:
            await self.redis.delete(self.key)
            return True
        except Exception as e:
            logger.error(f"Failed to clear cart for device {sanitize_id_for_logging(self.device_id)}: {e}")
            return False
