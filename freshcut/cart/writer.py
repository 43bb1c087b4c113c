"""Ordered write-behind of cart snapshots to a CartStorage."""
import asyncio
import os
from collections import deque
from typing import Deque, Optional

from freshcut.logging import get_logger

from .storage import CartStorage

logger = get_logger(__name__)

CART_PERSIST_TIMEOUT = float(os.environ.get("CART_PERSIST_TIMEOUT", "2.0"))


class CartWriter:
    """
    Applies cart writes to storage in submission order.

    Each submitted job is a payload snapshot (``None`` means clear the record).
    A single drain task runs per burst of writes, so a slow save never lets a
    later write overtake it. Failures and timeouts are logged and counted; a
    timed-out call is still awaited before the next job starts.
    """

    def __init__(self, storage: CartStorage, timeout: float = CART_PERSIST_TIMEOUT):
        self.storage = storage
        self.timeout = timeout
        self.failures = 0
        self._pending: Deque[Optional[str]] = deque()
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, payload: Optional[str]) -> None:
        """Queue a write without waiting for it. Must be called from the event loop."""
        self._pending.append(payload)
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self._drain())

    async def flush(self) -> None:
        """Wait until every submitted write has been applied (or has failed)."""
        while self._task is not None and not self._task.done():
            await self._task

    async def _drain(self) -> None:
        while self._pending:
            payload = self._pending.popleft()
            if not await self._apply(payload):
                self.failures += 1

    async def _apply(self, payload: Optional[str]) -> bool:
        action = "clear" if payload is None else "save"
        call = self.storage.clear() if payload is None else self.storage.save(payload)
        job = asyncio.ensure_future(call)
        try:
            ok = await asyncio.wait_for(asyncio.shield(job), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Cart {action} timed out after {self.timeout}s (key={self.storage.key})")
            await self._settle(job, action)
            return False
        except Exception as e:
            # The in-memory cart stays authoritative for the session
            logger.error(f"Cart {action} failed (key={self.storage.key}): {e}", exc_info=True)
            return False

        if not ok:
            logger.warning(f"Cart {action} was rejected by storage (key={self.storage.key})")
        return bool(ok)

    async def _settle(self, job: asyncio.Future, action: str) -> None:
        """Let a timed-out call finish so the next write cannot land before it."""
        await asyncio.wait({job})
        if not job.cancelled() and job.exception() is not None:
            logger.error(f"Late cart {action} failed (key={self.storage.key}): {job.exception()}")
