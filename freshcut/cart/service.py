"""Cart engine: owns the in-memory cart and keeps storage in sync."""
from dataclasses import dataclass
from typing import List, Mapping, Optional, Any

from freshcut.logging import get_logger, sanitize_id_for_logging

from .models import CartItem, CartPayloadError, Customization, parse_items, serialize_items
from .pricing import CartSummary, calculate_summary
from .storage import CartStorage
from .writer import CART_PERSIST_TIMEOUT, CartWriter

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartSnapshot:
    """Items and summary captured together, e.g. for checkout."""
    items: List[CartItem]
    summary: CartSummary


class CartEngine:
    """
    Sole owner and mutator of one session's cart.

    Usage:
        engine = await CartEngine.create(MemoryCartStorage())
        await engine.add_item(item, quantity=2)
        summary = engine.get_summary()
        await engine.flush()  # only when the caller needs the write on disk

    Mutators change the in-memory list synchronously and queue the write;
    they never await storage. Lines are unique on (id, customization), and
    quantities are always >= 1. Validation problems are silent no-ops.

    An engine belongs to one event loop. Each mutator finishes its
    read-modify-write before yielding, so no lock is needed.
    """

    def __init__(self, storage: CartStorage, persist_timeout: float = CART_PERSIST_TIMEOUT):
        self.storage = storage
        self._writer = CartWriter(storage, timeout=persist_timeout)
        self._items: List[CartItem] = []
        self._ready = False
        self._dirty = False

    @classmethod
    async def create(cls, storage: CartStorage, **kwargs) -> "CartEngine":
        """Construct an engine and hydrate it from storage."""
        engine = cls(storage, **kwargs)
        await engine.initialize()
        return engine

    # ---- state ----

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def items(self) -> List[CartItem]:
        """Copies of the current lines, in insertion order."""
        return [item.copy() for item in self._items]

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def pending_writes(self) -> int:
        return self._writer.pending

    @property
    def failed_writes(self) -> int:
        return self._writer.failures

    # ---- lifecycle ----

    async def initialize(self) -> None:
        """
        Hydrate from storage once.

        A missing record leaves the cart as is; a malformed record is erased
        and the cart starts empty. Load errors count as a missing record.
        """
        if self._ready:
            return

        try:
            payload = await self.storage.load()
        except Exception as e:
            logger.error(f"Failed to load cart (key={self.storage.key}): {e}")
            payload = None

        if payload is not None:
            try:
                self._items = parse_items(payload)
                logger.debug(f"Hydrated cart with {len(self._items)} line(s) (key={self.storage.key})")
            except CartPayloadError as e:
                logger.warning(f"Corrupted cart data (key={self.storage.key}): {e}")
                self._items = []
                self._ready = True
                self._writer.submit(None)
                return

        self._ready = True

        # Lines added before hydration with nothing saved to replace them
        if self._dirty and payload is None and self._items:
            self._persist()

    async def flush(self) -> None:
        """Wait for queued writes to reach storage."""
        await self._writer.flush()

    # ---- mutations ----

    async def add_item(self, item: CartItem, quantity: int = 1) -> bool:
        """
        Add ``quantity`` units of ``item``.

        An existing line with the same id and customization gets its quantity
        increased in place; otherwise a new line is appended.
        """
        if not self._valid_quantity(quantity):
            logger.debug(f"Rejected add of {sanitize_id_for_logging(item.id)} with quantity {quantity!r}")
            return False

        existing = self._find(item.id, item.customization)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items.append(item.copy(quantity=quantity))

        self._changed()
        return True

    async def update_quantity(
        self,
        item_id: str,
        quantity: int,
        customization: "Customization | Mapping[str, Any] | None" = None,
    ) -> bool:
        """
        Set the quantity of a line.

        Without ``customization`` the first line for ``item_id`` is updated,
        even if the product has several customized lines. Pass the
        customization to target one line exactly.
        """
        if not self._valid_quantity(quantity):
            return False

        target = self._find(item_id, None if customization is None else Customization.of(customization))
        if target is None or target.quantity == quantity:
            return False

        target.quantity = quantity
        self._changed()
        return True

    async def remove_item(
        self,
        item_id: str,
        customization: "Customization | Mapping[str, Any] | None" = None,
    ) -> bool:
        """Remove every line for ``item_id`` (or just the matching customization)."""
        wanted = None if customization is None else Customization.of(customization)
        kept = [item for item in self._items if not item.matches(item_id, wanted)]
        if len(kept) == len(self._items):
            return False

        self._items = kept
        self._changed()
        return True

    async def clear(self) -> None:
        """Empty the cart and erase the stored record."""
        self._items = []
        self._changed()

    # ---- reads ----

    def get_summary(self) -> CartSummary:
        return calculate_summary(self._items)

    def snapshot(self) -> CartSnapshot:
        items = self.items
        return CartSnapshot(items=items, summary=calculate_summary(items))

    # ---- internal helpers ----

    @staticmethod
    def _valid_quantity(quantity: Any) -> bool:
        return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 1

    def _find(self, item_id: str, customization: Optional[Customization]) -> Optional[CartItem]:
        return next((item for item in self._items if item.matches(item_id, customization)), None)

    def _changed(self) -> None:
        if not self._ready:
            self._dirty = True
            return
        self._persist()

    def _persist(self) -> None:
        self._writer.submit(serialize_items(self._items) if self._items else None)
