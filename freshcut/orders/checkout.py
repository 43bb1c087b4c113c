"""Checkout: turns the current cart into an order record."""
from typing import Any, Dict, Optional, TYPE_CHECKING

from freshcut.cart import CartEngine, CartSnapshot
from freshcut.errors import ERROR_CART_EMPTY, ERROR_INVALID_PINCODE, ERROR_LOCATION_NOT_SERVICEABLE
from freshcut.logging import get_logger, sanitize_id_for_logging
from freshcut.services.money import format_money
from freshcut.services.serviceability import is_serviceable, is_valid_pincode

if TYPE_CHECKING:
    from freshcut.services.database import Database
    from freshcut.services.models import Order

logger = get_logger(__name__)


def build_order_payload(
    snapshot: CartSnapshot,
    pincode: str,
    address: Optional[str] = None,
) -> Dict[str, Any]:
    """Order row for the ``orders`` table. Amounts are sent as strings."""
    summary = snapshot.summary
    return {
        "items": [item.to_dict() for item in snapshot.items],
        "subtotal": str(summary.subtotal),
        "delivery_fee": str(summary.delivery_fee),
        "cutting_fee": str(summary.cutting_fee),
        "tax": str(summary.tax),
        "total": str(summary.total),
        "item_count": summary.item_count,
        "status": "pending",
        "pincode": pincode,
        "address": address,
    }


class CheckoutService:
    """
    Places orders from a cart.

    The cart is cleared only after the order row is stored; if the insert
    fails the cart is left as it was and the error propagates.
    """

    def __init__(self, db: "Database"):
        self.db = db

    async def place_order(
        self,
        engine: CartEngine,
        pincode: str,
        address: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> "Order":
        """
        Raises:
            ValueError: Empty cart, malformed pincode, or pincode outside coverage
        """
        if engine.is_empty:
            raise ValueError(ERROR_CART_EMPTY)
        if not is_valid_pincode(pincode):
            raise ValueError(ERROR_INVALID_PINCODE)
        if not is_serviceable(pincode):
            raise ValueError(ERROR_LOCATION_NOT_SERVICEABLE)

        snapshot = engine.snapshot()
        order = await self.db.create_order(
            build_order_payload(snapshot, pincode, address),
            customer_id=customer_id,
        )

        await engine.clear()
        logger.info(
            f"Order {sanitize_id_for_logging(order.id)} placed: "
            f"{snapshot.summary.item_count} item(s), {format_money(snapshot.summary.total)}"
        )
        return order
