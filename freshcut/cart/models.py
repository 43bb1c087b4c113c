"""Cart models with Decimal-based pricing and canonical customizations."""
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Tuple

from freshcut.services.money import multiply, parse_amount, round_money, to_decimal


class CartPayloadError(ValueError):
    """Persisted cart data is not a well-formed list of cart items."""


class Customization:
    """
    Cutting and size options chosen for a cart line.

    Two customizations are equal when their canonical JSON forms are equal,
    so key order never matters. ``None`` and ``{}`` are the same (no options).
    Values JSON cannot hold (Decimal, dates) are stored as strings, so the
    options always serialize exactly as they compare.
    """

    __slots__ = ("_options", "_canonical")

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self._canonical = json.dumps(
            dict(options or {}),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            default=str,
        )
        self._options = json.loads(self._canonical)

    @classmethod
    def of(cls, value: "Customization | Mapping[str, Any] | None") -> "Customization":
        if isinstance(value, Customization):
            return value
        return cls(value)

    @property
    def canonical(self) -> str:
        return self._canonical

    @property
    def options(self) -> dict:
        return dict(self._options)

    def get(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def to_dict(self) -> dict:
        return self.options

    def __bool__(self) -> bool:
        return bool(self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customization):
            return NotImplemented
        return self._canonical == other._canonical

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __repr__(self) -> str:
        return f"Customization({self._canonical})"


@dataclass
class ItemPricing:
    """Per-line price breakdown."""
    total: Decimal  # One unit, before cutting fee
    delivery_fee: Decimal = Decimal("0")  # Flat, per line
    cutting_fee: Decimal = Decimal("0")  # Per unit

    def __post_init__(self):
        self.total = to_decimal(self.total)
        self.delivery_fee = to_decimal(self.delivery_fee)
        self.cutting_fee = to_decimal(self.cutting_fee)

    def to_dict(self) -> dict:
        # camelCase keys match the storefront's localStorage record
        return {
            "total": str(self.total),
            "deliveryFee": str(self.delivery_fee),
            "cuttingFee": str(self.cutting_fee),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ItemPricing":
        if not isinstance(data, dict):
            raise CartPayloadError("pricing must be an object")
        if "total" not in data:
            raise CartPayloadError("pricing.total is required")
        try:
            return cls(
                total=parse_amount(data["total"]),
                delivery_fee=parse_amount(data.get("deliveryFee", 0)),
                cutting_fee=parse_amount(data.get("cuttingFee", 0)),
            )
        except ValueError as e:
            raise CartPayloadError(f"invalid pricing: {e}") from e


@dataclass
class CartItem:
    """Single line in the cart."""
    id: str
    pricing: ItemPricing
    customization: Customization = field(default_factory=Customization)
    quantity: int = 1
    name: str = ""
    image_url: Optional[str] = None
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.customization = Customization.of(self.customization)

    @property
    def key(self) -> Tuple[str, str]:
        """Identity of the line: product id plus canonical customization."""
        return (self.id, self.customization.canonical)

    @property
    def line_total(self) -> Decimal:
        """Unit price times quantity, before fees."""
        return round_money(multiply(self.pricing.total, self.quantity))

    def matches(self, item_id: str, customization: Optional[Customization] = None) -> bool:
        if self.id != item_id:
            return False
        return customization is None or self.customization == customization

    def copy(self, **changes) -> "CartItem":
        values = {
            "id": self.id,
            "pricing": ItemPricing(
                total=self.pricing.total,
                delivery_fee=self.pricing.delivery_fee,
                cutting_fee=self.pricing.cutting_fee,
            ),
            "customization": self.customization,
            "quantity": self.quantity,
            "name": self.name,
            "image_url": self.image_url,
            "added_at": self.added_at,
        }
        values.update(changes)
        return CartItem(**values)

    def to_dict(self) -> dict:
        """Convert to the persisted record form."""
        return {
            "id": self.id,
            "name": self.name,
            "image_url": self.image_url,
            "customization": self.customization.to_dict(),
            "quantity": self.quantity,
            "pricing": self.pricing.to_dict(),
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "CartItem":
        """
        Create from a persisted record, validating its structure.

        Raises:
            CartPayloadError: If the record is not a well-formed cart item
        """
        if not isinstance(data, dict):
            raise CartPayloadError("cart item must be an object")

        item_id = data.get("id")
        if not isinstance(item_id, str) or not item_id:
            raise CartPayloadError("cart item id must be a non-empty string")

        quantity = data.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise CartPayloadError(f"invalid quantity for item {item_id}: {quantity!r}")

        customization = data.get("customization")
        if customization is not None and not isinstance(customization, dict):
            raise CartPayloadError(f"invalid customization for item {item_id}")

        name = data.get("name") or ""
        image_url = data.get("image_url")
        added_at = data.get("added_at") or ""
        if not isinstance(name, str) or not isinstance(added_at, str):
            raise CartPayloadError(f"invalid display fields for item {item_id}")
        if image_url is not None and not isinstance(image_url, str):
            raise CartPayloadError(f"invalid image_url for item {item_id}")

        return cls(
            id=item_id,
            pricing=ItemPricing.from_dict(data.get("pricing")),
            customization=Customization(customization),
            quantity=quantity,
            name=name,
            image_url=image_url,
            added_at=added_at,
        )


def serialize_items(items: List[CartItem]) -> str:
    """Serialize cart lines into the persisted JSON record."""
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def parse_items(payload: str) -> List[CartItem]:
    """
    Parse a persisted cart record.

    The whole payload is rejected if any element is malformed or two
    elements share a product id and customization.

    Raises:
        CartPayloadError: If the payload is not a well-formed cart
    """
    try:
        raw = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise CartPayloadError(f"cart record is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise CartPayloadError("cart record must be a list")

    items = [CartItem.from_dict(entry) for entry in raw]

    seen = set()
    for item in items:
        if item.key in seen:
            raise CartPayloadError(f"duplicate cart line for item {item.id}")
        seen.add(item.key)

    return items
