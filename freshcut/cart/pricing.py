"""Cart pricing: derives the order summary from cart lines."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from freshcut.services.money import multiply, round_money, to_float

from .models import CartItem

TAX_RATE = Decimal("0.05")


@dataclass(frozen=True)
class CartSummary:
    """Aggregate pricing for a cart. Derived on demand, never persisted."""
    subtotal: Decimal
    delivery_fee: Decimal
    cutting_fee: Decimal
    tax: Decimal
    total: Decimal
    item_count: int

    @classmethod
    def empty(cls) -> "CartSummary":
        zero = round_money(0)
        return cls(
            subtotal=zero,
            delivery_fee=zero,
            cutting_fee=zero,
            tax=zero,
            total=zero,
            item_count=0,
        )

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(self.subtotal),
            "delivery_fee": to_float(self.delivery_fee),
            "cutting_fee": to_float(self.cutting_fee),
            "tax": to_float(self.tax),
            "total": to_float(self.total),
            "item_count": self.item_count,
        }


def calculate_summary(items: Iterable[CartItem]) -> CartSummary:
    """
    Compute the cart summary.

    - subtotal: unit total x quantity, summed
    - delivery_fee: flat per line, not scaled by quantity
    - cutting_fee: per unit, reported separately
    - tax: 5% of subtotal
    - total: subtotal + delivery_fee + tax

    The cutting fee is not part of ``total``; checkout shows it as its own line.
    """
    subtotal = Decimal("0")
    delivery_fee = Decimal("0")
    cutting_fee = Decimal("0")
    item_count = 0

    for item in items:
        subtotal += multiply(item.pricing.total, item.quantity)
        delivery_fee += item.pricing.delivery_fee
        cutting_fee += multiply(item.pricing.cutting_fee, item.quantity)
        item_count += item.quantity

    subtotal = round_money(subtotal)
    delivery_fee = round_money(delivery_fee)
    tax = round_money(multiply(subtotal, TAX_RATE))

    return CartSummary(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        cutting_fee=round_money(cutting_fee),
        tax=tax,
        total=round_money(subtotal + delivery_fee + tax),
        item_count=item_count,
    )
