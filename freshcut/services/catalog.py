"""Turning catalog products into cart lines."""
from decimal import Decimal
from typing import Any, Mapping, Optional

from freshcut.cart.models import CartItem, Customization, ItemPricing
from freshcut.services.models import Product

# Cutting styles that need no butchering work
UNCUT_STYLES = frozenset({"", "whole"})


def cutting_fee_for(product: Product, customization: Customization) -> Decimal:
    style = customization.get("cutting_style") or ""
    if style in UNCUT_STYLES:
        return Decimal("0")
    return product.cutting_fee


def build_cart_item(product: Product, customization: Optional[Mapping[str, Any]] = None) -> CartItem:
    """Snapshot a catalog product as a single-unit cart line."""
    options = Customization.of(customization)
    return CartItem(
        id=product.id,
        name=product.name,
        image_url=product.image_url,
        customization=options,
        quantity=1,
        pricing=ItemPricing(
            total=product.total_price,
            delivery_fee=product.delivery_fee,
            cutting_fee=cutting_fee_for(product, options),
        ),
    )
