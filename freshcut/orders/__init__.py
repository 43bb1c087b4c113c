"""Order processing module."""
from .checkout import CheckoutService, build_order_payload

__all__ = [
    "CheckoutService",
    "build_order_payload",
]
