"""Cart package: models, pricing, storage, and the cart engine."""
from .models import CartItem, CartPayloadError, Customization, ItemPricing
from .pricing import TAX_RATE, CartSummary, calculate_summary
from .service import CartEngine, CartSnapshot
from .storage import CartStorage, FileCartStorage, MemoryCartStorage, RedisCartStorage

__all__ = [
    "CartItem",
    "CartPayloadError",
    "Customization",
    "ItemPricing",
    "TAX_RATE",
    "CartSummary",
    "calculate_summary",
    "CartEngine",
    "CartSnapshot",
    "CartStorage",
    "FileCartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
]
