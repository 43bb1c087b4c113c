"""Database Models - Pydantic models for Supabase rows."""
from decimal import Decimal
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator

from freshcut.services.money import to_decimal as _to_decimal

DEFAULT_DELIVERY_FEE = Decimal("40")
DEFAULT_CUTTING_FEE = Decimal("10")


class Category(BaseModel):
    """Product category (Chicken, Fish, ...)."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    created_at: Optional[datetime] = None


class Product(BaseModel):
    """One animal on sale, weighed and priced individually."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category_id: Optional[str] = None
    category: Optional[Category] = None
    target_weight: Optional[Decimal] = None  # kg
    actual_weight: Optional[Decimal] = None  # kg
    price_per_kg: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    images: list[str] = []
    grade: Optional[str] = None
    farm: Optional[str] = None
    status: str = "live"  # live | draft | sold_out
    stock_count: int = 0
    video_url: Optional[str] = None
    delivery_fee: Decimal = DEFAULT_DELIVERY_FEE
    cutting_fee: Decimal = DEFAULT_CUTTING_FEE
    created_at: Optional[datetime] = None

    @field_validator("price_per_kg", "total_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("delivery_fee", mode="before")
    @classmethod
    def default_delivery_fee(cls, v):
        return DEFAULT_DELIVERY_FEE if v is None else _to_decimal(v)

    @field_validator("cutting_fee", mode="before")
    @classmethod
    def default_cutting_fee(cls, v):
        return DEFAULT_CUTTING_FEE if v is None else _to_decimal(v)

    @field_validator("images", mode="before")
    @classmethod
    def normalize_images(cls, v):
        return v if isinstance(v, list) else []

    @property
    def is_orderable(self) -> bool:
        return self.status == "live"

    @property
    def image_url(self) -> Optional[str]:
        return self.images[0] if self.images else None


class Order(BaseModel):
    """Order placed from a cart snapshot."""
    model_config = ConfigDict(extra="ignore")

    id: str
    customer_id: Optional[str] = None
    items: list[dict[str, Any]] = []
    subtotal: Decimal = Decimal("0")
    delivery_fee: Decimal = Decimal("0")
    cutting_fee: Decimal = Decimal("0")
    tax: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    item_count: int = 0
    status: str = "pending"
    pincode: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("subtotal", "delivery_fee", "cutting_fee", "tax", "total", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)
