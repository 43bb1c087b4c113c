"""
API Pydantic Models

Request bodies shared by the storefront endpoints.
"""
from typing import Any, Optional
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1
    customization: dict[str, Any] = {}


class UpdateCartItemRequest(BaseModel):
    product_id: str
    quantity: int
    customization: Optional[dict[str, Any]] = None


# ==================== ORDER MODELS ====================

class CheckoutRequest(BaseModel):
    pincode: str
    address: Optional[str] = None
    customer_id: Optional[str] = None
