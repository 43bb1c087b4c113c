"""
Orders Router

Checkout from the device cart and order lookups.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from freshcut.cart import CartEngine
from freshcut.errors import ERROR_ORDER_FAILED, ERROR_ORDER_NOT_FOUND
from freshcut.logging import get_logger
from freshcut.orders import CheckoutService
from freshcut.services.database import Database
from freshcut.services.models import Order
from .deps import get_cart_engine, get_checkout_service, get_db
from .models import CheckoutRequest

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


@router.post("/orders/checkout", response_model=Order)
async def checkout(
    request: CheckoutRequest,
    engine: CartEngine = Depends(get_cart_engine),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Place an order from the device cart; the cart is emptied on success."""
    try:
        return await service.place_order(
            engine,
            pincode=request.pincode,
            address=request.address,
            customer_id=request.customer_id,
        )
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        logger.error(f"Checkout failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_ORDER_FAILED)


@router.get("/orders", response_model=list[Order])
async def get_orders(customer_id: Optional[str] = None, db: Database = Depends(get_db)):
    """List orders, newest first."""
    return await db.get_orders(customer_id=customer_id)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str, db: Database = Depends(get_db)):
    """Get order by ID."""
    order = await db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    return order
