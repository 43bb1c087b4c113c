"""
Cart Router

Device cart endpoints. Every response carries the full cart and its summary,
so the storefront re-renders from one payload.
"""
from fastapi import APIRouter, Depends, HTTPException

from freshcut.cart import CartEngine
from freshcut.errors import ERROR_PRODUCT_NOT_FOUND, ERROR_PRODUCT_UNAVAILABLE
from freshcut.logging import get_logger, sanitize_id_for_logging
from freshcut.services.catalog import build_cart_item
from freshcut.services.database import Database
from freshcut.services.money import format_money, to_float
from .deps import get_cart_engine, get_db
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(engine: CartEngine) -> dict:
    """Cart lines plus summary; amounts as floats, with a display total."""
    summary = engine.get_summary()
    return {
        "items": [
            {
                "product_id": item.id,
                "name": item.name,
                "image_url": item.image_url,
                "customization": item.customization.to_dict(),
                "quantity": item.quantity,
                "unit_price": to_float(item.pricing.total),
                "delivery_fee": to_float(item.pricing.delivery_fee),
                "cutting_fee": to_float(item.pricing.cutting_fee),
                "line_total": to_float(item.line_total),
            }
            for item in engine.items
        ],
        "summary": summary.to_dict(),
        "total_display": format_money(summary.total),
    }


@router.get("/cart")
async def get_cart(engine: CartEngine = Depends(get_cart_engine)):
    """Get the device's cart."""
    return _format_cart_response(engine)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    engine: CartEngine = Depends(get_cart_engine),
    db: Database = Depends(get_db),
):
    """Add a customized product to the cart (merges with an identical line)."""
    product = await db.get_product_by_id(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    if not product.is_orderable:
        raise HTTPException(status_code=400, detail=ERROR_PRODUCT_UNAVAILABLE)

    item = build_cart_item(product, request.customization)
    if not await engine.add_item(item, request.quantity):
        logger.info(f"Ignored add of {sanitize_id_for_logging(request.product_id)} with quantity {request.quantity}")

    return _format_cart_response(engine)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, engine: CartEngine = Depends(get_cart_engine)):
    """Set a line's quantity. Quantities below 1 are ignored; use DELETE to remove."""
    await engine.update_quantity(request.product_id, request.quantity, request.customization)
    return _format_cart_response(engine)


@router.delete("/cart/item")
async def remove_cart_item(product_id: str, engine: CartEngine = Depends(get_cart_engine)):
    """Remove every line for a product."""
    await engine.remove_item(product_id)
    return _format_cart_response(engine)


@router.delete("/cart")
async def clear_cart(engine: CartEngine = Depends(get_cart_engine)):
    """Empty the cart."""
    await engine.clear()
    return _format_cart_response(engine)
