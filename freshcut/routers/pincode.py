"""
Pincode Router

GET /pincode/check/{pincode} -> {"serviceable": bool}
"""
from fastapi import APIRouter

from freshcut.services.serviceability import is_serviceable

router = APIRouter(prefix="/pincode", tags=["pincode"])


@router.get("/check/{pincode}")
async def check_pincode(pincode: str):
    """Simple availability check."""
    return {"serviceable": is_serviceable(pincode)}
