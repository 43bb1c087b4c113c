"""
Catalog Router

Public, read-only category and product listings.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from freshcut.errors import ERROR_PRODUCT_NOT_FOUND
from freshcut.services.database import Database
from freshcut.services.models import Category, Product
from .deps import get_db

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=list[Category])
async def get_categories(db: Database = Depends(get_db)):
    """Get all categories."""
    return await db.get_categories()


@router.get("/products", response_model=list[Product])
async def get_products(
    category_id: Optional[str] = None,
    search: Optional[str] = None,
    db: Database = Depends(get_db),
):
    """Get live products, optionally filtered by category or name."""
    return await db.get_products(status="live", category_id=category_id, search=search)


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str, db: Database = Depends(get_db)):
    """Get product by ID."""
    product = await db.get_product_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product
