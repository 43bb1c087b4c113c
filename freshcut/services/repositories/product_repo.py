"""Product Repository - Product catalog lookups."""
from typing import Optional, List
from .base import BaseRepository
from freshcut.services.models import Product

PRODUCT_COLUMNS = "*, category:categories(*)"


class ProductRepository(BaseRepository):
    """Product database operations (read-only for the storefront)."""

    async def get_all(
        self,
        status: Optional[str] = None,
        category_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Product]:
        """Get products, newest first, with their category embedded."""
        query = self.client.table("products").select(PRODUCT_COLUMNS).order("created_at", desc=True)

        if status:
            query = query.eq("status", status)
        if category_id:
            query = query.eq("category_id", category_id)
        if search:
            query = query.ilike("name", f"%{search}%")

        result = await query.execute()
        return [Product(**p) for p in result.data or []]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select(PRODUCT_COLUMNS).eq("id", product_id).execute()

        if not result.data:
            return None
        return Product(**result.data[0])
