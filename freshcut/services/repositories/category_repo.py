"""Category Repository - Catalog categories."""
from typing import List
from .base import BaseRepository
from freshcut.services.models import Category


class CategoryRepository(BaseRepository):
    """Category database operations (read-only for the storefront)."""

    async def get_all(self) -> List[Category]:
        """Get all categories ordered by name."""
        result = await self.client.table("categories").select("*").order("name").execute()
        return [Category(**c) for c in result.data or []]
