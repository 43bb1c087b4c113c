"""Order Repository - Order operations."""
from typing import Any, Dict, Optional, List
from .base import BaseRepository
from freshcut.services.models import Order


class OrderRepository(BaseRepository):
    """Order database operations."""

    async def create(self, data: Dict[str, Any]) -> Order:
        """Insert an order row and return it."""
        result = await self.client.table("orders").insert(data).execute()
        if not result.data:
            raise ValueError("Order insert returned no row")
        return Order(**result.data[0])

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID."""
        result = await self.client.table("orders").select("*").eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def get_all(self, customer_id: Optional[str] = None) -> List[Order]:
        """Get orders, newest first, optionally for one customer."""
        query = self.client.table("orders").select("*").order("created_at", desc=True)
        if customer_id:
            query = query.eq("customer_id", customer_id)

        result = await query.execute()
        return [Order(**o) for o in result.data or []]
