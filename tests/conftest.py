"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")

from freshcut.cart import CartItem, ItemPricing, MemoryCartStorage  # noqa: E402


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client; every builder call returns the same query mock."""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.ilike.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    return client


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database wired to the mocked client"""
    from freshcut.services.database import Database

    return Database(mock_supabase_client)


@pytest.fixture
def sample_category():
    return {"id": "1", "name": "Chicken", "created_at": "2025-01-01T00:00:00Z"}


@pytest.fixture
def sample_product(sample_category):
    """Sample product row as returned by Supabase"""
    return {
        "id": "1",
        "name": "Farm Fresh Chicken",
        "category_id": "1",
        "category": sample_category,
        "target_weight": 1.2,
        "actual_weight": 1.18,
        "price_per_kg": 180,
        "total_price": 212.40,
        "images": ["https://example.com/chicken.jpg"],
        "grade": "Premium",
        "farm": "Farm A",
        "status": "live",
        "stock_count": 15,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_order():
    """Sample order row"""
    return {
        "id": "order-123",
        "customer_id": "user-123",
        "items": [],
        "subtotal": "637.20",
        "delivery_fee": "40.00",
        "cutting_fee": "30.00",
        "tax": "31.86",
        "total": "709.06",
        "item_count": 3,
        "status": "pending",
        "pincode": "560001",
        "address": "12 MG Road",
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def make_item():
    """Factory for cart lines priced like the Farm Fresh Chicken"""
    def _make(item_id="P1", customization=None, total="212.40", delivery_fee="40", cutting_fee="10", **kwargs):
        return CartItem(
            id=item_id,
            customization=customization,
            pricing=ItemPricing(
                total=Decimal(total),
                delivery_fee=Decimal(delivery_fee),
                cutting_fee=Decimal(cutting_fee),
            ),
            **kwargs,
        )
    return _make


@pytest.fixture
def browser_store():
    """Backing dict shared by storages to simulate reloads of one browser"""
    return {}


@pytest.fixture
def memory_storage(browser_store):
    return MemoryCartStorage(browser_store)
