"""Tests for API endpoints"""
import asyncio
import pytest
from decimal import Decimal
from fastapi import Depends
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, Mock

from api.index import app
from freshcut.cart import CartEngine, MemoryCartStorage
from freshcut.routers.deps import device_cart, get_cart_engine, get_db, get_device_id
from freshcut.services.models import Order, Product

DEVICE = {"X-Device-Id": "device-123"}


@pytest.fixture
def mock_db(sample_product, sample_order):
    """Database mock with one live and one sold-out product"""
    db = Mock()
    live = Product(**sample_product)
    sold_out = Product(**{**sample_product, "id": "2", "status": "sold_out"})
    db.get_product_by_id = AsyncMock(side_effect=lambda pid: {"1": live, "2": sold_out}.get(pid))
    db.get_products = AsyncMock(return_value=[live])
    db.get_categories = AsyncMock(return_value=[live.category])
    db.create_order = AsyncMock(return_value=Order(**sample_order))
    db.get_order = AsyncMock(return_value=None)
    db.get_orders = AsyncMock(return_value=[Order(**sample_order)])
    return db


@pytest.fixture
def client(mock_db, browser_store):
    """Test client with a memory-backed device cart"""
    async def _engine(device_id: str = Depends(get_device_id)):
        async with device_cart(device_id, MemoryCartStorage(browser_store)) as engine:
            yield engine

    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_cart_engine] = _engine
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_pincode_check(client):
    assert client.get("/pincode/check/560001").json() == {"serviceable": True}
    assert client.get("/pincode/check/123456").json() == {"serviceable": False}


def test_get_products(client, mock_db):
    response = client.get("/api/products", params={"category_id": "1"})

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Farm Fresh Chicken"
    mock_db.get_products.assert_awaited_once_with(status="live", category_id="1", search=None)


def test_get_product_not_found(client):
    response = client.get("/api/products/missing")
    assert response.status_code == 404


def test_cart_requires_device_id():
    app.dependency_overrides.clear()
    response = TestClient(app).get("/api/cart")
    assert response.status_code == 400


def test_add_to_cart_merges_and_prices(client):
    body = {"product_id": "1", "quantity": 1, "customization": {"cutting_style": "curry_cut"}}
    client.post("/api/cart/add", json=body, headers=DEVICE)

    response = client.post("/api/cart/add", json={**body, "quantity": 2}, headers=DEVICE)

    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 1
    assert data["items"][0]["quantity"] == 3
    assert data["summary"]["total"] == 709.06
    assert data["summary"]["cutting_fee"] == 30.0
    assert data["total_display"] == "₹709.06"


def test_add_whole_bird_has_no_cutting_fee(client):
    response = client.post(
        "/api/cart/add",
        json={"product_id": "1", "customization": {"cutting_style": "whole"}},
        headers=DEVICE,
    )

    assert response.json()["items"][0]["cutting_fee"] == 0.0


def test_add_unknown_product(client):
    response = client.post("/api/cart/add", json={"product_id": "missing"}, headers=DEVICE)
    assert response.status_code == 404


def test_add_unavailable_product(client):
    response = client.post("/api/cart/add", json={"product_id": "2"}, headers=DEVICE)
    assert response.status_code == 400


def test_cart_survives_requests(client):
    client.post("/api/cart/add", json={"product_id": "1", "quantity": 2}, headers=DEVICE)

    response = client.get("/api/cart", headers=DEVICE)

    assert response.json()["summary"]["item_count"] == 2


def test_update_quantity_below_one_is_ignored(client):
    client.post("/api/cart/add", json={"product_id": "1", "quantity": 2}, headers=DEVICE)

    response = client.patch("/api/cart/item", json={"product_id": "1", "quantity": 0}, headers=DEVICE)

    assert response.status_code == 200
    assert response.json()["items"][0]["quantity"] == 2


def test_remove_and_clear(client):
    client.post("/api/cart/add", json={"product_id": "1"}, headers=DEVICE)

    removed = client.delete("/api/cart/item", params={"product_id": "1"}, headers=DEVICE)
    cleared = client.delete("/api/cart", headers=DEVICE)

    assert removed.json()["items"] == []
    assert cleared.json()["summary"]["total"] == 0


def test_checkout(client, mock_db):
    client.post("/api/cart/add", json={"product_id": "1", "quantity": 3}, headers=DEVICE)

    response = client.post(
        "/api/orders/checkout",
        json={"pincode": "560001", "address": "12 MG Road", "customer_id": "user-123"},
        headers=DEVICE,
    )

    assert response.status_code == 200
    assert response.json()["id"] == "order-123"
    payload = mock_db.create_order.await_args.args[0]
    assert Decimal(payload["total"]) == Decimal("709.06")
    assert client.get("/api/cart", headers=DEVICE).json()["items"] == []


def test_checkout_empty_cart(client):
    response = client.post("/api/orders/checkout", json={"pincode": "560001"}, headers=DEVICE)
    assert response.status_code == 400


def test_checkout_unserviceable(client):
    client.post("/api/cart/add", json={"product_id": "1"}, headers=DEVICE)

    response = client.post("/api/orders/checkout", json={"pincode": "999999"}, headers=DEVICE)

    assert response.status_code == 400
    assert len(client.get("/api/cart", headers=DEVICE).json()["items"]) == 1


def test_get_order_not_found(client):
    assert client.get("/api/orders/nope").status_code == 404


@pytest.mark.asyncio
async def test_overlapping_sessions_for_one_device_keep_both_adds(browser_store, make_item):
    async def add(item_id):
        async with device_cart("device-123", MemoryCartStorage(browser_store)) as engine:
            await asyncio.sleep(0.01)
            await engine.add_item(make_item(item_id))

    await asyncio.gather(add("P1"), add("P2"))

    engine = await CartEngine.create(MemoryCartStorage(browser_store))
    assert [item.id for item in engine.items] == ["P1", "P2"]
