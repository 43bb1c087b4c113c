"""Tests for cart pricing"""
import pytest
from decimal import Decimal

from freshcut.cart import CartEngine, CartSummary, calculate_summary, TAX_RATE


def test_empty_cart_summary():
    """Empty cart prices to zero everywhere"""
    summary = calculate_summary([])

    assert summary == CartSummary.empty()
    assert summary.total == 0
    assert summary.item_count == 0


def test_summary_formulas(make_item):
    """Delivery is flat per line; cutting is per unit and outside the total"""
    items = [
        make_item("P1", quantity=2, total="100", delivery_fee="40", cutting_fee="10"),
        make_item("P2", quantity=3, total="50", delivery_fee="25", cutting_fee="5"),
    ]

    summary = calculate_summary(items)

    assert summary.subtotal == Decimal("350.00")  # 200 + 150
    assert summary.delivery_fee == Decimal("65.00")  # not scaled by quantity
    assert summary.cutting_fee == Decimal("35.00")  # 20 + 15
    assert summary.tax == Decimal("17.50")  # 5% of 350
    assert summary.total == Decimal("432.50")  # 350 + 65 + 17.50
    assert summary.item_count == 5


def test_tax_rate_is_five_percent():
    assert TAX_RATE == Decimal("0.05")


def test_tax_rounds_half_up(make_item):
    summary = calculate_summary([make_item("P1", total="0.30", delivery_fee="0", cutting_fee="0")])

    # 0.30 * 0.05 = 0.015
    assert summary.tax == Decimal("0.02")


def test_summary_to_dict(make_item):
    data = calculate_summary([make_item("P1", quantity=3)]).to_dict()

    assert data == {
        "subtotal": 637.2,
        "delivery_fee": 40.0,
        "cutting_fee": 30.0,
        "tax": 31.86,
        "total": 709.06,
        "item_count": 3,
    }


@pytest.mark.asyncio
async def test_chicken_scenario(memory_storage, make_item):
    """P1 x1 then x2 with the same cut: one line of 3 and the storefront totals"""
    engine = await CartEngine.create(memory_storage)

    await engine.add_item(make_item("P1", {"cutting_style": "curry_cut"}), 1)
    await engine.add_item(make_item("P1", {"cutting_style": "curry_cut"}), 2)
    summary = engine.get_summary()

    assert len(engine.items) == 1
    assert engine.items[0].quantity == 3
    assert summary.subtotal == Decimal("637.20")
    assert summary.delivery_fee == Decimal("40")
    assert summary.cutting_fee == Decimal("30")
    assert summary.tax == Decimal("31.86")
    assert summary.total == Decimal("709.06")


@pytest.mark.asyncio
async def test_summary_does_not_mutate(memory_storage, make_item):
    engine = await CartEngine.create(memory_storage)
    await engine.add_item(make_item("P1"), 2)

    first = engine.get_summary()
    second = engine.get_summary()

    assert first == second
    assert engine.items[0].quantity == 2
