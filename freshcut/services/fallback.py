"""
Fallback catalog served when Supabase is unreachable.

Keeps the storefront browsable during outages and in local development
without credentials.
"""
from datetime import datetime, timezone
from typing import List, Optional

from freshcut.services.models import Category, Product

CHICKEN_IMAGE = "https://images.pexels.com/photos/1267320/pexels-photo-1267320.jpeg?auto=compress&cs=tinysrgb&w=400"
FISH_IMAGE = "https://images.pexels.com/photos/1267697/pexels-photo-1267697.jpeg?auto=compress&cs=tinysrgb&w=400"

_CATEGORIES = {
    "1": {"id": "1", "name": "Chicken"},
    "2": {"id": "2", "name": "Fish"},
}

_PRODUCTS = [
    # id, name, target kg, actual kg, price/kg, total, grade, farm, stock, category
    ("1", "Farm Fresh Chicken", "1.2", "1.18", "180", "212.40", "Premium", "Farm A", 15, "1"),
    ("2", "Organic Chicken", "1.4", "1.42", "200", "284.00", "Grade A", "Farm B", 8, "1"),
    ("3", "Free Range Chicken", "1.6", "1.58", "180", "284.40", "Premium", "Farm C", 12, "1"),
    ("4", "Fresh Pomfret", "1.2", "1.15", "299", "344.85", "Premium", "Coastal Farm A", 6, "2"),
    ("5", "Sea Bass", "1.4", "1.38", "350", "483.00", "Grade A", "Coastal Farm B", 10, "2"),
    ("6", "Fresh Kingfish", "1.6", "1.62", "299", "484.38", "Premium", "Coastal Farm C", 14, "2"),
]


def fallback_categories() -> List[Category]:
    now = datetime.now(timezone.utc)
    return [Category(**c, created_at=now) for c in _CATEGORIES.values()]


def fallback_products(
    status: Optional[str] = None,
    category_id: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """Fallback products with the same filters the live query supports."""
    now = datetime.now(timezone.utc)
    products = []
    for pid, name, target, actual, per_kg, total, grade, farm, stock, cat_id in _PRODUCTS:
        products.append(Product(
            id=pid,
            name=name,
            category_id=cat_id,
            category=Category(**_CATEGORIES[cat_id]),
            target_weight=target,
            actual_weight=actual,
            price_per_kg=per_kg,
            total_price=total,
            images=[CHICKEN_IMAGE if cat_id == "1" else FISH_IMAGE],
            grade=grade,
            farm=farm,
            status="live",
            stock_count=stock,
            created_at=now,
        ))

    if status:
        products = [p for p in products if p.status == status]
    if category_id:
        products = [p for p in products if p.category_id == category_id]
    if search:
        needle = search.lower()
        products = [p for p in products if needle in p.name.lower()]
    return products
