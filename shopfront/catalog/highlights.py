"""Homepage product picks."""

from __future__ import annotations

from typing import List, Sequence

from shopfront.schemas import Product

NON_CLOTHING_CATEGORIES = ("Shoes", "Accessories")


def clothing(products: Sequence[Product]) -> List[Product]:
    return [p for p in products if p.category not in NON_CLOTHING_CATEGORIES]


def featured_products(products: Sequence[Product], limit: int = 6) -> List[Product]:
    """New or on-sale clothing, in catalog order."""
    return [p for p in clothing(products) if p.is_new or p.is_on_sale][:limit]


def trending_products(products: Sequence[Product], limit: int = 4) -> List[Product]:
    """Best rated clothing; equal ratings keep catalog order."""
    return sorted(clothing(products), key=lambda p: p.rating, reverse=True)[:limit]
