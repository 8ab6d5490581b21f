"""Filter engine for the product listing.

Every active criterion narrows the catalog independently (logical AND);
an empty or ``None`` criterion does not filter on that dimension.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, NamedTuple, Optional, Sequence

from shopfront.schemas import Product

logger = logging.getLogger(__name__)


class PriceRange(NamedTuple):
    min: float
    max: float


@dataclass(frozen=True)
class FilterCriteria:
    category: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    search: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    def with_changes(self, **changes) -> "FilterCriteria":
        return replace(self, **changes)

    def with_price_range(self, bounds: Optional[PriceRange]) -> "FilterCriteria":
        if bounds is None:
            return replace(self, min_price=None, max_price=None)
        return replace(self, min_price=bounds.min, max_price=bounds.max)

    def is_empty(self) -> bool:
        return not any(
            (self.category, self.brand, self.size, self.color, self.search)
        ) and self.min_price is None and self.max_price is None


def matches_search(product: Product, query: str) -> bool:
    needle = query.lower()
    return (
        needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.brand.lower()
    )


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """True when ``product`` satisfies every active criterion."""
    if criteria.search and not matches_search(product, criteria.search):
        return False
    if criteria.category and product.category != criteria.category:
        return False
    if criteria.brand and product.brand != criteria.brand:
        return False
    if criteria.size and criteria.size not in product.sizes:
        return False
    if criteria.color and criteria.color not in product.colors:
        return False
    if criteria.min_price is not None and product.price < criteria.min_price:
        return False
    if criteria.max_price is not None and product.price > criteria.max_price:
        return False
    return True


def filter_products(products: Sequence[Product], criteria: FilterCriteria) -> List[Product]:
    """Return the products matching ``criteria``, in catalog order."""
    kept = [p for p in products if matches(p, criteria)]
    logger.debug("Filtered %d of %d products with %s", len(kept), len(products), criteria)
    return kept


def price_bounds(products: Iterable[Product]) -> Optional[PriceRange]:
    """Observed (min, max) price of the catalog, or None when it is empty."""
    prices = [p.price for p in products]
    if not prices:
        return None
    return PriceRange(min(prices), max(prices))


def _distinct(values: Iterable[str]) -> List[str]:
    seen = {}
    for value in values:
        seen.setdefault(value, None)
    return list(seen)


def facet_values(products: Sequence[Product]) -> dict:
    """Distinct brands, sizes and colors in first-seen order."""
    return {
        "brands": _distinct(p.brand for p in products),
        "sizes": _distinct(s for p in products for s in p.sizes),
        "colors": _distinct(c for p in products for c in p.colors),
    }
