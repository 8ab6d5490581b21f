from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Callable, Dict, List, Sequence, Tuple

from pyuca import Collator

from shopfront.schemas import Product


class SortKey(str, Enum):
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        if value is None or value == "":
            return DEFAULT_SORT
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown sort key: {value!r}") from None

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


DEFAULT_SORT = SortKey.NAME_ASC

SORT_LABELS: Dict[SortKey, str] = {
    SortKey.NAME_ASC: "Name A-Z",
    SortKey.NAME_DESC: "Name Z-A",
    SortKey.PRICE_ASC: "Price Low to High",
    SortKey.PRICE_DESC: "Price High to Low",
    SortKey.RATING_DESC: "Highest Rated",
}


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the Unicode collation table once.
    return Collator()


def name_key(product: Product) -> Tuple[int, ...]:
    """Unicode collation key, so accented names sort with their base letter."""
    return _collator().sort_key(product.name.casefold())


# key function, descending?
_ORDERINGS: Dict[SortKey, Tuple[Callable[[Product], object], bool]] = {
    SortKey.NAME_ASC: (name_key, False),
    SortKey.NAME_DESC: (name_key, True),
    SortKey.PRICE_ASC: (lambda p: p.price, False),
    SortKey.PRICE_DESC: (lambda p: p.price, True),
    SortKey.RATING_DESC: (lambda p: p.rating, True),
}


def sort_products(products: Sequence[Product], key: "SortKey | str" = DEFAULT_SORT) -> List[Product]:
    """Return a new list ordered by ``key``.

    The sort is stable in both directions: products comparing equal keep
    their input order.
    """
    key_func, descending = _ORDERINGS[SortKey.parse(key)]
    return sorted(products, key=key_func, reverse=descending)


def sort_options() -> List[dict]:
    return [{"value": k.value, "label": k.label} for k in SortKey]
