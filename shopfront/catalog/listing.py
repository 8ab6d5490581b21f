"""Product listing state.

``ProductListing`` owns the loaded catalog and runs it through
filter -> sort -> paginate. Until ``load`` has been called the listing is
in the "not loaded" state and every read or filter change raises
``CatalogNotLoadedError`` instead of quietly working on an empty list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Tuple

from shopfront.catalog.filters import (
    FilterCriteria,
    PriceRange,
    facet_values,
    filter_products,
    price_bounds,
)
from shopfront.catalog.pagination import PAGE_SIZE, page_count, page_window, paginate
from shopfront.catalog.sorting import DEFAULT_SORT, SortKey, sort_products
from shopfront.schemas import Product

if TYPE_CHECKING:
    from shopfront.cart.cart import Cart
    from shopfront.client.gateway import GatewayClient

logger = logging.getLogger(__name__)


class CatalogNotLoadedError(RuntimeError):
    """Raised when the listing is used before a catalog was loaded."""


class ProductListing:
    def __init__(self, cart: Optional["Cart"] = None, page_size: int = PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        self.cart = cart
        self.page_size = page_size
        self.criteria = FilterCriteria()
        self.sort_key: SortKey = DEFAULT_SORT
        self.current_page = 1
        self.bounds: Optional[PriceRange] = None
        self.facets: Dict[str, List[str]] = {"brands": [], "sizes": [], "colors": []}
        self._products: Optional[List[Product]] = None
        self._results: List[Product] = []

    # --- loading -----------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._products is not None

    def load(self, products: Iterable[Product]) -> None:
        """Replace the catalog and recompute facets and price bounds.

        The active price filter is reset to the new bounds; other criteria
        and the sort key are kept.
        """
        self._products = list(products)
        self.facets = facet_values(self._products)
        self.bounds = price_bounds(self._products)
        self.criteria = self.criteria.with_price_range(self.bounds)
        logger.info("Loaded %d products (price bounds %s)", len(self._products), self.bounds)
        self._apply()

    def load_from_gateway(self, gateway: "GatewayClient") -> None:
        self.load(gateway.fetch_all_products())

    def _require_loaded(self) -> List[Product]:
        if self._products is None:
            raise CatalogNotLoadedError("catalog has not been loaded yet")
        return self._products

    # --- pipeline ----------------------------------------------------------

    def _apply(self) -> None:
        products = self._require_loaded()
        self._results = sort_products(filter_products(products, self.criteria), self.sort_key)
        self.current_page = 1

    def update_filters(self, **changes) -> None:
        """Change one or more criteria (``brand="X"``, ``size=None``...)."""
        self._require_loaded()
        self.criteria = self.criteria.with_changes(**changes)
        self._apply()

    def set_search(self, query: str) -> None:
        self.update_filters(search=query.strip() or None)

    def apply_route_params(self, params: Mapping[str, str]) -> None:
        """Take ``search`` and ``category`` from the page's query string."""
        self.update_filters(
            search=(params.get("search") or "").strip() or None,
            category=params.get("category") or None,
        )

    def set_sort(self, key: "SortKey | str") -> None:
        self._require_loaded()
        self.sort_key = SortKey.parse(key)
        self._results = sort_products(self._results, self.sort_key)
        self.current_page = 1

    def clear_filters(self) -> None:
        self._require_loaded()
        self.criteria = FilterCriteria().with_price_range(self.bounds)
        self.sort_key = DEFAULT_SORT
        self._apply()

    # --- results -----------------------------------------------------------

    @property
    def products(self) -> List[Product]:
        return list(self._require_loaded())

    @property
    def results(self) -> List[Product]:
        self._require_loaded()
        return list(self._results)

    @property
    def total_results(self) -> int:
        self._require_loaded()
        return len(self._results)

    @property
    def total_pages(self) -> int:
        return page_count(self.total_results, self.page_size)

    @property
    def page_items(self) -> List[Product]:
        self._require_loaded()
        return paginate(self._results, self.current_page, self.page_size)

    @property
    def showing(self) -> Tuple[int, int]:
        return page_window(self.total_results, self.current_page, self.page_size)

    def go_to_page(self, page: int) -> None:
        total = self.total_pages
        if not 1 <= page <= max(total, 1):
            raise ValueError(f"page {page} out of range 1..{total}")
        self.current_page = page

    # --- cart --------------------------------------------------------------

    def add_to_cart(self, product: Product, size: str, color: str) -> bool:
        """Add one unit to the cart; False when size or color is missing."""
        if self.cart is None:
            raise RuntimeError("listing has no cart attached")
        if not size or not color:
            return False
        self.cart.add_item(product, size, color)
        return True
