"""HTTP client for the storefront API.

Every call blocks until it has one result: the parsed payload or a
``GatewayError``. Nothing is retried; transport failures surface as
``TransportError`` for the UI layer to report.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from shopfront.catalog.pagination import PAGE_SIZE
from shopfront.client.errors import MalformedPayloadError, TransportError, error_from_response
from shopfront.schemas import AuthResult, Category, Product, ProductPage, Review, UserOut

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
# Page size used when walking the whole catalog; matches the API's MAX_LIMIT.
CATALOG_BATCH_SIZE = 50


class GatewayClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8080/api",
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None and v != ""}

        try:
            resp = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise TransportError(status=None, message=str(exc), code="transport_error") from exc

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            err = error_from_response(resp.status_code, payload)
            logger.info("%s %s -> %s", method, url, err)
            raise err
        if payload is None:
            raise MalformedPayloadError(status=resp.status_code, message="Response body is not JSON")
        return payload

    @staticmethod
    def _parse(model, payload: Any):
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise MalformedPayloadError(
                status=None,
                message=f"Malformed {model.__name__} payload",
                code="malformed_payload",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def _parse_products(self, items: Any) -> List[Product]:
        if not isinstance(items, list):
            raise MalformedPayloadError(status=None, message="products is not a list", code="malformed_payload")
        products = []
        for item in items:
            try:
                products.append(Product.model_validate(item))
            except ValidationError as exc:
                ident = item.get("id", item.get("_id")) if isinstance(item, dict) else item
                logger.warning("Skipping malformed product %r: %s", ident, exc)
        return products

    # --- catalog -------------------------------------------------------------

    def list_products(
        self,
        category: Optional[str] = None,
        brand: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = 1,
        limit: int = PAGE_SIZE,
    ) -> ProductPage:
        payload = self._request(
            "GET",
            "/products",
            params={
                "category": category,
                "brand": brand,
                "minPrice": min_price,
                "maxPrice": max_price,
                "search": search,
                "sort": sort,
                "page": page,
                "limit": limit,
            },
        )
        # A bare list is accepted as a single page.
        if isinstance(payload, list):
            products = self._parse_products(payload)
            return ProductPage(products=products, total_pages=1 if products else 0, current_page=1, total=len(products))
        if not isinstance(payload, dict):
            raise MalformedPayloadError(status=None, message="Unexpected products payload", code="malformed_payload")

        products = self._parse_products(payload.get("products", []))
        return self._parse(ProductPage, {**payload, "products": products})

    def fetch_all_products(self, **filters) -> List[Product]:
        """Walk every page of ``GET /products`` and return the whole catalog."""
        products: List[Product] = []
        page = 1
        while True:
            result = self.list_products(page=page, limit=CATALOG_BATCH_SIZE, **filters)
            products.extend(result.products)
            if page >= result.total_pages:
                break
            page += 1
        return products

    def get_product(self, product_id: str) -> Product:
        return self._parse(Product, self._request("GET", f"/products/{product_id}"))

    def list_categories(self) -> List[Category]:
        payload = self._request("GET", "/categories")
        return [self._parse(Category, item) for item in payload]

    def list_reviews(self, product_id: str) -> List[Review]:
        payload = self._request("GET", f"/products/{product_id}/reviews")
        return [self._parse(Review, item) for item in payload]

    # --- users ---------------------------------------------------------------

    def register(self, name: str, email: str, password: str) -> AuthResult:
        payload = self._request(
            "POST", "/users/register", json={"name": name, "email": email, "password": password}
        )
        return self._parse(AuthResult, payload)

    def login(self, email: str, password: str) -> AuthResult:
        payload = self._request("POST", "/users/login", json={"email": email, "password": password})
        return self._parse(AuthResult, payload)

    def me(self, token: str) -> UserOut:
        return self._parse(UserOut, self._request("GET", "/users/me", token=token))
