import pytest
import requests

from shopfront.client.errors import (
    BadRequestError,
    ConflictError,
    GatewayError,
    MalformedPayloadError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    error_from_response,
)
from shopfront.client.gateway import GatewayClient


class _CannedResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class CannedSession:
    def __init__(self, status_code=200, payload=None, exc=None):
        self.status_code = status_code
        self.payload = payload
        self.exc = exc
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "headers": headers})
        if self.exc:
            raise self.exc
        return _CannedResponse(self.status_code, self.payload)


def _canned(**kwargs):
    session = CannedSession(**kwargs)
    return GatewayClient(base_url="http://shop.test/api/", session=session), session


# GW-001: product listing against the real API
def test_list_products(gateway, flask_session):
    page = gateway.list_products(category="Outerwear", sort="price-desc", search="")

    assert [p.name for p in page.products] == ["Winter Jacket", "Hoodie"]
    assert page.total == 2 and page.total_pages == 1 and page.current_page == 1

    _, _, params = flask_session.calls[-1]
    assert params == {"category": "Outerwear", "sort": "price-desc", "page": 1, "limit": 12}


def test_list_products_price_params(gateway, flask_session):
    page = gateway.list_products(min_price=50, max_price=80)

    assert sorted(p.price for p in page.products) == [59.99, 79.99]
    assert flask_session.calls[-1][2]["minPrice"] == 50


def test_fetch_all_products_walks_pages(gateway, flask_session, monkeypatch):
    monkeypatch.setattr("shopfront.client.gateway.CATALOG_BATCH_SIZE", 4)

    products = gateway.fetch_all_products()

    assert len(products) == 6
    assert len({p.id for p in products}) == 6
    assert [call[2]["page"] for call in flask_session.calls] == [1, 2]


def test_get_product_and_reviews(gateway):
    product = gateway.get_product("1")
    reviews = gateway.list_reviews(product.id)

    assert product.name == "Classic White T-Shirt"
    assert [r.user_name for r in reviews] == ["Sarah Johnson", "Mike Chen"]


# GW-002: HTTP errors map onto the error taxonomy
def test_missing_product_raises_not_found(gateway):
    with pytest.raises(NotFoundError) as info:
        gateway.get_product("999")
    assert info.value.status == 404
    assert info.value.code == "not_found"


def test_register_login_me(gateway):
    registered = gateway.register("Ana", "ana@example.com", "Secret123!")
    assert registered.user.email == "ana@example.com"

    with pytest.raises(ConflictError):
        gateway.register("Ana", "ana@example.com", "Secret123!")

    logged_in = gateway.login("ana@example.com", "Secret123!")
    assert gateway.me(logged_in.token) == registered.user

    with pytest.raises(UnauthorizedError):
        gateway.login("ana@example.com", "wrong")
    with pytest.raises(UnauthorizedError):
        gateway.me("not-a-token")


def test_validation_error_is_bad_request(gateway):
    with pytest.raises(BadRequestError) as info:
        gateway.register("", "bad", "")
    assert "fields" in info.value.details


# GW-003: transport failures
def test_transport_error():
    client, _ = _canned(exc=requests.ConnectionError("connection refused"))

    with pytest.raises(TransportError) as info:
        client.get_product("1")
    assert info.value.status is None
    assert "connection refused" in str(info.value)


def test_non_json_body():
    client, _ = _canned(payload=None)
    with pytest.raises(MalformedPayloadError):
        client.list_categories()


def test_non_json_error_body():
    client, _ = _canned(status_code=502, payload=None)
    with pytest.raises(GatewayError) as info:
        client.list_categories()
    assert info.value.status == 502
    assert info.value.message == "HTTP 502"


# GW-004: malformed products are skipped from lists but fail single fetches
def test_malformed_products_skipped(caplog):
    good = {"_id": "a1", "name": "Tee", "price": 10, "category": "Tops", "brand": "X"}
    bad = {"_id": "a2", "name": "Broken", "price": -5, "category": "Tops", "brand": "X"}
    client, _ = _canned(payload={"products": [good, bad], "totalPages": 1, "currentPage": 1, "total": 2})

    with caplog.at_level("WARNING"):
        page = client.list_products()

    assert [p.id for p in page.products] == ["a1"]
    assert "Skipping malformed product 'a2'" in caplog.text


def test_malformed_single_product():
    client, _ = _canned(payload={"id": "1", "name": "x"})
    with pytest.raises(MalformedPayloadError):
        client.get_product("1")


def test_bare_list_payload():
    client, session = _canned(payload=[{"id": 1, "name": "Tee", "price": 10, "category": "Tops", "brand": "X"}])

    page = client.list_products()

    assert [p.id for p in page.products] == ["1"]
    assert page.total_pages == 1
    assert session.calls[0]["url"] == "http://shop.test/api/products"


def test_bearer_header():
    client, session = _canned(payload={"id": 1, "name": "Ana", "email": "ana@example.com"})

    client.me("tok")

    assert session.calls[0]["headers"]["Authorization"] == "Bearer tok"


def test_error_from_response_codes():
    envelope = {"error": {"code": "conflict", "message": "exists", "details": {"id": 1}}}
    err = error_from_response(400, envelope)
    assert isinstance(err, ConflictError)
    assert err.details == {"id": 1}

    assert isinstance(error_from_response(401, None), UnauthorizedError)
    assert isinstance(error_from_response(409, {}), ConflictError)
    assert type(error_from_response(500, {"error": "boom"})) is GatewayError
