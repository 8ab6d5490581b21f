import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopfront.app.cli import seed_catalog
from shopfront.app.config import TestConfig
from shopfront.app.extensions import db
from shopfront.app.factory import create_app
from shopfront.cart.cart import Cart
from shopfront.cart.storage import MemoryStorage
from shopfront.client.gateway import GatewayClient
from shopfront.schemas import Product

BASE_URL = "http://shop.test"


@pytest.fixture()
def app():
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        seed_catalog()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


class _FlaskResponse:
    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("response is not JSON")
        return data


class FlaskSession:
    """Stands in for requests.Session and sends calls to a Flask test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        assert url.startswith(BASE_URL)
        self.calls.append((method, url, params))
        resp = self.client.open(
            url[len(BASE_URL):],
            method=method,
            query_string=params,
            json=json,
            headers=headers,
        )
        return _FlaskResponse(resp)


@pytest.fixture()
def flask_session(client):
    return FlaskSession(client)


@pytest.fixture()
def gateway(flask_session):
    return GatewayClient(base_url=f"{BASE_URL}/api", session=flask_session)


@pytest.fixture()
def make_product():
    def _make(id, name="Item", price=10.0, **overrides):
        data = {
            "id": str(id),
            "name": name,
            "price": price,
            "description": f"{name} description",
            "category": "Tops",
            "brand": "FashionCo",
            "sizes": ["S", "M", "L"],
            "colors": ["Red", "Black"],
            "rating": 4.0,
        }
        data.update(overrides)
        return Product.model_validate(data)

    return _make


@pytest.fixture()
def catalog(make_product):
    return [
        make_product(1, "Classic Tee", 29.99, category="Tops", brand="FashionCo",
                     sizes=["S", "M"], colors=["White", "Black"], rating=4.5),
        make_product(2, "Denim Jeans", 79.99, category="Bottoms", brand="DenimBrand",
                     description="Blue denim", sizes=["30", "32"], colors=["Blue"], rating=4.2),
        make_product(3, "summer dress", 59.99, category="Dresses", brand="SummerStyle",
                     sizes=["S", "M", "L"], colors=["Floral", "White"], rating=4.7),
        make_product(4, "Hoodie", 49.99, category="Outerwear", brand="ComfortWear",
                     sizes=["M", "L", "XL"], colors=["Gray", "Black"], rating=4.2),
        make_product(5, "Winter Jacket", 199.99, category="Outerwear", brand="WinterGear",
                     sizes=["M", "L"], colors=["Black"], rating=4.8),
    ]


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def cart(storage):
    return Cart(storage)
