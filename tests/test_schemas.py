import datetime as dt

import pytest
from pydantic import ValidationError

from shopfront.schemas import Category, Product, ProductPage, Review

BASE = {"name": "Tee", "price": 10, "category": "Tops", "brand": "FashionCo"}


def test_document_id_and_integer_id():
    assert Product.model_validate({**BASE, "_id": "abc123"}).id == "abc123"
    assert Product.model_validate({**BASE, "id": 7}).id == "7"


def test_option_lists_accept_semicolon_strings():
    p = Product.model_validate({**BASE, "id": "1", "sizes": "S; M;;L", "colors": None, "images": ["a.jpg"]})

    assert p.sizes == ["S", "M", "L"]
    assert p.colors == []
    assert p.images == ["a.jpg"]


def test_defaults():
    p = Product.model_validate({**BASE, "id": "1"})

    assert p.in_stock is True
    assert p.is_new is False and p.is_on_sale is False
    assert p.rating == 0 and p.review_count == 0
    assert p.discount is None and p.gender is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -1},
        {"name": ""},
        {"rating": 6},
        {"discount": 0},
        {"discount": 101},
        {"gender": "Kids"},
        {"category": None},
    ],
)
def test_invalid_products(overrides):
    with pytest.raises(ValidationError):
        Product.model_validate({**BASE, "id": "1", **overrides})


def test_wire_names_are_camel_case():
    p = Product.model_validate({**BASE, "id": "1", "originalPrice": 20, "isOnSale": True, "discount": 50})
    wire = p.to_wire()

    assert wire["originalPrice"] == 20
    assert wire["isOnSale"] is True
    assert wire["reviewCount"] == 0
    assert "original_price" not in wire
    assert Product.model_validate(wire) == p


def test_discounted_price():
    p = Product.model_validate({**BASE, "id": "1", "original_price": 40, "discount": 25})
    assert p.discounted_price() == pytest.approx(30)
    assert Product.model_validate({**BASE, "id": "2"}).discounted_price() == 10


def test_review_and_category():
    review = Review.model_validate(
        {"id": 1, "productId": 3, "userName": "Sam", "rating": 5, "date": "2024-01-15"}
    )
    assert (review.id, review.product_id) == ("1", "3")
    assert review.date == dt.date(2024, 1, 15)
    assert review.to_wire()["date"] == "2024-01-15"

    with pytest.raises(ValidationError):
        Review.model_validate({"id": "1", "productId": "3", "userName": "Sam", "rating": 0})

    assert Category.model_validate({"id": "tops", "name": "Tops", "productCount": 2}).product_count == 2


def test_product_page_defaults():
    page = ProductPage()
    assert (page.products, page.total_pages, page.current_page, page.total) == ([], 0, 1, 0)
