from __future__ import annotations

from typing import Any, Optional

from flask import Blueprint, current_app
from pydantic import Field, model_validator
from sqlalchemy import func, or_

from shopfront.app.common.errors import abort_json
from shopfront.app.common.validation import parse_args
from shopfront.app.extensions import db
from shopfront.app.models import Product, Review
from shopfront.catalog.pagination import page_count
from shopfront.catalog.sorting import DEFAULT_SORT, SortKey
from shopfront.schemas import Category, Product as ProductOut, Review as ReviewOut, WireModel

bp = Blueprint("catalog", __name__)


class ProductQuery(WireModel):
    """Query string of ``GET /products``; blank values count as absent."""

    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    search: Optional[str] = None
    sort: SortKey = DEFAULT_SORT
    page: int = Field(1, ge=1)
    limit: Optional[int] = Field(None, ge=1)

    @model_validator(mode="before")
    @classmethod
    def _drop_blank(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
        return data


_ORDERING = {
    SortKey.NAME_ASC: func.lower(Product.name).asc(),
    SortKey.NAME_DESC: func.lower(Product.name).desc(),
    SortKey.PRICE_ASC: Product.price.asc(),
    SortKey.PRICE_DESC: Product.price.desc(),
    SortKey.RATING_DESC: Product.rating.desc(),
}


def _like(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _product_out(p: Product) -> dict:
    return ProductOut.model_validate(p.to_dict()).to_wire()


def _get_product_or_404(product_id: str) -> Product:
    try:
        pk = int(product_id)
    except ValueError:
        pk = None
    p = db.session.get(Product, pk) if pk is not None else None
    if not p:
        abort_json(404, "not_found", "Product not found", {"id": product_id})
    return p


@bp.get("/products")
def list_products():
    """GET /api/products - Filtered, sorted, paginated catalog.

    Query params:
      - category, brand: exact match
      - minPrice, maxPrice: inclusive price bounds
      - search: case-insensitive match on name, description or brand
      - sort: name-asc (default) | name-desc | price-asc | price-desc | rating-desc
      - page (1-based), limit
    """
    query = parse_args(ProductQuery)
    limit = min(query.limit or current_app.config["DEFAULT_LIMIT"], current_app.config["MAX_LIMIT"])

    q = Product.query
    if query.category:
        q = q.filter(Product.category == query.category)
    if query.brand:
        q = q.filter(Product.brand == query.brand)
    if query.min_price is not None:
        q = q.filter(Product.price >= query.min_price)
    if query.max_price is not None:
        q = q.filter(Product.price <= query.max_price)
    if query.search:
        like = _like(query.search.strip())
        q = q.filter(
            or_(
                Product.name.ilike(like, escape="\\"),
                Product.description.ilike(like, escape="\\"),
                Product.brand.ilike(like, escape="\\"),
            )
        )

    total = q.count()
    items = (
        q.order_by(_ORDERING[query.sort], Product.id.asc())
        .offset((query.page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "products": [_product_out(p) for p in items],
        "totalPages": page_count(total, limit),
        "currentPage": query.page,
        "total": total,
    }, 200


@bp.get("/products/<product_id>")
def get_product(product_id: str):
    """GET /api/products/<id> - Single product."""
    return _product_out(_get_product_or_404(product_id)), 200


@bp.get("/products/<product_id>/reviews")
def list_reviews(product_id: str):
    """GET /api/products/<id>/reviews - Newest first."""
    p = _get_product_or_404(product_id)
    reviews = (
        Review.query.filter_by(product_id=p.id)
        .order_by(Review.review_date.desc(), Review.id.desc())
        .all()
    )
    return [ReviewOut.model_validate(r.to_dict()).to_wire() for r in reviews], 200


@bp.get("/categories")
def list_categories():
    """GET /api/categories - Categories present in the catalog with counts."""
    rows = (
        db.session.query(Product.category, func.count(Product.id), func.min(Product.id))
        .group_by(Product.category)
        .order_by(Product.category.asc())
        .all()
    )
    out = []
    for name, count, first_id in rows:
        first = db.session.get(Product, first_id)
        out.append(
            Category(
                id=name.lower().replace(" ", "-"),
                name=name,
                image=first.images[0] if first and first.images else None,
                product_count=count,
            ).to_wire()
        )
    return out, 200
