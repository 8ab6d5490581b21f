from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import CheckConstraint, Index

from shopfront.app.extensions import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    price = db.Column(db.Float, nullable=False)
    original_price = db.Column(db.Float, nullable=True)
    description = db.Column(db.Text, nullable=False, default="")
    category = db.Column(db.String(100), nullable=False, index=True)
    brand = db.Column(db.String(100), nullable=False, index=True)

    # Ordered lists of strings
    images = db.Column(db.JSON, nullable=False, default=list)
    sizes = db.Column(db.JSON, nullable=False, default=list)
    colors = db.Column(db.JSON, nullable=False, default=list)

    rating = db.Column(db.Float, nullable=False, default=0)
    review_count = db.Column(db.Integer, nullable=False, default=0)
    in_stock = db.Column(db.Boolean, nullable=False, default=True)
    is_new = db.Column(db.Boolean, nullable=False, default=False)
    is_on_sale = db.Column(db.Boolean, nullable=False, default=False)
    discount = db.Column(db.Float, nullable=True)  # percent, 0 < discount <= 100
    gender = db.Column(db.String(10), nullable=True)  # Men | Women | Unisex

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    reviews = db.relationship("Review", back_populates="product", lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonnegative"),
        CheckConstraint("discount IS NULL OR (discount > 0 AND discount <= 100)", name="ck_products_discount_range"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "original_price": self.original_price,
            "description": self.description or "",
            "category": self.category,
            "brand": self.brand,
            "images": list(self.images or []),
            "sizes": list(self.sizes or []),
            "colors": list(self.colors or []),
            "rating": self.rating or 0,
            "review_count": self.review_count or 0,
            "in_stock": self.in_stock,
            "is_new": self.is_new,
            "is_on_sale": self.is_on_sale,
            "discount": self.discount,
            "gender": self.gender,
        }


class Review(db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False, index=True)

    user_name = db.Column(db.String(120), nullable=False)
    rating = db.Column(db.Integer, nullable=False)  # 1..5
    comment = db.Column(db.Text, nullable=True)
    review_date = db.Column(db.Date, nullable=False, default=date.today)
    verified = db.Column(db.Boolean, nullable=False, default=False)

    product = db.relationship("Product", back_populates="reviews")

    __table_args__ = (
        Index("ix_reviews_product_date", "product_id", "review_date"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "user_name": self.user_name,
            "rating": self.rating,
            "comment": self.comment or "",
            "date": self.review_date,
            "verified": self.verified,
        }
