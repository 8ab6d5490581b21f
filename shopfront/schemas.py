"""
Catalog schemas

Pydantic models shared by the API gateway and the client core. Field names
are snake_case in Python and camelCase on the wire:
- Product -> {"id", "name", "price", "originalPrice", ...}
- Review -> {"id", "productId", "userName", ...}

Payloads are normalised on the way in (Mongo style ``_id``, integer ids,
``;`` separated option lists) so the filter, sort and paginate stages only
ever see well-formed products.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


def _split_options(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(";") if part.strip()]
    return value


class Product(WireModel):
    """
    Products collection schema
    Wire name of the collection: "products"
    """
    id: str = Field(..., description="Product identifier")
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Unit price")
    original_price: Optional[float] = Field(None, ge=0, description="Price before discount")
    description: str = ""
    category: str
    brand: str
    images: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    in_stock: bool = True
    is_new: bool = False
    is_on_sale: bool = False
    discount: Optional[float] = Field(None, gt=0, le=100, description="Percent off original price")
    gender: Optional[Literal["Men", "Women", "Unisex"]] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_document_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("id") is None and "_id" in data:
            data = dict(data)
            data["id"] = data.pop("_id")
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("images", "sizes", "colors", mode="before")
    @classmethod
    def _option_list(cls, value: Any) -> Any:
        return _split_options(value)

    def discounted_price(self) -> float:
        if self.original_price and self.discount:
            return self.original_price * (1 - self.discount / 100)
        return self.price


class Category(WireModel):
    id: str
    name: str
    image: Optional[str] = None
    product_count: int = Field(0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class Review(WireModel):
    id: str
    product_id: str
    user_name: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    date: Optional[dt.date] = None
    verified: bool = False

    @field_validator("id", "product_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class ProductPage(WireModel):
    """One page of ``GET /products``."""

    products: List[Product] = Field(default_factory=list)
    total_pages: int = Field(0, ge=0)
    current_page: int = Field(1, ge=1)
    total: int = Field(0, ge=0)


class UserOut(WireModel):
    id: str
    name: str
    email: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class AuthResult(WireModel):
    """Body of a successful register or login."""

    token: str
    user: UserOut
