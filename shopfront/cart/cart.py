"""Shopping cart state.

The cart is a plain object owned by whoever builds it and handed to the
listing and detail views. Every mutation writes the full line list back to
the storage under ``CART_STORAGE_KEY`` and then notifies subscribers with a
fresh snapshot.

Lines are keyed on (product id, size, color). ``remove_item`` and
``set_quantity`` accept the same key, with a missing size or color matching
any value, so calling them with only a product id touches every line of
that product.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from shopfront.cart.storage import MemoryStorage, Storage
from shopfront.schemas import Product

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "cart"

Subscriber = Callable[[List["CartLine"]], None]


@dataclass
class CartLine:
    product: Product
    quantity: int
    selected_size: str
    selected_color: str

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.product.id, self.selected_size, self.selected_color)

    @property
    def unit_price(self) -> float:
        return self.product.price

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity

    def matches(self, product_id: str, size: Optional[str] = None, color: Optional[str] = None) -> bool:
        if self.product.id != str(product_id):
            return False
        if size is not None and self.selected_size != size:
            return False
        if color is not None and self.selected_color != color:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product": self.product.to_wire(),
            "quantity": self.quantity,
            "selectedSize": self.selected_size,
            "selectedColor": self.selected_color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartLine":
        if not isinstance(data, dict):
            raise TypeError("cart line must be an object")
        quantity = data["quantity"]
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValueError(f"invalid quantity: {quantity!r}")
        return cls(
            product=Product.model_validate(data["product"]),
            quantity=quantity,
            selected_size=str(data.get("selectedSize") or ""),
            selected_color=str(data.get("selectedColor") or ""),
        )


def serialize_lines(lines: List[CartLine]) -> str:
    return json.dumps([line.to_dict() for line in lines])


def deserialize_lines(raw: str) -> List[CartLine]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("persisted cart is not a list")
    return [CartLine.from_dict(item) for item in data]


class Cart:
    def __init__(self, storage: Optional[Storage] = None, key: str = CART_STORAGE_KEY):
        self._storage: Storage = storage if storage is not None else MemoryStorage()
        self._key = key
        self._lines: List[CartLine] = []
        self._subscribers: List[Subscriber] = []
        self._restore()

    # --- persistence -------------------------------------------------------

    def _restore(self) -> None:
        raw = self._storage.get_item(self._key)
        if not raw:
            return
        try:
            self._lines = deserialize_lines(raw)
        except (ValueError, TypeError, KeyError) as exc:
            logger.warning("Discarding unreadable cart from storage key %r: %s", self._key, exc)
            self._lines = []

    def _commit(self) -> None:
        self._storage.set_item(self._key, serialize_lines(self._lines))
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)

    # --- observers ---------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and call it once with the current lines.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self.snapshot())

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- queries -----------------------------------------------------------

    def snapshot(self) -> List[CartLine]:
        return [replace(line) for line in self._lines]

    @property
    def lines(self) -> List[CartLine]:
        return self.snapshot()

    def __len__(self) -> int:
        return len(self._lines)

    def find(self, product_id: str, size: str, color: str) -> Optional[CartLine]:
        for line in self._lines:
            if line.key == (str(product_id), size, color):
                return line
        return None

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines)

    def total_price(self) -> float:
        return sum(line.line_total for line in self._lines)

    # --- mutations ---------------------------------------------------------

    def add_item(self, product: Product, size: str, color: str, quantity: int = 1) -> None:
        if quantity < 1:
            raise ValueError("quantity must be >= 1")

        existing = self.find(product.id, size, color)
        if existing:
            existing.quantity += quantity
        else:
            self._lines.append(
                CartLine(product=product, quantity=quantity, selected_size=size, selected_color=color)
            )
        self._commit()

    def remove_item(self, product_id: str, size: Optional[str] = None, color: Optional[str] = None) -> None:
        self._lines = [line for line in self._lines if not line.matches(product_id, size, color)]
        self._commit()

    def set_quantity(
        self,
        product_id: str,
        quantity: int,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> None:
        if quantity <= 0:
            self.remove_item(product_id, size, color)
            return

        targets = [line for line in self._lines if line.matches(product_id, size, color)]
        if not targets:
            return
        for line in targets:
            line.quantity = quantity
        self._commit()

    def clear(self) -> None:
        self._lines = []
        self._commit()
