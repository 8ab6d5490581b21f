from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from shopfront.schemas import Product, Review

if TYPE_CHECKING:
    from shopfront.cart.cart import Cart
    from shopfront.client.gateway import GatewayClient


class ProductDetail:
    """Selection state of the product detail page.

    Image, size and color default to the first option the product offers.
    The quantity picker never goes below 1.
    """

    def __init__(self, product: Product, cart: "Cart", reviews: Optional[List[Review]] = None):
        self.product = product
        self.cart = cart
        self.reviews: List[Review] = list(reviews or [])
        self.selected_image = product.images[0] if product.images else ""
        self.selected_size = product.sizes[0] if product.sizes else ""
        self.selected_color = product.colors[0] if product.colors else ""
        self.quantity = 1
        self.show_reviews = False

    @classmethod
    def fetch(cls, gateway: "GatewayClient", product_id: str, cart: "Cart") -> "ProductDetail":
        product = gateway.get_product(product_id)
        return cls(product, cart, reviews=gateway.list_reviews(product.id))

    def _pick(self, value: str, options: List[str], what: str) -> str:
        if value not in options:
            raise ValueError(f"{what} {value!r} is not offered for {self.product.name}")
        return value

    def select_image(self, image: str) -> None:
        self.selected_image = self._pick(image, self.product.images, "image")

    def select_size(self, size: str) -> None:
        self.selected_size = self._pick(size, self.product.sizes, "size")

    def select_color(self, color: str) -> None:
        self.selected_color = self._pick(color, self.product.colors, "color")

    def increase_quantity(self) -> None:
        self.quantity += 1

    def decrease_quantity(self) -> None:
        if self.quantity > 1:
            self.quantity -= 1

    def toggle_reviews(self) -> None:
        self.show_reviews = not self.show_reviews

    def add_to_cart(self) -> bool:
        if not (self.selected_size and self.selected_color):
            return False
        self.cart.add_item(self.product, self.selected_size, self.selected_color, self.quantity)
        return True
