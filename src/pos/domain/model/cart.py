"""Cart model — the in-progress sale.

A cart is never persisted. It holds product snapshots taken when the
product was added, so later catalog edits do not leak into the cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    """A product snapshot plus how many units of it are being bought."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def price(self) -> Money:
        return self.product.price

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class Cart:
    """Ordered, immutable collection of cart items, unique by product id."""

    items: tuple[CartItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def get(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
