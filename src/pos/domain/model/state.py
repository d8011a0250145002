"""Application state tree shared by the reducers."""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.model.cart import Cart
from pos.domain.model.order import Order
from pos.domain.model.product import Product


@dataclass(frozen=True)
class PosState:
    catalog: tuple[Product, ...] = ()
    cart: Cart = field(default_factory=Cart)
    orders: tuple[Order, ...] = ()
