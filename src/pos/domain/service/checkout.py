"""Cart and checkout reducer.

Checkout spans three pieces of state — the cart, the catalog and the
order history — so it validates everything first and only then builds
its outputs. Either the caller gets the new order, the decremented
catalog and the cleared cart together, or it gets an exception and
nothing has changed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from pos.domain.exceptions import InsufficientStockError
from pos.domain.model.cart import Cart, CartItem
from pos.domain.model.order import Order
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    catalog: tuple[Product, ...]
    cart: Cart


def add_to_cart(cart: Cart, product: Product) -> Cart:
    """Add one unit of *product*.

    A product already in the cart has its quantity bumped; otherwise a new
    line is appended. Stock is not consulted here.
    """
    if cart.get(product.id) is None:
        return Cart((*cart.items, CartItem(product=product, quantity=Quantity(1))))

    return Cart(tuple(
        CartItem(product=item.product, quantity=item.quantity.increment())
        if item.product_id == product.id else item
        for item in cart.items
    ))


def compute_cart_total(cart: Cart) -> Money:
    total = Money.zero()
    for item in cart:
        total = total + item.line_total
    return total


def checkout(
    cart: Cart,
    customer_name: str,
    catalog: Sequence[Product],
    *,
    order_id: str,
    now: datetime,
    enforce_stock: bool = False,
) -> CheckoutResult:
    """Turn the cart into an order and draw down stock.

    With ``enforce_stock`` off (the default) stock may go negative.
    """
    # Phase 1: validate. Order.create raises for blank names and empty carts.
    order = Order.create(
        order_id=order_id,
        customer_name=customer_name,
        items=cart.items,
        date=now,
    )
    if enforce_stock:
        _check_stock(cart, catalog)

    # Phase 2: build the new catalog. Stale cart lines whose product was
    # deleted have nothing to decrement.
    sold = {item.product_id: item.quantity.value for item in cart}
    new_catalog = tuple(
        p.with_stock(p.stock - sold[p.id]) if p.id in sold else p
        for p in catalog
    )
    return CheckoutResult(order=order, catalog=new_catalog, cart=Cart())


def _check_stock(cart: Cart, catalog: Sequence[Product]) -> None:
    stock = {p.id: p.stock for p in catalog}
    for item in cart:
        available = stock.get(item.product_id)
        if available is not None and item.quantity.value > available:
            raise InsufficientStockError(
                f"Insufficient stock for {item.name} "
                f"(need {item.quantity.value}, have {available} available)"
            )
