"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.order import Order


@dataclass(frozen=True)
class CartLineSpec:
    """Input: a product id and how many units to put in the cart."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line of a past order as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rp 25.000"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete past order as displayed to the user."""

    id: str
    customer_name: str
    items: list[OrderLineDTO]
    total: str
    date: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_name=order.customer_name,
        items=[
            OrderLineDTO(
                product_name=item.name,
                quantity=item.quantity.value,
                unit_price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        date=order.date.strftime("%Y-%m-%d %H:%M UTC"),
    )
