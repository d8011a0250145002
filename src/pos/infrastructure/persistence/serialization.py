"""Mapping between domain objects and the stored JSON records.

Field names follow the stored format exactly (``customerName``, ``date``,
flat product fields on order items) so existing data keeps loading.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from pos.domain.model.cart import CartItem
from pos.domain.model.order import Order
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity

# Errors that mean "this record is not what we wrote".
RECORD_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError)


# --- Scalars ------------------------------------------------------------------


def money_to_raw(money: Money) -> int | float:
    """Whole amounts are stored as JSON integers, others as floats."""
    if money.amount == money.amount.to_integral_value():
        return int(money.amount)
    return float(money.amount)


def money_from_raw(value: object) -> Money:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return Money(Decimal(str(value)))


def int_from_raw(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected an integer, got {value!r}")
    if value != int(value):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def str_from_raw(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def datetime_to_raw(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def datetime_from_raw(value: object) -> datetime:
    text = str_from_raw(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


# --- Products -----------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": money_to_raw(product.price),
        "stock": product.stock,
        "category": product.category,
    }


def product_from_raw(raw: dict) -> Product:
    return Product(
        id=str_from_raw(raw["id"]),
        name=str_from_raw(raw["name"]),
        price=money_from_raw(raw["price"]),
        stock=int_from_raw(raw["stock"]),
        category=str_from_raw(raw["category"]),
    )


# --- Orders -------------------------------------------------------------------


def order_to_raw(order: Order) -> dict:
    return {
        "id": order.id,
        "customerName": order.customer_name,
        "items": [
            {**product_to_raw(item.product), "quantity": item.quantity.value}
            for item in order.items
        ],
        "total": money_to_raw(order.total),
        "date": datetime_to_raw(order.date),
    }


def order_from_raw(raw: dict) -> Order:
    items = tuple(
        CartItem(
            product=product_from_raw(i),
            quantity=Quantity(int_from_raw(i["quantity"])),
        )
        for i in raw["items"]
    )
    return Order(
        id=str_from_raw(raw["id"]),
        customer_name=str_from_raw(raw["customerName"]),
        items=items,
        total=money_from_raw(raw["total"]),
        date=datetime_from_raw(raw["date"]),
    )
