"""Order — an immutable record of a completed sale.

Orders are append-only history. The total is computed once, at checkout,
and stored; it is never recomputed from current catalog prices.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pos.domain.exceptions import EmptyCustomerNameError, ValidationError
from pos.domain.model.cart import CartItem
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """A completed sale.

    Use the ``Order.create()`` factory for new orders — it enforces the
    checkout rules and freezes the total. The plain constructor is what the
    repository uses to reconstitute persisted orders without re-validating
    (a stored total is kept even if it no longer matches the items).
    """

    id: str
    customer_name: str
    items: tuple[CartItem, ...]
    total: Money
    date: datetime

    @staticmethod
    def create(
        order_id: str,
        customer_name: str,
        items: tuple[CartItem, ...] | list[CartItem],
        date: datetime,
    ) -> Order:
        if not customer_name or not customer_name.strip():
            raise EmptyCustomerNameError("Customer name is required")
        if not items:
            raise ValidationError("Cannot check out an empty cart")

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            id=order_id,
            customer_name=customer_name.strip(),
            items=tuple(items),
            total=total,
            date=date,
        )

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
