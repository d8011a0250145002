"""Sales report — a derived view over order history. Never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductSales:
    quantity: int
    revenue: Money


@dataclass(frozen=True)
class SalesReport:
    """Totals across all orders plus a per-product breakdown.

    ``products_sold`` is keyed by product *name* and keeps first-seen order.
    """

    total_sales: Money
    total_orders: int
    products_sold: dict[str, ProductSales] = field(default_factory=dict)
