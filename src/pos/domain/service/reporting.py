"""Reporting aggregator: sales totals derived from order history."""

from __future__ import annotations

from collections.abc import Sequence

from pos.domain.model.order import Order
from pos.domain.model.report import ProductSales, SalesReport
from pos.domain.model.value_objects import Money


def build_sales_report(orders: Sequence[Order]) -> SalesReport:
    """Aggregate every order into a ``SalesReport``.

    ``total_sales`` sums the totals frozen on each order. The per-product
    breakdown is keyed by product name, so two products that share a name
    are reported as one.
    """
    total_sales = Money.zero()
    products_sold: dict[str, ProductSales] = {}

    for order in orders:
        total_sales = total_sales + order.total
        for item in order.items:
            current = products_sold.get(item.name, ProductSales(0, Money.zero()))
            products_sold[item.name] = ProductSales(
                quantity=current.quantity + item.quantity.value,
                revenue=current.revenue + item.line_total,
            )

    return SalesReport(
        total_sales=total_sales,
        total_orders=len(orders),
        products_sold=products_sold,
    )
