"""Application service: the point-of-sale session.

Owns the in-memory ``PosState`` for one running session. Every operation
follows the same flow: run a pure reducer against the current state,
persist whatever blob changed, then swap in the new state. The cart lives
only here and is lost when the session ends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from pos.application.dto import OrderDTO, to_order_dto
from pos.application.sinks import ReceiptSink, ReportSink
from pos.domain.exceptions import StorageCorruptError
from pos.domain.model.cart import Cart
from pos.domain.model.order import Order
from pos.domain.model.product import Product, ProductFields
from pos.domain.model.report import SalesReport
from pos.domain.model.state import PosState
from pos.domain.model.value_objects import Money
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.repository.order_repository import OrderRepository
from pos.domain.service import catalog as catalog_reducer
from pos.domain.service.checkout import add_to_cart, checkout, compute_cart_total
from pos.domain.service.identity import next_id
from pos.domain.service.reporting import build_sales_report

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PosSession:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        order_repo: OrderRepository,
        *,
        enforce_stock: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._order_repo = order_repo
        self._enforce_stock = enforce_stock
        self._clock = clock
        self._state = PosState()
        self.load_errors: list[StorageCorruptError] = []
        self.last_receipt_error: Exception | None = None
        self.load()

    @property
    def state(self) -> PosState:
        return self._state

    def load(self) -> PosState:
        """(Re)read both blobs and reset the cart.

        Corrupt blobs do not raise: the fallback state is used and the
        error is collected in ``load_errors`` for the caller to report.
        """
        catalog_result = self._catalog_repo.load_catalog()
        orders_result = self._order_repo.load_orders()

        self.load_errors = [
            r.error for r in (catalog_result, orders_result) if not r.ok
        ]

        self._state = PosState(
            catalog=tuple(catalog_result.value),
            cart=Cart(),
            orders=tuple(orders_result.value),
        )
        return self._state

    # --- Catalog --------------------------------------------------------------

    def products(self) -> list[Product]:
        return list(self._state.catalog)

    def get_product(self, product_id: str) -> Product:
        return catalog_reducer.find_product(self._state.catalog, product_id)

    def search(self, query: str) -> list[Product]:
        return catalog_reducer.filter_catalog(self._state.catalog, query)

    def add_product(self, fields: ProductFields) -> Product:
        product_id = next_id((p.id for p in self._state.catalog), self._clock())
        catalog, product = catalog_reducer.add_product(
            self._state.catalog, fields, product_id
        )
        self._commit_catalog(catalog)
        logger.info("Added product %s (%s)", product.id, product.name)
        return product

    def update_product(self, product_id: str, fields: ProductFields) -> Product:
        catalog, product = catalog_reducer.update_product(
            self._state.catalog, product_id, fields
        )
        self._commit_catalog(catalog)
        logger.info("Updated product %s (%s)", product.id, product.name)
        return product

    def delete_product(self, product_id: str) -> None:
        catalog = catalog_reducer.delete_product(self._state.catalog, product_id)
        self._commit_catalog(catalog)
        logger.info("Deleted product %s", product_id)

    # --- Cart & checkout ------------------------------------------------------

    def add_to_cart(self, product_id: str, quantity: int = 1) -> Cart:
        """Add *quantity* units of a catalog product, one unit at a time."""
        product = catalog_reducer.find_product(self._state.catalog, product_id)
        cart = self._state.cart
        for _ in range(quantity):
            cart = add_to_cart(cart, product)
        self._state = PosState(self._state.catalog, cart, self._state.orders)
        return cart

    def cart_total(self) -> Money:
        return compute_cart_total(self._state.cart)

    def checkout(
        self,
        customer_name: str,
        receipt_sink: ReceiptSink | None = None,
    ) -> Order:
        """Complete the sale in the cart.

        The order history is written before the catalog. If the catalog
        write fails the previous history is written back and the error is
        re-raised, leaving both blobs and the in-memory state untouched.
        A receipt sink failure is logged and kept in ``last_receipt_error``.
        """
        previous_orders = list(self._state.orders)
        order_id = next_id((o.id for o in previous_orders), self._clock())
        result = checkout(
            self._state.cart,
            customer_name,
            self._state.catalog,
            order_id=order_id,
            now=self._clock(),
            enforce_stock=self._enforce_stock,
        )
        orders = (*previous_orders, result.order)

        self._order_repo.persist_orders(list(orders))
        try:
            self._catalog_repo.persist_catalog(list(result.catalog))
        except Exception:
            logger.error("Catalog write failed; rolling back order %s", result.order.id)
            self._order_repo.persist_orders(previous_orders)
            raise

        self._state = PosState(catalog=result.catalog, cart=result.cart, orders=orders)
        logger.info(
            "Order %s for %s: %d item(s), total %s",
            result.order.id,
            result.order.customer_name,
            result.order.item_count,
            result.order.total,
        )

        self.last_receipt_error = None
        if receipt_sink is not None:
            # The sale is committed by now; sink failures are recorded, not raised.
            try:
                receipt_sink.emit(result.order)
            except Exception as exc:
                logger.exception("Receipt for order %s could not be produced", result.order.id)
                self.last_receipt_error = exc
        return result.order

    # --- History & reporting --------------------------------------------------

    def order_history(self) -> list[OrderDTO]:
        """Past orders, newest first."""
        return [to_order_dto(o) for o in reversed(self._state.orders)]

    def sales_report(self) -> SalesReport:
        return build_sales_report(self._state.orders)

    def export_report(self, sink: ReportSink, today: date | None = None) -> SalesReport:
        report = self.sales_report()
        sink.emit(report, today or self._clock().date())
        logger.info("Exported sales report covering %d order(s)", report.total_orders)
        return report

    # --- Internal helpers -----------------------------------------------------

    def _commit_catalog(self, catalog: tuple[Product, ...]) -> None:
        self._catalog_repo.persist_catalog(list(catalog))
        self._state = PosState(catalog, self._state.cart, self._state.orders)
