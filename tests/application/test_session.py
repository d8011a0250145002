"""Integration tests for PosSession.

Uses in-memory fake repositories — no file I/O.
"""

from datetime import date

import pytest

from pos.application.session import PosSession
from pos.domain.exceptions import (
    EmptyCustomerNameError,
    EntityNotFoundError,
    InsufficientStockError,
)
from pos.domain.model.product import ProductFields
from pos.domain.model.seed import seed_catalog
from pos.domain.model.value_objects import Money
from tests.fakes import (
    FIXED_NOW,
    FakeCatalogRepository,
    FailingReceiptSink,
    FakeOrderRepository,
    RecordingReceiptSink,
    RecordingReportSink,
    fixed_clock,
)


def _setup(
    enforce_stock: bool = False,
) -> tuple[PosSession, FakeCatalogRepository, FakeOrderRepository]:
    catalog_repo = FakeCatalogRepository()
    order_repo = FakeOrderRepository()
    session = PosSession(catalog_repo, order_repo, enforce_stock=enforce_stock, clock=fixed_clock)
    return session, catalog_repo, order_repo


def _fields(name: str = "Mie Goreng") -> ProductFields:
    return ProductFields(name=name, price=Money.of(20000), stock=10, category="Makanan")


class TestLoad:

    def test_first_run_seeds_catalog(self):
        session, catalog_repo, _ = _setup()
        assert [p.name for p in session.products()] == ["Nasi Goreng", "Es Teh", "Ayam Goreng"]
        assert catalog_repo.stored == seed_catalog()
        assert session.load_errors == []

    def test_loading_twice_is_idempotent(self):
        session, _, _ = _setup()
        first = session.load()
        second = session.load()
        assert first == second

    def test_corrupt_storage_reported_not_raised(self):
        session = PosSession(
            FakeCatalogRepository(corrupt=True),
            FakeOrderRepository(corrupt=True),
            clock=fixed_clock,
        )
        assert [e.key for e in session.load_errors] == ["products", "orders"]
        assert session.products() == seed_catalog()
        assert session.state.orders == ()


class TestCatalogOperations:

    def test_add_product_persists(self):
        session, catalog_repo, _ = _setup()
        product = session.add_product(_fields())
        assert product.id == str(int(FIXED_NOW.timestamp() * 1000))
        assert catalog_repo.stored[-1] == product

    def test_added_ids_are_unique(self):
        session, _, _ = _setup()
        a = session.add_product(_fields("A"))
        b = session.add_product(_fields("B"))
        assert a.id != b.id

    def test_update_product_persists(self):
        session, catalog_repo, _ = _setup()
        session.update_product("1", _fields("Nasi Goreng Spesial"))
        assert catalog_repo.stored[0].name == "Nasi Goreng Spesial"

    def test_delete_missing_product(self):
        session, catalog_repo, _ = _setup()
        writes = catalog_repo.writes
        with pytest.raises(EntityNotFoundError):
            session.delete_product("99")
        assert catalog_repo.writes == writes
        assert len(session.products()) == 3

    def test_search(self):
        session, _, _ = _setup()
        assert [p.id for p in session.search("goreng")] == ["1", "3"]


class TestCheckout:

    def test_checkout_updates_everything(self):
        session, catalog_repo, order_repo = _setup()
        session.add_to_cart("1", 2)
        assert session.cart_total() == Money.of(50000)

        order = session.checkout("Budi")

        assert order.total == Money.of(50000)
        assert order_repo.stored == [order]
        assert catalog_repo.stored[0].stock == 98
        assert session.state.cart.is_empty
        assert len(session.state.orders) == 1

    def test_add_unknown_product_to_cart(self):
        session, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            session.add_to_cart("99")

    def test_failing_receipt_sink_keeps_the_sale(self):
        session, catalog_repo, order_repo = _setup()
        session.add_to_cart("1")
        order = session.checkout("Budi", receipt_sink=FailingReceiptSink())

        assert order_repo.stored == [order]
        assert catalog_repo.stored[0].stock == 99
        assert session.state.cart.is_empty
        assert isinstance(session.last_receipt_error, OSError)

    def test_successful_receipt_clears_previous_error(self):
        session, _, _ = _setup()
        session.add_to_cart("1")
        session.checkout("Ani", receipt_sink=FailingReceiptSink())
        session.add_to_cart("1")
        session.checkout("Budi", receipt_sink=RecordingReceiptSink())
        assert session.last_receipt_error is None

    def test_receipt_sink_receives_order(self):
        session, _, _ = _setup()
        sink = RecordingReceiptSink()
        session.add_to_cart("2")
        order = session.checkout("Budi", receipt_sink=sink)
        assert sink.orders == [order]

    def test_blank_name_changes_nothing(self):
        session, catalog_repo, order_repo = _setup()
        session.add_to_cart("1")
        with pytest.raises(EmptyCustomerNameError):
            session.checkout("  ")
        assert order_repo.stored == []
        assert catalog_repo.stored[0].stock == 100
        assert len(session.state.cart) == 1

    def test_enforced_stock(self):
        session, _, order_repo = _setup(enforce_stock=True)
        session.add_to_cart("2", 51)
        with pytest.raises(InsufficientStockError):
            session.checkout("Budi")
        assert order_repo.stored == []

    def test_failed_catalog_write_rolls_back_orders(self):
        session, catalog_repo, order_repo = _setup()
        session.add_to_cart("1")
        session.checkout("Ani")
        history = list(order_repo.stored)

        session.add_to_cart("1")
        catalog_repo.fail_writes = True
        with pytest.raises(OSError):
            session.checkout("Budi")

        assert order_repo.stored == history
        assert catalog_repo.stored[0].stock == 99
        assert len(session.state.orders) == 1
        assert len(session.state.cart) == 1


class TestHistoryAndReport:

    def test_history_newest_first(self):
        session, _, _ = _setup()
        for name in ("Ani", "Budi"):
            session.add_to_cart("2")
            session.checkout(name)
        history = session.order_history()
        assert [o.customer_name for o in history] == ["Budi", "Ani"]
        assert history[0].total == "Rp 5.000"
        assert history[0].items[0].product_name == "Es Teh"

    def test_sales_report(self):
        session, _, _ = _setup()
        for _ in range(2):
            session.add_to_cart("1")
            session.checkout("Budi")
        report = session.sales_report()
        assert report.total_orders == 2
        assert report.products_sold["Nasi Goreng"].quantity == 2

    def test_export_report_uses_clock_date(self):
        session, _, _ = _setup()
        sink = RecordingReportSink()
        report = session.export_report(sink)
        assert sink.reports == [(report, date(2026, 10, 19))]
