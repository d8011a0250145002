"""Tests for the receipt renderer and report exporter."""

from datetime import date, datetime, timezone

from pos.domain.model.cart import CartItem
from pos.domain.model.order import Order
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.service.reporting import build_sales_report
from pos.infrastructure.output.formatting import format_date
from pos.infrastructure.output.receipt_renderer import FileReceiptSink, render_receipt
from pos.infrastructure.output.report_exporter import (
    FileReportSink,
    export_report,
    report_filename,
)

NOW = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)


def _order(customer: str = "Budi") -> Order:
    items = [
        CartItem(Product("1", "Nasi Goreng", Money.of(25000), 100, "Makanan"), Quantity(2)),
        CartItem(Product("2", "Es Teh", Money.of(5000), 50, "Minuman"), Quantity(1)),
    ]
    return Order.create(order_id="42", customer_name=customer, items=items, date=NOW)


class TestReceipt:

    def test_contains_lines_and_total(self):
        html = render_receipt(_order())
        assert "Struk Pembelian" in html
        assert "Pelanggan: Budi" in html
        assert "2 x Rp 25.000" in html
        assert "Rp 50.000" in html
        assert "Rp 55.000" in html
        assert "Terima kasih atas kunjungan Anda!" in html

    def test_customer_name_is_escaped(self):
        html = render_receipt(_order("<b>Budi</b>"))
        assert "&lt;b&gt;Budi&lt;/b&gt;" in html
        assert "<b>Budi</b>" not in html

    def test_file_sink(self, tmp_path):
        sink = FileReceiptSink(tmp_path / "receipts")
        sink.emit(_order())
        assert sink.written == [tmp_path / "receipts" / "struk-42.html"]
        assert "Rp 55.000" in sink.written[0].read_text(encoding="utf-8")


class TestReport:

    def test_filename(self):
        assert report_filename(date(2026, 10, 19)) == "laporan-penjualan-2026-10-19.txt"

    def test_format_date_unpadded(self):
        assert format_date(date(2026, 3, 5)) == "5/3/2026"

    def test_text(self):
        text = export_report(build_sales_report([_order(), _order()]), date(2026, 10, 19))
        assert text == (
            "LAPORAN PENJUALAN\n"
            "19/10/2026\n"
            "\n"
            "Total Penjualan: Rp 110.000\n"
            "Total Pesanan: 2\n"
            "\n"
            "DETAIL PRODUK:\n"
            "Nasi Goreng:\n"
            "  Jumlah Terjual: 4\n"
            "  Pendapatan: Rp 100.000\n"
            "\n"
            "Es Teh:\n"
            "  Jumlah Terjual: 2\n"
            "  Pendapatan: Rp 10.000\n"
        )

    def test_empty_report(self):
        text = export_report(build_sales_report([]), date(2026, 10, 19))
        assert text.endswith("Total Pesanan: 0\n\nDETAIL PRODUK:\n")

    def test_file_sink(self, tmp_path):
        sink = FileReportSink(tmp_path)
        sink.emit(build_sales_report([_order()]), date(2026, 10, 19))
        path = tmp_path / "laporan-penjualan-2026-10-19.txt"
        assert sink.written == [path]
        assert path.read_text(encoding="utf-8").startswith("LAPORAN PENJUALAN\n")
