"""Report exporter: plain-text sales report ("Laporan Penjualan")."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from pos.application.sinks import ReportSink
from pos.domain.model.report import SalesReport
from pos.infrastructure.output.formatting import format_date

logger = logging.getLogger(__name__)


def report_filename(generated_on: date) -> str:
    return f"laporan-penjualan-{generated_on.isoformat()}.txt"


def export_report(report: SalesReport, generated_on: date) -> str:
    lines = [
        "LAPORAN PENJUALAN",
        format_date(generated_on),
        "",
        f"Total Penjualan: {report.total_sales}",
        f"Total Pesanan: {report.total_orders}",
        "",
        "DETAIL PRODUK:",
    ]
    for name, sales in report.products_sold.items():
        lines += [
            f"{name}:",
            f"  Jumlah Terjual: {sales.quantity}",
            f"  Pendapatan: {sales.revenue}",
            "",
        ]
    return "\n".join(lines).rstrip("\n") + "\n"


class FileReportSink(ReportSink):
    """Writes the report to ``laporan-penjualan-<ISO date>.txt``."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self.written: list[Path] = []

    def emit(self, report: SalesReport, generated_on: date) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._directory / report_filename(generated_on)
        path.write_text(export_report(report, generated_on), encoding="utf-8")
        self.written.append(path)
        logger.info("Sales report written to %s", path)
