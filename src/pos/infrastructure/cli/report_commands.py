"""CLI commands for the sales report."""

from __future__ import annotations

from pathlib import Path

import click

from pos.infrastructure.cli.common import pass_settings, session_for
from pos.infrastructure.config import Settings
from pos.infrastructure.output.report_exporter import FileReportSink


@click.command("show")
@pass_settings
def report_show(settings: Settings) -> None:
    """Show total sales and units sold per product."""
    report = session_for(settings).sales_report()

    click.echo(f"Total sales:  {report.total_sales}")
    click.echo(f"Total orders: {report.total_orders}")

    if not report.products_sold:
        return
    click.echo()
    click.echo(f"{'Product':<20} {'Sold':>6} {'Revenue':>14}")
    click.echo("-" * 42)
    for name, sales in report.products_sold.items():
        click.echo(f"{name:<20} {sales.quantity:>6} {str(sales.revenue):>14}")


@click.command("export")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where to write the report (defaults to the output directory).",
)
@pass_settings
def report_export(settings: Settings, output_dir: Path | None) -> None:
    """Write the sales report to laporan-penjualan-<date>.txt."""
    sink = FileReportSink(output_dir or settings.output_dir)
    session_for(settings).export_report(sink)

    for path in sink.written:
        click.echo(f"Report written to {path}")
