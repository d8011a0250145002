import logging
from pathlib import Path

import click

from pos.infrastructure.cli.order_commands import order_checkout, order_history
from pos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from pos.infrastructure.cli.report_commands import report_export, report_show
from pos.infrastructure.config import (
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    ENFORCE_STOCK_ENV,
    OUTPUT_DIR_ENV,
    Settings,
)


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding products.json and orders.json.",
)
@click.option(
    "--enforce-stock/--allow-oversell",
    envvar=ENFORCE_STOCK_ENV,
    default=False,
    help="Reject checkouts that exceed the stock on hand.",
)
@click.option(
    "--output-dir",
    envvar=OUTPUT_DIR_ENV,
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Default directory for receipts and exported reports.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path,
    enforce_stock: bool,
    output_dir: Path,
    verbose: bool,
) -> None:
    """POS — Point of Sale"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Settings(data_dir=data_dir, enforce_stock=enforce_stock, output_dir=output_dir)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def order() -> None:
    """Check out carts and browse order history."""


@cli.group()
def report() -> None:
    """Sales reporting."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_checkout)
order.add_command(order_history)
report.add_command(report_export)
report.add_command(report_show)
