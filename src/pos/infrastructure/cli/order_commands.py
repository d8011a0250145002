"""CLI commands for checkout and order history."""

from __future__ import annotations

from pathlib import Path

import click

from pos.application.dto import CartLineSpec
from pos.domain.exceptions import DomainException
from pos.infrastructure.cli.common import pass_settings, session_for
from pos.infrastructure.config import Settings
from pos.infrastructure.output.receipt_renderer import FileReceiptSink


def _parse_items(raw: str) -> list[CartLineSpec]:
    """Parse '1:2,3:1' into CartLineSpec list."""
    specs: list[CartLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty < 1:
            raise click.BadParameter(
                f"Quantity for product '{product_id}' must be at least 1."
            )
        specs.append(CartLineSpec(product_id=product_id.strip(), quantity=qty))
    return specs


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Cart as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--receipt/--no-receipt", default=True, help="Write an HTML receipt.")
@click.option(
    "--receipt-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where receipts go (defaults to the output directory).",
)
@pass_settings
def order_checkout(
    settings: Settings,
    customer: str,
    items: str,
    receipt: bool,
    receipt_dir: Path | None,
) -> None:
    """Ring up a sale: fill the cart, record the order, print the receipt."""
    specs = _parse_items(items)
    session = session_for(settings)
    sink = FileReceiptSink(receipt_dir or settings.output_dir) if receipt else None

    try:
        for spec in specs:
            product = session.get_product(spec.product_id)
            if not product.is_available:
                raise click.ClickException(f"'{product.name}' is out of stock")
            session.add_to_cart(spec.product_id, spec.quantity)
        order = session.checkout(customer, receipt_sink=sink)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} recorded")
    click.echo(f"Customer: {order.customer_name}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*54}")
    for item in order.items:
        click.echo(
            f"  {item.name:<20} {item.quantity.value:>5} {str(item.price):>12} {str(item.line_total):>14}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Order Total':<27} {str(order.total):>27}")
    if session.last_receipt_error is not None:
        click.echo(
            f"Warning: receipt could not be written: {session.last_receipt_error}", err=True
        )
    if sink is not None:
        for path in sink.written:
            click.echo(f"Receipt written to {path}")


@click.command("history")
@pass_settings
def order_history(settings: Settings) -> None:
    """Show past orders, newest first."""
    session = session_for(settings)
    orders = session.order_history()

    if not orders:
        click.echo("No orders yet.")
        return

    for dto in orders:
        click.echo(f"#{dto.id}  {dto.date}  {dto.customer_name}  {dto.total}")
        for item in dto.items:
            click.echo(f"    {item.product_name} x {item.quantity}")
