"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.domain.exceptions import DomainException
from pos.domain.model.product import Product, ProductFields
from pos.domain.model.value_objects import Money
from pos.infrastructure.cli.common import pass_settings, session_for
from pos.infrastructure.config import Settings


def _print_products(products: list[Product]) -> None:
    click.echo(f"{'ID':<14} {'Name':<20} {'Price':>12} {'Stock':>6}  {'Category'}")
    click.echo("-" * 66)
    for p in products:
        click.echo(f"{p.id:<14} {p.name:<20} {str(p.price):>12} {p.stock:>6}  {p.category}")


def _parse_price(raw: str) -> Money:
    try:
        return Money.of(raw)
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="'--price'")


def _require_text(value: str, option: str) -> str:
    if not value.strip():
        raise click.BadParameter("must not be blank", param_hint=f"'{option}'")
    return value.strip()


@click.command("list")
@click.option("--search", "query", default="", help="Filter by name or category.")
@pass_settings
def product_list(settings: Settings, query: str) -> None:
    """List products in the catalog."""
    session = session_for(settings)
    products = session.search(query)

    if not products:
        click.echo("No products found.")
        return
    _print_products(products)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price in rupiah (e.g. 25000).")
@click.option("--stock", required=True, type=click.IntRange(min=0), help="Units in stock.")
@click.option("--category", required=True, help="Category (e.g. Makanan).")
@pass_settings
def product_add(settings: Settings, name: str, price: str, stock: int, category: str) -> None:
    """Add a new product to the catalog."""
    fields = ProductFields(
        name=_require_text(name, "--name"),
        price=_parse_price(price),
        stock=stock,
        category=_require_text(category, "--category"),
    )
    session = session_for(settings)

    try:
        product = session.add_product(fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price in rupiah.")
@click.option("--stock", default=None, type=click.IntRange(min=0), help="New stock level.")
@click.option("--category", default=None, help="New category.")
@pass_settings
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    price: str | None,
    stock: int | None,
    category: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""
    session = session_for(settings)

    try:
        current = session.get_product(product_id)
        fields = ProductFields(
            name=_require_text(name, "--name") if name is not None else current.name,
            price=_parse_price(price) if price is not None else current.price,
            stock=stock if stock is not None else current.stock,
            category=(
                _require_text(category, "--category")
                if category is not None else current.category
            ),
        )
        product = session.update_product(product_id, fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Deleted products cannot be restored. Continue?")
@pass_settings
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    session = session_for(settings)

    try:
        session.delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
