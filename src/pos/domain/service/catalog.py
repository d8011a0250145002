"""Catalog reducer: create, update, delete and search products.

Every function takes the current catalog and returns a new one; the input
sequence is never modified.
"""

from __future__ import annotations

from collections.abc import Sequence

from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.product import Product, ProductFields


def find_product(catalog: Sequence[Product], product_id: str) -> Product:
    for product in catalog:
        if product.id == product_id:
            return product
    raise EntityNotFoundError(f"Product with ID '{product_id}' not found")


def add_product(
    catalog: Sequence[Product],
    fields: ProductFields,
    product_id: str,
) -> tuple[tuple[Product, ...], Product]:
    """Append a new product built from *fields*.

    No validation beyond the id: the caller is responsible for
    non-negative price and stock.
    """
    if any(p.id == product_id for p in catalog):
        raise ValidationError(f"Product ID '{product_id}' is already in use")
    product = Product.from_fields(product_id, fields)
    return (*catalog, product), product


def update_product(
    catalog: Sequence[Product],
    product_id: str,
    fields: ProductFields,
) -> tuple[tuple[Product, ...], Product]:
    """Replace every field of the product except its id."""
    updated = find_product(catalog, product_id).with_fields(fields)
    new_catalog = tuple(updated if p.id == product_id else p for p in catalog)
    return new_catalog, updated


def delete_product(catalog: Sequence[Product], product_id: str) -> tuple[Product, ...]:
    """Remove a product.

    Cart entries that reference it are left alone; they are still billed
    at checkout but no stock is decremented for them.
    """
    find_product(catalog, product_id)
    return tuple(p for p in catalog if p.id != product_id)


def filter_catalog(catalog: Sequence[Product], query: str) -> list[Product]:
    """Case-insensitive substring match against name or category."""
    needle = query.lower()
    return [
        p for p in catalog
        if needle in p.name.lower() or needle in p.category.lower()
    ]
