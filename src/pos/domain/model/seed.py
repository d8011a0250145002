"""Default catalog used on first run or when the stored catalog is unreadable."""

from __future__ import annotations

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


def seed_catalog() -> list[Product]:
    return [
        Product(id="1", name="Nasi Goreng", price=Money.of(25000), stock=100, category="Makanan"),
        Product(id="2", name="Es Teh", price=Money.of(5000), stock=50, category="Minuman"),
        Product(id="3", name="Ayam Goreng", price=Money.of(15000), stock=75, category="Makanan"),
    ]
