"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog, and
stock is drawn down at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductFields:
    """Every editable attribute of a product, i.e. everything except ``id``.

    Range checks (non-negative price and stock) belong to whoever builds
    this; the catalog reducer stores what it is given.
    """

    name: str
    price: Money
    stock: int
    category: str


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable: catalog operations return a replacement record instead of
    mutating in place, so earlier states stay valid snapshots.
    """

    id: str
    name: str
    price: Money
    stock: int
    category: str

    @staticmethod
    def from_fields(product_id: str, fields: ProductFields) -> Product:
        return Product(
            id=product_id,
            name=fields.name,
            price=fields.price,
            stock=fields.stock,
            category=fields.category,
        )

    @property
    def is_available(self) -> bool:
        return self.stock > 0

    def with_fields(self, fields: ProductFields) -> Product:
        """Return a copy carrying *fields*; the id is preserved."""
        return Product.from_fields(self.id, fields)

    def with_stock(self, stock: int) -> Product:
        # No floor: stock may go negative when oversold.
        return replace(self, stock=stock)
