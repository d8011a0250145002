"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product
from pos.domain.repository.load_result import LoadResult


class CatalogRepository(ABC):

    @abstractmethod
    def load_catalog(self) -> LoadResult[list[Product]]:
        """Return the stored catalog, seeding it first if nothing is stored."""

    @abstractmethod
    def persist_catalog(self, products: list[Product]) -> None:
        """Overwrite the stored catalog with *products*."""
