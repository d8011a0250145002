"""Abstract repository for order history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.order import Order
from pos.domain.repository.load_result import LoadResult


class OrderRepository(ABC):

    @abstractmethod
    def load_orders(self) -> LoadResult[list[Order]]:
        """Return the stored order history, oldest first (empty if none)."""

    @abstractmethod
    def persist_orders(self, orders: list[Order]) -> None:
        """Overwrite the stored history with *orders*."""
