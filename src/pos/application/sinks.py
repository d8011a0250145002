"""Collaborator interfaces for receipt printing and report export.

The core hands finished data to these sinks; how it is printed,
downloaded or saved is up to the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from pos.domain.model.order import Order
from pos.domain.model.report import SalesReport


class ReceiptSink(ABC):

    @abstractmethod
    def emit(self, order: Order) -> None:
        """Deliver the receipt for a completed order."""


class ReportSink(ABC):

    @abstractmethod
    def emit(self, report: SalesReport, generated_on: date) -> None:
        """Deliver a sales report generated on *generated_on*."""
