"""JSON-blob-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging

from pos.domain.exceptions import StorageCorruptError, ValidationError
from pos.domain.model.order import Order
from pos.domain.repository.load_result import LoadResult
from pos.domain.repository.order_repository import OrderRepository
from pos.infrastructure.persistence.json_blob_store import JsonBlobStore
from pos.infrastructure.persistence.serialization import (
    RECORD_ERRORS,
    order_from_raw,
    order_to_raw,
)

logger = logging.getLogger(__name__)

ORDERS_KEY = "orders"


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonBlobStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def load_orders(self) -> LoadResult[list[Order]]:
        text = self._store.get(ORDERS_KEY)
        if not text:
            return LoadResult([])

        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
            orders = [order_from_raw(item) for item in raw]
        except (*RECORD_ERRORS, ValidationError) as exc:
            error = StorageCorruptError(ORDERS_KEY, str(exc))
            logger.warning("%s", error)
            return LoadResult([], error)

        return LoadResult(orders)

    def persist_orders(self, orders: list[Order]) -> None:
        raw = [order_to_raw(o) for o in orders]
        self._store.put(ORDERS_KEY, json.dumps(raw, indent=2) + "\n")
