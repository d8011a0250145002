"""JSON-blob-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging

from pos.domain.exceptions import StorageCorruptError, ValidationError
from pos.domain.model.product import Product
from pos.domain.model.seed import seed_catalog
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.repository.load_result import LoadResult
from pos.infrastructure.persistence.json_blob_store import JsonBlobStore
from pos.infrastructure.persistence.serialization import (
    RECORD_ERRORS,
    product_from_raw,
    product_to_raw,
)

logger = logging.getLogger(__name__)

PRODUCTS_KEY = "products"


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, store: JsonBlobStore) -> None:
        self._store = store

    # --- CatalogRepository interface ------------------------------------------

    def load_catalog(self) -> LoadResult[list[Product]]:
        text = self._store.get(PRODUCTS_KEY)
        if not text:
            logger.info("No stored catalog; seeding defaults")
            products = seed_catalog()
            self.persist_catalog(products)
            return LoadResult(products)

        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
            products = [product_from_raw(item) for item in raw]
        except (*RECORD_ERRORS, ValidationError) as exc:
            error = StorageCorruptError(PRODUCTS_KEY, str(exc))
            logger.warning("%s", error)
            # The corrupt blob stays on disk until the next write.
            return LoadResult(seed_catalog(), error)

        return LoadResult(products)

    def persist_catalog(self, products: list[Product]) -> None:
        raw = [product_to_raw(p) for p in products]
        self._store.put(PRODUCTS_KEY, json.dumps(raw, indent=2) + "\n")
