"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pos.application.session import PosSession
from pos.infrastructure.config import Settings
from pos.infrastructure.persistence.json_blob_store import JsonBlobStore
from pos.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from pos.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def blob_store(settings: Settings) -> JsonBlobStore:
    return JsonBlobStore(settings.data_dir)


def catalog_repository(settings: Settings) -> JsonCatalogRepository:
    return JsonCatalogRepository(blob_store(settings))


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(blob_store(settings))


def open_session(settings: Settings) -> PosSession:
    return PosSession(
        catalog_repository(settings),
        order_repository(settings),
        enforce_stock=settings.enforce_stock,
    )
