"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)
from catalog.infrastructure.storage.local_image_storage import LocalImageStorage


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> SqliteProductRepository:
    return SqliteProductRepository(settings().db_path)


def image_storage() -> LocalImageStorage:
    cfg = settings()
    return LocalImageStorage(cfg.image_dir, base_url=cfg.image_base_url)
