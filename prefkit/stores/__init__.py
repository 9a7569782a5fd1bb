"""Preference store backends."""

from __future__ import annotations

import logging

from config import Config, get_config
from prefkit.stores.base import KeyValueStore
from prefkit.stores.memory import MemoryStore
from prefkit.stores.sqlite import SQLiteStore

logger = logging.getLogger(__name__)


def open_store(config: Config | None = None) -> KeyValueStore:
    """Open the backend selected by configuration."""
    store_config = (config or get_config()).store
    if store_config.backend == "memory":
        logger.debug("Opening in-memory preference store")
        return MemoryStore()
    db_path = store_config.resolved_db_path
    logger.debug(f"Opening SQLite preference store at {db_path}")
    return SQLiteStore(db_path)


__all__ = ["KeyValueStore", "MemoryStore", "SQLiteStore", "open_store"]
