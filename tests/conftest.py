"""Pytest configuration for the test suite."""

from __future__ import annotations

import pytest

from config import clear_config_cache
from prefkit.errors import SettingsFailure
from prefkit.settings import TypedSettings
from prefkit.stores.memory import MemoryStore
from prefkit.stores.sqlite import SQLiteStore
from tests.helpers import AppKey


@pytest.fixture
def memory_store() -> MemoryStore:
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def sqlite_store(tmp_path) -> SQLiteStore:
    """Return a SQLite store backed by a temporary database file."""
    store = SQLiteStore(tmp_path / "preferences.db")
    yield store
    store.engine.dispose()


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Run a test once against each backend."""
    if request.param == "memory":
        yield MemoryStore()
        return
    sqlite = SQLiteStore(tmp_path / "preferences.db")
    yield sqlite
    sqlite.engine.dispose()


@pytest.fixture
def failures() -> list[SettingsFailure]:
    """Collects failures reported through on_failure."""
    return []


@pytest.fixture
def settings(store, failures) -> TypedSettings[AppKey]:
    """Return a facade over the parametrised store with a test prefix."""
    return TypedSettings(AppKey, store, prefix="test.", on_failure=failures.append)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep environment-driven configuration isolated between tests."""
    for name in ("PREFKIT_BACKEND", "PREFKIT_DB_PATH", "PREFKIT_PREFIX", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
