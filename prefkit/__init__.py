"""prefkit - typed settings over a key-value preference store."""

from config.project import get_project
from prefkit.coding import CodingType
from prefkit.errors import (
    FailureKind,
    PrefkitError,
    SettingsFailure,
    StoreError,
    UnsupportedKeyError,
    UnsupportedValueError,
)
from prefkit.keys import SettingKey
from prefkit.settings import TypedSettings
from prefkit.stores import KeyValueStore, MemoryStore, SQLiteStore, open_store

__version__ = get_project().version

__all__ = [
    "CodingType",
    "FailureKind",
    "KeyValueStore",
    "MemoryStore",
    "PrefkitError",
    "SQLiteStore",
    "SettingKey",
    "SettingsFailure",
    "StoreError",
    "TypedSettings",
    "UnsupportedKeyError",
    "UnsupportedValueError",
    "open_store",
]
