"""In-process preference store."""

from __future__ import annotations

import copy
from threading import RLock
from typing import Any

from pydantic import AnyUrl

from prefkit.stores.base import KeyValueStore


def _copy(value: Any) -> Any:
    # URLs are immutable and kept as is
    if isinstance(value, AnyUrl):
        return value
    return copy.deepcopy(value)


class MemoryStore(KeyValueStore):
    """Dictionary-backed store; values are copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._lock = RLock()
        self._slots: dict[str, Any] = {key: _copy(value) for key, value in (initial or {}).items()}

    def set_value(self, key: str, value: Any) -> None:
        with self._lock:
            self._slots[key] = _copy(value)

    def remove_value(self, key: str) -> None:
        with self._lock:
            self._slots.pop(key, None)

    def get_value(self, key: str) -> Any | None:
        with self._lock:
            return _copy(self._slots.get(key))

    def set_url(self, key: str, url: AnyUrl) -> None:
        with self._lock:
            self._slots[key] = url

    def keys(self, prefix: str = "") -> list[str]:
        """Slot names starting with ``prefix``, sorted."""
        with self._lock:
            return sorted(key for key in self._slots if key.startswith(prefix))

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._slots
