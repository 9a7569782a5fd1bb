"""Key-value store interface consumed by the settings facade."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import AnyUrl, ValidationError

from prefkit.values import file_url

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Untyped preference store addressed by string keys.

    Implementations must be safe to share between facades; whatever
    thread-safety a caller gets comes from here.
    """

    @abstractmethod
    def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous slot."""

    @abstractmethod
    def remove_value(self, key: str) -> None:
        """Remove the slot for ``key``; a missing slot is not an error."""

    @abstractmethod
    def get_value(self, key: str) -> Any | None:
        """Return the stored value, or None when the slot is empty."""

    @abstractmethod
    def set_url(self, key: str, url: AnyUrl) -> None:
        """Store ``url`` under ``key`` as a URL."""

    def get_url(self, key: str) -> AnyUrl | None:
        """Return the slot as a URL.

        Stored URLs come back unchanged. A stored string is taken as a
        filesystem path and returned as a ``file://`` URL. Anything else
        reads as None.
        """
        value = self.get_value(key)
        if isinstance(value, AnyUrl):
            return value
        if isinstance(value, str) and value:
            try:
                return file_url(value)
            except ValidationError as e:
                logger.debug("Slot %s holds a string that is not a path: %s", key, e)
        return None
