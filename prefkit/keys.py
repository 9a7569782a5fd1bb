"""Setting key catalogs."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class SettingKey(StrEnum):
    """Base class for a closed catalog of setting keys.

    Subclass with one member per setting; the member value is the key's
    canonical string. Override ``clear_keys`` to limit what ``clear_all``
    removes::

        class AppKey(SettingKey):
            THEME = "theme"
            SESSION = "session"

            @classmethod
            def clear_keys(cls) -> list[AppKey]:
                return [cls.SESSION]
    """

    @property
    def raw_value(self) -> str:
        return self.value

    @classmethod
    def from_raw(cls, raw: str) -> Self | None:
        """Return the member whose raw value is ``raw``, or None."""
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def clear_keys(cls) -> list[Self]:
        """Keys removed by ``clear_all``, in removal order."""
        return list(cls)
