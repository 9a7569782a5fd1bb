"""Typed settings facade over a key-value store."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import AnyUrl, ValidationError

from prefkit.coding import CODING_ERRORS, CodingType, decode_object, encode_object
from prefkit.errors import (
    FailureCallback,
    FailureKind,
    SettingsFailure,
    UnsupportedKeyError,
    UnsupportedValueError,
)
from prefkit.keys import SettingKey
from prefkit.stores.base import KeyValueStore
from prefkit.values import MISMATCH, SCALAR_TYPES, downcast, downcast_url, ensure_storable, parse_url

logger = logging.getLogger(__name__)


class TypedSettings[K: SettingKey]:
    """Read and write settings for one key catalog under one prefix.

    Every key maps to a single store slot named ``prefix + key.raw_value``.
    Values are handled by category, each with its own pair of methods:

    - storable values (``set_value`` / ``value`` and the ``get_*`` shortcuts)
    - URLs (``set_url`` / ``url``)
    - enum members stored as their raw value (``set_enum`` / ``enum``)
    - structured objects stored as serialized bytes (``set_object`` / ``object``)

    Writing None removes the slot. Reads never raise on bad data: a value of
    the wrong type, an undecodable blob or a raw value that no longer maps to
    a member all read as None. Pass ``on_failure`` to be told about those.
    """

    def __init__(
        self,
        keys: type[K],
        store: KeyValueStore,
        prefix: str = "",
        *,
        on_failure: FailureCallback | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            keys: The key catalog this facade accepts
            store: Shared backing store, not owned by the facade
            prefix: Namespace prepended to every key
            on_failure: Optional callback for silently recovered failures

        """
        self._keys = keys
        self._store = store
        self._prefix = prefix
        self._on_failure = on_failure

    @property
    def keys(self) -> type[K]:
        return self._keys

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def prefix(self) -> str:
        return self._prefix

    def slot(self, key: K) -> str:
        """Store key used for ``key``."""
        if not isinstance(key, self._keys):
            raise UnsupportedKeyError(key, self._keys)
        return self._prefix + key.raw_value

    # ------------------------------------------------------------------ #
    #  Storable values                                                   #
    # ------------------------------------------------------------------ #
    def set_value(self, key: K, value: Any) -> None:
        """Store a bool, str, bytes, datetime, number, list or dict verbatim."""
        if value is not None:
            ensure_storable(value)
        self._write(self.slot(key), value)

    def value[T](self, key: K, value_type: type[T]) -> T | None:
        """Return the stored value if it is a ``value_type``, else None."""
        slot = self.slot(key)
        raw = self._store.get_value(slot)
        if raw is None:
            return None
        result = downcast(raw, value_type)
        if result is MISMATCH:
            self._report(FailureKind.TYPE_MISMATCH, slot)
            return None
        return result

    def get_bool(self, key: K) -> bool | None:
        return self.value(key, bool)

    def get_str(self, key: K) -> str | None:
        return self.value(key, str)

    def get_int(self, key: K) -> int | None:
        return self.value(key, int)

    def get_float(self, key: K) -> float | None:
        return self.value(key, float)

    def get_bytes(self, key: K) -> bytes | None:
        return self.value(key, bytes)

    def get_datetime(self, key: K) -> datetime | None:
        return self.value(key, datetime)

    # ------------------------------------------------------------------ #
    #  URLs                                                              #
    # ------------------------------------------------------------------ #
    def set_url(self, key: K, url: AnyUrl | str | None) -> None:
        """Store a URL through the store's URL accessor.

        Strings are parsed first; one that is not a URL removes the slot.
        """
        slot = self.slot(key)
        if url is None:
            self._store.remove_value(slot)
            return
        if isinstance(url, str):
            try:
                url = parse_url(url)
            except ValidationError as e:
                self._report(FailureKind.INVALID_URL, slot, e)
                self._store.remove_value(slot)
                return
        if not isinstance(url, AnyUrl):
            raise UnsupportedValueError(url, "expected a URL")
        self._store.set_url(slot, url)

    def url[U: AnyUrl](self, key: K, url_type: type[U] = AnyUrl) -> U | None:
        """Return the slot as a ``url_type``, or None."""
        slot = self.slot(key)
        url = self._store.get_url(slot)
        if url is None:
            return None
        result = downcast_url(url, url_type)
        if result is MISMATCH:
            self._report(FailureKind.TYPE_MISMATCH, slot)
            return None
        return result

    # ------------------------------------------------------------------ #
    #  Enum raw values                                                   #
    # ------------------------------------------------------------------ #
    def set_enum(self, key: K, member: Enum | None) -> None:
        """Store ``member.value``."""
        if member is None:
            self._write(self.slot(key), None)
            return
        if not isinstance(member, Enum):
            raise UnsupportedValueError(member, "expected an Enum member")
        self.set_value(key, member.value)

    def enum[E: Enum](self, key: K, enum_type: type[E]) -> E | None:
        """Rebuild an ``enum_type`` member from the stored raw value.

        The raw value must have the type of the members' values, so an
        ``IntEnum`` does not accept a stored ``True`` or ``2.0``.
        """
        slot = self.slot(key)
        raw = self._store.get_value(slot)
        if raw is None:
            return None
        raw_types = {type(member.value) for member in enum_type}
        if len(raw_types) == 1 and raw_types <= set(SCALAR_TYPES):
            raw = downcast(raw, raw_types.pop())
            if raw is MISMATCH:
                self._report(FailureKind.TYPE_MISMATCH, slot)
                return None
        try:
            return enum_type(raw)
        except (ValueError, TypeError) as e:
            self._report(FailureKind.RAW_VALUE_UNMATCHED, slot, e)
            return None

    # ------------------------------------------------------------------ #
    #  Structured objects                                                #
    # ------------------------------------------------------------------ #
    def set_object(
        self,
        key: K,
        obj: Any,
        coding: CodingType = CodingType.PLIST,
        object_type: Any = None,
    ) -> None:
        """Serialize ``obj`` and store the bytes.

        An object that cannot be encoded removes the slot instead.
        """
        slot = self.slot(key)
        if obj is None:
            self._write(slot, None)
            return
        try:
            data = encode_object(obj, coding, object_type)
        except CODING_ERRORS as e:
            self._report(FailureKind.ENCODE_FAILED, slot, e)
            data = None
        self._write(slot, data)

    def object[T](
        self,
        key: K,
        object_type: type[T],
        coding: CodingType = CodingType.PLIST,
    ) -> T | None:
        """Decode the stored bytes as ``object_type``, or None."""
        slot = self.slot(key)
        data = self._store.get_value(slot)
        if data is None:
            return None
        if not isinstance(data, bytes):
            self._report(FailureKind.TYPE_MISMATCH, slot)
            return None
        try:
            return decode_object(data, object_type, coding)
        except CODING_ERRORS as e:
            self._report(FailureKind.DECODE_FAILED, slot, e)
            return None

    # ------------------------------------------------------------------ #
    #  Clearing                                                          #
    # ------------------------------------------------------------------ #
    def clear(self, key: K) -> None:
        """Remove the slot for ``key`` whatever was stored in it."""
        self._write(self.slot(key), None)

    def clear_all(self) -> None:
        """Clear every key in the catalog's ``clear_keys``, one at a time."""
        keys = self._keys.clear_keys()
        for key in keys:
            self.clear(key)
        logger.debug(f"Cleared {len(keys)} {self._keys.__name__} keys under '{self._prefix}'")

    # ------------------------------------------------------------------ #
    def _write(self, slot: str, value: Any) -> None:
        if value is None:
            self._store.remove_value(slot)
        else:
            self._store.set_value(slot, value)

    def _report(self, kind: FailureKind, slot: str, error: Exception | None = None) -> None:
        failure = SettingsFailure(kind=kind, key=slot, error=error)
        logger.debug("Setting read/write recovered as absent: %s", failure.to_dict())
        if self._on_failure is not None:
            self._on_failure(failure)

    def __repr__(self) -> str:
        return f"<TypedSettings(keys={self._keys.__name__}, prefix='{self._prefix}', store={self._store!r})>"
