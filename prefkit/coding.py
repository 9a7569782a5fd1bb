"""Structured-object encodings.

Objects are anything a pydantic ``TypeAdapter`` understands: models,
dataclasses, typed dicts, lists of those. Two encodings are offered and
they do not read each other's output:

- ``CodingType.JSON``: UTF-8 JSON produced by pydantic.
- ``CodingType.PLIST``: binary property list. Fields set to None are
  omitted, values with no property-list form (UUIDs, decimals, enums...)
  are stored in their JSON form. Naive timestamps are stored as they are;
  aware ones are stored in UTC next to their UTC offset and come back aware.
"""

from __future__ import annotations

import plistlib
from datetime import UTC, datetime, timedelta, timezone
from enum import Enum
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

# Everything the codecs below raise for unencodable or undecodable data.
# pydantic's ValidationError/PydanticSerializationError and plistlib's
# InvalidFileException are ValueError subclasses.
CODING_ERRORS: tuple[type[Exception], ...] = (ValueError, TypeError, OverflowError)


class CodingType(str, Enum):
    """Serialization used for structured objects."""

    JSON = "json"
    PLIST = "plist"


# Property-list dates carry no zone; an aware timestamp is written as a
# mapping with exactly these two keys.
DATE_KEY = "$datetime"
OFFSET_KEY = "$utcoffset"


def _pack_datetime(value: datetime) -> datetime | dict[str, Any]:
    offset = value.utcoffset()
    if offset is None:
        return value
    return {
        DATE_KEY: value.astimezone(UTC).replace(tzinfo=None),
        OFFSET_KEY: offset.total_seconds(),
    }


def _unpack_datetime(value: dict[str, Any]) -> datetime | None:
    if value.keys() != {DATE_KEY, OFFSET_KEY}:
        return None
    when, offset = value[DATE_KEY], value[OFFSET_KEY]
    if not isinstance(when, datetime) or not isinstance(offset, int | float):
        return None
    zone = UTC if offset == 0 else timezone(timedelta(seconds=offset))
    return when.replace(tzinfo=UTC).astimezone(zone)


def to_plist_value(value: Any) -> Any:
    """Map a plain Python structure onto property-list types."""
    if value is None:
        raise TypeError("property lists cannot hold None")
    if isinstance(value, datetime):
        return _pack_datetime(value)
    if isinstance(value, bool | int | float | str | bytes):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, dict):
        return {
            str(key): to_plist_value(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, list | tuple | set | frozenset):
        return [to_plist_value(item) for item in value]
    return to_plist_value(to_jsonable_python(value))


def from_plist_value(value: Any) -> Any:
    """Inverse of ``to_plist_value`` for timestamps: packed aware ones are restored."""
    if isinstance(value, dict):
        when = _unpack_datetime(value)
        if when is not None:
            return when
        return {key: from_plist_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [from_plist_value(item) for item in value]
    return value


def dumps_plist(value: Any) -> bytes:
    return plistlib.dumps(to_plist_value(value), fmt=plistlib.FMT_BINARY, sort_keys=False)


def loads_plist(data: bytes) -> Any:
    return from_plist_value(plistlib.loads(data, fmt=plistlib.FMT_BINARY))


def encode_object(
    obj: Any,
    coding: CodingType = CodingType.PLIST,
    object_type: Any = None,
) -> bytes:
    """Serialize ``obj``; raises one of CODING_ERRORS on failure.

    Args:
        obj: The object to serialize
        coding: Which encoding to produce
        object_type: Type to serialize as, defaults to ``type(obj)``

    """
    adapter = TypeAdapter(object_type if object_type is not None else type(obj))
    if coding is CodingType.JSON:
        return adapter.dump_json(obj)
    return dumps_plist(adapter.dump_python(obj, mode="python", exclude_none=True))


def decode_object[T](
    data: bytes,
    object_type: type[T],
    coding: CodingType = CodingType.PLIST,
) -> T:
    """Deserialize ``data`` as ``object_type``; raises one of CODING_ERRORS on failure."""
    adapter = TypeAdapter(object_type)
    if coding is CodingType.JSON:
        return adapter.validate_json(data)
    return adapter.validate_python(loads_plist(data))
