"""Storable values and type-checked reads.

A storable value is one of ``bool``, ``str``, ``bytes``, ``datetime``,
``int``, ``float``, a ``list`` of storable values or a ``dict`` with ``str``
keys and storable values. These are the only values the primitive accessors
write verbatim.
"""

from __future__ import annotations

import types
from datetime import datetime
from pathlib import Path
from typing import Any, Union, get_args, get_origin

from pydantic import AnyUrl, TypeAdapter, ValidationError

from prefkit.errors import UnsupportedValueError

SCALAR_TYPES: tuple[type, ...] = (bool, str, bytes, datetime, int, float)

# Returned by the downcast helpers when a value does not fit the requested type.
MISMATCH = object()


def is_storable(value: object) -> bool:
    """Return True when ``value`` can be written through the primitive path."""
    if isinstance(value, SCALAR_TYPES):
        return True
    if isinstance(value, list):
        return all(is_storable(item) for item in value)
    if isinstance(value, dict):
        return all(
            isinstance(key, str) and is_storable(item) for key, item in value.items()
        )
    return False


def ensure_storable(value: object) -> None:
    """Raise UnsupportedValueError unless ``value`` is storable."""
    if not is_storable(value):
        raise UnsupportedValueError(
            value, "expected bool, str, bytes, datetime, int, float, list or dict"
        )


def downcast(value: Any, value_type: Any) -> Any:
    """Return ``value`` viewed as ``value_type`` or MISMATCH.

    ``bool`` never satisfies ``int``/``float`` and ``int`` widens to
    ``float``. Parametrised ``list[X]`` and ``dict[str, X]`` check every
    element. Unions try each member in order; ``None`` members never match.
    """
    if value_type is Any or value_type is object:
        return value

    origin = get_origin(value_type)
    if origin is Union or origin is types.UnionType:
        for member in get_args(value_type):
            # a stored value is never None
            if member is types.NoneType:
                continue
            result = downcast(value, member)
            if result is not MISMATCH:
                return result
        return MISMATCH

    if origin is list:
        if not isinstance(value, list):
            return MISMATCH
        (item_type,) = get_args(value_type) or (Any,)
        items = [downcast(item, item_type) for item in value]
        return MISMATCH if any(item is MISMATCH for item in items) else items

    if origin is dict:
        if not isinstance(value, dict):
            return MISMATCH
        key_type, item_type = get_args(value_type) or (str, Any)
        if key_type is not str:
            raise UnsupportedValueError(value_type, "mapping keys must be str")
        items = {key: downcast(item, item_type) for key, item in value.items()}
        return MISMATCH if any(item is MISMATCH for item in items.values()) else items

    if value_type in (list, dict):
        return value if isinstance(value, value_type) else MISMATCH

    if value_type is bool:
        return value if isinstance(value, bool) else MISMATCH
    if value_type is int:
        return value if isinstance(value, int) and not isinstance(value, bool) else MISMATCH
    if value_type is float:
        if isinstance(value, bool):
            return MISMATCH
        if isinstance(value, int):
            return float(value)
        return value if isinstance(value, float) else MISMATCH
    if value_type in (str, bytes, datetime):
        return value if isinstance(value, value_type) else MISMATCH

    raise UnsupportedValueError(value_type, "not a storable type")


def parse_url(value: str, url_type: type[AnyUrl] = AnyUrl) -> AnyUrl:
    """Validate ``value`` as ``url_type``; raises pydantic ValidationError."""
    return TypeAdapter(url_type).validate_python(value)


def downcast_url(url: AnyUrl, url_type: type[AnyUrl]) -> Any:
    """Return ``url`` as ``url_type`` or MISMATCH."""
    if type(url) is url_type:
        return url
    try:
        return parse_url(str(url), url_type)
    except ValidationError:
        return MISMATCH


def file_url(path: str) -> AnyUrl:
    """Build a file URL from a filesystem path, expanding ``~``."""
    return parse_url(Path(path).expanduser().absolute().as_uri())
