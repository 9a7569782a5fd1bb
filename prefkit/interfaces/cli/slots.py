"""Raw slot commands: list, get, set and remove store entries by name."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import click
import clicycle
from pydantic import AnyUrl, ValidationError

from prefkit.stores import MemoryStore, SQLiteStore, open_store
from prefkit.values import parse_url

PREVIEW_LENGTH = 60
TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}


def describe(value: Any) -> tuple[str, str]:
    """Return a (type, preview) pair for display."""
    if isinstance(value, AnyUrl):
        return "url", str(value)
    if isinstance(value, bytes):
        return "bytes", f"<{len(value)} bytes>"
    if isinstance(value, datetime):
        return "datetime", value.isoformat()
    preview = repr(value)
    if len(preview) > PREVIEW_LENGTH:
        preview = preview[: PREVIEW_LENGTH - 3] + "..."
    return type(value).__name__, preview


def parse_input(raw: str, value_type: str) -> Any:
    """Convert command line text to a typed value; raises ValueError."""
    if value_type == "int":
        return int(raw)
    if value_type == "float":
        return float(raw)
    if value_type == "bool":
        word = raw.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {raw}")
    if value_type == "url":
        return parse_url(raw)
    return raw


def _store() -> SQLiteStore | MemoryStore:
    return open_store()


def list_slots(prefix: str = ""):
    """Show every slot, optionally limited to a prefix."""
    store = _store()
    names = store.keys(prefix)

    if not names:
        clicycle.warning("No preferences stored" + (f" under '{prefix}'" if prefix else ""))
        return

    clicycle.header(f"Preferences ({len(names)})")
    table_data = []
    for name in names:
        value_type, preview = describe(store.get_value(name))
        table_data.append({"Key": name, "Type": value_type, "Value": preview})
    clicycle.table(table_data)


def get_slot(key: str):
    """Show one slot."""
    value = _store().get_value(key)
    if value is None:
        clicycle.warning(f"{key}: not set")
        return
    value_type, preview = describe(value)
    clicycle.info(f"{key} ({value_type}): {preview}")


def set_slot(key: str, raw: str, value_type: str = "str"):
    """Write one slot from command line text."""
    try:
        value = parse_input(raw, value_type)
    except (ValueError, ValidationError) as e:
        clicycle.error(f"Invalid {value_type} value for {key}: {e}")
        raise click.Abort() from e

    store = _store()
    if isinstance(value, AnyUrl):
        store.set_url(key, value)
    else:
        store.set_value(key, value)
    clicycle.success(f"Set {key} ({value_type})")


def remove_slot(key: str):
    """Remove one slot."""
    store = _store()
    if store.get_value(key) is None:
        clicycle.warning(f"{key}: not set")
        return
    store.remove_value(key)
    clicycle.success(f"Removed {key}")
