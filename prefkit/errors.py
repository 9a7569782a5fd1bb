"""Exception classes and failure reporting for prefkit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class PrefkitError(Exception):
    """Base exception for all prefkit errors."""


class UnsupportedValueError(PrefkitError, TypeError):
    """Raised when a value or requested type cannot live in a preference slot."""

    def __init__(self: UnsupportedValueError, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Unsupported setting value of type {type(value).__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedKeyError(PrefkitError, TypeError):
    """Raised when a key does not belong to the facade's catalog."""

    def __init__(self: UnsupportedKeyError, key: object, catalog: type) -> None:
        self.key = key
        self.catalog = catalog
        super().__init__(f"{key!r} is not a {catalog.__name__} key")


class StoreError(PrefkitError):
    """Raised when a backend cannot persist a value."""

    def __init__(self: StoreError, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"{key}: {message}")


class FailureKind(str, Enum):
    """Data-level failures that read or write as absent."""

    TYPE_MISMATCH = "type_mismatch"
    ENCODE_FAILED = "encode_failed"
    DECODE_FAILED = "decode_failed"
    RAW_VALUE_UNMATCHED = "raw_value_unmatched"
    INVALID_URL = "invalid_url"


@dataclass(frozen=True)
class SettingsFailure:
    """A silently recovered failure, handed to an optional callback."""

    kind: FailureKind
    key: str
    error: Exception | None = None

    def to_dict(self: SettingsFailure) -> dict:
        """Convert to dictionary for logging."""
        return {
            "kind": self.kind.value,
            "key": self.key,
            "error": repr(self.error) if self.error else None,
        }


FailureCallback = Callable[[SettingsFailure], None]
