"""SQLite-backed preference store.

Each slot is a row in the ``preferences`` table. Values are kept as binary
property lists so booleans, numbers, bytes, timestamps and nested
lists/dicts come back with their Python types; URLs are kept as text under
their own kind so ``get_url`` can tell them apart.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import AnyUrl
from sqlalchemy import Engine, create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from config.paths import get_default_db_path
from prefkit.coding import CODING_ERRORS, dumps_plist, loads_plist
from prefkit.errors import StoreError
from prefkit.stores.base import KeyValueStore
from prefkit.stores.models import KIND_URL, KIND_VALUE, Base, Preference
from prefkit.values import parse_url

logger = logging.getLogger(__name__)


def create_sqlite_engine(db_path: Path) -> Engine:
    """Create an engine for ``db_path``, creating its directory if needed."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        pool_pre_ping=True,
        connect_args={
            "check_same_thread": False,  # Sessions are opened per call from any thread
            "timeout": 20,  # Seconds to wait on a locked database
        },
    )


class SQLiteStore(KeyValueStore):
    """Persistent store using SQLAlchemy over SQLite."""

    def __init__(self, db_path: Path | str | None = None, *, engine: Engine | None = None) -> None:
        """Open (and create if needed) the preference table.

        Args:
            db_path: Database file; defaults to the per-user data directory
            engine: Pre-built engine, takes precedence over ``db_path``

        """
        if engine is None:
            self.db_path = Path(db_path) if db_path is not None else get_default_db_path()
            engine = create_sqlite_engine(self.db_path)
        else:
            self.db_path = None
        self.engine = engine
        self._session_factory = sessionmaker(autoflush=False, bind=engine)
        Base.metadata.create_all(bind=engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Context manager for a committed-or-rolled-back session"""
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _write(self, key: str, kind: str, payload: bytes) -> None:
        with self.session() as db:
            db.merge(Preference(key=key, kind=kind, payload=payload))

    def set_value(self, key: str, value: Any) -> None:
        try:
            payload = dumps_plist(value)
        except CODING_ERRORS as e:
            raise StoreError(key, f"cannot store {type(value).__name__}: {e}") from e
        self._write(key, KIND_VALUE, payload)

    def set_url(self, key: str, url: AnyUrl) -> None:
        self._write(key, KIND_URL, str(url).encode("utf-8"))

    def remove_value(self, key: str) -> None:
        with self.session() as db:
            row = db.get(Preference, key)
            if row is not None:
                db.delete(row)

    def get_value(self, key: str) -> Any | None:
        with self.session() as db:
            row = db.get(Preference, key)
            if row is None:
                return None
            kind, payload = row.kind, row.payload

        try:
            if kind == KIND_URL:
                return parse_url(payload.decode("utf-8"))
            return loads_plist(payload)
        except CODING_ERRORS as e:
            logger.warning(f"Unreadable preference {key} ({kind}): {e}")
            return None

    def keys(self, prefix: str = "") -> list[str]:
        """Slot names starting with ``prefix``, sorted."""
        with self.session() as db:
            query = select(Preference.key).order_by(Preference.key)
            if prefix:
                query = query.where(Preference.key.startswith(prefix, autoescape=True))
            return list(db.scalars(query))

    def __repr__(self: SQLiteStore) -> str:
        return f"<SQLiteStore(url='{self.engine.url}')>"
