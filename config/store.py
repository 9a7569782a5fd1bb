"""Preference store configuration."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.paths import get_default_db_path, get_project_root


class StoreConfig(BaseSettings):
    """Which backend to open and where it lives."""

    backend: Literal["sqlite", "memory"] = Field("sqlite", alias="PREFKIT_BACKEND")
    db_path: Path | None = Field(None, alias="PREFKIT_DB_PATH")
    prefix: str = Field("", alias="PREFKIT_PREFIX")

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def resolved_db_path(self) -> Path:
        """Configured database path, or the per-user default."""
        if self.db_path is not None:
            return self.db_path.expanduser()
        return get_default_db_path()
