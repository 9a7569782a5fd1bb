"""Configuration module - orchestrates all configuration components."""

import logging
from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.paths import get_project_root
from config.runtime import RuntimeConfig
from config.store import StoreConfig

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # Preference store
    store: StoreConfig = Field(default_factory=StoreConfig)

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@cache
def get_config() -> Config:
    """Get the global configuration instance."""
    config = Config()
    logger.debug("Loaded configuration: backend=%s", config.store.backend)
    return config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    get_config.cache_clear()


__all__ = ["Config", "RuntimeConfig", "StoreConfig", "clear_config_cache", "get_config"]
