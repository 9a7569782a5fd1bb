"""
Filesystem locations used by the preference stores.
"""

import os
import platform
from pathlib import Path

from config.project import get_project

APP_NAME = get_project().name
DEFAULT_DB_NAME = "preferences.db"


def get_user_data_dir() -> Path:
    """Get the per-user data directory for the application."""
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    # XDG Base Directory layout elsewhere
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_default_db_path() -> Path:
    """Location of the SQLite preference database when none is configured."""
    return get_user_data_dir() / DEFAULT_DB_NAME


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


__all__ = [
    "APP_NAME",
    "DEFAULT_DB_NAME",
    "get_default_db_path",
    "get_project_root",
    "get_user_data_dir",
]
