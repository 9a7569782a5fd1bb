"""
Project metadata read from pyproject.toml.
"""

import tomllib
from dataclasses import dataclass
from functools import cache
from pathlib import Path

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


@dataclass(frozen=True)
class Project:
    """Name, version and description of the distribution."""

    name: str
    version: str
    description: str = ""


@cache
def get_project() -> Project:
    """
    Parse pyproject.toml once and return the project table.
    Missing fields fall back to placeholders so imports never fail.
    """
    if not PYPROJECT_PATH.exists():
        return Project(name="prefkit", version="0.0.0")

    with PYPROJECT_PATH.open("rb") as f:
        data = tomllib.load(f)

    project_data = data.get("project", {})
    return Project(
        name=project_data.get("name", "prefkit"),
        version=project_data.get("version", "0.0.0"),
        description=project_data.get("description", ""),
    )
