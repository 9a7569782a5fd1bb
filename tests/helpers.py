"""Test catalogs, enums and models shared across the suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, IntEnum, StrEnum
from uuid import UUID

from pydantic import BaseModel

from prefkit.keys import SettingKey


class AppKey(SettingKey):
    """Catalog used by most tests."""

    THEME = "theme"
    LAUNCH_COUNT = "launchCount"
    VOLUME = "volume"
    ONBOARDED = "onboarded"
    AVATAR = "avatar"
    LAST_SYNC = "lastSync"
    RECENT_SEARCHES = "recentSearches"
    HOMEPAGE = "homepage"
    APPEARANCE = "appearance"
    PROFILE = "profile"
    INSTALL_ID = "installId"

    @classmethod
    def clear_keys(cls) -> list[AppKey]:
        # INSTALL_ID survives a sign-out
        return [key for key in cls if key is not cls.INSTALL_ID]


class OtherKey(SettingKey):
    THEME = "theme"


class Appearance(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class Color(Enum):
    RED = "a"
    BLUE = "b"


class Address(BaseModel):
    city: str
    postcode: str | None = None


class Profile(BaseModel):
    user_id: UUID
    name: str
    tags: list[str] = []
    address: Address | None = None
    joined: datetime | None = None
    avatar: bytes | None = None


@dataclass
class WindowFrame:
    x: int
    y: int
    width: int
    height: int
    pinned: bool = False
    labels: dict[str, str] = field(default_factory=dict)


def sample_profile(name: str = "Ada", avatar: bytes | None = b"\x89PNG") -> Profile:
    return Profile(
        user_id=UUID("12345678-1234-5678-1234-567812345678"),
        name=name,
        tags=["admin", "beta"],
        address=Address(city="London"),
        joined=datetime(2024, 5, 17, 9, 30, tzinfo=UTC),
        avatar=avatar,
    )


class Stamp(BaseModel):
    label: str
    at: datetime
    history: list[datetime] = []
