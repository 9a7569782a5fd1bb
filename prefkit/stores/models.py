from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Index, LargeBinary, String
from sqlalchemy.orm import Mapped, declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

KIND_VALUE = "value"
KIND_URL = "url"


class Preference(Base):
    """One preference slot"""

    __tablename__ = "preferences"

    key: Mapped[str] = Column(String(512), primary_key=True)
    kind: Mapped[str] = Column(String(16), nullable=False, default=KIND_VALUE)
    payload: Mapped[bytes] = Column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = Column(
        DateTime, default=func.now(), onupdate=func.now(), nullable=False,
    )

    __table_args__ = (Index("idx_preferences_updated_at", "updated_at"),)

    def __repr__(self: Preference) -> str:
        return f"<Preference(key='{self.key}', kind='{self.kind}')>"
