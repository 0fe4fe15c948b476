"""
SQLAlchemy 2.0 Models for StudyDesk.

Local storage is a flat key/value table: one row per collection, holding the
whole collection as a JSON document. Rows are overwritten, never patched.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from studydesk.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StorageEntry(Base):
    """A single serialized document stored under a fixed key."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)  # JSON text
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
