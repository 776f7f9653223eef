"""Key-Value Entry ORM — one row per stored key.

Invariants:
    - key is the primary key; writes are upserts
    - value holds the serialized text exactly as the containers produced it
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from countnotes.db.base import Base


class KeyValueEntry(Base):
    """Stored value for a single key."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
