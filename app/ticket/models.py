# app/ticket/models.py
from datetime import datetime, timedelta, timezone

from sqlalchemy import Boolean, Column, DateTime, String
from app.core.database import Base


def utcnow() -> datetime:
    # naive UTC, SQLite drops tzinfo on the way back anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(32), primary_key=True, index=True)
    description = Column(String, nullable=False)
    created = Column(DateTime, nullable=False)
    modified = Column(DateTime, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    def on_create(self) -> None:
        """Stamp both timestamps right before the first insert."""
        now = utcnow()
        self.created = now
        self.modified = now

    def on_update(self) -> None:
        """Stamp ``modified`` right before an update; ``created`` is left alone.

        ``modified`` always moves forward, even when the clock has not ticked
        since the previous write.
        """
        now = utcnow()
        if self.modified is not None and now <= self.modified:
            now = self.modified + timedelta(microseconds=1)
        self.modified = now

    def __repr__(self) -> str:
        return f"Ticket(id={self.id!r}, description={self.description!r}, completed={self.completed!r})"
