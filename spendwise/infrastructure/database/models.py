"""SQLAlchemy ORM models for the key-value state store."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StateRecordModel(Base):
    """One persisted state collection, stored whole as a JSON array."""

    __tablename__ = "state_records"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[list] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )
