"""SQLAlchemy ORM base and model registry."""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize a timestamp to aware UTC.

    SQLite hands back naive values for ``DateTime(timezone=True)`` columns;
    those are stored as UTC, so they are tagged rather than converted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Primary keys are 64-bit signed integers on every supported backend.
MAX_ROW_ID = 2**63 - 1


def is_row_id(value: int) -> bool:
    return 1 <= value <= MAX_ROW_ID
