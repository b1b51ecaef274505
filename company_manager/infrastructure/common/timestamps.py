"""Timestamp helpers for ORM mapping."""

from datetime import UTC, datetime


def as_utc(value: datetime | None) -> datetime | None:
    """
    Attach UTC to naive datetimes read back from the store.

    SQLite drops the offset of `DateTime(timezone=True)` columns; every
    timestamp is written in UTC, so a naive value is UTC.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def as_utc_required(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
