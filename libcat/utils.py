"""Datetime helpers."""

from datetime import UTC, datetime


def ensure_utc(value: datetime) -> datetime:
    """
    Return ``value`` as a timezone-aware UTC datetime.

    Naive datetimes are taken to already be in UTC. SQLite hands them back
    that way because it has no timezone support.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def ensure_utc_or_none(value: datetime | None) -> datetime | None:
    return ensure_utc(value) if value is not None else None
