"""Timestamp helpers.

SQL providers hand back naive datetimes for values stored in UTC; the memory
provider keeps them aware. Comparisons go through ``as_utc``.
"""

from datetime import UTC, datetime


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
