"""Time helpers shared by the pure rules.

Invariants:
    - Naive datetimes are treated as UTC (SQLite drops tzinfo on read)
"""

from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
