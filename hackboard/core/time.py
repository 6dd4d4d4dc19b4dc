"""Clock helpers shared by models and the lifecycle engine."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Union

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_date(value: Union[date, datetime]) -> date:
    """Calendar day of ``value`` in UTC; plain dates pass through."""

    if isinstance(value, datetime):
        return as_utc(value).date()
    return value


__all__ = ["Clock", "as_utc", "utc_date", "utcnow"]
