"""Human-readable countdown to the next hackathon."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.config import COUNTDOWN_PLACEHOLDER, COUNTDOWN_STARTING
from ..core.time import as_utc
from ..models import HackathonRead


def seconds_until(target: datetime, now: datetime) -> float:
    return (as_utc(target) - as_utc(now)).total_seconds()


def format_remaining(target: datetime, now: datetime) -> str:
    """Render the time left until ``target`` as ``"2d 3h 14m"``.

    Leading zero units are dropped. Nothing left renders as the
    "starting" text rather than a negative duration.
    """

    remaining = int(seconds_until(target, now))
    if remaining <= 0:
        return COUNTDOWN_STARTING
    if remaining < 60:
        return "<1m"

    days, remainder = divmod(remaining, 86_400)
    hours, remainder = divmod(remainder, 3_600)
    minutes = remainder // 60

    parts = []
    if days:
        parts.append(f"{days}d")
    if days or hours:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")
    return " ".join(parts)


def countdown_text(nearest: Optional[HackathonRead], now: datetime) -> str:
    if nearest is None:
        return COUNTDOWN_PLACEHOLDER
    return format_remaining(nearest.start_date, now)


__all__ = ["countdown_text", "format_remaining", "seconds_until"]
