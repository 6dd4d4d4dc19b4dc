"""Lifecycle classification, next-event selection and calendar lookups."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from sqlmodel import SQLModel

from ..core.time import as_utc, utc_date
from ..models import HackathonRead, HackathonStatus

DateLike = Union[date, datetime]


def classify(start: datetime, end: datetime, now: datetime) -> HackathonStatus:
    """Return the phase of an event spanning ``start``..``end`` at ``now``.

    Both boundaries count as ongoing. An ``end`` before ``start`` is not
    rejected; the comparisons below decide whatever they decide.
    """

    start, end, now = as_utc(start), as_utc(end), as_utc(now)
    if now < start:
        return HackathonStatus.UPCOMING
    if now > end:
        return HackathonStatus.PAST
    return HackathonStatus.ONGOING


def classify_all(hackathons: Iterable[SQLModel], now: datetime) -> List[HackathonRead]:
    """Annotate each record with its phase at ``now``, keeping input order.

    Any ``status`` already present on a record is overwritten.
    """

    classified: List[HackathonRead] = []
    for hackathon in hackathons:
        data = hackathon.model_dump()
        data["start_date"] = as_utc(hackathon.start_date)
        data["end_date"] = as_utc(hackathon.end_date)
        data["status"] = classify(hackathon.start_date, hackathon.end_date, now)
        classified.append(HackathonRead(**data))
    return classified


def filter_by_status(
    classified: Iterable[HackathonRead], status: HackathonStatus
) -> List[HackathonRead]:
    return [hackathon for hackathon in classified if hackathon.status == status]


def nearest_upcoming(classified: Sequence[HackathonRead]) -> Optional[HackathonRead]:
    """Upcoming event with the earliest start; ties go to the first seen."""

    nearest: Optional[HackathonRead] = None
    for hackathon in classified:
        if hackathon.status != HackathonStatus.UPCOMING:
            continue
        if nearest is None or as_utc(hackathon.start_date) < as_utc(nearest.start_date):
            nearest = hackathon
    return nearest


def _covers(hackathon: HackathonRead, day: date) -> bool:
    return utc_date(hackathon.start_date) <= day <= utc_date(hackathon.end_date)


def hackathons_on_date(
    hackathons: Iterable[HackathonRead], day: DateLike
) -> List[HackathonRead]:
    """Every hackathon whose start..end days include ``day``."""

    target = utc_date(day)
    return [hackathon for hackathon in hackathons if _covers(hackathon, target)]


def annotate(hackathons: Iterable[HackathonRead], day: DateLike) -> Optional[HackathonRead]:
    """First hackathon, in input order, running on ``day``.

    Only one event is surfaced per day; use :func:`hackathons_on_date` for
    the full set.
    """

    target = utc_date(day)
    for hackathon in hackathons:
        if _covers(hackathon, target):
            return hackathon
    return None


@dataclass(frozen=True)
class CalendarDay:
    day: date
    hackathon: Optional[HackathonRead] = None


def month_calendar(
    hackathons: Sequence[HackathonRead], year: int, month: int
) -> List[CalendarDay]:
    """One annotated cell per day of ``year``/``month``."""

    _, days_in_month = calendar.monthrange(year, month)
    cells: List[CalendarDay] = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        cells.append(CalendarDay(day=day, hackathon=annotate(hackathons, day)))
    return cells


__all__ = [
    "CalendarDay",
    "annotate",
    "classify",
    "classify_all",
    "filter_by_status",
    "hackathons_on_date",
    "month_calendar",
    "nearest_upcoming",
]
