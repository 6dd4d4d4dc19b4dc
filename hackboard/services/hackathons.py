"""Serialisation helpers for hackathon projections."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.time import as_utc
from ..models import HackathonRead, LeaderboardEntry
from .board import BoardSnapshot
from .lifecycle import CalendarDay


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat().replace("+00:00", "Z")


def hackathon_to_dict(hackathon: Optional[HackathonRead]) -> Optional[Dict[str, Any]]:
    """Serialise a classified hackathon to an API-friendly dict."""

    if hackathon is None:
        return None
    return {
        "id": hackathon.id,
        "title": hackathon.title,
        "description": hackathon.description,
        "start_date": isoformat_utc(hackathon.start_date),
        "end_date": isoformat_utc(hackathon.end_date),
        "status": hackathon.status.value,
        "banner_image_url": hackathon.banner_image_url,
        "organization_image_url": hackathon.organization_image_url,
        "prize_money": hackathon.prize_money,
        "offerings": list(hackathon.offerings or []),
    }


def leaderboard_to_list(entries: List[LeaderboardEntry]) -> List[Dict[str, Any]]:
    return [entry.model_dump() for entry in entries]


def calendar_day_to_dict(cell: CalendarDay) -> Dict[str, Any]:
    hackathon = cell.hackathon
    return {
        "date": cell.day.isoformat(),
        "hackathon_id": hackathon.id if hackathon else None,
        "title": hackathon.title if hackathon else None,
    }


def snapshot_to_dict(snapshot: BoardSnapshot) -> Dict[str, Any]:
    """Payload pushed to live countdown subscribers."""

    return {
        "nearest": hackathon_to_dict(snapshot.nearest),
        "countdown": snapshot.countdown,
        "computed_at": isoformat_utc(snapshot.computed_at),
        "leaderboard": leaderboard_to_list(list(snapshot.leaderboard)),
    }


__all__ = [
    "calendar_day_to_dict",
    "hackathon_to_dict",
    "isoformat_utc",
    "leaderboard_to_list",
    "snapshot_to_dict",
]
