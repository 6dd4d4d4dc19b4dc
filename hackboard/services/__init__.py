"""Service layer helpers."""

from .board import BoardSnapshot, HackathonBoard
from .countdown import countdown_text, format_remaining
from .hackathons import hackathon_to_dict, snapshot_to_dict
from .leaderboard import format_time_spent, rank_participants
from .lifecycle import (
    CalendarDay,
    annotate,
    classify,
    classify_all,
    filter_by_status,
    hackathons_on_date,
    month_calendar,
    nearest_upcoming,
)

__all__ = [
    "BoardSnapshot",
    "CalendarDay",
    "HackathonBoard",
    "annotate",
    "classify",
    "classify_all",
    "countdown_text",
    "filter_by_status",
    "format_remaining",
    "format_time_spent",
    "hackathon_to_dict",
    "hackathons_on_date",
    "month_calendar",
    "nearest_upcoming",
    "rank_participants",
    "snapshot_to_dict",
]
