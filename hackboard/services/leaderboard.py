"""Leaderboard ranking and formatting."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..core.config import ANONYMOUS_NAME, LEADERBOARD_LIMIT
from ..models import LeaderboardEntry, ParticipantRecord


def format_time_spent(minutes: Optional[int]) -> str:
    """Format raw minutes as ``"Xh Ym"``; missing counts as zero."""

    total = int(minutes or 0)
    return f"{total // 60}h {total % 60}m"


def rank_participants(
    records: Iterable[ParticipantRecord], limit: int = LEADERBOARD_LIMIT
) -> List[LeaderboardEntry]:
    """Order records by score and number them 1..limit.

    Equal scores keep their input order and still get distinct ranks
    (1, 2, 3, 4 rather than 1, 1, 3, 4).
    """

    if limit <= 0:
        return []

    ordered = sorted(records, key=lambda record: record.score or 0, reverse=True)

    entries: List[LeaderboardEntry] = []
    for position, record in enumerate(ordered[:limit], start=1):
        entries.append(
            LeaderboardEntry(
                rank=position,
                user_name=record.profile_name or ANONYMOUS_NAME,
                score=record.score or 0,
                solved_problems=record.solved_problems or 0,
                time_spent_display=format_time_spent(record.time_spent),
            )
        )
    return entries


__all__ = ["format_time_spent", "rank_participants"]
