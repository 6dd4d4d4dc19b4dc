"""Leaderboard input and output shapes."""

from __future__ import annotations

from typing import Optional

from sqlmodel import SQLModel


class ParticipantRecord(SQLModel):
    """Participant row joined with its profile display name."""

    id: Optional[int] = None
    user_id: Optional[str] = None
    hackathon_id: Optional[int] = None
    score: Optional[float] = None
    time_spent: Optional[int] = None
    solved_problems: Optional[int] = None
    profile_name: Optional[str] = None


class LeaderboardEntry(SQLModel):
    """Ranked, display-ready projection of one participant record."""

    rank: int
    user_name: str
    score: float
    solved_problems: int
    time_spent_display: str


__all__ = ["LeaderboardEntry", "ParticipantRecord"]
