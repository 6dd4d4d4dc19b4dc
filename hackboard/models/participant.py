"""Database models for hackathon participants and their profiles."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class Profile(SQLModel, table=True):
    """Public profile; only the display name is read here."""

    __tablename__ = "profiles"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: str = ORMField(index=True, unique=True)
    name: Optional[str] = None


class HackathonParticipant(SQLModel, table=True):
    """Score and time tracked for one user."""

    __tablename__ = "hackathon_participants"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    hackathon_id: Optional[int] = ORMField(
        default=None, foreign_key="hackathons.id", index=True
    )
    user_id: str = ORMField(index=True)
    score: Optional[float] = ORMField(default=None, index=True)
    time_spent: Optional[int] = None
    solved_problems: Optional[int] = None


__all__ = ["HackathonParticipant", "Profile"]
