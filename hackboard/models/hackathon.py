"""Database and read models for hackathon events."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field as ORMField, SQLModel


class HackathonStatus(str, Enum):
    """Lifecycle phase derived from an event's start/end against the clock."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


class HackathonBase(SQLModel):
    title: str
    description: str = ""
    start_date: datetime
    end_date: datetime
    banner_image_url: Optional[str] = None
    organization_image_url: Optional[str] = None
    prize_money: Optional[float] = None


class Hackathon(HackathonBase, table=True):
    """Hackathon event as stored; the lifecycle phase is never persisted."""

    __tablename__ = "hackathons"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    start_date: datetime = ORMField(index=True)
    offerings: Optional[List[str]] = ORMField(default=None, sa_column=Column(JSON))


class HackathonRead(HackathonBase):
    """Hackathon annotated with its derived lifecycle phase."""

    id: Optional[int] = None
    offerings: Optional[List[str]] = None
    status: HackathonStatus = HackathonStatus.UPCOMING


__all__ = ["Hackathon", "HackathonBase", "HackathonRead", "HackathonStatus"]
