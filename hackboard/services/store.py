"""Read-only queries against the hackathon tables.

Every query degrades to an empty result on a database error: the failure is
logged and the caller renders an empty board instead of an error page.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from ..models import Hackathon, HackathonParticipant, ParticipantRecord, Profile

logger = logging.getLogger(__name__)


def list_hackathons(session: Session) -> List[Hackathon]:
    """All hackathons, earliest start first."""

    try:
        return list(session.exec(select(Hackathon).order_by(Hackathon.start_date.asc())).all())
    except SQLAlchemyError:
        logger.exception("Error fetching hackathons")
        return []


def get_hackathon(session: Session, hackathon_id: int) -> Optional[Hackathon]:
    try:
        return session.get(Hackathon, hackathon_id)
    except SQLAlchemyError:
        logger.exception("Error fetching hackathon %s", hackathon_id)
        return None


def list_participants(
    session: Session, limit: int, hackathon_id: Optional[int] = None
) -> List[ParticipantRecord]:
    """Top ``limit`` participants by score, joined with their display names.

    A missing score sorts as zero, the same key the ranker uses.
    """

    query = (
        select(HackathonParticipant, Profile.name)
        .join(Profile, Profile.user_id == HackathonParticipant.user_id, isouter=True)
        .order_by(func.coalesce(HackathonParticipant.score, 0).desc(), HackathonParticipant.id.asc())
        .limit(limit)
    )
    if hackathon_id is not None:
        query = query.where(HackathonParticipant.hackathon_id == hackathon_id)

    try:
        rows = session.exec(query).all()
    except SQLAlchemyError:
        logger.exception("Error fetching leaderboard")
        return []

    return [
        ParticipantRecord(
            id=participant.id,
            user_id=participant.user_id,
            hackathon_id=participant.hackathon_id,
            score=participant.score,
            time_spent=participant.time_spent,
            solved_problems=participant.solved_problems,
            profile_name=profile_name,
        )
        for participant, profile_name in rows
    ]


__all__ = ["get_hackathon", "list_hackathons", "list_participants"]
