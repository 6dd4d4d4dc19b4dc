"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from ...core import LEADERBOARD_LIMIT, LEADERBOARD_MAX_LIMIT, LEADERBOARD_SCOPE, get_session
from ...services import store
from ...services.hackathons import leaderboard_to_list
from ...services.leaderboard import rank_participants
from ..deps import require_viewer

router = APIRouter(tags=["leaderboard"], dependencies=[Depends(require_viewer)])


@router.get("/leaderboard")
def get_leaderboard(
    limit: int = Query(LEADERBOARD_LIMIT, ge=1, le=LEADERBOARD_MAX_LIMIT),
    hackathon_id: Optional[int] = None,
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Top participants by score.

    In ``global`` scope the board spans every hackathon unless
    ``hackathon_id`` narrows it; in ``hackathon`` scope the id is required.
    """

    if LEADERBOARD_SCOPE == "hackathon" and hackathon_id is None:
        raise HTTPException(400, "hackathon_id is required")

    records = store.list_participants(session, limit, hackathon_id=hackathon_id)
    return {
        "scope": "hackathon" if hackathon_id is not None else "global",
        "hackathon_id": hackathon_id,
        "entries": leaderboard_to_list(rank_participants(records, limit)),
    }


__all__ = ["router"]
