"""Hackathon lifecycle, calendar and live countdown endpoints."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    WebSocket,
    WebSocketDisconnect,
)
from fastapi.concurrency import run_in_threadpool
from sqlmodel import Session

from ...core import (
    COUNTDOWN_TICK_SECONDS,
    LEADERBOARD_LIMIT,
    LEADERBOARD_MAX_LIMIT,
    Clock,
    SessionFactory,
    get_session,
    get_session_factory,
)
from ...models import HackathonStatus
from ...services import store
from ...services.board import BoardSnapshot, HackathonBoard
from ...services.countdown import countdown_text
from ...services.hackathons import (
    calendar_day_to_dict,
    hackathon_to_dict,
    leaderboard_to_list,
    snapshot_to_dict,
)
from ...services.leaderboard import rank_participants
from ...services.lifecycle import (
    annotate,
    classify_all,
    filter_by_status,
    hackathons_on_date,
    month_calendar,
    nearest_upcoming,
)
from ..deps import get_clock, require_viewer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hackathons"], dependencies=[Depends(require_viewer)])


@router.get("/hackathons")
def list_hackathons(
    status: Optional[HackathonStatus] = None,
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> List[Dict[str, Any]]:
    """List hackathons with their current phase, earliest start first."""

    classified = classify_all(store.list_hackathons(session), clock())
    if status is not None:
        classified = filter_by_status(classified, status)
    return [hackathon_to_dict(hackathon) for hackathon in classified]


@router.get("/hackathons/nearest")
def get_nearest_hackathon(
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    """Next hackathon to start and the time left until it does."""

    now = clock()
    nearest = nearest_upcoming(classify_all(store.list_hackathons(session), now))
    return {
        "hackathon": hackathon_to_dict(nearest),
        "countdown": countdown_text(nearest, now),
    }


@router.get("/hackathons/calendar")
def get_month_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    """Annotate every day cell of a month with the hackathon running on it."""

    classified = classify_all(store.list_hackathons(session), clock())
    return {
        "year": year,
        "month": month,
        "days": [calendar_day_to_dict(cell) for cell in month_calendar(classified, year, month)],
    }


@router.get("/hackathons/calendar/{day}")
def get_calendar_day(
    day: date,
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    """Hackathon shown on ``day``, plus every other one overlapping it."""

    classified = classify_all(store.list_hackathons(session), clock())
    return {
        "date": day.isoformat(),
        "hackathon": hackathon_to_dict(annotate(classified, day)),
        "overlapping": [
            hackathon_to_dict(hackathon) for hackathon in hackathons_on_date(classified, day)
        ],
    }


@router.get("/hackathons/{hackathon_id}")
def get_hackathon(
    hackathon_id: int,
    session: Session = Depends(get_session),
    clock: Clock = Depends(get_clock),
) -> Dict[str, Any]:
    """Get a specific hackathon by ID."""

    hackathon = store.get_hackathon(session, hackathon_id)
    if not hackathon:
        raise HTTPException(404, "Hackathon not found")
    return hackathon_to_dict(classify_all([hackathon], clock())[0])


@router.get("/hackathons/{hackathon_id}/leaderboard")
def get_hackathon_leaderboard(
    hackathon_id: int,
    limit: int = Query(LEADERBOARD_LIMIT, ge=1, le=LEADERBOARD_MAX_LIMIT),
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """Leaderboard restricted to one hackathon's participants."""

    if not store.get_hackathon(session, hackathon_id):
        raise HTTPException(404, "Hackathon not found")
    records = store.list_participants(session, limit, hackathon_id=hackathon_id)
    return {
        "hackathon_id": hackathon_id,
        "entries": leaderboard_to_list(rank_participants(records, limit)),
    }


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    with contextlib.suppress(WebSocketDisconnect):
        while True:
            await websocket.receive_text()


@router.websocket("/hackathons/countdown")
async def countdown_stream(
    websocket: WebSocket,
    session_factory: SessionFactory = Depends(get_session_factory),
    clock: Clock = Depends(get_clock),
) -> None:
    """Push the next-hackathon countdown on load and on every tick."""

    await websocket.accept()

    def _hackathons():
        with session_factory() as session:
            return store.list_hackathons(session)

    def _participants():
        with session_factory() as session:
            return store.list_participants(session, LEADERBOARD_LIMIT)

    updates: "asyncio.Queue[BoardSnapshot]" = asyncio.Queue()
    board = HackathonBoard(
        lambda: run_in_threadpool(_hackathons),
        lambda: run_in_threadpool(_participants),
        clock=clock,
        tick_seconds=COUNTDOWN_TICK_SECONDS,
        listener=updates.put_nowait,
    )

    async with board:
        disconnected = asyncio.create_task(_wait_for_disconnect(websocket))
        try:
            while True:
                next_update = asyncio.create_task(updates.get())
                done, _ = await asyncio.wait(
                    {next_update, disconnected}, return_when=asyncio.FIRST_COMPLETED
                )
                if next_update not in done:
                    next_update.cancel()
                    break
                snapshot = next_update.result()
                if snapshot.hackathons_loaded:
                    await websocket.send_json(snapshot_to_dict(snapshot))
        except WebSocketDisconnect:
            logger.debug("Countdown client disconnected mid-send")
        finally:
            disconnected.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await disconnected
    logger.debug("Countdown stream closed")


__all__ = ["router"]
