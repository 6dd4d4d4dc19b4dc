"""Per-view hackathon board: one fetch, a countdown ticker, clean teardown.

A board belongs to a single consumer (a page view or a WebSocket
connection). It loads hackathons and participants once, keeps the derived
state in an immutable :class:`BoardSnapshot`, and re-derives that snapshot
on each tick of the countdown. Everything runs on the event loop that
called :meth:`HackathonBoard.start`, so no locking is needed.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Tuple

from sqlmodel import SQLModel

from ..core.config import COUNTDOWN_PLACEHOLDER, COUNTDOWN_TICK_SECONDS, LEADERBOARD_LIMIT
from ..core.time import Clock, utcnow
from ..models import HackathonRead, LeaderboardEntry, ParticipantRecord
from .countdown import countdown_text, seconds_until
from .leaderboard import rank_participants
from .lifecycle import classify_all, nearest_upcoming

logger = logging.getLogger(__name__)

HackathonFetcher = Callable[[], Awaitable[Sequence[SQLModel]]]
ParticipantFetcher = Callable[[], Awaitable[Sequence[ParticipantRecord]]]
SnapshotListener = Callable[["BoardSnapshot"], None]


@dataclass(frozen=True)
class BoardSnapshot:
    """Derived board state at ``computed_at``."""

    hackathons: Tuple[HackathonRead, ...] = ()
    leaderboard: Tuple[LeaderboardEntry, ...] = ()
    nearest: Optional[HackathonRead] = None
    countdown: str = COUNTDOWN_PLACEHOLDER
    computed_at: Optional[datetime] = None
    hackathons_loaded: bool = False
    participants_loaded: bool = False


class HackathonBoard:
    """Owns the hackathon and leaderboard state for one view."""

    def __init__(
        self,
        fetch_hackathons: HackathonFetcher,
        fetch_participants: ParticipantFetcher,
        *,
        clock: Clock = utcnow,
        tick_seconds: float = COUNTDOWN_TICK_SECONDS,
        leaderboard_limit: int = LEADERBOARD_LIMIT,
        listener: Optional[SnapshotListener] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self._fetch_hackathons = fetch_hackathons
        self._fetch_participants = fetch_participants
        self._clock = clock
        self._tick_seconds = tick_seconds
        self._leaderboard_limit = leaderboard_limit
        self._listener = listener
        self._log = log or logger

        self._raw_hackathons: Tuple[SQLModel, ...] = ()
        self._snapshot = BoardSnapshot()
        self._fetch_tasks: List[asyncio.Task] = []
        self._ticker: Optional[asyncio.Task] = None
        self._started = False
        self._closed = False

    @property
    def snapshot(self) -> BoardSnapshot:
        return self._snapshot

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def ticking(self) -> bool:
        return self._ticker is not None and not self._ticker.done()

    async def __aenter__(self) -> "HackathonBoard":
        self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def start(self) -> None:
        """Issue both fetches and start the ticker. Only the first call counts."""

        if self._started or self._closed:
            return
        self._started = True
        self._fetch_tasks = [
            asyncio.create_task(self._load_hackathons()),
            asyncio.create_task(self._load_participants()),
        ]
        self._ticker = asyncio.create_task(self._run_ticker())

    async def wait_loaded(self) -> BoardSnapshot:
        """Wait for both fetches to settle and return the resulting snapshot."""

        if self._fetch_tasks:
            await asyncio.gather(*self._fetch_tasks, return_exceptions=True)
        return self._snapshot

    async def close(self) -> None:
        """Stop the ticker and drop any fetch still in flight."""

        if self._closed:
            return
        self._closed = True
        tasks = [task for task in (*self._fetch_tasks, self._ticker) if task is not None]
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._log.debug("Hackathon board closed")

    def tick(self) -> BoardSnapshot:
        """Re-derive phases, next event and countdown against the clock.

        A no-op until the hackathon fetch has completed, and after close.
        """

        if self._closed or not self._snapshot.hackathons_loaded:
            return self._snapshot
        self._publish(self._derive(self._snapshot))
        return self._snapshot

    # Fetch handling ---------------------------------------------------------

    async def _load_hackathons(self) -> None:
        records = await self._fetch("hackathons", self._fetch_hackathons)
        if self._closed:
            return
        self._raw_hackathons = tuple(records)
        self._publish(self._derive(replace(self._snapshot, hackathons_loaded=True)))

    async def _load_participants(self) -> None:
        records = await self._fetch("leaderboard", self._fetch_participants)
        if self._closed:
            return
        leaderboard = tuple(rank_participants(records, self._leaderboard_limit))
        self._publish(
            replace(self._snapshot, leaderboard=leaderboard, participants_loaded=True)
        )

    async def _fetch(self, label: str, fetcher: Callable[[], Awaitable[Sequence[Any]]]):
        try:
            return list(await fetcher())
        except asyncio.CancelledError:
            raise
        except Exception:
            self._log.exception("Error fetching %s", label)
            return []

    # Derivation -------------------------------------------------------------

    def _derive(self, base: BoardSnapshot) -> BoardSnapshot:
        now = self._clock()
        hackathons = tuple(classify_all(self._raw_hackathons, now))
        nearest = nearest_upcoming(hackathons)
        return replace(
            base,
            hackathons=hackathons,
            nearest=nearest,
            countdown=countdown_text(nearest, now),
            computed_at=now,
        )

    def _publish(self, snapshot: BoardSnapshot) -> None:
        self._snapshot = snapshot
        if self._listener is None:
            return
        try:
            self._listener(snapshot)
        except Exception:
            self._log.exception("Board listener failed")

    # Ticker -----------------------------------------------------------------

    def _next_delay(self) -> float:
        nearest = self._snapshot.nearest
        if nearest is None:
            return self._tick_seconds
        until_start = seconds_until(nearest.start_date, self._clock())
        if 0 < until_start < self._tick_seconds:
            return until_start
        return self._tick_seconds

    async def _run_ticker(self) -> None:
        while not self._closed:
            await asyncio.sleep(self._next_delay())
            if self._closed:
                return
            if not self._snapshot.hackathons_loaded:
                continue
            self.tick()
            if self._snapshot.nearest is None:
                self._log.debug("No upcoming hackathon left; countdown stopped")
                return


__all__ = ["BoardSnapshot", "HackathonBoard"]
