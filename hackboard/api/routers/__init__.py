"""Aggregate API routers."""

from fastapi import APIRouter

from .hackathons import router as hackathons_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    hackathons_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
