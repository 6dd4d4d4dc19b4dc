"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...core import (
    ANONYMOUS_NAME,
    COUNTDOWN_PLACEHOLDER,
    COUNTDOWN_TICK_SECONDS,
    LEADERBOARD_LIMIT,
    LEADERBOARD_MAX_LIMIT,
    LEADERBOARD_SCOPE,
)

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "countdown_tick_seconds": COUNTDOWN_TICK_SECONDS,
        "countdown_placeholder": COUNTDOWN_PLACEHOLDER,
        "leaderboard_limit": LEADERBOARD_LIMIT,
        "leaderboard_max_limit": LEADERBOARD_MAX_LIMIT,
        "leaderboard_scope": LEADERBOARD_SCOPE,
        "anonymous_name": ANONYMOUS_NAME,
    }


__all__ = ["router"]
