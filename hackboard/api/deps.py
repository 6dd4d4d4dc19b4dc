"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import HTTPException, WebSocketException, status
from starlette.requests import HTTPConnection

from ..core import HACKATHONS_REQUIRE_SESSION, Clock, utcnow


def get_clock() -> Clock:
    """Clock used to classify hackathons; overridden in tests."""

    return utcnow


def require_viewer(connection: HTTPConnection) -> None:
    """Gate hackathon pages behind the site session when configured.

    The auth layer stores the signed-in user's id as ``uid``. Checking it
    here keeps any storage query from running for an anonymous visitor.
    """

    if not HACKATHONS_REQUIRE_SESSION:
        return
    if connection.session.get("uid"):
        return
    if connection.scope["type"] == "websocket":
        raise WebSocketException(code=status.WS_1008_POLICY_VIOLATION)
    raise HTTPException(401, "Sign in to view hackathons")


__all__ = ["get_clock", "require_viewer"]
