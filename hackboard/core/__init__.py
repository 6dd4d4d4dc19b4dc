"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    ANONYMOUS_NAME,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    COUNTDOWN_PLACEHOLDER,
    COUNTDOWN_STARTING,
    COUNTDOWN_TICK_SECONDS,
    DB_RESET,
    HACKATHONS_REQUIRE_SESSION,
    LEADERBOARD_LIMIT,
    LEADERBOARD_MAX_LIMIT,
    LEADERBOARD_SCOPE,
    LOG_LEVEL,
    SECRET_KEY,
)
from .database import SessionFactory, engine, get_session, get_session_factory
from .logging import configure_logging
from .time import Clock, as_utc, utc_date, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "ANONYMOUS_NAME",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "COUNTDOWN_PLACEHOLDER",
    "COUNTDOWN_STARTING",
    "COUNTDOWN_TICK_SECONDS",
    "DB_RESET",
    "HACKATHONS_REQUIRE_SESSION",
    "LEADERBOARD_LIMIT",
    "LEADERBOARD_MAX_LIMIT",
    "LEADERBOARD_SCOPE",
    "LOG_LEVEL",
    "SECRET_KEY",
    "Clock",
    "SessionFactory",
    "as_utc",
    "configure_logging",
    "engine",
    "get_session",
    "get_session_factory",
    "utc_date",
    "utcnow",
]
