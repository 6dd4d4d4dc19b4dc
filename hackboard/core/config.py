"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_positive_int(name: str, default: int) -> int:
    value = _env_int(name, default)
    if value <= 0:
        raise RuntimeError(f"{name} must be greater than zero")
    return value


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'hackboard.db'}"
DB_RESET = _env_bool("DB_RESET", False)


# Application security -------------------------------------------------------
SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-secret")

# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)

COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN") or None
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

# The auth layer writes ``uid`` into the session; engine routes only check it.
HACKATHONS_REQUIRE_SESSION = _env_bool("HACKATHONS_REQUIRE_SESSION", False)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

COUNTDOWN_TICK_SECONDS = _env_positive_int("COUNTDOWN_TICK_SECONDS", 60)
COUNTDOWN_PLACEHOLDER = os.getenv("COUNTDOWN_PLACEHOLDER", "N/A")
COUNTDOWN_STARTING = os.getenv("COUNTDOWN_STARTING", "Starting now")

LEADERBOARD_LIMIT = _env_positive_int("LEADERBOARD_LIMIT", 10)
LEADERBOARD_MAX_LIMIT = _env_positive_int("LEADERBOARD_MAX_LIMIT", 100)
ANONYMOUS_NAME = os.getenv("ANONYMOUS_NAME", "Anonymous")

LEADERBOARD_SCOPES = ("global", "hackathon")
LEADERBOARD_SCOPE = os.getenv("LEADERBOARD_SCOPE", "global").strip().lower()
if LEADERBOARD_SCOPE not in LEADERBOARD_SCOPES:
    raise RuntimeError(
        f"LEADERBOARD_SCOPE must be one of {', '.join(LEADERBOARD_SCOPES)}"
    )


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "ANONYMOUS_NAME",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "COUNTDOWN_PLACEHOLDER",
    "COUNTDOWN_STARTING",
    "COUNTDOWN_TICK_SECONDS",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "HACKATHONS_REQUIRE_SESSION",
    "LEADERBOARD_LIMIT",
    "LEADERBOARD_MAX_LIMIT",
    "LEADERBOARD_SCOPE",
    "LEADERBOARD_SCOPES",
    "LOG_LEVEL",
    "SECRET_KEY",
]
