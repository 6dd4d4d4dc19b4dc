"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Callable, Iterator

from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL

_connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    _connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)

SessionFactory = Callable[[], Session]


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


def get_session_factory() -> SessionFactory:
    """FastAPI dependency for callers that open one session per query.

    The countdown WebSocket fetches concurrently and must not share a single
    ``Session`` across threads.
    """

    return lambda: Session(engine)


__all__ = ["SessionFactory", "engine", "get_session", "get_session_factory"]
