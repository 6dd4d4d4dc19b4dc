from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine

from hackboard.api.deps import get_clock
from hackboard.app import create_app
from hackboard.core import get_session, get_session_factory
from hackboard.models import Hackathon, HackathonParticipant, Profile

NOW = datetime(2025, 6, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def engine(tmp_path):
    db_engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False}
    )
    SQLModel.metadata.create_all(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def seeded(session):
    """Past, ongoing and two upcoming hackathons around ``NOW`` plus scores."""

    hackathons = [
        Hackathon(
            title="Spring Sprint",
            description="Past event",
            start_date=NOW - timedelta(days=30),
            end_date=NOW - timedelta(days=28),
            prize_money=500,
        ),
        Hackathon(
            title="June Jam",
            description="Running now",
            start_date=datetime(2025, 6, 1, tzinfo=timezone.utc),
            end_date=datetime(2025, 6, 3, tzinfo=timezone.utc),
            offerings=["swag", "mentoring"],
        ),
        Hackathon(
            title="Summer Build",
            description="Next up",
            start_date=NOW + timedelta(days=2, hours=3, minutes=14),
            end_date=NOW + timedelta(days=4),
        ),
        Hackathon(
            title="Autumn Hack",
            description="Later",
            start_date=NOW + timedelta(days=90),
            end_date=NOW + timedelta(days=92),
        ),
    ]
    session.add_all(hackathons)
    session.commit()
    for hackathon in hackathons:
        session.refresh(hackathon)

    june = hackathons[1]
    session.add_all(
        [
            Profile(user_id="u1", name="Ada"),
            Profile(user_id="u2", name="Grace"),
            Profile(user_id="u3", name=None),
            HackathonParticipant(hackathon_id=june.id, user_id="u1", score=50, time_spent=125, solved_problems=3),
            HackathonParticipant(hackathon_id=june.id, user_id="u2", score=80, time_spent=60, solved_problems=4),
            HackathonParticipant(hackathon_id=hackathons[0].id, user_id="u3", score=70, time_spent=None),
            HackathonParticipant(hackathon_id=hackathons[0].id, user_id="u4", score=None, time_spent=30),
        ]
    )
    session.commit()
    return hackathons


@pytest.fixture
def client(engine):
    app = create_app()

    def _session():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_session_factory] = lambda: (lambda: Session(engine))
    app.dependency_overrides[get_clock] = lambda: (lambda: NOW)
    return TestClient(app)
