"""
Shared test fixtures for injury-tracker.

Provides:
- db_session: In-memory SQLite session with all tables created
- client: FastAPI TestClient with DB dependency override
- episode / match factories for the pure computation tests
"""

import os

# Force sqlite for tests — must be set before any src imports.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["API_KEY"] = ""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.entities.base import Base
from src.entities.injury_episode import InjuryEpisode
from src.entities.match import Match

# Import ALL entity modules so Base.metadata.create_all() registers them.
import src.entities.injury_episode  # noqa: F401
import src.entities.match  # noqa: F401
import src.entities.user  # noqa: F401


@pytest.fixture
def db_session():
    """In-memory SQLite for unit tests. Never hits production DB."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    TestSession = sessionmaker(bind=engine)
    session = TestSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session: Session):
    """FastAPI TestClient with DB dependency overridden to use in-memory SQLite."""
    from fastapi.testclient import TestClient
    from src.core.database import get_db
    from src.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
    app.dependency_overrides.clear()


def make_episode(
    name="Player A",
    injury_date=None,
    recovery_date=None,
    status=None,
    injury_type="strain",
    **kwargs,
) -> InjuryEpisode:
    if status is None:
        status = "recovered" if recovery_date else "injured"
    return InjuryEpisode(
        name=name,
        injury_date=injury_date,
        recovery_date=recovery_date,
        status=status,
        injury_type=injury_type,
        **kwargs,
    )


def make_matches(*dates: date) -> list[Match]:
    return [Match(match_date=d) for d in dates]


@pytest.fixture
def episode_factory():
    return make_episode


@pytest.fixture
def matches_factory():
    return make_matches
