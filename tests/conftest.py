"""Shared fixtures for the leaderboard tests."""

from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from ranking_service.app import app
from ranking_service.core import get_session
from tests.factories import achievements, score


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(session):
    """A small window population with a few unlocked achievements."""

    session.add_all(
        [
            score("alice", 100, 10),
            score("bob", 100, 5),
            score("carol", 90, 1),
            score("dave", 80, 20),
            score("erin", 500, 1_000),
        ]
    )
    session.add_all(achievements("bob", 2) + achievements("alice", 1))
    session.commit()
    return session
