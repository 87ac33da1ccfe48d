"""Shared fixtures: in-memory database, test client and action helpers."""

import os

# Settings require DATABASE_URL at import time
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from vocabdecks.core.database import get_session
from vocabdecks.main import app


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def call(client):
    """Invoke an action as ``user`` (anonymous when None)."""

    def _call(action, payload=None, user="alice"):
        headers = {"X-User-Id": user} if user is not None else {}
        return client.post(f"/api/v1/actions/{action}", json=payload, headers=headers)

    return _call


@pytest.fixture
def make_deck(call):
    """Create a deck and return its data."""

    def _make_deck(user="alice", **fields):
        payload = {"title": "Travel", **fields}
        response = call("createDeck", payload, user=user)
        assert response.status_code == 200, response.text
        return response.json()["data"]["deck"]

    return _make_deck


@pytest.fixture
def make_card(call):
    """Upsert a new card into a deck and return its data."""

    def _make_card(deck_id, user="alice", **fields):
        payload = {"deckId": deck_id, "term": "book", "translation": "Buch", **fields}
        response = call("upsertCard", payload, user=user)
        assert response.status_code == 200, response.text
        return response.json()["data"]["card"]

    return _make_card
