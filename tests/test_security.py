"""Tests for the identity middleware and the signed-in user guard."""

import pytest

from vocabdecks.core.exceptions import AuthenticationError
from vocabdecks.core.security import identity_from_header, require_user
from vocabdecks.schemas.auth import Identity, RequestContext


class TestIdentityFromHeader:
    def test_missing_header(self):
        assert identity_from_header(None) is None

    def test_blank_header(self):
        assert identity_from_header("   ") is None

    def test_header_value_is_trimmed(self):
        assert identity_from_header(" user-1 ") == Identity(id="user-1")


class TestRequireUser:
    def test_returns_identity(self):
        context = RequestContext(user=Identity(id="alice"))
        assert require_user(context).id == "alice"

    def test_fails_closed_without_user(self):
        with pytest.raises(AuthenticationError) as exc_info:
            require_user(RequestContext())
        assert exc_info.value.code == "UNAUTHORIZED"


@pytest.mark.parametrize(
    "action, payload",
    [
        ("createDeck", {"title": "Travel"}),
        ("updateDeck", {"id": 1, "title": "Renamed"}),
        ("listDecks", None),
        ("upsertCard", {"deckId": 1, "term": "book", "translation": "Buch"}),
        ("listCards", {"deckId": 1}),
        ("startStudySession", {"deckId": 1}),
        ("completeStudySession", {"id": 1}),
        ("logReview", {"deckId": 1, "cardId": 1}),
    ],
)
def test_every_action_requires_a_user(call, action, payload):
    response = call(action, payload, user=None)

    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "UNAUTHORIZED"


def test_blank_identity_header_is_anonymous(call):
    response = call("createDeck", {"title": "Travel"}, user="  ")
    assert response.status_code == 401


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
