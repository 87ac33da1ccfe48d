"""Tests for deck actions and the deck ownership check."""

from datetime import datetime, timedelta

import pytest

from vocabdecks.core.exceptions import AuthorizationError, NotFoundError
from vocabdecks.models import Deck
from vocabdecks.services.deck_service import get_deck_for_user


def parse_timestamp(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestCreateDeck:
    def test_defaults(self, call):
        response = call("createDeck", {"title": "Travel"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        deck = body["data"]["deck"]
        assert deck["ownerId"] == "alice"
        assert deck["title"] == "Travel"
        assert deck["description"] is None
        assert deck["fromLanguage"] == "en"
        assert deck["toLanguage"] == "en"
        assert deck["level"] == "mixed"
        assert deck["isActive"] is True
        assert deck["createdAt"] == deck["updatedAt"]

    def test_timestamps_are_utc(self, call):
        deck = call("createDeck", {"title": "Travel"}).json()["data"]["deck"]

        for key in ("createdAt", "updatedAt"):
            assert parse_timestamp(deck[key]).utcoffset() == timedelta(0)

    def test_all_fields(self, call):
        payload = {
            "title": "JLPT N5 Verbs",
            "description": "Core verbs",
            "fromLanguage": "en",
            "toLanguage": "ja",
            "level": "A1",
            "tags": "verbs,jlpt",
            "isActive": False,
        }
        deck = call("createDeck", payload).json()["data"]["deck"]

        for key, value in payload.items():
            assert deck[key] == value

    def test_owner_id_in_payload_is_ignored(self, call):
        deck = call("createDeck", {"title": "Travel", "ownerId": "mallory"}).json()["data"]["deck"]
        assert deck["ownerId"] == "alice"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"title": ""},
            {"title": "Travel", "level": "D1"},
            {"title": "Travel", "isActive": "maybe"},
            {"title": "Travel", "description": None},
            {"title": "Travel", "level": None},
        ],
    )
    def test_invalid_input(self, call, payload):
        response = call("createDeck", payload)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "BAD_REQUEST"


class TestUpdateDeck:
    def test_updates_only_supplied_fields(self, call, make_deck):
        deck = make_deck(description="Before", level="B1", tags="travel")

        response = call("updateDeck", {"id": deck["id"], "title": "Trips", "isActive": False})

        assert response.status_code == 200
        updated = response.json()["data"]["deck"]
        assert updated["title"] == "Trips"
        assert updated["isActive"] is False
        assert updated["description"] == "Before"
        assert updated["level"] == "B1"
        assert updated["tags"] == "travel"
        assert updated["ownerId"] == "alice"
        assert updated["createdAt"] == deck["createdAt"]

    def test_updated_at_strictly_increases(self, call, make_deck):
        deck = make_deck()
        previous = parse_timestamp(deck["updatedAt"])

        for title in ("One", "Two", "Three"):
            updated = call("updateDeck", {"id": deck["id"], "title": title}).json()["data"]["deck"]
            current = parse_timestamp(updated["updatedAt"])
            assert current > previous
            previous = current

    def test_other_user_is_forbidden(self, call, make_deck):
        deck = make_deck(user="alice")

        response = call("updateDeck", {"id": deck["id"], "title": "Mine now"}, user="bob")

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"

    def test_unknown_deck(self, call):
        response = call("updateDeck", {"id": 999, "title": "Ghost"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_no_fields(self, call, make_deck):
        deck = make_deck()

        response = call("updateDeck", {"id": deck["id"]})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert error["message"] == "At least one field must be provided to update."

    def test_no_fields_wins_over_missing_deck(self, call):
        response = call("updateDeck", {"id": 12345}, user="bob")
        assert response.json()["error"]["code"] == "INVALID_ARGUMENT"

    @pytest.mark.parametrize("field", ["title", "description", "tags", "isActive"])
    def test_null_field_is_rejected(self, call, make_deck, field):
        deck = make_deck(tags="travel")

        response = call("updateDeck", {"id": deck["id"], field: None})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "BAD_REQUEST"
        listed = call("listDecks", {}).json()["data"]["items"]
        assert listed[0]["tags"] == "travel"

    @pytest.mark.parametrize("deck_id", [0, 2**31, 2**70])
    def test_out_of_range_id_is_rejected(self, call, deck_id):
        response = call("updateDeck", {"id": deck_id, "title": "Ghost"})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_empty_title_is_rejected(self, call, make_deck):
        deck = make_deck()
        response = call("updateDeck", {"id": deck["id"], "title": ""})
        assert response.status_code == 422


class TestListDecks:
    def test_only_active_by_default(self, call, make_deck):
        active = make_deck(title="Active")
        make_deck(title="Retired", isActive=False)

        response = call("listDecks", {})

        data = response.json()["data"]
        assert data["total"] == 1
        assert [d["id"] for d in data["items"]] == [active["id"]]

    def test_include_inactive(self, call, make_deck):
        make_deck(title="Active")
        make_deck(title="Retired", isActive=False)

        data = call("listDecks", {"includeInactive": True}).json()["data"]

        assert data["total"] == 2
        assert {d["isActive"] for d in data["items"]} == {True, False}

    def test_body_is_optional(self, call, make_deck):
        make_deck()

        response = call("listDecks")

        assert response.status_code == 200
        assert response.json()["data"]["total"] == 1

    def test_only_own_decks(self, call, make_deck):
        make_deck(user="alice", title="Alice's")
        make_deck(user="bob", title="Bob's")

        data = call("listDecks", user="bob").json()["data"]

        assert [d["title"] for d in data["items"]] == ["Bob's"]

    def test_soft_disabled_deck_drops_out_of_list(self, call, make_deck):
        deck = make_deck()
        call("updateDeck", {"id": deck["id"], "isActive": False})

        assert call("listDecks").json()["data"]["total"] == 0
        assert call("listDecks", {"includeInactive": True}).json()["data"]["total"] == 1


class TestGetDeckForUser:
    def test_returns_owned_deck(self, session):
        deck = Deck(owner_id="alice", title="Travel")
        session.add(deck)
        session.commit()

        assert get_deck_for_user(session, deck.id, "alice").title == "Travel"

    def test_missing_deck(self, session):
        with pytest.raises(NotFoundError):
            get_deck_for_user(session, 42, "alice")

    def test_foreign_deck(self, session):
        deck = Deck(owner_id="alice", title="Travel")
        session.add(deck)
        session.commit()

        with pytest.raises(AuthorizationError):
            get_deck_for_user(session, deck.id, "bob")
