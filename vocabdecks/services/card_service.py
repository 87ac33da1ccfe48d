"""
Card service for creating, updating and listing the cards of a deck.
"""
import logging
from sqlmodel import Session, select
from typing import List

from vocabdecks.core.database import save
from vocabdecks.core.exceptions import NotFoundError
from vocabdecks.core.security import require_user
from vocabdecks.models import Card
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.card import ListCardsRequest, UpsertCardRequest
from vocabdecks.services.deck_service import get_deck_for_user

logger = logging.getLogger(__name__)

# Written on every upsert: an omitted optional field clears the stored value
REPLACED_FIELDS = (
    "term",
    "translation",
    "transliteration",
    "part_of_speech",
    "gender",
    "example_sentence",
    "example_translation",
    "phonetic",
    "audio_url",
    "tags",
)


def upsert_card(
    session: Session,
    context: RequestContext,
    request: UpsertCardRequest
) -> Card:
    """
    Create a card, or replace an existing one when ``request.id`` is given.

    On update, ``display_order`` and ``is_active`` fall back to the stored
    values when omitted; the fields in ``REPLACED_FIELDS`` are always taken
    from the request.

    Raises:
        NotFoundError: If ``request.id`` does not name a card in ``request.deck_id``
    """
    user = require_user(context)
    get_deck_for_user(session, request.deck_id, user.id)

    content = {field: getattr(request, field) for field in REPLACED_FIELDS}

    if request.id is not None:
        card = session.exec(
            select(Card).where(
                Card.id == request.id,
                Card.deck_id == request.deck_id
            )
        ).first()

        if not card:
            logger.warning(f"Card {request.id} not found in deck {request.deck_id}")
            raise NotFoundError("Card not found.")

        if request.display_order is not None:
            card.display_order = request.display_order
        if request.is_active is not None:
            card.is_active = request.is_active
        for field, value in content.items():
            setattr(card, field, value)
        save(session, card)

        logger.info(f"Updated card {card.id} in deck {card.deck_id}")
        return card

    card = Card(
        deck_id=request.deck_id,
        display_order=request.display_order if request.display_order is not None else 0,
        is_active=request.is_active if request.is_active is not None else True,
        **content
    )
    save(session, card)

    logger.info(f"Created card {card.id} in deck {card.deck_id}")
    return card


def list_cards(
    session: Session,
    context: RequestContext,
    request: ListCardsRequest
) -> List[Card]:
    """List a deck's cards in display order, active ones only unless asked otherwise."""
    user = require_user(context)
    get_deck_for_user(session, request.deck_id, user.id)

    query = select(Card).where(Card.deck_id == request.deck_id)
    if not request.include_inactive:
        query = query.where(Card.is_active == True)  # noqa: E712
    query = query.order_by(Card.display_order, Card.id)  # type: ignore

    return list(session.exec(query).all())
