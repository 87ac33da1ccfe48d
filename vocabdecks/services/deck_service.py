"""
Deck service for ownership checks and deck operations.
"""
import logging
from sqlmodel import Session, select
from typing import List

from vocabdecks.core.database import save
from vocabdecks.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from vocabdecks.core.security import require_user
from vocabdecks.models import Deck, DeckLevel
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.deck import CreateDeckRequest, ListDecksRequest, UpdateDeckRequest
from vocabdecks.utils.time_utils import next_timestamp, utcnow

logger = logging.getLogger(__name__)


def get_deck_for_user(
    session: Session,
    deck_id: int,
    user_id: str
) -> Deck:
    """
    Load a deck and verify that ``user_id`` owns it.

    Every operation on a deck's cards, study sessions or reviews goes through
    this check first.

    Raises:
        NotFoundError: If no deck has this id
        AuthorizationError: If the deck belongs to another user
    """
    deck = session.get(Deck, deck_id)
    if not deck:
        logger.warning(f"Deck {deck_id} not found (requested by user {user_id})")
        raise NotFoundError("Deck not found.")

    if deck.owner_id != user_id:
        logger.warning(f"User {user_id} denied access to deck {deck_id}")
        raise AuthorizationError("You do not have access to this deck.")

    return deck


def create_deck(
    session: Session,
    context: RequestContext,
    request: CreateDeckRequest
) -> Deck:
    """Create a deck owned by the signed-in user."""
    user = require_user(context)
    now = utcnow()

    deck = Deck(
        owner_id=user.id,
        title=request.title,
        description=request.description,
        from_language=request.from_language if request.from_language is not None else "en",
        to_language=request.to_language if request.to_language is not None else "en",
        level=request.level if request.level is not None else DeckLevel.MIXED.value,
        tags=request.tags,
        is_active=request.is_active if request.is_active is not None else True,
        created_at=now,
        updated_at=now
    )
    save(session, deck)

    logger.info(f"Created deck {deck.id} for user {user.id}")
    return deck


def update_deck(
    session: Session,
    context: RequestContext,
    request: UpdateDeckRequest
) -> Deck:
    """
    Update the supplied fields of a deck owned by the signed-in user.

    Fields that are absent (or null) keep their stored values. ``updated_at``
    always moves forward.

    Raises:
        ValidationError: If no mutable field is supplied
    """
    # Checked before anything else, like any other input constraint
    changes = request.changes()
    if not changes:
        raise ValidationError("At least one field must be provided to update.")

    user = require_user(context)
    deck = get_deck_for_user(session, request.id, user.id)

    for field, value in changes.items():
        setattr(deck, field, value)
    deck.updated_at = next_timestamp(deck.updated_at)
    save(session, deck)

    logger.info(f"Updated deck {deck.id} ({', '.join(sorted(changes))})")
    return deck


def list_decks(
    session: Session,
    context: RequestContext,
    request: ListDecksRequest
) -> List[Deck]:
    """List the signed-in user's decks, active ones only unless asked otherwise."""
    user = require_user(context)

    query = select(Deck).where(Deck.owner_id == user.id)
    if not request.include_inactive:
        query = query.where(Deck.is_active == True)  # noqa: E712

    return list(session.exec(query).all())
