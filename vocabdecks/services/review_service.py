"""
Review service: append-only log of card ratings.

No scheduling happens here. ``due_at``, ``interval_days`` and ``ease_factor``
are computed by the client and stored as received.
"""
import logging
from sqlmodel import Session, select

from vocabdecks.core.database import save
from vocabdecks.core.exceptions import AuthorizationError, NotFoundError
from vocabdecks.core.security import require_user
from vocabdecks.models import Card, Review, ReviewRating
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.review import LogReviewRequest
from vocabdecks.services.deck_service import get_deck_for_user
from vocabdecks.services.study_session_service import get_study_session_for_user
from vocabdecks.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


def log_review(
    session: Session,
    context: RequestContext,
    request: LogReviewRequest
) -> Review:
    """
    Insert a review for a card of a deck owned by the signed-in user.

    Raises:
        NotFoundError: If the card does not belong to the deck
        AuthorizationError: If ``session_id`` is not one of the caller's study sessions
    """
    user = require_user(context)
    get_deck_for_user(session, request.deck_id, user.id)

    card = session.exec(
        select(Card).where(
            Card.id == request.card_id,
            Card.deck_id == request.deck_id
        )
    ).first()
    if not card:
        logger.warning(f"Card {request.card_id} not found in deck {request.deck_id}")
        raise NotFoundError("Card not found for this deck.")

    if request.session_id is not None:
        study_session = get_study_session_for_user(session, request.session_id, user.id)
        if not study_session:
            logger.warning(f"User {user.id} cannot log reviews to study session {request.session_id}")
            raise AuthorizationError("Session not found or not accessible.")

    review = Review(
        deck_id=request.deck_id,
        card_id=request.card_id,
        user_id=user.id,
        session_id=request.session_id,
        rating=ReviewRating(request.rating).value,
        reviewed_at=request.reviewed_at if request.reviewed_at is not None else utcnow(),
        due_at=request.due_at,
        interval_days=request.interval_days if request.interval_days is not None else 0,
        ease_factor=request.ease_factor
    )
    save(session, review)

    logger.info(f"Logged '{review.rating}' review {review.id} for card {card.id} (user {user.id})")
    return review
