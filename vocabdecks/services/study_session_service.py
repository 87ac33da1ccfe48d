"""
Study session service.
"""
import logging
from sqlmodel import Session, select
from typing import Optional

from vocabdecks.core.database import save
from vocabdecks.core.exceptions import NotFoundError
from vocabdecks.core.security import require_user
from vocabdecks.models import StudySession
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.study_session import CompleteStudySessionRequest, StartStudySessionRequest
from vocabdecks.services.deck_service import get_deck_for_user
from vocabdecks.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


def get_study_session_for_user(
    session: Session,
    study_session_id: int,
    user_id: str
) -> Optional[StudySession]:
    """Return the study session with this id if it belongs to ``user_id``."""
    return session.exec(
        select(StudySession).where(
            StudySession.id == study_session_id,
            StudySession.user_id == user_id
        )
    ).first()


def start_study_session(
    session: Session,
    context: RequestContext,
    request: StartStudySessionRequest
) -> StudySession:
    """Open a study session on a deck owned by the signed-in user."""
    user = require_user(context)
    get_deck_for_user(session, request.deck_id, user.id)
    started_at = utcnow()

    study_session = StudySession(
        deck_id=request.deck_id,
        user_id=user.id,
        started_at=started_at,
        completed_at=None,
        total_cards_seen=0,
        correct_count=0,
        wrong_count=0,
        summary=None,
        created_at=started_at
    )
    save(session, study_session)

    logger.info(f"Started study session {study_session.id} on deck {request.deck_id} for user {user.id}")
    return study_session


def complete_study_session(
    session: Session,
    context: RequestContext,
    request: CompleteStudySessionRequest
) -> StudySession:
    """
    Record the outcome of a study session.

    Omitted counters and summary keep their stored values; ``completed_at``
    defaults to now. Sessions of other users are reported as not found.

    Raises:
        NotFoundError: If the caller has no study session with this id
    """
    user = require_user(context)

    study_session = get_study_session_for_user(session, request.id, user.id)
    if not study_session:
        logger.warning(f"Study session {request.id} not found for user {user.id}")
        raise NotFoundError("Study session not found.")

    if request.total_cards_seen is not None:
        study_session.total_cards_seen = request.total_cards_seen
    if request.correct_count is not None:
        study_session.correct_count = request.correct_count
    if request.wrong_count is not None:
        study_session.wrong_count = request.wrong_count
    if request.summary is not None:
        study_session.summary = request.summary
    study_session.completed_at = request.completed_at if request.completed_at is not None else utcnow()
    save(session, study_session)

    logger.info(
        f"Completed study session {study_session.id}: "
        f"{study_session.correct_count} correct, {study_session.wrong_count} wrong "
        f"of {study_session.total_cards_seen} seen"
    )
    return study_session
