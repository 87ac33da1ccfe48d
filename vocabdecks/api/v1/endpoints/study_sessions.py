"""
Study session actions.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from vocabdecks.core.database import get_session
from vocabdecks.core.security import get_request_context
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.base import ActionResponse
from vocabdecks.schemas.study_session import (
    CompleteStudySessionRequest,
    StartStudySessionRequest,
    StudySessionData,
    StudySessionResponse
)
from vocabdecks.services import study_session_service

router = APIRouter(prefix="/actions", tags=["study-sessions"])


@router.post("/startStudySession", response_model=ActionResponse[StudySessionData])
async def start_study_session(
    request: StartStudySessionRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """Start a study session on one of the signed-in user's decks."""
    study_session = study_session_service.start_study_session(session, context, request)
    return ActionResponse[StudySessionData](
        data=StudySessionData(session=StudySessionResponse.model_validate(study_session))
    )


@router.post("/completeStudySession", response_model=ActionResponse[StudySessionData])
async def complete_study_session(
    request: CompleteStudySessionRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """Complete one of the signed-in user's study sessions."""
    study_session = study_session_service.complete_study_session(session, context, request)
    return ActionResponse[StudySessionData](
        data=StudySessionData(session=StudySessionResponse.model_validate(study_session))
    )
