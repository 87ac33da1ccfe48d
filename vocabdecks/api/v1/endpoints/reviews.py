"""
Review actions.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from vocabdecks.core.database import get_session
from vocabdecks.core.security import get_request_context
from vocabdecks.schemas.auth import RequestContext
from vocabdecks.schemas.base import ActionResponse
from vocabdecks.schemas.review import LogReviewRequest, ReviewData, ReviewResponse
from vocabdecks.services import review_service

router = APIRouter(prefix="/actions", tags=["reviews"])


@router.post("/logReview", response_model=ActionResponse[ReviewData])
async def log_review(
    request: LogReviewRequest,
    context: RequestContext = Depends(get_request_context),
    session: Session = Depends(get_session)
):
    """Append a review of a card to the signed-in user's review log."""
    review = review_service.log_review(session, context, request)
    return ActionResponse[ReviewData](data=ReviewData(review=ReviewResponse.model_validate(review)))
