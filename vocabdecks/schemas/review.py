"""
Review schemas.
"""
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from vocabdecks.models.enums import ReviewRating
from vocabdecks.schemas.base import MAX_INT, CamelModel
from vocabdecks.utils.time_utils import to_utc


class ReviewResponse(CamelModel):
    """Review response schema."""
    id: int
    deck_id: int
    card_id: int
    user_id: Optional[str] = None
    session_id: Optional[int] = None
    rating: ReviewRating = ReviewRating.GOOD
    reviewed_at: datetime
    due_at: Optional[datetime] = None
    interval_days: int = 0
    ease_factor: Optional[float] = None

    @field_validator("reviewed_at", "due_at")
    @classmethod
    def as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)


class LogReviewRequest(CamelModel):
    """
    Request to log a card review.

    ``due_at``, ``interval_days`` and ``ease_factor`` come from the client's
    scheduler and are stored as given.
    """
    deck_id: int = Field(..., ge=1, le=MAX_INT)
    card_id: int = Field(..., ge=1, le=MAX_INT)
    session_id: Optional[int] = Field(None, ge=1, le=MAX_INT)
    rating: ReviewRating = Field(ReviewRating.GOOD, description="again, hard, good or easy")
    reviewed_at: Optional[datetime] = Field(None, description="Review time (default: now)")
    due_at: Optional[datetime] = None
    interval_days: Optional[int] = Field(None, ge=0, le=MAX_INT)
    ease_factor: Optional[float] = None

    @field_validator("reviewed_at", "due_at")
    @classmethod
    def normalize_datetimes(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)


class ReviewData(CamelModel):
    review: ReviewResponse
