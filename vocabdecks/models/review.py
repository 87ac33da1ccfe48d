"""
Review model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, DateTime, String as SAString
from vocabdecks.models.enums import ReviewRating
from vocabdecks.utils.time_utils import utcnow

if TYPE_CHECKING:
    from vocabdecks.models.card import Card
    from vocabdecks.models.study_session import StudySession


class Review(SQLModel, table=True):
    """Review table - append-only spaced repetition log, one row per card rating."""
    __tablename__ = "vocab_review"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="vocab_deck.id", index=True)
    card_id: int = Field(foreign_key="vocab_card.id", index=True)
    user_id: Optional[str] = Field(default=None, index=True)
    session_id: Optional[int] = Field(default=None, foreign_key="vocab_study_session.id")
    rating: ReviewRating = Field(
        default=ReviewRating.GOOD,
        sa_column=Column(SAString, nullable=False, default=ReviewRating.GOOD.value)
    )
    reviewed_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    # Scheduling fields are supplied by the client and stored verbatim
    due_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    interval_days: int = Field(default=0)
    ease_factor: Optional[float] = None

    # Relationships
    card: "Card" = Relationship(back_populates="reviews")
    study_session: Optional["StudySession"] = Relationship(back_populates="reviews")
