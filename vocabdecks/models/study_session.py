"""
Study session model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Any, Dict, Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, DateTime, JSON
from vocabdecks.utils.time_utils import utcnow

if TYPE_CHECKING:
    from vocabdecks.models.deck import Deck
    from vocabdecks.models.review import Review


class StudySession(SQLModel, table=True):
    """StudySession table - one practice run against a deck."""
    __tablename__ = "vocab_study_session"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="vocab_deck.id", index=True)
    user_id: Optional[str] = Field(default=None, index=True)  # Null for anonymous sessions
    started_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    total_cards_seen: int = Field(default=0)
    correct_count: int = Field(default=0)
    wrong_count: int = Field(default=0)
    summary: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    # Relationships
    deck: "Deck" = Relationship(back_populates="study_sessions")
    reviews: List["Review"] = Relationship(back_populates="study_session")
