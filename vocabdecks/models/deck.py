"""
Deck model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, DateTime, String as SAString
from vocabdecks.models.enums import DeckLevel
from vocabdecks.utils.time_utils import utcnow

if TYPE_CHECKING:
    from vocabdecks.models.card import Card
    from vocabdecks.models.study_session import StudySession


class Deck(SQLModel, table=True):
    """Deck table - a named vocabulary collection for a language pair, owned by one user."""
    __tablename__ = "vocab_deck"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(index=True)  # Set from the signed-in user on create, never changed
    title: str
    description: Optional[str] = None
    from_language: str = Field(default="en")  # Source language code
    to_language: str = Field(default="en")  # Target language code
    level: DeckLevel = Field(
        default=DeckLevel.MIXED,
        sa_column=Column(SAString, nullable=False, default=DeckLevel.MIXED.value)
    )  # CEFR level or 'mixed' - stored as string, converted to enum
    tags: Optional[str] = None
    is_active: bool = Field(default=True)  # Soft-disable flag; decks are never deleted
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    # Relationships
    cards: List["Card"] = Relationship(back_populates="deck")
    study_sessions: List["StudySession"] = Relationship(back_populates="deck")
