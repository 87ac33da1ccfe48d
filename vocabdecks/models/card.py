"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from vocabdecks.models.deck import Deck
    from vocabdecks.models.review import Review


class Card(SQLModel, table=True):
    """Card table - one term/translation entry within a deck."""
    __tablename__ = "vocab_card"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="vocab_deck.id", index=True)
    display_order: int = Field(default=0)  # Position within the deck

    # Core content
    term: str  # e.g. "book"
    translation: str  # e.g. "Buch"
    transliteration: Optional[str] = None  # e.g. for Japanese/Arabic
    part_of_speech: Optional[str] = None

    # Optional extra data
    gender: Optional[str] = None  # For languages with grammatical gender
    example_sentence: Optional[str] = None
    example_translation: Optional[str] = None

    # Pronunciation / audio
    phonetic: Optional[str] = None
    audio_url: Optional[str] = None

    tags: Optional[str] = None
    is_active: bool = Field(default=True)

    # Relationships
    deck: "Deck" = Relationship(back_populates="cards")
    reviews: List["Review"] = Relationship(back_populates="card")
