"""
Card schemas.
"""
from pydantic import Field
from typing import List, Optional
from vocabdecks.schemas.base import MAX_INT, CamelModel


class CardResponse(CamelModel):
    """Card response schema."""
    id: int
    deck_id: int
    display_order: int = 0
    term: str
    translation: str
    transliteration: Optional[str] = None
    part_of_speech: Optional[str] = None
    gender: Optional[str] = None
    example_sentence: Optional[str] = None
    example_translation: Optional[str] = None
    phonetic: Optional[str] = None
    audio_url: Optional[str] = None
    tags: Optional[str] = None
    is_active: bool = True


class UpsertCardRequest(CamelModel):
    """
    Request schema for creating or updating a card.

    Without ``id`` a new card is inserted. With ``id`` the card is replaced:
    ``display_order`` and ``is_active`` keep their stored values when omitted,
    every other descriptive field is overwritten (omitted means cleared).
    Optional fields may be omitted but not sent as null.
    """
    id: int = Field(None, ge=1, le=MAX_INT, description="Card ID to update; omit to create")
    deck_id: int = Field(..., ge=1, le=MAX_INT, description="Deck the card belongs to")
    display_order: int = Field(None, ge=-MAX_INT - 1, le=MAX_INT)
    term: str = Field(..., min_length=1, description="Term in the source language")
    translation: str = Field(..., min_length=1, description="Translation in the target language")
    transliteration: str = None
    part_of_speech: str = None
    gender: str = None
    example_sentence: str = None
    example_translation: str = None
    phonetic: str = None
    audio_url: str = None
    tags: str = None
    is_active: bool = None

    class Config:
        json_schema_extra = {
            "example": {
                "deckId": 1,
                "term": "book",
                "translation": "Buch",
                "partOfSpeech": "noun",
                "gender": "n"
            }
        }


class ListCardsRequest(CamelModel):
    """Request schema for listing the cards of a deck."""
    deck_id: int = Field(..., ge=1, le=MAX_INT)
    include_inactive: bool = False


class CardData(CamelModel):
    card: CardResponse


class CardListData(CamelModel):
    items: List[CardResponse]
    total: int
