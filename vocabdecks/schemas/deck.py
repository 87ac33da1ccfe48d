"""
Deck schemas.
"""
from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime
from vocabdecks.models.enums import DeckLevel
from vocabdecks.schemas.base import MAX_INT, CamelModel
from vocabdecks.utils.time_utils import to_utc


class DeckResponse(CamelModel):
    """Deck response schema."""
    id: int
    owner_id: str
    title: str
    description: Optional[str] = None
    from_language: str = "en"
    to_language: str = "en"
    level: DeckLevel = DeckLevel.MIXED
    tags: Optional[str] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        return to_utc(value)


# Optional request fields below may be omitted but not sent as null
class CreateDeckRequest(CamelModel):
    """Request schema for creating a deck. Omitted optional fields take table defaults."""
    title: str = Field(..., min_length=1, description="Deck title")
    description: str = None
    from_language: str = Field(None, description="Source language code (default 'en')")
    to_language: str = Field(None, description="Target language code (default 'en')")
    level: DeckLevel = Field(None, description="CEFR level or 'mixed' (default 'mixed')")
    tags: str = None
    is_active: bool = None

    class Config:
        json_schema_extra = {
            "example": {
                "title": "EN → DE Travel",
                "fromLanguage": "en",
                "toLanguage": "de",
                "level": "A2"
            }
        }


class UpdateDeckRequest(CamelModel):
    """Request schema for updating a deck. Only supplied fields are changed."""
    id: int = Field(..., ge=1, le=MAX_INT, description="Deck ID")
    title: str = Field(None, min_length=1)
    description: str = None
    from_language: str = None
    to_language: str = None
    level: DeckLevel = None
    tags: str = None
    is_active: bool = None

    def changes(self) -> dict:
        """Mutable fields present in the request."""
        return self.model_dump(exclude={"id"}, exclude_unset=True)


class ListDecksRequest(CamelModel):
    """Request schema for listing the caller's decks."""
    include_inactive: bool = False


class DeckData(CamelModel):
    deck: DeckResponse


class DeckListData(CamelModel):
    items: List[DeckResponse]
    total: int
