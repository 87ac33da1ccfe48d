"""
Study session schemas.
"""
from pydantic import Field, field_validator
from typing import Any, Dict, Optional
from datetime import datetime
from vocabdecks.schemas.base import MAX_INT, CamelModel
from vocabdecks.utils.time_utils import to_utc


class StudySessionResponse(CamelModel):
    """Study session response schema."""
    id: int
    deck_id: int
    user_id: Optional[str] = None
    started_at: datetime
    completed_at: Optional[datetime] = None
    total_cards_seen: int = 0
    correct_count: int = 0
    wrong_count: int = 0
    summary: Optional[Dict[str, Any]] = None
    created_at: datetime

    @field_validator("started_at", "completed_at", "created_at")
    @classmethod
    def as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)


class StartStudySessionRequest(CamelModel):
    """Request to start studying a deck."""
    deck_id: int = Field(..., ge=1, le=MAX_INT)


class CompleteStudySessionRequest(CamelModel):
    """Request to complete a study session. Omitted counters keep their stored values."""
    id: int = Field(..., ge=1, le=MAX_INT, description="Study session ID")
    total_cards_seen: Optional[int] = Field(None, ge=0, le=MAX_INT)
    correct_count: Optional[int] = Field(None, ge=0, le=MAX_INT)
    wrong_count: Optional[int] = Field(None, ge=0, le=MAX_INT)
    summary: Optional[Dict[str, Any]] = Field(None, description="Free-form session summary")
    completed_at: Optional[datetime] = Field(None, description="Completion time (default: now)")

    @field_validator("completed_at")
    @classmethod
    def normalize_completed_at(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)

    class Config:
        json_schema_extra = {
            "example": {
                "id": 42,
                "totalCardsSeen": 20,
                "correctCount": 17,
                "wrongCount": 3,
                "summary": {"hardest": ["Bahnhof"]}
            }
        }


class StudySessionData(CamelModel):
    session: StudySessionResponse
