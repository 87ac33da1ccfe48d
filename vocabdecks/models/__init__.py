"""
Models package - imports all models so they register with SQLModel.metadata.
"""
# Import enums first
from vocabdecks.models.enums import DeckLevel, ReviewRating

# Import all models
from vocabdecks.models.deck import Deck
from vocabdecks.models.card import Card
from vocabdecks.models.study_session import StudySession
from vocabdecks.models.review import Review

__all__ = [
    'DeckLevel',
    'ReviewRating',
    'Deck',
    'Card',
    'StudySession',
    'Review',
]
