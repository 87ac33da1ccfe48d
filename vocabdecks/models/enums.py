"""
Model enums.
"""
from enum import Enum


class DeckLevel(str, Enum):
    """CEFR proficiency level of a deck, or mixed."""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"
    MIXED = "mixed"


class ReviewRating(str, Enum):
    """Recall quality reported for a card review (SM-2 style buttons)."""
    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"
