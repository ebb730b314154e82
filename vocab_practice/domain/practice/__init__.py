"""Practice module domain layer."""

from .entities import Category, PracticeSession, Word
from .services import RandomWordPicker, TranslationChecker
from .value_objects import CategoryName, Difficulty, TranslationMode

__all__ = [
    "Category",
    "CategoryName",
    "Difficulty",
    "PracticeSession",
    "RandomWordPicker",
    "TranslationChecker",
    "TranslationMode",
    "Word",
]
