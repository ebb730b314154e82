"""
Word entity for translation practice.
"""

from dataclasses import dataclass

from vocab_practice.domain.common.entity import Entity
from vocab_practice.domain.common.errors import ValidationError
from vocab_practice.domain.common.value_objects import CategoryId, WordId
from vocab_practice.domain.practice.value_objects import Difficulty, TranslationMode


@dataclass(eq=False)
class Word(Entity[WordId]):
    """
    Polish/English word pair.

    Business Rules:
    - Neither side of the pair can be empty
    - A word always belongs to exactly one category
    """

    id: WordId
    polish: str
    english: str
    category_id: CategoryId
    category_name: str
    difficulty: Difficulty

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.polish or not self.polish.strip():
            raise ValidationError.empty_field("polish")
        if not self.english or not self.english.strip():
            raise ValidationError.empty_field("english")

    def word_to_translate(self, mode: TranslationMode) -> str:
        """Side of the pair shown to the learner."""
        return self.english if mode.is_from_english else self.polish

    def correct_translation(self, mode: TranslationMode) -> str:
        """Side of the pair the learner must type."""
        return self.polish if mode.is_from_english else self.english
