"""DTOs for practice use cases."""

from dataclasses import dataclass
from datetime import datetime

from vocab_practice.constants import DIFFICULTY_LABELS
from vocab_practice.domain.practice import Difficulty, PracticeSession, TranslationMode, Word


@dataclass(frozen=True)
class WordDTO:
    """Flat word record. Category is referenced by id only."""

    id: int
    polish: str
    english: str
    category_id: int
    difficulty: int

    @classmethod
    def from_entity(cls, word: Word) -> "WordDTO":
        return cls(
            id=word.id.value,
            polish=word.polish,
            english=word.english,
            category_id=word.category_id.value,
            difficulty=int(word.difficulty),
        )


@dataclass(frozen=True)
class WordChallengeDTO:
    """A word served for translation in a given mode."""

    id: int
    word_to_translate: str
    correct_translation: str
    category: str
    difficulty: int
    mode: TranslationMode

    @classmethod
    def from_entity(cls, word: Word, mode: TranslationMode) -> "WordChallengeDTO":
        return cls(
            id=word.id.value,
            word_to_translate=word.word_to_translate(mode),
            correct_translation=word.correct_translation(mode),
            category=word.category_name,
            difficulty=int(word.difficulty),
            mode=mode,
        )


@dataclass(frozen=True)
class TranslationResultDTO:
    is_correct: bool
    correct_translation: str
    user_translation: str
    similarity: float


@dataclass(frozen=True)
class DifficultyDTO:
    value: int
    label: str

    @classmethod
    def from_difficulty(cls, difficulty: Difficulty) -> "DifficultyDTO":
        return cls(value=int(difficulty), label=DIFFICULTY_LABELS[int(difficulty)])


@dataclass(frozen=True)
class SessionDTO:
    session_id: str
    used_word_ids: list[int]
    created_at: datetime
    last_accessed_at: datetime

    @classmethod
    def from_entity(cls, session: PracticeSession) -> "SessionDTO":
        return cls(
            session_id=session.id.value,
            used_word_ids=list(session.used_word_ids),
            created_at=session.created_at,
            last_accessed_at=session.last_accessed_at,
        )
