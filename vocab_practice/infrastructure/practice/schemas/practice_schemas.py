"""Pydantic schemas for practice API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from vocab_practice.domain.practice import TranslationMode


class Word(BaseModel):
    """Schema for a stored word pair."""

    id: int
    polish: str
    english: str
    category_id: int
    difficulty: int = Field(..., ge=1, le=3)

    model_config = {"from_attributes": True}


class WordsResponse(BaseModel):
    """Schema for list of words response."""

    words: list[Word] = Field(..., description="All words ordered by id")


class WordChallenge(BaseModel):
    """Schema for a word served for translation. The expected answer is not included."""

    id: int
    word_to_translate: str
    category: str
    difficulty: int
    mode: TranslationMode

    model_config = {"from_attributes": True}


class WordChallengesResponse(BaseModel):
    """Schema for a batch of served words."""

    words: list[WordChallenge]
    count: int = Field(..., description="Number of words served")


class WordCountResponse(BaseModel):
    count: int = Field(..., ge=0)


class TranslationCheckRequest(BaseModel):
    """Schema for checking a learner's answer."""

    word_id: int = Field(..., description="ID of the word that was shown")
    user_translation: str = Field(..., description="Learner's answer")
    mode: TranslationMode = Field(..., description="Mode the word was shown in")


class TranslationCheckResponse(BaseModel):
    is_correct: bool
    correct_translation: str
    user_translation: str
    similarity: float = Field(
        ..., ge=0, le=1, description="Levenshtein ratio to the closest answer"
    )

    model_config = {"from_attributes": True}


class CategoriesResponse(BaseModel):
    categories: list[str] = Field(..., description="Category names in alphabetical order")


class Difficulty(BaseModel):
    value: int
    label: str

    model_config = {"from_attributes": True}


class DifficultiesResponse(BaseModel):
    difficulties: list[Difficulty]


class SessionResponse(BaseModel):
    """Schema for practice session state."""

    session_id: str
    used_word_ids: list[int]
    created_at: datetime
    last_accessed_at: datetime

    model_config = {"from_attributes": True}


class PracticeSettingsResponse(BaseModel):
    """Schema for the practice defaults exposed to clients."""

    word_limit: int
    min_word_limit: int
    max_word_limit: int
    time_limit: int = Field(..., description="Quiz time limit in seconds")
    difficulty_labels: dict[int, str]
