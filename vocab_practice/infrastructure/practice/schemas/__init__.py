from .practice_schemas import (
    CategoriesResponse,
    Difficulty,
    DifficultiesResponse,
    PracticeSettingsResponse,
    SessionResponse,
    TranslationCheckRequest,
    TranslationCheckResponse,
    Word,
    WordChallenge,
    WordChallengesResponse,
    WordCountResponse,
    WordsResponse,
)

__all__ = [
    "CategoriesResponse",
    "DifficultiesResponse",
    "Difficulty",
    "PracticeSettingsResponse",
    "SessionResponse",
    "TranslationCheckRequest",
    "TranslationCheckResponse",
    "Word",
    "WordChallenge",
    "WordChallengesResponse",
    "WordCountResponse",
    "WordsResponse",
]
