"""
Application constants.

Practice defaults and the names of the public operations. The operation names
are used as the ``operation`` key in use-case log events.
"""

from types import MappingProxyType
from typing import Final


class DEFAULTS:
    """Default and boundary values for practice sessions."""

    WORD_LIMIT: Final = 50
    TIME_LIMIT: Final = 300  # seconds
    MAX_WORD_LIMIT: Final = 150
    MIN_WORD_LIMIT: Final = 1


DIFFICULTY_LABELS: Final = MappingProxyType({1: "Easy", 2: "Medium", 3: "Hard"})


class OPERATIONS:
    """Public operation names."""

    GET_RANDOM_WORD: Final = "getRandomWord"
    GET_RANDOM_WORDS: Final = "getRandomWords"
    GET_ALL_WORDS: Final = "getAllWords"
    GET_CATEGORIES: Final = "getCategories"
    GET_DIFFICULTIES: Final = "getDifficulties"
    GET_WORD_COUNT: Final = "getWordCount"
    CHECK_TRANSLATION: Final = "checkTranslation"
    RESET_SESSION: Final = "resetSession"
