from .check_translation_use_case import CheckTranslationUseCase
from .get_all_words_use_case import GetAllWordsUseCase
from .get_categories_use_case import GetCategoriesUseCase
from .get_difficulties_use_case import GetDifficultiesUseCase
from .get_random_word_use_case import GetRandomWordUseCase
from .get_random_words_use_case import GetRandomWordsUseCase
from .get_word_count_use_case import GetWordCountUseCase
from .reset_session_use_case import ResetSessionUseCase

__all__ = [
    "CheckTranslationUseCase",
    "GetAllWordsUseCase",
    "GetCategoriesUseCase",
    "GetDifficultiesUseCase",
    "GetRandomWordUseCase",
    "GetRandomWordsUseCase",
    "GetWordCountUseCase",
    "ResetSessionUseCase",
]
