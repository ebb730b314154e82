from .category_name import CategoryName
from .difficulty import Difficulty
from .translation_mode import TranslationMode

__all__ = ["CategoryName", "Difficulty", "TranslationMode"]
