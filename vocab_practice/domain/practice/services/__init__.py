from .random_word_picker import RandomWordPicker
from .translation_checker import TranslationCheck, TranslationChecker

__all__ = ["RandomWordPicker", "TranslationCheck", "TranslationChecker"]
