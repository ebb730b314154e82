from . import sessions, settings, translations, vocabulary, words

__all__ = ["sessions", "settings", "translations", "vocabulary", "words"]
