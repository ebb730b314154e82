from .category import Category
from .practice_session import PracticeSession
from .word import Word

__all__ = ["Category", "PracticeSession", "Word"]
