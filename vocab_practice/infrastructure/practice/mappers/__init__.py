from .category_mapper import CategoryMapper
from .session_mapper import SessionMapper
from .word_mapper import WordMapper

__all__ = ["CategoryMapper", "SessionMapper", "WordMapper"]
