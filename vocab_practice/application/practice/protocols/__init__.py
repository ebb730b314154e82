from .session_repository import SessionRepositoryProtocol
from .word_repository import WordFilters, WordRepositoryProtocol

__all__ = ["SessionRepositoryProtocol", "WordFilters", "WordRepositoryProtocol"]
