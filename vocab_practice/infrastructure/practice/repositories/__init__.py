from .in_memory import InMemorySessionRepository, InMemoryWordRepository
from .session_repository import SessionRepository
from .word_repository import WordRepository

__all__ = [
    "InMemorySessionRepository",
    "InMemoryWordRepository",
    "SessionRepository",
    "WordRepository",
]
