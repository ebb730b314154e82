"""
In-memory repositories.

Used with ``STORAGE_BACKEND=memory`` for local development and as test doubles.
State lives in the process; each instance is independent.
"""

import copy
import threading
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from vocab_practice.application.practice.protocols import WordFilters
from vocab_practice.domain.common.value_objects import SessionId, WordId
from vocab_practice.domain.practice import Category, Difficulty, PracticeSession, Word


class InMemoryWordRepository:
    """Read-only word store backed by a list."""

    def __init__(self, words: Iterable[Word] = (), categories: Iterable[Category] = ()) -> None:
        self._words = sorted(words, key=lambda word: word.id.value)
        by_id = {category.id: category for category in categories}
        for word in self._words:
            by_id.setdefault(
                word.category_id, Category(id=word.category_id, name=word.category_name)
            )
        self._categories = list(by_id.values())

    def find_all(self) -> list[Word]:
        return list(self._words)

    def find_by_id(self, word_id: WordId) -> Word | None:
        return next((word for word in self._words if word.id == word_id), None)

    def find_by_filters(self, filters: WordFilters) -> list[Word]:
        return [word for word in self._words if self._matches(word, filters)]

    def count(self, filters: WordFilters | None = None) -> int:
        if filters is None:
            return len(self._words)
        return len(self.find_by_filters(filters))

    def get_categories(self) -> list[Category]:
        return sorted(self._categories, key=lambda category: category.name)

    def get_difficulties(self) -> list[Difficulty]:
        return sorted({word.difficulty for word in self._words})

    def _matches(self, word: Word, filters: WordFilters) -> bool:
        if filters.category is not None and word.category_name != filters.category.value:
            return False
        return filters.difficulty is None or word.difficulty == filters.difficulty


class InMemorySessionRepository:
    """
    Session store backed by a dict guarded by a lock.

    Entities are copied in and out so callers never share mutable state with
    the store. The lock covers single calls only; a read-modify-write cycle
    across ``find_or_create`` and ``save`` is not atomic.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, PracticeSession] = {}
        self._lock = threading.Lock()

    def find_by_id(self, session_id: SessionId) -> PracticeSession | None:
        with self._lock:
            session = self._sessions.get(session_id.value)
            return copy.deepcopy(session) if session else None

    def find_or_create(self, session_id: SessionId) -> PracticeSession:
        with self._lock:
            session = self._sessions.get(session_id.value)
            if session is None:
                session = PracticeSession.create(session_id)
                self._sessions[session_id.value] = session
            return copy.deepcopy(session)

    def save(self, session: PracticeSession) -> PracticeSession:
        with self._lock:
            existing = self._sessions.get(session.id.value)
            stored = copy.deepcopy(session)
            if existing is not None:
                stored.created_at = existing.created_at
            self._sessions[session.id.value] = stored
            return copy.deepcopy(stored)

    def delete_expired(self, max_age_seconds: int) -> int:
        cutoff = datetime.now(UTC) - timedelta(seconds=max_age_seconds)
        with self._lock:
            expired = [
                key
                for key, session in self._sessions.items()
                if session.last_accessed_at < cutoff
            ]
            for key in expired:
                del self._sessions[key]
            return len(expired)

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
