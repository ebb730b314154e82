"""
PracticeSession entity.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from vocab_practice.domain.common.entity import Entity
from vocab_practice.domain.common.value_objects import SessionId, WordId


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(eq=False)
class PracticeSession(Entity[SessionId]):
    """
    Tracks which words a learner has already been shown.

    Business Rules:
    - used_word_ids keeps insertion order and never holds duplicates
    - used_word_ids only grows until reset() clears it
    - created_at never changes; every mutation bumps last_accessed_at
    """

    id: SessionId
    used_word_ids: list[int] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    last_accessed_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, session_id: SessionId) -> "PracticeSession":
        """Start a new, empty session."""
        now = _utcnow()
        return cls(id=session_id, used_word_ids=[], created_at=now, last_accessed_at=now)

    @classmethod
    def create_with_id(
        cls,
        id: SessionId,
        used_word_ids: Iterable[int],
        created_at: datetime,
        last_accessed_at: datetime,
    ) -> "PracticeSession":
        """Reconstitute a session from persistence."""
        used: list[int] = []
        for word_id in used_word_ids:
            if word_id not in used:
                used.append(word_id)
        return cls(
            id=id,
            used_word_ids=used,
            created_at=created_at,
            last_accessed_at=last_accessed_at,
        )

    @property
    def used_word_count(self) -> int:
        return len(self.used_word_ids)

    def has_used_word(self, word_id: WordId) -> bool:
        return word_id.value in self.used_word_ids

    def mark_word_as_used(self, word_id: WordId) -> None:
        """Append a word to the used list (no-op if already present)."""
        if word_id.value not in self.used_word_ids:
            self.used_word_ids.append(word_id.value)
        self.touch()

    def reset(self) -> None:
        """Forget all used words."""
        self.used_word_ids = []
        self.touch()

    def touch(self) -> None:
        now = _utcnow()
        # last_accessed_at never moves backwards
        self.last_accessed_at = max(now, self.last_accessed_at)

    def is_expired(self, max_age: timedelta, now: datetime | None = None) -> bool:
        return (now or _utcnow()) - self.last_accessed_at > max_age
