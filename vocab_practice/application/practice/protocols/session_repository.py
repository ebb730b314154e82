from typing import Protocol

from vocab_practice.domain.common.value_objects import SessionId
from vocab_practice.domain.practice import PracticeSession


class SessionRepositoryProtocol(Protocol):
    def find_by_id(self, session_id: SessionId) -> PracticeSession | None: ...

    def find_or_create(self, session_id: SessionId) -> PracticeSession: ...

    def save(self, session: PracticeSession) -> PracticeSession: ...

    def delete_expired(self, max_age_seconds: int) -> int: ...

    def count(self) -> int: ...
