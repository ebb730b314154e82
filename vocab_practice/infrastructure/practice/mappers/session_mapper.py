"""Mapper for PracticeSession ORM ↔ Domain conversion."""

import json
from datetime import UTC, datetime

import structlog

from vocab_practice.domain.common.value_objects import SessionId
from vocab_practice.domain.practice import PracticeSession
from vocab_practice.models import PracticeSession as PracticeSessionORM

logger = structlog.get_logger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class SessionMapper:
    """Mapper for PracticeSession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PracticeSessionORM) -> PracticeSession:
        """Convert ORM model to domain entity."""
        return PracticeSession.create_with_id(
            id=SessionId(orm_model.id),
            used_word_ids=self.parse_used_word_ids(orm_model.id, orm_model.used_word_ids),
            created_at=_as_utc(orm_model.created_at),
            last_accessed_at=_as_utc(orm_model.last_accessed_at),
        )

    def to_orm(
        self, domain_entity: PracticeSession, orm_model: PracticeSessionORM | None = None
    ) -> PracticeSessionORM:
        """Convert domain entity to ORM model."""
        used_word_ids = json.dumps(domain_entity.used_word_ids)
        if orm_model:
            # Update existing (created_at is never rewritten)
            orm_model.used_word_ids = used_word_ids
            orm_model.last_accessed_at = domain_entity.last_accessed_at
            return orm_model

        # Create new
        return PracticeSessionORM(
            id=domain_entity.id.value,
            used_word_ids=used_word_ids,
            created_at=domain_entity.created_at,
            last_accessed_at=domain_entity.last_accessed_at,
        )

    def parse_used_word_ids(self, session_id: str, raw: str | None) -> list[int]:
        """
        Decode the JSON array stored in ``sessions.used_word_ids``.

        A corrupt value is logged and treated as an empty list.
        """
        if not raw:
            return []
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("session_used_word_ids_corrupt", session_id=session_id)
            return []
        if not isinstance(decoded, list):
            logger.warning("session_used_word_ids_corrupt", session_id=session_id)
            return []
        # JSON true/false decode to bool, a subclass of int
        return [
            word_id
            for word_id in decoded
            if isinstance(word_id, int) and not isinstance(word_id, bool)
        ]
