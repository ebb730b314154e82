"""Repository for PracticeSession domain entities."""

from datetime import UTC, datetime, timedelta

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocab_practice.domain.common.value_objects import SessionId
from vocab_practice.domain.practice import PracticeSession
from vocab_practice.infrastructure.common.persistence import store_operation
from vocab_practice.infrastructure.practice.mappers import SessionMapper
from vocab_practice.models import PracticeSession as PracticeSessionORM

logger = structlog.get_logger(__name__)


class SessionRepository:
    """
    Repository for PracticeSession domain entities.

    ``find_or_create`` locks the session row (``SELECT ... FOR UPDATE``) until
    ``save`` commits, so read-modify-write cycles on one session serialize.
    SQLite ignores the clause and relies on its database-level write lock.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SessionMapper()

    @store_operation("sessions.find_by_id")
    def find_by_id(self, session_id: SessionId) -> PracticeSession | None:
        """
        Find a session by ID without locking it.

        Returns:
            PracticeSession entity if found, None otherwise
        """
        orm_model = self.db.get(PracticeSessionORM, session_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    @store_operation("sessions.find_or_create")
    def find_or_create(self, session_id: SessionId) -> PracticeSession:
        """
        Get the session, inserting an empty one on first access.

        The insert is flushed but not committed; ``save`` commits it together
        with the caller's changes.
        """
        orm_model = self._select_for_update(session_id)
        if orm_model:
            return self.mapper.to_domain(orm_model)

        session = PracticeSession.create(session_id)
        orm_model = self.mapper.to_orm(session)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError:
            # Another request inserted the same id first
            self.db.rollback()
            orm_model = self._select_for_update(session_id)
            if orm_model is None:
                raise
            logger.info("session_insert_race_resolved", session_id=session_id.value)
            return self.mapper.to_domain(orm_model)

        logger.info("session_created", session_id=session_id.value)
        return self.mapper.to_domain(orm_model)

    @store_operation("sessions.save")
    def save(self, session: PracticeSession) -> PracticeSession:
        """
        Insert or update a session and commit.

        Returns:
            Saved session entity as stored
        """
        orm_model = self.db.get(PracticeSessionORM, session.id.value)
        if orm_model:
            self.mapper.to_orm(session, orm_model)
        else:
            orm_model = self.mapper.to_orm(session)
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    @store_operation("sessions.delete_expired")
    def delete_expired(self, max_age_seconds: int) -> int:
        """
        Delete sessions not accessed within ``max_age_seconds``.

        Returns:
            Number of deleted sessions
        """
        cutoff = datetime.now(UTC) - timedelta(seconds=max_age_seconds)
        stmt = (
            delete(PracticeSessionORM)
            .where(PracticeSessionORM.last_accessed_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        deleted = result.rowcount or 0
        logger.info("expired_sessions_deleted", count=deleted, max_age_seconds=max_age_seconds)
        return deleted

    @store_operation("sessions.count")
    def count(self) -> int:
        stmt = select(func.count()).select_from(PracticeSessionORM)
        return self.db.execute(stmt).scalar_one()

    def _select_for_update(self, session_id: SessionId) -> PracticeSessionORM | None:
        stmt = (
            select(PracticeSessionORM)
            .where(PracticeSessionORM.id == session_id.value)
            .with_for_update()
        )
        return self.db.execute(stmt).scalar_one_or_none()
