import structlog

from vocab_practice.application.common import Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import SessionRepositoryProtocol
from vocab_practice.application.practice.use_cases.dtos import SessionDTO
from vocab_practice.constants import OPERATIONS
from vocab_practice.domain.common.value_objects import SessionId

logger = structlog.get_logger(__name__)


class ResetSessionUseCase:
    def __init__(self, session_repository: SessionRepositoryProtocol) -> None:
        self.session_repository = session_repository

    @use_case_operation(OPERATIONS.RESET_SESSION)
    def execute(self, session_id: str) -> Result[SessionDTO]:
        """
        Forget every word served to a session.

        The session row is kept (or created): created_at is preserved and
        last_accessed_at is bumped.
        """
        session_id_vo = SessionId.parse(session_id)

        session = self.session_repository.find_or_create(session_id_vo)
        cleared = session.used_word_count
        session.reset()
        session = self.session_repository.save(session)

        logger.info("session_reset", session_id=session_id_vo.value, cleared=cleared)
        return Ok(SessionDTO.from_entity(session))
