"""Use case for serving the next unused word of a practice session."""

import structlog

from vocab_practice.application.common import Err, Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import (
    SessionRepositoryProtocol,
    WordRepositoryProtocol,
)
from vocab_practice.application.practice.use_cases.dtos import WordChallengeDTO
from vocab_practice.application.practice.use_cases.inputs import (
    describe_filters,
    parse_word_filters,
)
from vocab_practice.constants import OPERATIONS
from vocab_practice.domain.common.errors import NoWordsAvailableError
from vocab_practice.domain.common.value_objects import SessionId
from vocab_practice.domain.practice import RandomWordPicker, TranslationMode

logger = structlog.get_logger(__name__)


class GetRandomWordUseCase:
    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        session_repository: SessionRepositoryProtocol,
        random_word_picker: RandomWordPicker,
    ) -> None:
        self.word_repository = word_repository
        self.session_repository = session_repository
        self.random_word_picker = random_word_picker

    @use_case_operation(OPERATIONS.GET_RANDOM_WORD)
    def execute(
        self,
        mode: str,
        session_id: str,
        category: str | None = None,
        difficulty: int | None = None,
    ) -> Result[WordChallengeDTO]:
        """
        Pick a random word the session has not seen yet.

        The picked word is recorded in the session. When every word matching
        the filters was already used, the session is left as is apart from its
        access time and NO_WORDS_AVAILABLE is returned.

        Args:
            mode: EN_TO_PL or PL_TO_EN
            session_id: Caller-supplied session token
            category: Optional category name filter
            difficulty: Optional difficulty filter (1-3)

        Returns:
            Ok with the challenge, Err(ValidationError) for bad input,
            Err(NoWordsAvailableError) when nothing is left to serve
        """
        translation_mode = TranslationMode.parse(mode)
        session_id_vo = SessionId.parse(session_id)
        filters = parse_word_filters(category, difficulty)

        pool = self.word_repository.find_by_filters(filters)
        if not pool:
            return Err(NoWordsAvailableError(**describe_filters(filters)))

        session = self.session_repository.find_or_create(session_id_vo)
        unused = [word for word in pool if not session.has_used_word(word.id)]
        word = self.random_word_picker.pick(unused)

        if word is None:
            session.touch()
            self.session_repository.save(session)
            logger.info(
                "session_exhausted",
                session_id=session_id_vo.value,
                pool_size=len(pool),
            )
            return Err(NoWordsAvailableError(**describe_filters(filters)))

        session.mark_word_as_used(word.id)
        self.session_repository.save(session)

        logger.info(
            "random_word_served",
            session_id=session_id_vo.value,
            word_id=word.id.value,
            remaining=len(unused) - 1,
        )
        return Ok(WordChallengeDTO.from_entity(word, translation_mode))
