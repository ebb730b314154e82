"""Use case for serving a batch of unused words (quiz pool preloading)."""

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
from vocab_practice.constants import DEFAULTS, OPERATIONS
from vocab_practice.domain.common.errors import NoWordsAvailableError, ValidationError
from vocab_practice.domain.common.value_objects import SessionId
from vocab_practice.domain.practice import RandomWordPicker, TranslationMode

logger = structlog.get_logger(__name__)


class GetRandomWordsUseCase:
    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        session_repository: SessionRepositoryProtocol,
        random_word_picker: RandomWordPicker,
    ) -> None:
        self.word_repository = word_repository
        self.session_repository = session_repository
        self.random_word_picker = random_word_picker

    @use_case_operation(OPERATIONS.GET_RANDOM_WORDS)
    def execute(
        self,
        mode: str,
        session_id: str,
        limit: int = DEFAULTS.WORD_LIMIT,
        category: str | None = None,
        difficulty: int | None = None,
    ) -> Result[list[WordChallengeDTO]]:
        """
        Pick up to ``limit`` distinct words the session has not seen yet.

        Returns fewer words when fewer remain. Every returned word is recorded
        in the session.

        Returns:
            Ok with the shuffled challenges, Err(ValidationError) for a limit
            outside [MIN_WORD_LIMIT, MAX_WORD_LIMIT] or other bad input,
            Err(NoWordsAvailableError) when nothing is left to serve
        """
        if not DEFAULTS.MIN_WORD_LIMIT <= limit <= DEFAULTS.MAX_WORD_LIMIT:
            return Err(
                ValidationError(
                    f"Limit must be between {DEFAULTS.MIN_WORD_LIMIT} "
                    f"and {DEFAULTS.MAX_WORD_LIMIT}",
                    field="limit",
                    value=limit,
                )
            )

        translation_mode = TranslationMode.parse(mode)
        session_id_vo = SessionId.parse(session_id)
        filters = parse_word_filters(category, difficulty)

        pool = self.word_repository.find_by_filters(filters)
        if not pool:
            return Err(NoWordsAvailableError(**describe_filters(filters)))

        session = self.session_repository.find_or_create(session_id_vo)
        unused = [word for word in pool if not session.has_used_word(word.id)]
        words = self.random_word_picker.sample(unused, limit)

        if not words:
            session.touch()
            self.session_repository.save(session)
            logger.info(
                "session_exhausted",
                session_id=session_id_vo.value,
                pool_size=len(pool),
            )
            return Err(NoWordsAvailableError(**describe_filters(filters)))

        for word in words:
            session.mark_word_as_used(word.id)
        self.session_repository.save(session)

        logger.info(
            "random_words_served",
            session_id=session_id_vo.value,
            requested=limit,
            served=len(words),
        )
        return Ok([WordChallengeDTO.from_entity(word, translation_mode) for word in words])
