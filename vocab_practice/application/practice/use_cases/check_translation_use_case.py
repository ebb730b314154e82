import structlog

from vocab_practice.application.common import Err, Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import WordRepositoryProtocol
from vocab_practice.application.practice.use_cases.dtos import TranslationResultDTO
from vocab_practice.constants import OPERATIONS
from vocab_practice.domain.common.errors import NotFoundError, ValidationError
from vocab_practice.domain.common.value_objects import WordId
from vocab_practice.domain.practice import TranslationChecker, TranslationMode

logger = structlog.get_logger(__name__)

MAX_ANSWER_LENGTH = 200


class CheckTranslationUseCase:
    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        translation_checker: TranslationChecker,
    ) -> None:
        self.word_repository = word_repository
        self.translation_checker = translation_checker

    @use_case_operation(OPERATIONS.CHECK_TRANSLATION)
    def execute(
        self, word_id: int, user_translation: str, mode: str
    ) -> Result[TranslationResultDTO]:
        """
        Compare a learner's answer with the expected translation of a word.

        Args:
            word_id: ID of the word that was shown
            user_translation: Learner's answer (1-200 characters)
            mode: Mode the word was shown in

        Returns:
            Ok with the verdict, Err(ValidationError) for bad input,
            Err(NotFoundError) if the word does not exist
        """
        word_id_vo = WordId(word_id)
        translation_mode = TranslationMode.parse(mode)
        if not user_translation or not user_translation.strip():
            raise ValidationError.empty_field("user_translation")
        if len(user_translation) > MAX_ANSWER_LENGTH:
            raise ValidationError(
                f"user_translation must be at most {MAX_ANSWER_LENGTH} characters",
                field="user_translation",
            )

        word = self.word_repository.find_by_id(word_id_vo)
        if word is None:
            return Err(NotFoundError.word(word_id))

        check = self.translation_checker.check(
            word.correct_translation(translation_mode), user_translation
        )
        logger.info(
            "translation_checked",
            word_id=word_id,
            mode=translation_mode.value,
            is_correct=check.is_correct,
        )
        return Ok(
            TranslationResultDTO(
                is_correct=check.is_correct,
                correct_translation=check.correct_translation,
                user_translation=check.user_translation,
                similarity=check.similarity,
            )
        )
