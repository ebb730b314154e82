from vocab_practice.application.common import Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import WordRepositoryProtocol
from vocab_practice.application.practice.use_cases.inputs import parse_word_filters
from vocab_practice.constants import OPERATIONS


class GetWordCountUseCase:
    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    @use_case_operation(OPERATIONS.GET_WORD_COUNT)
    def execute(self, category: str | None = None, difficulty: int | None = None) -> Result[int]:
        """
        Count words matching the optional filters.

        Returns:
            Ok with the count, or Err(ValidationError) for an invalid filter
        """
        filters = parse_word_filters(category, difficulty)
        return Ok(self.word_repository.count(filters))
