"""Use case for listing the whole word collection."""

from vocab_practice.application.common import Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import WordRepositoryProtocol
from vocab_practice.application.practice.use_cases.dtos import WordDTO
from vocab_practice.constants import OPERATIONS


class GetAllWordsUseCase:
    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    @use_case_operation(OPERATIONS.GET_ALL_WORDS)
    def execute(self) -> Result[list[WordDTO]]:
        """
        Get every word in the store, ordered by id.

        Returns:
            Ok with one WordDTO per stored word
        """
        words = self.word_repository.find_all()
        return Ok([WordDTO.from_entity(word) for word in words])
