from vocab_practice.application.common import Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import WordRepositoryProtocol
from vocab_practice.application.practice.use_cases.dtos import DifficultyDTO
from vocab_practice.constants import OPERATIONS


class GetDifficultiesUseCase:
    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    @use_case_operation(OPERATIONS.GET_DIFFICULTIES)
    def execute(self) -> Result[list[DifficultyDTO]]:
        """Get the difficulty levels that have at least one word, ascending."""
        difficulties = self.word_repository.get_difficulties()
        return Ok(
            [DifficultyDTO.from_difficulty(difficulty) for difficulty in sorted(difficulties)]
        )
