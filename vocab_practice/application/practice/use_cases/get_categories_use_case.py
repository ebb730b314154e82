from vocab_practice.application.common import Ok, Result, use_case_operation
from vocab_practice.application.practice.protocols import WordRepositoryProtocol
from vocab_practice.constants import OPERATIONS


class GetCategoriesUseCase:
    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    @use_case_operation(OPERATIONS.GET_CATEGORIES)
    def execute(self) -> Result[list[str]]:
        """Get all category names in alphabetical order."""
        categories = self.word_repository.get_categories()
        return Ok(sorted(category.name for category in categories))
