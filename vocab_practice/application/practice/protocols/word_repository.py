from dataclasses import dataclass
from typing import Protocol

from vocab_practice.domain.common.value_objects import WordId
from vocab_practice.domain.practice import Category, CategoryName, Difficulty, Word


@dataclass(frozen=True)
class WordFilters:
    """Optional filters narrowing the word pool. ``None`` means no restriction."""

    category: CategoryName | None = None
    difficulty: Difficulty | None = None

    @property
    def is_empty(self) -> bool:
        return self.category is None and self.difficulty is None


class WordRepositoryProtocol(Protocol):
    def find_all(self) -> list[Word]: ...

    def find_by_id(self, word_id: WordId) -> Word | None: ...

    def find_by_filters(self, filters: WordFilters) -> list[Word]: ...

    def count(self, filters: WordFilters | None = None) -> int: ...

    def get_categories(self) -> list[Category]: ...

    def get_difficulties(self) -> list[Difficulty]: ...
