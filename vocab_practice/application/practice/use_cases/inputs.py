"""Parsing of raw use case inputs into domain value objects."""

from vocab_practice.application.practice.protocols import WordFilters
from vocab_practice.domain.practice import CategoryName, Difficulty


def parse_word_filters(category: str | None, difficulty: int | None) -> WordFilters:
    """
    Build word filters from optional raw values.

    Raises:
        ValidationError: If the category is blank or too long, or the difficulty is not 1-3
    """
    return WordFilters(
        category=CategoryName.parse(category) if category is not None else None,
        difficulty=Difficulty.parse(difficulty) if difficulty is not None else None,
    )


def describe_filters(filters: WordFilters) -> dict[str, object]:
    """Keyword arguments for ``NoWordsAvailableError``."""
    return {
        "category": filters.category.value if filters.category else None,
        "difficulty": int(filters.difficulty) if filters.difficulty else None,
    }
