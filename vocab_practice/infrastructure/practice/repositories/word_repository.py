"""Repository for Word and Category domain entities."""

from typing import Any

from sqlalchemy import Select, distinct, func, select
from sqlalchemy.orm import Session, joinedload

from vocab_practice.application.practice.protocols import WordFilters
from vocab_practice.domain.common.value_objects import WordId
from vocab_practice.domain.practice import Category, Difficulty, Word
from vocab_practice.infrastructure.common.persistence import store_operation
from vocab_practice.infrastructure.practice.mappers import CategoryMapper, WordMapper
from vocab_practice.models import Category as CategoryORM
from vocab_practice.models import Word as WordORM


class WordRepository:
    """Repository for Word and Category domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordMapper()
        self.category_mapper = CategoryMapper()

    @store_operation("words.find_all")
    def find_all(self) -> list[Word]:
        """
        Get every word.

        Returns:
            List of word entities ordered by id
        """
        stmt = select(WordORM).options(joinedload(WordORM.category)).order_by(WordORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    @store_operation("words.find_by_id")
    def find_by_id(self, word_id: WordId) -> Word | None:
        """
        Find a word by ID.

        Args:
            word_id: The word ID

        Returns:
            Word entity if found, None otherwise
        """
        stmt = (
            select(WordORM)
            .options(joinedload(WordORM.category))
            .where(WordORM.id == word_id.value)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    @store_operation("words.find_by_filters")
    def find_by_filters(self, filters: WordFilters) -> list[Word]:
        """
        Get the words matching the filters.

        Args:
            filters: Optional category name and difficulty

        Returns:
            List of word entities ordered by id
        """
        stmt = self._apply_filters(
            select(WordORM).options(joinedload(WordORM.category)), filters
        ).order_by(WordORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    @store_operation("words.count")
    def count(self, filters: WordFilters | None = None) -> int:
        """Count words, optionally restricted by filters."""
        stmt = select(func.count(WordORM.id))
        if filters is not None:
            stmt = self._apply_filters(stmt, filters)
        return self.db.execute(stmt).scalar_one()

    @store_operation("categories.find_all")
    def get_categories(self) -> list[Category]:
        """
        Get all categories.

        Returns:
            List of category entities ordered by name
        """
        stmt = select(CategoryORM).order_by(CategoryORM.name)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.category_mapper.to_domain(orm) for orm in orm_models]

    @store_operation("words.distinct_difficulties")
    def get_difficulties(self) -> list[Difficulty]:
        """Get the distinct difficulty levels present in the store, ascending."""
        stmt = select(distinct(WordORM.difficulty)).order_by(WordORM.difficulty)
        return [Difficulty(value) for value in self.db.execute(stmt).scalars().all()]

    def _apply_filters(self, stmt: Select[Any], filters: WordFilters) -> Select[Any]:
        if filters.category is not None:
            stmt = stmt.join(CategoryORM, WordORM.category_id == CategoryORM.id).where(
                CategoryORM.name == filters.category.value
            )
        if filters.difficulty is not None:
            stmt = stmt.where(WordORM.difficulty == int(filters.difficulty))
        return stmt
