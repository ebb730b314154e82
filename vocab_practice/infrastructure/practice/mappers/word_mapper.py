"""Mapper for Word ORM ↔ Domain conversion."""

from vocab_practice.domain.common.value_objects import CategoryId, WordId
from vocab_practice.domain.practice import Difficulty, Word
from vocab_practice.models import Word as WordORM


class WordMapper:
    """Mapper for Word ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WordORM) -> Word:
        """
        Convert ORM model to domain entity.

        Reads ``orm_model.category``, so load the relationship eagerly when
        mapping many rows.
        """
        return Word(
            id=WordId(orm_model.id),
            polish=orm_model.polish,
            english=orm_model.english,
            category_id=CategoryId(orm_model.category_id),
            category_name=orm_model.category.name,
            difficulty=Difficulty(orm_model.difficulty),
        )

    def to_orm(self, domain_entity: Word) -> WordORM:
        """Convert domain entity to ORM model."""
        return WordORM(
            id=domain_entity.id.value,
            polish=domain_entity.polish,
            english=domain_entity.english,
            category_id=domain_entity.category_id.value,
            difficulty=int(domain_entity.difficulty),
        )
