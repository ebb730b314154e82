"""Mapper for Category ORM ↔ Domain conversion."""

from vocab_practice.domain.common.value_objects import CategoryId
from vocab_practice.domain.practice import Category
from vocab_practice.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category(id=CategoryId(orm_model.id), name=orm_model.name)

    def to_orm(self, domain_entity: Category) -> CategoryORM:
        """Convert domain entity to ORM model."""
        return CategoryORM(id=domain_entity.id.value, name=domain_entity.name)
