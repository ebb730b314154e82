from dataclasses import dataclass

from vocab_practice.domain.common.entity import Entity
from vocab_practice.domain.common.value_objects import CategoryId


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """Word category. Immutable after creation in normal operation."""

    id: CategoryId
    name: str
