"""
Base class for Entities.

Entities have a distinct identity that runs through time. Two entities are
equal if they have the same identity, regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject[int]):
    """
    Base class for strongly-typed integer entity identifiers.

    Example:
        WordId(7) != CategoryId(7)
    """

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"{self.__class__.__name__} must be positive")

    def __int__(self) -> int:
        return self.value


IdType = TypeVar("IdType")


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
