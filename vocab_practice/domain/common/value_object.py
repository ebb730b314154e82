"""
Base class for single-value Value Objects.

Every value object in this domain wraps exactly one primitive: an id, a
session token or a category name. Subclasses are frozen dataclasses, so
equality and hashing compare the wrapped value and the concrete type.

Example:
    @dataclass(frozen=True)
    class CategoryName(ValueObject[str]):
        value: str

        def __post_init__(self) -> None:
            if not self.value:
                raise ValidationError.empty_field("category")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValueObject(Generic[T]):
    """Immutable wrapper around one primitive value."""

    value: T

    def __str__(self) -> str:
        return str(self.value)
