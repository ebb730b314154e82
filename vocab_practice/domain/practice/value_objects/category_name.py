from dataclasses import dataclass

from vocab_practice.domain.common.errors import ValidationError
from vocab_practice.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class CategoryName(ValueObject[str]):
    """Category name used as a word filter."""

    value: str

    MAX_LENGTH = 100

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError.empty_field("category")
        if len(self.value) > self.MAX_LENGTH:
            raise ValidationError(
                f"Category name must be at most {self.MAX_LENGTH} characters",
                field="category",
            )

    @classmethod
    def parse(cls, raw: str) -> "CategoryName":
        """Trim and validate a raw category filter."""
        return cls(raw.strip())
