from enum import IntEnum

from vocab_practice.constants import DIFFICULTY_LABELS
from vocab_practice.domain.common.errors import ValidationError


class Difficulty(IntEnum):
    """Word difficulty level."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        """Human-readable label (Easy / Medium / Hard)."""
        return DIFFICULTY_LABELS[self.value]

    @classmethod
    def parse(cls, value: int) -> "Difficulty":
        """
        Validate an untrusted difficulty value.

        Raises:
            ValidationError: If value is not 1, 2 or 3
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                f"Invalid difficulty value: {value}. Must be 1, 2, or 3",
                field="difficulty",
                value=value,
            ) from e
