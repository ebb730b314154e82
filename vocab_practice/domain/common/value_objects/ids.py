from dataclasses import dataclass

from ..entity import EntityId
from ..errors import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class WordId(EntityId):
    """Strongly-typed word identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValidationError("Word id must be positive", field="word_id", value=self.value)


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""

    value: int


@dataclass(frozen=True)
class SessionId(ValueObject[str]):
    """
    Opaque practice-session token supplied by the caller.

    Only the length is checked (it must fit the ``sessions.id`` column);
    the token format belongs to whoever issued it.
    """

    value: str

    MAX_LENGTH = 255

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError.empty_field("session_id")
        if len(self.value) > self.MAX_LENGTH:
            raise ValidationError(
                f"session_id must be at most {self.MAX_LENGTH} characters",
                field="session_id",
            )

    @classmethod
    def parse(cls, raw: str) -> "SessionId":
        """Trim and validate a raw token."""
        return cls(raw.strip())
