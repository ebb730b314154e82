"""
Result type for use case outcomes.

The Result type provides a way to handle success and failure cases
explicitly, without relying on exceptions for control flow. The failure side
always carries a ``DomainError``.

Example:
    def get_word_count(...) -> Result[int]:
        if difficulty not in (1, 2, 3):
            return Err(ValidationError("Invalid difficulty"))
        return Ok(repository.count(filters))

    # Usage
    match get_word_count(...):
        case Ok(value):
            print(f"Words: {value}")
        case Err(error):
            print(f"Error: {error.code}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from vocab_practice.domain.common.errors import DomainError

T = TypeVar("T")  # Success value type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        """Always True for Ok."""
        return True

    def is_err(self) -> bool:
        """Always False for Ok."""
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises ValueError - Ok has no error."""
        raise ValueError("Cannot get error from Ok result")

    def value_or(self, default: T) -> T:
        """Get the value (default is ignored for Ok)."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Apply a function to the success value."""
        return Ok(fn(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err:
    """Represents a failed result containing a domain error."""

    error: DomainError

    def is_ok(self) -> bool:
        """Always False for Err."""
        return False

    def is_err(self) -> bool:
        """Always True for Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried domain error."""
        raise self.error

    def unwrap_err(self) -> DomainError:
        """Get the error."""
        return self.error

    def value_or(self, default: T) -> T:
        """Return the default value for Err."""
        return default

    def map(self, fn: Callable[[T], U]) -> "Err":
        """No-op for Err - returns self."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result - a union of Ok and Err
Result = Ok[T] | Err
