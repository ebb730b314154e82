"""
Domain error taxonomy.

The set of error codes is closed. Each code has exactly one ``DomainError``
subclass. Use cases do not raise these across their boundary; they return them
inside ``Err`` so callers inspect the outcome before touching a payload.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable error codes exposed to API clients."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_WORDS_AVAILABLE = "NO_WORDS_AVAILABLE"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Subclasses pin ``code`` and ``status_code``.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message

    def to_dict(self) -> dict[str, object]:
        """Serialize for API responses and log events."""
        return {"code": self.code.value, "message": self.message, "details": self.details}


class NotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: checking a translation for a word id that doesn't exist.
    """

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(self, entity_type: str, entity_id: object | None = None) -> None:
        if entity_id is not None:
            message = f'{entity_type} with id "{entity_id}" not found'
        else:
            message = f"{entity_type} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id

    @classmethod
    def word(cls, word_id: object) -> "NotFoundError":
        return cls("Word", word_id)


class ValidationError(DomainError):
    """
    Raised when input falls outside configured bounds.

    Example: word limit outside [1, 150], difficulty 4, unknown mode.
    """

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value

    @classmethod
    def empty_field(cls, field: str) -> "ValidationError":
        return cls(f"{field} cannot be empty", field=field)


class NoWordsAvailableError(DomainError):
    """Raised when no unused word matches the requested filters."""

    code = ErrorCode.NO_WORDS_AVAILABLE
    status_code = 404

    def __init__(self, category: str | None = None, difficulty: int | None = None) -> None:
        filters = {
            key: value
            for key, value in (("category", category), ("difficulty", difficulty))
            if value is not None
        }
        if filters:
            desc = ", ".join(f"{k}={v}" for k, v in filters.items())
            message = f"No words available for filters: {desc}"
        else:
            message = "No words available"
        super().__init__(message, dict(filters))
        self.category = category
        self.difficulty = difficulty


class UnauthorizedError(DomainError):
    """Caller is not authenticated."""

    code = ErrorCode.UNAUTHORIZED
    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(DomainError):
    """Caller is authenticated but not allowed to perform the action."""

    code = ErrorCode.FORBIDDEN
    status_code = 403

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)


class InternalError(DomainError):
    """Store or infrastructure failure."""

    code = ErrorCode.INTERNAL_ERROR
    status_code = 500

    def __init__(self, message: str = "Internal error", operation: str | None = None) -> None:
        super().__init__(message, {"operation": operation} if operation else None)
        self.operation = operation
