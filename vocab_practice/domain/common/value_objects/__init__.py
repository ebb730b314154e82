"""Common value objects shared across domain modules."""

from .ids import CategoryId, SessionId, WordId

__all__ = ["CategoryId", "SessionId", "WordId"]
