"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainError and its subclasses: the closed error taxonomy
"""

from .entity import Entity, EntityId
from .errors import (
    DomainError,
    ErrorCode,
    ForbiddenError,
    InternalError,
    NotFoundError,
    NoWordsAvailableError,
    UnauthorizedError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ErrorCode",
    "ForbiddenError",
    "InternalError",
    "NoWordsAvailableError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    "ValueObject",
]
