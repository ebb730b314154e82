"""Translation of SQLAlchemy failures into ``PersistenceError``."""

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vocab_practice.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class _HasSession(Protocol):
    db: Session


def store_operation(operation: str) -> Callable[[F], F]:
    """
    Decorator for repository methods that talk to the database.

    Any ``SQLAlchemyError`` rolls back the session and is re-raised as
    ``PersistenceError`` with the original exception as ``__cause__``.

    Usage:
        class WordRepository:
            @store_operation("words.find_all")
            def find_all(self) -> list[Word]:
                ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: _HasSession, *args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            try:
                return func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.warning("store_operation_failed", operation=operation, error=str(e))
                raise PersistenceError(operation, e.__class__.__name__) from e

        return wrapper  # type: ignore[return-value]

    return decorator
