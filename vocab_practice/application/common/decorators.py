"""Use case boundary decorator."""

import time
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import structlog

from vocab_practice.application.common.result import Err, Ok, Result
from vocab_practice.domain.common.errors import DomainError, InternalError
from vocab_practice.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Result[Any]])


def use_case_operation(operation: str) -> Callable[[F], F]:
    """
    Decorator marking a use case method as a public operation.

    - Domain errors raised while parsing input are returned as ``Err``
    - ``PersistenceError`` becomes ``Err(InternalError)``; the call is not retried
    - Every call logs its outcome and duration under ``operation``

    Usage:
        class GetAllWordsUseCase:
            @use_case_operation(OPERATIONS.GET_ALL_WORDS)
            def execute(self) -> Result[list[WordDTO]]:
                ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any]:  # noqa: ANN401
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except DomainError as e:
                result = Err(e)
            except PersistenceError as e:
                logger.exception(
                    "use_case_store_failure",
                    operation=operation,
                    store_operation=e.operation,
                )
                result = Err(InternalError(operation=operation))

            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            match result:
                case Ok():
                    logger.debug("use_case_succeeded", operation=operation, duration_ms=duration_ms)
                case Err(error):
                    logger.info(
                        "use_case_failed",
                        operation=operation,
                        code=error.code.value,
                        duration_ms=duration_ms,
                    )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
