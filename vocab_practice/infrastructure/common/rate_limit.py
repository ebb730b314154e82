"""
Per-client request rate limiting.

Endpoints opt in with ``@limiter.limit(words_rate_limit)`` and must take a
``request: Request`` argument. Clients are keyed by remote address. The
limiter is process-wide; ``configure_rate_limiting`` binds it to the
settings of the app being built and starts from empty counters.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from vocab_practice.config import Settings, get_settings

logger = structlog.get_logger(__name__)

RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

limiter = Limiter(key_func=get_remote_address)

_bound_settings: dict[str, Settings] = {}


def _settings() -> Settings:
    return _bound_settings.get("current") or get_settings()


def words_rate_limit() -> str:
    """Limit for the word-serving endpoints, read on every request."""
    return _settings().RATE_LIMIT_WORDS


def translations_rate_limit() -> str:
    """Limit for the translation check endpoint, read on every request."""
    return _settings().RATE_LIMIT_TRANSLATIONS


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a 429 in the same ``{code, message, details}`` shape as domain errors."""
    logger.warning(
        "rate_limit_exceeded",
        path=request.url.path,
        client=get_remote_address(request),
        limit=exc.detail,
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "code": RATE_LIMIT_EXCEEDED,
            "message": "Too many requests. Please wait a moment and try again.",
            "details": {"limit": exc.detail},
        },
    )


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    _bound_settings["current"] = settings
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    limiter.reset()

    app.state.limiter = limiter
    app.add_exception_handler(
        RateLimitExceeded,
        rate_limit_exceeded_handler,  # type: ignore[arg-type]
    )
    logger.info(
        "rate_limiting_configured",
        enabled=settings.RATE_LIMIT_ENABLED,
        words=settings.RATE_LIMIT_WORDS,
        translations=settings.RATE_LIMIT_TRANSLATIONS,
    )
