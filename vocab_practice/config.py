"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from limits import parse_many
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'vocab_practice.db'}"

    # Storage backend for repositories: SQL database or process-local memory
    STORAGE_BACKEND: Literal["sql", "memory"] = "sql"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Vocab Practice API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Practice sessions
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 30
    COOKIE_SECURE: bool = False

    # Per-client rate limits ("<count>/<period>", see slowapi/limits notation)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WORDS: str = "200/minute"
    RATE_LIMIT_TRANSLATIONS: str = "120/minute"

    @field_validator("SESSION_COOKIE_NAME", mode="after")
    @classmethod
    def strip_cookie_name(cls, value: str) -> str:
        """Cookie name must be a non-empty token."""
        value = value.strip()
        if not value:
            msg = "SESSION_COOKIE_NAME cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("RATE_LIMIT_WORDS", "RATE_LIMIT_TRANSLATIONS", mode="after")
    @classmethod
    def check_rate_limit(cls, value: str) -> str:
        try:
            parse_many(value)
        except ValueError as e:
            msg = f"Invalid rate limit {value!r}, expected e.g. \"100/minute\""
            raise ValueError(msg) from e
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # SQL echo and access logs are noisy at DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
