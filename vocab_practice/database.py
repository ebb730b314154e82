"""SQLAlchemy engine, declarative base and per-request sessions."""

from collections.abc import Generator
from typing import Annotated

import structlog
from fastapi import Depends, Request
from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vocab_practice.config import Settings

logger = structlog.get_logger(__name__)

# Deterministic constraint names for Alembic
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# Set by initialize_database, cleared by dispose_engine
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for ``database_url``.

    SQLite uses a single shared connection usable from FastAPI's worker
    threads. Other databases get a pre-pinged connection pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def initialize_database(settings: Settings) -> None:
    """Create the process-wide engine and session factory, replacing any previous one."""
    global _engine, _session_factory  # noqa: PLW0603

    if _engine is not None:
        _engine.dispose()

    _engine = build_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    logger.info("database_initialized", dialect=_engine.dialect.name)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield one session per request.

    The engine is created from the application's own settings
    (``app.state.settings``) if startup has not done so already.
    """
    if _session_factory is None:
        initialize_database(request.app.state.settings)
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
