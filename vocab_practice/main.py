"""FastAPI application entry point."""

import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from vocab_practice.config import Settings, configure_logging, get_settings
from vocab_practice.core import create_container, verify_container
from vocab_practice.database import (
    dispose_engine,
    get_engine,
    get_session_factory,
    initialize_database,
)
from vocab_practice.domain.common.errors import DomainError, InternalError
from vocab_practice.infrastructure.common.rate_limit import configure_rate_limiting
from vocab_practice.infrastructure.practice.routers import (
    sessions,
    settings as settings_router,
    translations,
    vocabulary,
    words,
)

logger = structlog.get_logger(__name__)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{code, message, details}``."""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "request_failed",
        path=request.url.path,
        code=exc.code.value,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    error = InternalError("An unexpected error occurred. Please try again later.")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error.to_dict())


async def log_request_metrics(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Emit one ``request_completed`` event per request with its status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    The dependency container is created here and stored on ``app.state``.
    The database engine is initialized and the container verified on startup.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    container = create_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        initialize_database(settings)
        with get_session_factory()() as db:
            verify_container(container, db)
        logger.info(
            "application_started",
            environment=settings.ENVIRONMENT,
            storage_backend=settings.STORAGE_BACKEND,
        )
        yield
        dispose_engine()
        logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API for Polish/English vocabulary practice",
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(log_request_metrics)

    configure_rate_limiting(app, settings)
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(words.router, prefix=settings.API_V1_PREFIX)
    app.include_router(translations.router, prefix=settings.API_V1_PREFIX)
    app.include_router(vocabulary.router, prefix=settings.API_V1_PREFIX)
    app.include_router(sessions.router, prefix=settings.API_V1_PREFIX)
    app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)

    @app.get("/", tags=["meta"])
    def read_root() -> dict[str, str]:
        return {"name": settings.PROJECT_NAME, "version": settings.VERSION}

    @app.get("/health", tags=["meta"])
    def health_check() -> JSONResponse:
        """Liveness check. With the SQL backend, also checks the database connection."""
        if settings.STORAGE_BACKEND == "memory":
            return JSONResponse({"status": "healthy", "database": "not used"})
        try:
            with get_engine().connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception:
            logger.exception("health_check_failed")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable"},
            )
        return JSONResponse({"status": "healthy", "database": "ok"})

    return app


app = create_app()
