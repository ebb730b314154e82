"""FastAPI dependencies for practice endpoints."""

import uuid
from typing import Annotated

import structlog
from fastapi import Depends, Header, Request, Response

from vocab_practice.config import Settings

logger = structlog.get_logger(__name__)

SESSION_HEADER = "X-Session-Id"


def new_session_id() -> str:
    return f"sess_{uuid.uuid4().hex}"


def get_session_id(
    request: Request,
    response: Response,
    x_session_id: Annotated[str | None, Header(alias=SESSION_HEADER)] = None,
) -> str:
    """
    Resolve the practice session token for this request.

    Order: session cookie, then the X-Session-Id header. When neither is
    present a new token is generated and set as the session cookie. Cookie
    name and attributes come from the settings the app was created with.
    """
    settings: Settings = request.app.state.settings
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME) or x_session_id
    if session_id:
        return session_id

    session_id = new_session_id()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    logger.debug("session_id_issued", session_id=session_id)
    return session_id


PracticeSessionId = Annotated[str, Depends(get_session_id)]
