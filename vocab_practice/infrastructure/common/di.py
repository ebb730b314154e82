from collections.abc import Callable
from typing import Any

from fastapi import Request

from vocab_practice.core import Container, scope
from vocab_practice.database import DatabaseSession


def inject_use_case(provider_name: str) -> Callable[[Request, DatabaseSession], Any]:
    """
    Create a FastAPI dependency for a container provider.

    Resolves the provider from the application's container inside a scope
    that binds the request-scoped database session.
    """

    def dependency(request: Request, db: DatabaseSession) -> Any:  # noqa: ANN401
        container: Container = request.app.state.container
        with scope(container, db=db):
            return getattr(container, provider_name)()

    return dependency
