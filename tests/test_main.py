"""Tests for main API endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from vocab_practice.application.common import Ok
from vocab_practice.application.practice.use_cases import GetAllWordsUseCase


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns service info."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"name": "Vocab Practice API", "version": "0.1.0"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "ok"}


def test_settings_endpoint(client: TestClient) -> None:
    """Test practice defaults are exposed."""
    response = client.get("/api/v1/settings")
    assert response.status_code == 200
    data = response.json()
    assert data["word_limit"] == 50
    assert data["min_word_limit"] == 1
    assert data["max_word_limit"] == 150
    assert data["time_limit"] == 300
    assert data["difficulty_labels"] == {"1": "Easy", "2": "Medium", "3": "Hard"}


def test_container_stored_on_app_state(app: FastAPI) -> None:
    """Test the composition root is reachable from the app."""
    assert hasattr(app.state, "container")
    assert app.state.container.translation_checker() is app.state.container.translation_checker()


def test_unexpected_exception_returns_internal_error(app: FastAPI, client: TestClient) -> None:
    """Test an exception escaping a use case is rendered as INTERNAL_ERROR."""

    class ExplodingUseCase(GetAllWordsUseCase):
        def execute(self) -> Ok[list]:  # type: ignore[override]
            raise RuntimeError("boom")

    app.state.container.get_all_words_use_case.override(ExplodingUseCase(word_repository=None))
    try:
        with TestClient(app, raise_server_exceptions=False) as raw_client:
            response = raw_client.get("/api/v1/words")
    finally:
        app.state.container.get_all_words_use_case.reset_override()

    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "INTERNAL_ERROR"
    assert "boom" not in data["message"]
