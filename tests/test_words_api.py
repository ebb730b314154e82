"""Tests for word, vocabulary and translation API endpoints."""

import json

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocab_practice import models


class TestGetAllWords:
    """Test suite for GET /words endpoint."""

    def test_returns_flat_word_records(self, client: TestClient, test_word: models.Word) -> None:
        """Test every stored word is returned with its fields unchanged."""
        response = client.get("/api/v1/words")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["words"] == [
            {"id": 7, "polish": "kot", "english": "cat", "category_id": 1, "difficulty": 1}
        ]

    def test_empty_store(self, client: TestClient) -> None:
        """Test an empty dictionary yields an empty list."""
        response = client.get("/api/v1/words")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"words": []}

    def test_words_ordered_by_id(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        response = client.get("/api/v1/words")

        ids = [word["id"] for word in response.json()["words"]]
        assert ids == sorted(word.id for word in test_vocabulary)


class TestGetRandomWord:
    """Test suite for GET /words/random endpoint."""

    def test_serves_word_and_sets_session_cookie(
        self, client: TestClient, db_session: Session, test_word: models.Word
    ) -> None:
        """Test first access issues a session id and records the served word."""
        response = client.get("/api/v1/words/random", params={"mode": "EN_TO_PL"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data == {
            "id": 7,
            "word_to_translate": "cat",
            "category": "Animals",
            "difficulty": 1,
            "mode": "EN_TO_PL",
        }
        assert "correct_translation" not in data

        session_id = response.cookies.get("session_id")
        assert session_id is not None
        assert session_id.startswith("sess_")

        db_session.expire_all()
        stored = db_session.get(models.PracticeSession, session_id)
        assert stored is not None
        assert json.loads(stored.used_word_ids) == [7]

    def test_pl_to_en_shows_polish_word(self, client: TestClient, test_word: models.Word) -> None:
        response = client.get("/api/v1/words/random", params={"mode": "PL_TO_EN"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["word_to_translate"] == "kot"

    def test_session_header_is_used(
        self, client: TestClient, db_session: Session, test_word: models.Word
    ) -> None:
        """Test the X-Session-Id header identifies the session when no cookie is sent."""
        response = client.get("/api/v1/words/random", headers={"X-Session-Id": "header-session"})

        assert response.status_code == status.HTTP_200_OK
        assert "session_id" not in response.cookies
        db_session.expire_all()
        assert db_session.get(models.PracticeSession, "header-session") is not None

    def test_exhausted_session_returns_no_words_available(
        self, client: TestClient, test_word: models.Word
    ) -> None:
        """Test a second request on a one-word pool reports exhaustion."""
        first = client.get("/api/v1/words/random")
        assert first.status_code == status.HTTP_200_OK

        second = client.get("/api/v1/words/random")

        assert second.status_code == status.HTTP_404_NOT_FOUND
        assert second.json()["code"] == "NO_WORDS_AVAILABLE"

    def test_filters_restrict_pool(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        response = client.get(
            "/api/v1/words/random",
            params={"mode": "PL_TO_EN", "category": "Phrases", "difficulty": 3},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["word_to_translate"] == "pogodzić się z (czymś)"

    def test_empty_pool_does_not_create_session(
        self, client: TestClient, db_session: Session, test_word: models.Word
    ) -> None:
        """Test a filter matching nothing fails before any session row exists."""
        response = client.get(
            "/api/v1/words/random",
            params={"category": "Unknown"},
            headers={"X-Session-Id": "no-row"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["code"] == "NO_WORDS_AVAILABLE"
        assert body["details"] == {"category": "Unknown"}
        db_session.expire_all()
        assert db_session.get(models.PracticeSession, "no-row") is None

    def test_invalid_difficulty_is_validation_error(
        self, client: TestClient, test_word: models.Word
    ) -> None:
        response = client.get("/api/v1/words/random", params={"difficulty": 4})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["field"] == "difficulty"

    def test_invalid_mode_is_rejected_by_request_validation(self, client: TestClient) -> None:
        response = client.get("/api/v1/words/random", params={"mode": "DE_TO_PL"})

        assert response.status_code == 422


class TestGetRandomWords:
    """Test suite for GET /words/random/batch endpoint."""

    def test_returns_distinct_words_up_to_limit(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        response = client.get("/api/v1/words/random/batch", params={"limit": 3})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["count"] == 3
        ids = [word["id"] for word in data["words"]]
        assert len(set(ids)) == 3
        assert all("correct_translation" not in word for word in data["words"])

    def test_returns_fewer_when_fewer_remain(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        client.get("/api/v1/words/random/batch", params={"limit": 3})

        response = client.get("/api/v1/words/random/batch", params={"limit": 3})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["count"] == 2

        exhausted = client.get("/api/v1/words/random/batch", params={"limit": 3})
        assert exhausted.status_code == status.HTTP_404_NOT_FOUND
        assert exhausted.json()["code"] == "NO_WORDS_AVAILABLE"

    def test_limit_bounds(self, client: TestClient, test_word: models.Word) -> None:
        """Test limits outside [1, 150] are rejected and limits inside are accepted."""
        for limit in (0, 151):
            response = client.get("/api/v1/words/random/batch", params={"limit": limit})
            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json()["code"] == "VALIDATION_ERROR"

        response = client.get("/api/v1/words/random/batch", params={"limit": 50})
        assert response.status_code == status.HTTP_200_OK

    def test_default_limit(self, client: TestClient, test_vocabulary: list[models.Word]) -> None:
        response = client.get("/api/v1/words/random/batch")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["count"] == len(test_vocabulary)


class TestWordCount:
    """Test suite for GET /words/count endpoint."""

    def test_counts_all_words(self, client: TestClient, test_vocabulary: list[models.Word]) -> None:
        response = client.get("/api/v1/words/count")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"count": 5}

    def test_counts_with_filters(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        assert client.get("/api/v1/words/count", params={"category": "Animals"}).json() == {
            "count": 3
        }
        assert client.get("/api/v1/words/count", params={"difficulty": 2}).json() == {"count": 2}
        assert client.get(
            "/api/v1/words/count", params={"category": "Animals", "difficulty": 2}
        ).json() == {"count": 1}

    def test_blank_category_is_validation_error(self, client: TestClient) -> None:
        response = client.get("/api/v1/words/count", params={"category": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestVocabulary:
    """Test suite for GET /categories and GET /difficulties endpoints."""

    def test_categories_sorted(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        response = client.get("/api/v1/categories")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"categories": ["Animals", "Phrases"]}

    def test_difficulties_in_use(self, client: TestClient, test_word: models.Word) -> None:
        response = client.get("/api/v1/difficulties")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"difficulties": [{"value": 1, "label": "Easy"}]}


class TestCheckTranslation:
    """Test suite for POST /translations/check endpoint."""

    def test_correct_answer(self, client: TestClient, test_word: models.Word) -> None:
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": 7, "user_translation": "  KOT ", "mode": "EN_TO_PL"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "is_correct": True,
            "correct_translation": "kot",
            "user_translation": "  KOT ",
            "similarity": 1.0,
        }

    def test_wrong_answer(self, client: TestClient, test_word: models.Word) -> None:
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": 7, "user_translation": "dog", "mode": "PL_TO_EN"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["is_correct"] is False
        assert data["correct_translation"] == "cat"
        assert 0 <= data["similarity"] < 1

    def test_optional_part_accepted(
        self, client: TestClient, test_vocabulary: list[models.Word]
    ) -> None:
        word = next(w for w in test_vocabulary if w.english == "come to terms with")
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": word.id, "user_translation": "pogodzić się z", "mode": "EN_TO_PL"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["is_correct"] is True

    def test_unknown_word(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": 99999, "user_translation": "kot", "mode": "EN_TO_PL"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["details"] == {"entity_type": "Word", "entity_id": 99999}

    def test_empty_answer(self, client: TestClient, test_word: models.Word) -> None:
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": 7, "user_translation": "", "mode": "EN_TO_PL"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_non_positive_word_id(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/translations/check",
            json={"word_id": 0, "user_translation": "kot", "mode": "EN_TO_PL"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "VALIDATION_ERROR"
