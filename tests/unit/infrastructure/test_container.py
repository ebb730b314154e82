from unittest.mock import MagicMock

import pytest
from dependency_injector import errors, providers
from sqlalchemy.orm import Session

from vocab_practice.application.practice.use_cases import GetAllWordsUseCase, ResetSessionUseCase
from vocab_practice.config import Settings
from vocab_practice.core import (
    USE_CASE_PROVIDERS,
    Container,
    create_container,
    scope,
    verify_container,
)
from vocab_practice.infrastructure.practice.repositories import (
    InMemorySessionRepository,
    InMemoryWordRepository,
    WordRepository,
)


def test_sql_backend_binds_repositories_to_db(db_session: Session) -> None:
    container = create_container(Settings(STORAGE_BACKEND="sql"))

    with scope(container, db=db_session):
        use_case = container.get_all_words_use_case()

    assert isinstance(use_case, GetAllWordsUseCase)
    assert isinstance(use_case.word_repository, WordRepository)
    assert use_case.word_repository.db is db_session


def test_db_is_required_outside_scope() -> None:
    container = create_container(Settings(STORAGE_BACKEND="sql"))

    with pytest.raises(errors.Error):
        container.get_all_words_use_case()


def test_memory_backend_uses_shared_in_memory_repositories() -> None:
    container = create_container(Settings(STORAGE_BACKEND="memory"))

    first = container.reset_session_use_case()
    second = container.reset_session_use_case()

    assert isinstance(first, ResetSessionUseCase)
    assert isinstance(first.session_repository, InMemorySessionRepository)
    assert first.session_repository is second.session_repository
    assert isinstance(container.word_repository(), InMemoryWordRepository)


def test_scope_overrides_are_reverted() -> None:
    container = create_container(Settings(STORAGE_BACKEND="memory"))
    double = InMemoryWordRepository()

    with scope(container, word_repository=double):
        assert container.get_all_words_use_case().word_repository is double

    restored = container.get_all_words_use_case().word_repository
    assert restored is not double
    assert isinstance(restored, InMemoryWordRepository)


def test_verify_container_resolves_every_use_case(db_session: Session) -> None:
    container = create_container(Settings(STORAGE_BACKEND="sql"))

    verify_container(container, db_session)

    assert len(USE_CASE_PROVIDERS) == 8


def test_verify_container_fails_on_broken_registration() -> None:
    def missing_checker() -> None:
        raise RuntimeError("missing")

    container = Container()
    container.translation_checker.override(providers.Callable(missing_checker))

    with pytest.raises(RuntimeError, match="missing"):
        verify_container(container, MagicMock(spec=Session))
