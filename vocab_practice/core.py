import threading
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import structlog
from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from vocab_practice.application.practice.use_cases import (
    CheckTranslationUseCase,
    GetAllWordsUseCase,
    GetCategoriesUseCase,
    GetDifficultiesUseCase,
    GetRandomWordsUseCase,
    GetRandomWordUseCase,
    GetWordCountUseCase,
    ResetSessionUseCase,
)
from vocab_practice.config import Settings
from vocab_practice.domain.practice import RandomWordPicker, TranslationChecker
from vocab_practice.infrastructure.practice.repositories import (
    InMemorySessionRepository,
    InMemoryWordRepository,
    SessionRepository,
    WordRepository,
)
from vocab_practice.seed import build_seed_vocabulary

logger = structlog.get_logger(__name__)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    word_repository = providers.Factory(WordRepository, db=db)
    session_repository = providers.Factory(SessionRepository, db=db)

    # Domain services (pure domain logic, no db)
    random_word_picker = providers.Singleton(RandomWordPicker)
    translation_checker = providers.Singleton(TranslationChecker)

    # Practice module, application use cases
    get_all_words_use_case = providers.Factory(
        GetAllWordsUseCase,
        word_repository=word_repository,
    )
    get_random_word_use_case = providers.Factory(
        GetRandomWordUseCase,
        word_repository=word_repository,
        session_repository=session_repository,
        random_word_picker=random_word_picker,
    )
    get_random_words_use_case = providers.Factory(
        GetRandomWordsUseCase,
        word_repository=word_repository,
        session_repository=session_repository,
        random_word_picker=random_word_picker,
    )
    get_categories_use_case = providers.Factory(
        GetCategoriesUseCase,
        word_repository=word_repository,
    )
    get_difficulties_use_case = providers.Factory(
        GetDifficultiesUseCase,
        word_repository=word_repository,
    )
    get_word_count_use_case = providers.Factory(
        GetWordCountUseCase,
        word_repository=word_repository,
    )
    check_translation_use_case = providers.Factory(
        CheckTranslationUseCase,
        word_repository=word_repository,
        translation_checker=translation_checker,
    )
    reset_session_use_case = providers.Factory(
        ResetSessionUseCase,
        session_repository=session_repository,
    )


USE_CASE_PROVIDERS = (
    "get_all_words_use_case",
    "get_random_word_use_case",
    "get_random_words_use_case",
    "get_categories_use_case",
    "get_difficulties_use_case",
    "get_word_count_use_case",
    "check_translation_use_case",
    "reset_session_use_case",
)

# Overrides mutate shared provider state; only one scope may be open at a time
_scope_lock = threading.RLock()


def create_container(settings: Settings) -> Container:
    """
    Build the application container.

    With ``STORAGE_BACKEND=memory`` the repositories are process-wide
    in-memory singletons seeded with the built-in vocabulary.
    """
    container = Container()

    if settings.STORAGE_BACKEND == "memory":
        categories, words = build_seed_vocabulary()
        container.word_repository.override(
            providers.Singleton(InMemoryWordRepository, words=words, categories=categories)
        )
        container.session_repository.override(providers.Singleton(InMemorySessionRepository))

    logger.info("container_created", storage_backend=settings.STORAGE_BACKEND)
    return container


@contextmanager
def scope(
    container: Container, **overrides: Any  # noqa: ANN401
) -> Generator[Container, None, None]:
    """
    Override providers for the duration of a ``with`` block.

    Usage:
        with scope(container, db=session):
            use_case = container.get_all_words_use_case()

    Values are wrapped as ``providers.Object`` by dependency_injector. Concurrent
    scopes serialize on a lock, so keep the block to provider resolution only.
    """
    with _scope_lock:
        providers_to_reset = []
        try:
            for name, value in overrides.items():
                provider = getattr(container, name)
                provider.override(value)
                providers_to_reset.append(provider)
            yield container
        finally:
            for provider in reversed(providers_to_reset):
                provider.reset_last_overriding()


def verify_container(container: Container, db: Session) -> None:
    """
    Resolve every use case once.

    Raises:
        Exception: Whatever the failing provider raises; startup should abort
    """
    with scope(container, db=db):
        for name in USE_CASE_PROVIDERS:
            getattr(container, name)()
    logger.info("container_verified", use_cases=len(USE_CASE_PROVIDERS))
