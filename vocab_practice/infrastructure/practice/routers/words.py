from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from vocab_practice.application.practice.use_cases import (
    GetAllWordsUseCase,
    GetRandomWordsUseCase,
    GetRandomWordUseCase,
    GetWordCountUseCase,
)
from vocab_practice.constants import DEFAULTS
from vocab_practice.domain.practice import TranslationMode
from vocab_practice.infrastructure.common.di import inject_use_case
from vocab_practice.infrastructure.common.rate_limit import limiter, words_rate_limit
from vocab_practice.infrastructure.practice.dependencies import PracticeSessionId
from vocab_practice.infrastructure.practice.schemas import (
    Word,
    WordChallenge,
    WordChallengesResponse,
    WordCountResponse,
    WordsResponse,
)

router = APIRouter(prefix="/words", tags=["words"])

CategoryFilter = Annotated[str | None, Query(description="Category name")]
DifficultyFilter = Annotated[int | None, Query(description="Difficulty level (1-3)")]


@router.get("", response_model=WordsResponse)
def get_all_words(
    use_case: GetAllWordsUseCase = Depends(inject_use_case("get_all_words_use_case")),
) -> WordsResponse:
    """
    Get every word in the dictionary.

    Returns:
        WordsResponse with words ordered by id
    """
    words = use_case.execute().unwrap()
    return WordsResponse(words=[Word.model_validate(word) for word in words])


@router.get("/random", response_model=WordChallenge)
@limiter.limit(words_rate_limit)  # type: ignore[misc]
def get_random_word(
    request: Request,
    session_id: PracticeSessionId,
    mode: TranslationMode = Query(TranslationMode.EN_TO_PL, description="Translation direction"),
    category: CategoryFilter = None,
    difficulty: DifficultyFilter = None,
    use_case: GetRandomWordUseCase = Depends(inject_use_case("get_random_word_use_case")),
) -> WordChallenge:
    """
    Serve a random word the session has not seen yet.

    Raises:
        DomainError: NO_WORDS_AVAILABLE when the filtered pool is exhausted,
            VALIDATION_ERROR for an invalid filter
    """
    challenge = use_case.execute(
        mode=mode, session_id=session_id, category=category, difficulty=difficulty
    ).unwrap()
    return WordChallenge.model_validate(challenge)


@router.get("/random/batch", response_model=WordChallengesResponse)
@limiter.limit(words_rate_limit)  # type: ignore[misc]
def get_random_words(
    request: Request,
    session_id: PracticeSessionId,
    mode: TranslationMode = Query(TranslationMode.EN_TO_PL, description="Translation direction"),
    limit: int = Query(DEFAULTS.WORD_LIMIT, description="Maximum number of words to serve"),
    category: CategoryFilter = None,
    difficulty: DifficultyFilter = None,
    use_case: GetRandomWordsUseCase = Depends(inject_use_case("get_random_words_use_case")),
) -> WordChallengesResponse:
    """
    Serve a batch of distinct words the session has not seen yet.

    Fewer than ``limit`` words are returned when fewer remain.
    """
    challenges = use_case.execute(
        mode=mode,
        session_id=session_id,
        limit=limit,
        category=category,
        difficulty=difficulty,
    ).unwrap()
    return WordChallengesResponse(
        words=[WordChallenge.model_validate(challenge) for challenge in challenges],
        count=len(challenges),
    )


@router.get("/count", response_model=WordCountResponse)
def get_word_count(
    category: CategoryFilter = None,
    difficulty: DifficultyFilter = None,
    use_case: GetWordCountUseCase = Depends(inject_use_case("get_word_count_use_case")),
) -> WordCountResponse:
    """Count words matching the optional filters."""
    count = use_case.execute(category=category, difficulty=difficulty).unwrap()
    return WordCountResponse(count=count)
