from fastapi import APIRouter, Depends, Request

from vocab_practice.application.practice.use_cases import CheckTranslationUseCase
from vocab_practice.infrastructure.common.di import inject_use_case
from vocab_practice.infrastructure.common.rate_limit import limiter, translations_rate_limit
from vocab_practice.infrastructure.practice.schemas import (
    TranslationCheckRequest,
    TranslationCheckResponse,
)

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("/check", response_model=TranslationCheckResponse)
@limiter.limit(translations_rate_limit)  # type: ignore[misc]
def check_translation(
    request: Request,
    body: TranslationCheckRequest,
    use_case: CheckTranslationUseCase = Depends(inject_use_case("check_translation_use_case")),
) -> TranslationCheckResponse:
    """
    Check a learner's answer for a word.

    Alternatives separated by "/" and optional parts in parentheses are
    accepted. Comparison ignores case and extra whitespace.

    Raises:
        DomainError: NOT_FOUND if the word does not exist,
            VALIDATION_ERROR for an empty or overlong answer
    """
    result = use_case.execute(
        word_id=body.word_id,
        user_translation=body.user_translation,
        mode=body.mode,
    ).unwrap()
    return TranslationCheckResponse.model_validate(result)
