from fastapi import APIRouter

from vocab_practice.constants import DEFAULTS, DIFFICULTY_LABELS
from vocab_practice.infrastructure.practice.schemas import PracticeSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=PracticeSettingsResponse)
def get_practice_settings() -> PracticeSettingsResponse:
    """Get practice defaults: word limits, quiz time limit and difficulty labels."""
    return PracticeSettingsResponse(
        word_limit=DEFAULTS.WORD_LIMIT,
        min_word_limit=DEFAULTS.MIN_WORD_LIMIT,
        max_word_limit=DEFAULTS.MAX_WORD_LIMIT,
        time_limit=DEFAULTS.TIME_LIMIT,
        difficulty_labels=dict(DIFFICULTY_LABELS),
    )
