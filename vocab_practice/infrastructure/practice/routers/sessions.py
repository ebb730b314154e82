from fastapi import APIRouter, Depends

from vocab_practice.application.practice.use_cases import ResetSessionUseCase
from vocab_practice.infrastructure.common.di import inject_use_case
from vocab_practice.infrastructure.practice.dependencies import PracticeSessionId
from vocab_practice.infrastructure.practice.schemas import SessionResponse

router = APIRouter(prefix="/session", tags=["session"])


@router.post("/reset", response_model=SessionResponse)
def reset_session(
    session_id: PracticeSessionId,
    use_case: ResetSessionUseCase = Depends(inject_use_case("reset_session_use_case")),
) -> SessionResponse:
    """
    Forget every word served to the current session.

    The session is created if it does not exist yet.
    """
    session = use_case.execute(session_id=session_id).unwrap()
    return SessionResponse.model_validate(session)
