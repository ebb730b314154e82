from fastapi import APIRouter, Depends

from vocab_practice.application.practice.use_cases import (
    GetCategoriesUseCase,
    GetDifficultiesUseCase,
)
from vocab_practice.infrastructure.common.di import inject_use_case
from vocab_practice.infrastructure.practice.schemas import (
    CategoriesResponse,
    DifficultiesResponse,
    Difficulty,
)

router = APIRouter(tags=["vocabulary"])


@router.get("/categories", response_model=CategoriesResponse)
def get_categories(
    use_case: GetCategoriesUseCase = Depends(inject_use_case("get_categories_use_case")),
) -> CategoriesResponse:
    """Get all category names in alphabetical order."""
    return CategoriesResponse(categories=use_case.execute().unwrap())


@router.get("/difficulties", response_model=DifficultiesResponse)
def get_difficulties(
    use_case: GetDifficultiesUseCase = Depends(inject_use_case("get_difficulties_use_case")),
) -> DifficultiesResponse:
    """Get the difficulty levels in use, with their labels."""
    difficulties = use_case.execute().unwrap()
    return DifficultiesResponse(
        difficulties=[Difficulty.model_validate(difficulty) for difficulty in difficulties]
    )
