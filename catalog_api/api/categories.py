"""Category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_api.api.deps import get_list_categories_use_case
from catalog_api.api.schemas import ErrorResponse
from catalog_api.application.dto import CategoryListResponse
from catalog_api.application.use_cases import ListCategoriesUseCase

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get(
    "",
    response_model=CategoryListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List categories",
    description="Return every category as a tree ordered by display order.",
)
async def list_categories(
    use_case: Annotated[ListCategoriesUseCase, Depends(get_list_categories_use_case)],
) -> CategoryListResponse:
    return await use_case.execute()
