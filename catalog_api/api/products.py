"""Storefront product endpoints.

Provides endpoints for listing published products and retrieving
product details.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_api.api.deps import (
    ProductQueryDep,
    get_get_product_use_case,
    get_list_products_use_case,
)
from catalog_api.api.schemas import ErrorResponse
from catalog_api.application.dto import ProductDetailResponse, ProductListResponse
from catalog_api.application.use_cases import GetProductUseCase, ListProductsUseCase

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get(
    "",
    response_model=ProductListResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="List products",
    description="List products with filtering, sorting and pagination. "
    "Only published products are returned unless statuses are given.",
)
async def list_products(
    query: ProductQueryDep,
    use_case: Annotated[ListProductsUseCase, Depends(get_list_products_use_case)],
) -> ProductListResponse:
    """List products for the storefront.

    Args:
        query: Filters, sort order and page.
        use_case: List products use case.

    Returns:
        One page of products with pagination info.
    """
    return await use_case.execute(query)


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product details",
)
async def get_product(
    product_id: str,
    use_case: Annotated[GetProductUseCase, Depends(get_get_product_use_case)],
) -> ProductDetailResponse:
    """Get a product with its options, variants and images."""
    return await use_case.execute(product_id)
