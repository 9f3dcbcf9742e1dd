"""Admin product endpoints.

Provides endpoints for listing products of every status and for
creating products.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from catalog_api.api.deps import (
    ProductQueryDep,
    get_create_product_use_case,
    get_list_admin_products_use_case,
)
from catalog_api.api.schemas import ErrorResponse
from catalog_api.application.dto import (
    AdminProductListResponse,
    CreateProductRequest,
    CreateProductResponse,
)
from catalog_api.application.use_cases import (
    CreateProductUseCase,
    ListAdminProductsUseCase,
)

router = APIRouter(prefix="/api/admin/products", tags=["Admin"])


@router.get(
    "",
    response_model=AdminProductListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List products (admin)",
    description="List products of any status, including products without variants.",
)
async def list_admin_products(
    query: ProductQueryDep,
    use_case: Annotated[
        ListAdminProductsUseCase, Depends(get_list_admin_products_use_case)
    ],
) -> AdminProductListResponse:
    """List products for administrators.

    Returns:
        One page of products with pagination info and the number of
        draft and published products on the page.
    """
    return await use_case.execute(query)


@router.post(
    "",
    response_model=CreateProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Create a product",
    description="Create a product together with its options and variants.",
)
async def create_product(
    request: CreateProductRequest,
    use_case: Annotated[CreateProductUseCase, Depends(get_create_product_use_case)],
) -> CreateProductResponse:
    """Create a product.

    The product, its options and variants are validated as a whole
    before anything is stored.

    Args:
        request: Product creation request.
        use_case: Create product use case.

    Returns:
        The created product.
    """
    return await use_case.execute(request)
