"""Shared endpoint dependencies.

Wires repositories and use cases for the routers and parses the
product list query string.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated, Literal

from fastapi import Depends, Query, Request

from catalog_api.application.ports import (
    CategoryRepository,
    ProductQuery,
    ProductRepository,
)
from catalog_api.application.use_cases import (
    CreateProductUseCase,
    GetProductUseCase,
    ListAdminProductsUseCase,
    ListCategoriesUseCase,
    ListProductsUseCase,
)
from catalog_api.domain import DEFAULT_LIMITS, ProductStatus
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import session_scope
from catalog_api.infrastructure.memory import (
    get_memory_category_repository,
    get_memory_product_repository,
)
from catalog_api.infrastructure.repositories import (
    SqlCategoryRepository,
    SqlProductRepository,
)


# ============================================================================
# Repositories
# ============================================================================


@dataclass
class Repositories:
    """Repositories bound to one request."""

    categories: CategoryRepository
    products: ProductRepository


async def get_repositories() -> AsyncGenerator[Repositories, None]:
    """Get repositories for the configured backend.

    Only the SQL backend opens a session; it is committed once the
    request has been handled.
    """
    if settings.repository_backend == "memory":
        yield Repositories(
            categories=get_memory_category_repository(),
            products=get_memory_product_repository(),
        )
        return

    async with session_scope() as session:
        yield Repositories(
            categories=SqlCategoryRepository(session),
            products=SqlProductRepository(session),
        )


RepositoriesDep = Annotated[Repositories, Depends(get_repositories)]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


# ============================================================================
# Use Cases
# ============================================================================


def get_create_product_use_case(
    request: Request, repos: RepositoriesDep
) -> CreateProductUseCase:
    return CreateProductUseCase(
        repos.categories, repos.products, request_id=_request_id(request)
    )


def get_get_product_use_case(
    request: Request, repos: RepositoriesDep
) -> GetProductUseCase:
    return GetProductUseCase(
        repos.categories, repos.products, request_id=_request_id(request)
    )


def get_list_products_use_case(
    request: Request, repos: RepositoriesDep
) -> ListProductsUseCase:
    return ListProductsUseCase(
        repos.categories, repos.products, request_id=_request_id(request)
    )


def get_list_admin_products_use_case(
    request: Request, repos: RepositoriesDep
) -> ListAdminProductsUseCase:
    return ListAdminProductsUseCase(
        repos.categories, repos.products, request_id=_request_id(request)
    )


def get_list_categories_use_case(
    request: Request, repos: RepositoriesDep
) -> ListCategoriesUseCase:
    return ListCategoriesUseCase(repos.categories, request_id=_request_id(request))


# ============================================================================
# Query Parameters
# ============================================================================


def get_product_query(
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = 1,
    per_page: Annotated[
        int,
        Query(alias="perPage", ge=1, le=settings.max_per_page, description="Items per page"),
    ] = settings.default_per_page,
    category_id: Annotated[str | None, Query(alias="categoryId")] = None,
    keyword: Annotated[
        str | None,
        Query(
            max_length=DEFAULT_LIMITS.max_product_name_length,
            description="Matches product name or description",
        ),
    ] = None,
    min_price: Annotated[
        int | None, Query(alias="minPrice", ge=0, le=DEFAULT_LIMITS.max_price)
    ] = None,
    max_price: Annotated[
        int | None, Query(alias="maxPrice", ge=0, le=DEFAULT_LIMITS.max_price)
    ] = None,
    statuses: Annotated[list[ProductStatus] | None, Query()] = None,
    sort_by: Annotated[Literal["name", "createdAt"], Query(alias="sortBy")] = "createdAt",
    order: Annotated[Literal["asc", "desc"], Query()] = "desc",
) -> ProductQuery:
    """Parse the product list query string."""
    return ProductQuery(
        page=page,
        per_page=per_page,
        category_id=category_id,
        keyword=keyword or None,
        min_price=min_price,
        max_price=max_price,
        statuses=tuple(statuses) if statuses else None,
        sort_by="name" if sort_by == "name" else "created_at",
        order=order,
    )


ProductQueryDep = Annotated[ProductQuery, Depends(get_product_query)]
