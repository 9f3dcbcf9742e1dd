"""Application layer module.

Contains the catalog use cases, the repository ports they depend on
and the DTOs they return.
"""

from catalog_api.application.ports import (
    CategoryRepository,
    ProductPage,
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

__all__ = [
    "CategoryRepository",
    "ProductPage",
    "ProductQuery",
    "ProductRepository",
    "CreateProductUseCase",
    "GetProductUseCase",
    "ListAdminProductsUseCase",
    "ListCategoriesUseCase",
    "ListProductsUseCase",
]
