"""Domain layer - Entities, value objects, aggregates, projections.

This module exports the core catalog building blocks:

- **Value Objects**: Immutable objects compared by value (Money, ProductStatus)
- **Entities**: Self-validating records (Category, Product, ProductVariant, ...)
- **Aggregates**: Cross-entity consistency (ProductDetails, CategoryTree)
- **Projections**: Read-side list items (ProductList, AdminProductList)
- **Exceptions**: Domain-specific errors and invariant violations

Example usage:
    from datetime import datetime, timezone

    from catalog_api.domain import Category, CategoryTree

    now = datetime.now(timezone.utc)
    electronics = Category.create("c1", "Electronics", None, 0, now, now)
    laptops = Category.create("c2", "Laptops", "c1", 0, now, now)

    tree = CategoryTree.from_flat_list([laptops, electronics])
    tree.roots[0].children[0].category.name  # "Laptops"
"""

# Base classes
from catalog_api.domain.base import AggregateRoot, Entity, ValueObject

# Category hierarchy
from catalog_api.domain.category_tree import CategoryTree, CategoryTreeNode

# Entities
from catalog_api.domain.entities import (
    Category,
    Product,
    ProductImage,
    ProductOption,
    ProductVariant,
    ProductVariantOption,
)

# Exceptions
from catalog_api.domain.exceptions import (
    CategoryNotFoundError,
    DomainError,
    NotFoundError,
    ProductNotFoundError,
    ValidationError,
)

# Limits
from catalog_api.domain.limits import DEFAULT_LIMITS, CatalogLimits

# Aggregates
from catalog_api.domain.product_details import ProductAggregate, ProductDetails

# Projections
from catalog_api.domain.product_list import (
    AdminProductList,
    AdminProductListItem,
    ProductList,
    ProductListItem,
)

# Value Objects
from catalog_api.domain.value_objects import Money, ProductStatus

__all__ = [
    # Base
    "AggregateRoot",
    "Entity",
    "ValueObject",
    # Value Objects
    "Money",
    "ProductStatus",
    # Entities
    "Category",
    "Product",
    "ProductImage",
    "ProductOption",
    "ProductVariant",
    "ProductVariantOption",
    # Aggregates
    "ProductAggregate",
    "ProductDetails",
    "CategoryTree",
    "CategoryTreeNode",
    # Projections
    "AdminProductList",
    "AdminProductListItem",
    "ProductList",
    "ProductListItem",
    # Limits
    "CatalogLimits",
    "DEFAULT_LIMITS",
    # Exceptions
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "CategoryNotFoundError",
    "ProductNotFoundError",
]
