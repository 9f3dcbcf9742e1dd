"""Repository contracts used by the catalog use cases.

Defined in the application layer so use cases never depend on
infrastructure. Concrete implementations (SQL, in-memory) live in
``catalog_api.infrastructure``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal

from catalog_api.domain import Category, ProductAggregate, ProductDetails, ProductStatus

SortField = Literal["name", "created_at"]
SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class ProductQuery:
    """Filter, sort and pagination parameters for product searches.

    Attributes:
        page: Page number (1-indexed).
        per_page: Items per page.
        category_id: Only products in this category.
        keyword: Case-insensitive substring of name or description.
        min_price: Keep products with a variant priced at least this.
        max_price: Keep products with a variant priced at most this.
        statuses: Only products in one of these statuses.
        sort_by: Sort field.
        order: Sort direction.
    """

    page: int = 1
    per_page: int = 20
    category_id: str | None = None
    keyword: str | None = None
    min_price: int | None = None
    max_price: int | None = None
    statuses: tuple[ProductStatus, ...] | None = None
    sort_by: SortField = "created_at"
    order: SortOrder = "desc"

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.per_page

    @property
    def has_price_filter(self) -> bool:
        return self.min_price is not None or self.max_price is not None


@dataclass(frozen=True)
class ProductPage:
    """One page of product aggregates plus the total match count."""

    products: list[ProductAggregate] = field(default_factory=list)
    total: int = 0


class CategoryRepository(ABC):
    """Read access to categories."""

    @abstractmethod
    async def find_by_ids(self, ids: set[str]) -> dict[str, Category]:
        """Return the categories with the given ids, keyed by id.

        Ids that do not exist are absent from the result.
        """

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Return every category."""


class ProductRepository(ABC):
    """Read and write access to products."""

    @abstractmethod
    async def find_many(self, query: ProductQuery) -> ProductPage:
        """Return one page of product aggregates matching the query."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> ProductAggregate | None:
        """Return a product aggregate by id, or None if not found."""

    @abstractmethod
    async def create(self, details: ProductDetails) -> None:
        """Persist a product with its options, variants and images as one unit."""
