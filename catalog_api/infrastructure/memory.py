"""In-memory repositories.

Dict-backed implementations of the repository contracts, used when
``repository_backend`` is ``memory`` and by the tests.
"""

from catalog_api.application.ports import (
    CategoryRepository,
    ProductPage,
    ProductQuery,
    ProductRepository,
)
from catalog_api.domain import Category, ProductAggregate, ProductDetails, ValidationError


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory category storage."""

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._categories: dict[str, Category] = {
            category.id: category for category in categories or []
        }

    async def save(self, category: Category) -> Category:
        """Store a category, replacing any with the same id."""
        self._categories[category.id] = category
        return category

    async def find_by_ids(self, ids: set[str]) -> dict[str, Category]:
        return {i: self._categories[i] for i in ids if i in self._categories}

    async def find_all(self) -> list[Category]:
        return list(self._categories.values())


class InMemoryProductRepository(ProductRepository):
    """In-memory product storage with the same filtering as the SQL one."""

    def __init__(self, products: list[ProductAggregate] | None = None) -> None:
        self._products: dict[str, ProductAggregate] = {}
        for aggregate in products or []:
            self.save(aggregate)

    def save(self, aggregate: ProductAggregate) -> None:
        """Store an aggregate as-is, without checks."""
        self._products[aggregate.id] = aggregate

    async def find_many(self, query: ProductQuery) -> ProductPage:
        matches = [a for a in self._products.values() if self._matches(a, query)]

        reverse = query.order == "desc"
        # Stable tie-breaker first, then the sort field
        matches.sort(key=lambda a: a.id, reverse=reverse)
        if query.sort_by == "name":
            matches.sort(key=lambda a: a.product.name, reverse=reverse)
        else:
            matches.sort(key=lambda a: a.product.created_at, reverse=reverse)

        start = query.offset
        return ProductPage(
            products=matches[start : start + query.per_page],
            total=len(matches),
        )

    async def find_by_id(self, product_id: str) -> ProductAggregate | None:
        return self._products.get(product_id)

    async def create(self, details: ProductDetails) -> None:
        taken = {v.sku for a in self._products.values() for v in a.variants}
        for variant in details.variants:
            if variant.sku in taken:
                raise ValidationError(
                    f'SKU "{variant.sku}" is already in use', field="sku"
                )
        self.save(
            ProductAggregate(
                product=details.product,
                variants=details.variants,
                images=details.images,
            )
        )

    @staticmethod
    def _matches(aggregate: ProductAggregate, query: ProductQuery) -> bool:
        product = aggregate.product

        if query.category_id is not None and product.category_id != query.category_id:
            return False

        if query.statuses and product.status not in query.statuses:
            return False

        if query.keyword:
            keyword = query.keyword.lower()
            if (
                keyword not in product.name.lower()
                and keyword not in product.description.lower()
            ):
                return False

        if query.has_price_filter:
            return any(
                (query.min_price is None or v.price.amount >= query.min_price)
                and (query.max_price is None or v.price.amount <= query.max_price)
                for v in aggregate.variants
            )

        return True


# ============================================================================
# Shared instances for the "memory" backend
# ============================================================================


_category_repo: InMemoryCategoryRepository | None = None
_product_repo: InMemoryProductRepository | None = None


def get_memory_category_repository() -> InMemoryCategoryRepository:
    """Get the process-wide in-memory category repository."""
    global _category_repo
    if _category_repo is None:
        _category_repo = InMemoryCategoryRepository()
    return _category_repo


def get_memory_product_repository() -> InMemoryProductRepository:
    """Get the process-wide in-memory product repository."""
    global _product_repo
    if _product_repo is None:
        _product_repo = InMemoryProductRepository()
    return _product_repo


def reset_memory_repositories() -> None:
    """Reset the in-memory repositories (for testing)."""
    global _category_repo, _product_repo
    _category_repo = None
    _product_repo = None
