"""Tests for the in-memory repositories."""

import pytest

from catalog_api.application.ports import ProductQuery
from catalog_api.domain import ProductStatus
from catalog_api.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    get_memory_product_repository,
    reset_memory_repositories,
)
from catalog_api.infrastructure.seed import seed_catalog
from factories import make_aggregate, make_category


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            make_aggregate("p1", name="Blue Shirt", prices=(500,), minutes=1),
            make_aggregate("p2", name="red shirt", prices=(1500, 5000), minutes=2, category_id="cat-2"),
            make_aggregate("p3", name="Jacket", prices=(9000,), minutes=3, status=ProductStatus.DRAFT),
        ]
    )


class TestInMemoryProductRepository:
    """Tests for InMemoryProductRepository.find_many()."""

    @pytest.mark.asyncio
    async def test_keyword_is_case_insensitive(self, product_repo) -> None:
        page = await product_repo.find_many(ProductQuery(keyword="SHIRT"))
        assert {a.id for a in page.products} == {"p1", "p2"}

    @pytest.mark.asyncio
    async def test_price_range_matches_any_variant(self, product_repo) -> None:
        page = await product_repo.find_many(ProductQuery(min_price=4000, max_price=6000))
        assert [a.id for a in page.products] == ["p2"]

        page = await product_repo.find_many(ProductQuery(max_price=500))
        assert [a.id for a in page.products] == ["p1"]

    @pytest.mark.asyncio
    async def test_statuses_and_category(self, product_repo) -> None:
        page = await product_repo.find_many(
            ProductQuery(statuses=(ProductStatus.DRAFT,))
        )
        assert [a.id for a in page.products] == ["p3"]

        page = await product_repo.find_many(ProductQuery(category_id="cat-2"))
        assert [a.id for a in page.products] == ["p2"]

    @pytest.mark.asyncio
    async def test_sorting(self, product_repo) -> None:
        page = await product_repo.find_many(ProductQuery())
        assert [a.id for a in page.products] == ["p3", "p2", "p1"]

        page = await product_repo.find_many(ProductQuery(sort_by="name", order="asc"))
        assert [a.product.name for a in page.products] == ["Blue Shirt", "Jacket", "red shirt"]

    @pytest.mark.asyncio
    async def test_pagination(self, product_repo) -> None:
        page = await product_repo.find_many(ProductQuery(page=2, per_page=2))
        assert page.total == 3
        assert [a.id for a in page.products] == ["p1"]

        page = await product_repo.find_many(ProductQuery(page=5, per_page=2))
        assert page.products == []
        assert page.total == 3


class TestInMemoryCategoryRepository:
    @pytest.mark.asyncio
    async def test_find_by_ids_skips_missing(self) -> None:
        repo = InMemoryCategoryRepository([make_category("cat-1")])
        assert list(await repo.find_by_ids({"cat-1", "nope"})) == ["cat-1"]


class TestSeed:
    """Tests for the demo catalog seed."""

    @pytest.mark.asyncio
    async def test_seed_catalog(self) -> None:
        category_repo = InMemoryCategoryRepository()
        product_repo = InMemoryProductRepository()

        result = await seed_catalog(category_repo, product_repo)

        assert result == {"categories": 6, "products": 4}
        page = await product_repo.find_many(
            ProductQuery(statuses=(ProductStatus.PUBLISHED,))
        )
        assert page.total == 3

    def test_shared_instances_reset(self) -> None:
        first = get_memory_product_repository()
        assert get_memory_product_repository() is first
        reset_memory_repositories()
        assert get_memory_product_repository() is not first
