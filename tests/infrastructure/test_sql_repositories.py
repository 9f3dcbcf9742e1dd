"""Tests for the SQL repositories on an in-memory SQLite database."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.application.ports import ProductQuery
from catalog_api.domain import ProductDetails, ProductStatus, ValidationError
from catalog_api.infrastructure import models  # noqa: F401
from catalog_api.infrastructure.database import Base
from catalog_api.infrastructure.repositories import (
    SqlCategoryRepository,
    SqlProductRepository,
)
from factories import NOW, make_category, make_image, make_product, make_variant


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory database."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def category_repo(session: AsyncSession) -> SqlCategoryRepository:
    repo = SqlCategoryRepository(session)
    await repo.save(make_category("cat-1", "Apparel"))
    await repo.save(make_category("cat-2", "Tops", parent_id="cat-1"))
    return repo


@pytest_asyncio.fixture
async def product_repo(
    session: AsyncSession, category_repo: SqlCategoryRepository
) -> SqlProductRepository:
    return SqlProductRepository(session)


def make_details(
    product_id: str,
    name: str = "Cotton T-Shirt",
    description: str = "A soft cotton tee",
    category_id: str = "cat-1",
    status: ProductStatus = ProductStatus.PUBLISHED,
    prices: tuple[int, ...] = (1000,),
    minutes: int = 0,
) -> ProductDetails:
    product = make_product(
        id=product_id,
        name=name,
        description=description,
        category_id=category_id,
        status=status,
        created_at=NOW + timedelta(minutes=minutes),
    )
    variants = [
        make_variant(
            product_id=product_id,
            sku=f"{product_id}-{index}",
            price=price,
            display_order=index,
            option_value=f"V{index}",
        )
        for index, price in enumerate(prices)
    ]
    images = [make_image(product_id, display_order=1)]
    return ProductDetails.create(product, variants, images)


class TestSqlCategoryRepository:
    """Tests for SqlCategoryRepository."""

    @pytest.mark.asyncio
    async def test_find_all(self, category_repo: SqlCategoryRepository) -> None:
        categories = await category_repo.find_all()
        assert {c.id for c in categories} == {"cat-1", "cat-2"}
        assert all(c.created_at.tzinfo is not None for c in categories)

    @pytest.mark.asyncio
    async def test_find_by_ids(self, category_repo: SqlCategoryRepository) -> None:
        found = await category_repo.find_by_ids({"cat-2", "missing"})
        assert list(found) == ["cat-2"]
        assert found["cat-2"].parent_id == "cat-1"

    @pytest.mark.asyncio
    async def test_find_by_ids_empty(self, category_repo: SqlCategoryRepository) -> None:
        assert await category_repo.find_by_ids(set()) == {}


class TestSqlProductRepository:
    """Tests for SqlProductRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, product_repo: SqlProductRepository) -> None:
        details = make_details("p1", prices=(1000, 2000))
        await product_repo.create(details)

        aggregate = await product_repo.find_by_id("p1")

        assert aggregate is not None
        assert aggregate.product.name == "Cotton T-Shirt"
        assert aggregate.product.created_at == NOW
        assert [o.option_name for o in aggregate.product.options] == ["Size"]
        assert [v.price.amount for v in aggregate.variants] == [1000, 2000]
        assert aggregate.variants[0].options[0].option_name == "Size"
        assert len(aggregate.images) == 1
        assert ProductDetails.from_aggregate(aggregate) == details

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, product_repo: SqlProductRepository) -> None:
        assert await product_repo.find_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_sku_already_in_use(self, product_repo: SqlProductRepository) -> None:
        await product_repo.create(make_details("p1"))
        clash = make_details("p2")
        clash = ProductDetails.create(
            clash.product,
            [make_variant(product_id="p2", sku="p1-0")],
            [],
        )

        with pytest.raises(ValidationError, match='SKU "p1-0" is already in use'):
            await product_repo.create(clash)

    @pytest.mark.asyncio
    async def test_find_many_filters_and_counts(
        self, product_repo: SqlProductRepository
    ) -> None:
        await product_repo.create(make_details("p1", name="Blue Shirt", prices=(500,)))
        await product_repo.create(
            make_details("p2", name="Red Shirt", prices=(1500, 5000), category_id="cat-2")
        )
        await product_repo.create(
            make_details("p3", name="Jacket", status=ProductStatus.DRAFT, prices=(9000,))
        )

        page = await product_repo.find_many(
            ProductQuery(statuses=(ProductStatus.PUBLISHED,))
        )
        assert page.total == 2

        page = await product_repo.find_many(ProductQuery(keyword="SHIRT"))
        assert {a.id for a in page.products} == {"p1", "p2"}

        page = await product_repo.find_many(ProductQuery(category_id="cat-2"))
        assert [a.id for a in page.products] == ["p2"]

        # Any variant within the range keeps the product
        page = await product_repo.find_many(ProductQuery(min_price=4000, max_price=6000))
        assert [a.id for a in page.products] == ["p2"]
        assert len(page.products[0].variants) == 2

    @pytest.mark.asyncio
    async def test_keyword_matches_description(
        self, product_repo: SqlProductRepository
    ) -> None:
        await product_repo.create(make_details("p1", description="Made of 100% wool"))
        await product_repo.create(make_details("p2", description="Cotton"))

        page = await product_repo.find_many(ProductQuery(keyword="100%"))

        assert [a.id for a in page.products] == ["p1"]

    @pytest.mark.asyncio
    async def test_sort_and_paginate(self, product_repo: SqlProductRepository) -> None:
        for index, name in enumerate(["Charlie", "Alpha", "Bravo"]):
            await product_repo.create(make_details(f"p{index}", name=name, minutes=index))

        page = await product_repo.find_many(ProductQuery(sort_by="name", order="asc"))
        assert [a.product.name for a in page.products] == ["Alpha", "Bravo", "Charlie"]

        page = await product_repo.find_many(ProductQuery(page=2, per_page=2))
        assert page.total == 3
        # Newest first: p2, p1 | p0
        assert [a.id for a in page.products] == ["p0"]
