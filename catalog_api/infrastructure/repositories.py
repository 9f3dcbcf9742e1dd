"""SQL repositories for the catalog.

Implement the repository contracts on top of an async SQLAlchemy
session. Rows are turned back into domain entities through their
validating ``create`` factories.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.application.ports import (
    CategoryRepository,
    ProductPage,
    ProductQuery,
    ProductRepository,
)
from catalog_api.domain import (
    Category,
    Money,
    Product,
    ProductAggregate,
    ProductDetails,
    ProductImage,
    ProductOption,
    ProductVariant,
    ProductVariantOption,
    ValidationError,
)
from catalog_api.infrastructure.models import (
    CategoryModel,
    ProductImageModel,
    ProductModel,
    ProductOptionModel,
    ProductVariantModel,
    ProductVariantOptionModel,
)


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ============================================================================
# Row -> Entity mapping
# ============================================================================


def category_from_row(row: CategoryModel) -> Category:
    return Category.create(
        id=row.id,
        name=row.name,
        parent_id=row.parent_id,
        display_order=row.display_order,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _variant_from_row(row: ProductVariantModel) -> ProductVariant:
    options = [
        ProductVariantOption.create(
            id=o.id,
            product_variant_id=o.product_variant_id,
            option_name=o.option_name,
            option_value=o.option_value,
            display_order=o.display_order,
            created_at=_as_utc(o.created_at),
            updated_at=_as_utc(o.updated_at),
        )
        for o in row.options
    ]
    return ProductVariant.create(
        id=row.id,
        product_id=row.product_id,
        sku=row.sku,
        barcode=row.barcode,
        image_url=row.image_url,
        price=Money.create(row.price),
        display_order=row.display_order,
        options=options,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def aggregate_from_row(row: ProductModel) -> ProductAggregate:
    """Build a ProductAggregate from a product row with loaded relations."""
    options = [
        ProductOption.create(
            id=o.id,
            product_id=o.product_id,
            option_name=o.option_name,
            display_order=o.display_order,
            created_at=_as_utc(o.created_at),
            updated_at=_as_utc(o.updated_at),
        )
        for o in row.options
    ]
    product = Product.create(
        id=row.id,
        name=row.name,
        description=row.description,
        category_id=row.category_id,
        status=row.status,
        options=options,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )
    images = [
        ProductImage.create(
            id=i.id,
            product_id=i.product_id,
            product_variant_id=i.product_variant_id,
            image_url=i.image_url,
            display_order=i.display_order,
            created_at=_as_utc(i.created_at),
            updated_at=_as_utc(i.updated_at),
        )
        for i in row.images
    ]
    return ProductAggregate(
        product=product,
        variants=tuple(_variant_from_row(v) for v in row.variants),
        images=tuple(images),
    )


# ============================================================================
# Category Repository
# ============================================================================


class SqlCategoryRepository(CategoryRepository):
    """Category repository backed by the ``categories`` table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_by_ids(self, ids: set[str]) -> dict[str, Category]:
        if not ids:
            return {}
        result = await self.session.execute(
            select(CategoryModel).where(CategoryModel.id.in_(ids))
        )
        return {row.id: category_from_row(row) for row in result.scalars().all()}

    async def find_all(self) -> list[Category]:
        result = await self.session.execute(
            select(CategoryModel).order_by(CategoryModel.display_order, CategoryModel.id)
        )
        return [category_from_row(row) for row in result.scalars().all()]

    async def save(self, category: Category) -> Category:
        """Insert a category (used for seeding and tests).

        Args:
            category: Category to save.

        Returns:
            Saved category.
        """
        self.session.add(
            CategoryModel(
                id=category.id,
                name=category.name,
                parent_id=category.parent_id,
                display_order=category.display_order,
                created_at=category.created_at,
                updated_at=category.updated_at,
            )
        )
        await self.session.flush()
        return category


# ============================================================================
# Product Repository
# ============================================================================


class SqlProductRepository(ProductRepository):
    """Product repository with filtering, sorting and pagination.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlProductRepository(session)
            page = await repo.find_many(
                ProductQuery(keyword="shirt", min_price=1000, per_page=10)
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_many(self, query: ProductQuery) -> ProductPage:
        """Find products with filtering, sorting, and pagination.

        Args:
            query: Filters, sort order and page.

        Returns:
            The requested page and the total number of matches.
        """
        conditions = self._build_conditions(query)
        where = and_(*conditions) if conditions else None

        count_stmt = select(func.count(ProductModel.id))
        if where is not None:
            count_stmt = count_stmt.where(where)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = select(ProductModel)
        if where is not None:
            stmt = stmt.where(where)

        # Sorting, with id as a stable tie-breaker
        sort_column = self._get_sort_column(query.sort_by)
        if query.order == "asc":
            stmt = stmt.order_by(sort_column.asc(), ProductModel.id.asc())
        else:
            stmt = stmt.order_by(sort_column.desc(), ProductModel.id.desc())

        stmt = stmt.limit(query.per_page).offset(query.offset)
        stmt = stmt.options(*self._load_options())

        result = await self.session.execute(stmt)
        products = [aggregate_from_row(row) for row in result.scalars().all()]
        return ProductPage(products=products, total=total)

    async def find_by_id(self, product_id: str) -> ProductAggregate | None:
        stmt = (
            select(ProductModel)
            .where(ProductModel.id == product_id)
            .options(*self._load_options())
        )
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        return aggregate_from_row(row) if row else None

    async def create(self, details: ProductDetails) -> None:
        """Insert a product with its options, variants and images.

        Raises:
            ValidationError: If one of the SKUs is already used by another
                product.
        """
        await self._ensure_skus_available([v.sku for v in details.variants])

        product = details.product
        row = ProductModel(
            id=product.id,
            name=product.name,
            description=product.description,
            category_id=product.category_id,
            status=product.status.value,
            created_at=product.created_at,
            updated_at=product.updated_at,
            options=[
                ProductOptionModel(
                    id=o.id,
                    option_name=o.option_name,
                    display_order=o.display_order,
                    created_at=o.created_at,
                    updated_at=o.updated_at,
                )
                for o in product.options
            ],
            variants=[
                ProductVariantModel(
                    id=v.id,
                    sku=v.sku,
                    barcode=v.barcode,
                    image_url=v.image_url,
                    price=v.price.to_int(),
                    display_order=v.display_order,
                    created_at=v.created_at,
                    updated_at=v.updated_at,
                    options=[
                        ProductVariantOptionModel(
                            id=vo.id,
                            option_name=vo.option_name,
                            option_value=vo.option_value,
                            display_order=vo.display_order,
                            created_at=vo.created_at,
                            updated_at=vo.updated_at,
                        )
                        for vo in v.options
                    ],
                )
                for v in details.variants
            ],
            images=[
                ProductImageModel(
                    id=i.id,
                    product_variant_id=i.product_variant_id,
                    image_url=i.image_url,
                    display_order=i.display_order,
                    created_at=i.created_at,
                    updated_at=i.updated_at,
                )
                for i in details.images
            ],
        )
        self.session.add(row)
        await self.session.flush()

    async def _ensure_skus_available(self, skus: Sequence[str]) -> None:
        if not skus:
            return
        result = await self.session.execute(
            select(ProductVariantModel.sku).where(ProductVariantModel.sku.in_(skus))
        )
        taken = result.scalars().first()
        if taken is not None:
            raise ValidationError(f'SKU "{taken}" is already in use', field="sku")

    def _build_conditions(self, query: ProductQuery) -> list[Any]:
        conditions: list[Any] = []

        if query.category_id is not None:
            conditions.append(ProductModel.category_id == query.category_id)

        if query.statuses:
            conditions.append(ProductModel.status.in_([s.value for s in query.statuses]))

        if query.keyword:
            conditions.append(
                or_(
                    ProductModel.name.icontains(query.keyword, autoescape=True),
                    ProductModel.description.icontains(query.keyword, autoescape=True),
                )
            )

        if query.has_price_filter:
            # Products with at least one variant inside the range
            price_conditions = []
            if query.min_price is not None:
                price_conditions.append(ProductVariantModel.price >= query.min_price)
            if query.max_price is not None:
                price_conditions.append(ProductVariantModel.price <= query.max_price)
            conditions.append(
                ProductModel.id.in_(
                    select(ProductVariantModel.product_id).where(and_(*price_conditions))
                )
            )

        return conditions

    def _load_options(self) -> list[Any]:
        return [
            selectinload(ProductModel.options),
            selectinload(ProductModel.variants).selectinload(ProductVariantModel.options),
            selectinload(ProductModel.images),
        ]

    def _get_sort_column(self, sort_by: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            sort_by: Sort field name.

        Returns:
            SQLAlchemy column.
        """
        columns = {
            "name": ProductModel.name,
            "created_at": ProductModel.created_at,
        }
        return columns.get(sort_by, ProductModel.created_at)
