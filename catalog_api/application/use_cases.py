"""Catalog use cases.

Orchestrates the catalog operations:
- Creating a product with its options and variants
- Fetching a single product with its details
- Listing products for the storefront and for administrators
- Listing the category tree

Use cases depend only on the repository contracts in
``catalog_api.application.ports`` and raise domain errors unchanged.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

import structlog

from catalog_api.application.dto import (
    AdminProductListResponse,
    CategoryListResponse,
    CreateProductRequest,
    CreateProductResponse,
    ProductDetailResponse,
    ProductListResponse,
)
from catalog_api.application.mappers import (
    admin_list_item_to_dto,
    aggregate_to_detail_response,
    category_node_to_dto,
    details_to_create_response,
    list_item_to_dto,
    pagination,
)
from catalog_api.application.ports import (
    CategoryRepository,
    ProductQuery,
    ProductRepository,
)
from catalog_api.domain import (
    DEFAULT_LIMITS,
    AdminProductList,
    AdminProductListItem,
    CatalogLimits,
    Category,
    CategoryNotFoundError,
    CategoryTree,
    Money,
    Product,
    ProductAggregate,
    ProductDetails,
    ProductList,
    ProductListItem,
    ProductNotFoundError,
    ProductOption,
    ProductStatus,
    ProductVariant,
    ProductVariantOption,
)

logger = structlog.get_logger()


def _new_id() -> str:
    return str(uuid4())


async def _resolve_categories(
    category_repo: CategoryRepository, products: Iterable[ProductAggregate]
) -> dict[str, Category]:
    """Fetch the categories of a page of products in one call."""
    ids = {aggregate.category_id for aggregate in products}
    if not ids:
        return {}
    return await category_repo.find_by_ids(ids)


def _category_for(categories: dict[str, Category], category_id: str) -> Category:
    category = categories.get(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


# ============================================================================
# Create Product
# ============================================================================


class CreateProductUseCase:
    """Creates a product together with its options and variants."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        limits: CatalogLimits = DEFAULT_LIMITS,
        request_id: str | None = None,
    ) -> None:
        self.category_repo = category_repo
        self.product_repo = product_repo
        self.limits = limits
        self.request_id = request_id

    async def execute(self, request: CreateProductRequest) -> CreateProductResponse:
        """Create and persist a product.

        The whole aggregate is validated before anything is written.

        Args:
            request: Product fields, options and variants.

        Returns:
            The created product.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            ValidationError: If any entity or aggregate rule is violated.
        """
        categories = await self.category_repo.find_by_ids({request.category_id})
        if request.category_id not in categories:
            raise CategoryNotFoundError(request.category_id)

        now = datetime.now(timezone.utc)
        product_id = _new_id()

        options = [
            ProductOption.create(
                id=_new_id(),
                product_id=product_id,
                option_name=option.option_name,
                display_order=option.display_order,
                created_at=now,
                updated_at=now,
                limits=self.limits,
            )
            for option in request.options
        ]

        variants = []
        for variant in request.variants:
            variant_id = _new_id()
            variant_options = [
                ProductVariantOption.create(
                    id=_new_id(),
                    product_variant_id=variant_id,
                    option_name=option.option_name,
                    option_value=option.option_value,
                    display_order=option.display_order,
                    created_at=now,
                    updated_at=now,
                    limits=self.limits,
                )
                for option in variant.options
            ]
            variants.append(
                ProductVariant.create(
                    id=variant_id,
                    product_id=product_id,
                    sku=variant.sku,
                    barcode=variant.barcode,
                    image_url=variant.image_url,
                    price=Money.create(variant.price),
                    display_order=variant.display_order,
                    options=variant_options,
                    created_at=now,
                    updated_at=now,
                    limits=self.limits,
                )
            )

        product = Product.create(
            id=product_id,
            name=request.name,
            description=request.description,
            category_id=request.category_id,
            status=request.status,
            options=options,
            created_at=now,
            updated_at=now,
            limits=self.limits,
        )

        details = ProductDetails.create(product, variants, [])
        await self.product_repo.create(details)

        logger.info(
            "Product created",
            product_id=product_id,
            category_id=request.category_id,
            status=product.status.value,
            variant_count=len(variants),
            request_id=self.request_id,
        )

        return details_to_create_response(details)


# ============================================================================
# Get Product
# ============================================================================


class GetProductUseCase:
    """Fetches one product with its variants, images and category."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        request_id: str | None = None,
    ) -> None:
        self.category_repo = category_repo
        self.product_repo = product_repo
        self.request_id = request_id

    async def execute(self, product_id: str) -> ProductDetailResponse:
        """Get a product by ID.

        Raises:
            ProductNotFoundError: If the product does not exist.
            CategoryNotFoundError: If its category no longer exists.
        """
        aggregate = await self.product_repo.find_by_id(product_id)
        if aggregate is None:
            raise ProductNotFoundError(product_id)

        categories = await _resolve_categories(self.category_repo, [aggregate])
        category = _category_for(categories, aggregate.category_id)

        return aggregate_to_detail_response(aggregate, category)


# ============================================================================
# List Products
# ============================================================================


class ListProductsUseCase:
    """Lists products for the storefront.

    Only published products are returned unless the query names
    statuses explicitly. Every listed product must have a variant.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        limits: CatalogLimits = DEFAULT_LIMITS,
        request_id: str | None = None,
    ) -> None:
        self.category_repo = category_repo
        self.product_repo = product_repo
        self.limits = limits
        self.request_id = request_id

    async def execute(self, query: ProductQuery) -> ProductListResponse:
        """Return one page of the storefront list.

        Raises:
            CategoryNotFoundError: If a listed product's category is missing.
            ValidationError: If a listed product has no variants.
        """
        if query.statuses is None:
            query = replace(query, statuses=(ProductStatus.PUBLISHED,))

        page = await self.product_repo.find_many(query)
        categories = await _resolve_categories(self.category_repo, page.products)

        product_list = ProductList.create(
            [
                ProductListItem.create(
                    product=aggregate.product,
                    category=_category_for(categories, aggregate.category_id),
                    images=aggregate.images,
                    variants=aggregate.variants,
                    limits=self.limits,
                )
                for aggregate in page.products
            ],
            limits=self.limits,
        )

        logger.debug(
            "Products listed",
            page=query.page,
            count=product_list.count,
            total=page.total,
            request_id=self.request_id,
        )

        return ProductListResponse(
            items=[list_item_to_dto(item) for item in product_list.items],
            pagination=pagination(query.page, query.per_page, page.total),
        )


class ListAdminProductsUseCase:
    """Lists products of every status for administrators."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
        limits: CatalogLimits = DEFAULT_LIMITS,
        request_id: str | None = None,
    ) -> None:
        self.category_repo = category_repo
        self.product_repo = product_repo
        self.limits = limits
        self.request_id = request_id

    async def execute(self, query: ProductQuery) -> AdminProductListResponse:
        """Return one page of the admin list.

        Products without variants are included with null prices.
        """
        page = await self.product_repo.find_many(query)
        categories = await _resolve_categories(self.category_repo, page.products)

        product_list = AdminProductList.create(
            [
                AdminProductListItem.create(
                    product=aggregate.product,
                    category=_category_for(categories, aggregate.category_id),
                    images=aggregate.images,
                    variants=aggregate.variants,
                    limits=self.limits,
                )
                for aggregate in page.products
            ],
            limits=self.limits,
        )

        logger.debug(
            "Admin products listed",
            page=query.page,
            count=product_list.count,
            total=page.total,
            request_id=self.request_id,
        )

        return AdminProductListResponse(
            items=[admin_list_item_to_dto(item) for item in product_list.items],
            pagination=pagination(query.page, query.per_page, page.total),
            draft_count=product_list.draft_count,
            published_count=product_list.published_count,
        )


# ============================================================================
# List Categories
# ============================================================================


class ListCategoriesUseCase:
    """Returns every category arranged as a tree."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        limits: CatalogLimits = DEFAULT_LIMITS,
        request_id: str | None = None,
    ) -> None:
        self.category_repo = category_repo
        self.limits = limits
        self.request_id = request_id

    async def execute(self) -> CategoryListResponse:
        categories = await self.category_repo.find_all()
        tree = CategoryTree.from_flat_list(categories, limits=self.limits)

        dropped = len(categories) - len(tree)
        if dropped:
            logger.warning(
                "Categories unreachable from a root were dropped",
                dropped=dropped,
                request_id=self.request_id,
            )

        return CategoryListResponse(
            categories=[category_node_to_dto(root) for root in tree.roots]
        )
