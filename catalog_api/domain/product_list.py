"""Product list projections.

Read-side projections that pair a product with its category, images
and variants and annotate it with a thumbnail and a price range.
The storefront list requires every product to have a variant; the
admin list also shows products that do not have one yet.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from catalog_api.domain.entities import Category, Product, ProductImage, ProductVariant
from catalog_api.domain.exceptions import ValidationError
from catalog_api.domain.limits import DEFAULT_LIMITS, CatalogLimits
from catalog_api.domain.value_objects import Money, ProductStatus


# ============================================================================
# Shared helpers
# ============================================================================


def _check_variant_ownership(product: Product, variants: Sequence[ProductVariant]) -> None:
    if any(v.product_id != product.id for v in variants):
        raise ValidationError(
            "All variants must belong to the same product", field="variants"
        )


def _check_variant_count(
    variants: Sequence[ProductVariant], minimum: int, maximum: int
) -> None:
    if len(variants) < minimum:
        raise ValidationError(
            "Product must have at least one variant", field="variants"
        )
    if len(variants) > maximum:
        raise ValidationError(
            f"Product can have at most {maximum} variants", field="variants"
        )


def select_thumbnail(images: Sequence[ProductImage]) -> str | None:
    """Return the URL of the image with the lowest display order.

    Ties go to the image that comes first in the input.
    """
    if not images:
        return None
    return min(images, key=lambda image: image.display_order).image_url


def price_range(variants: Sequence[ProductVariant]) -> tuple[Money, Money] | None:
    """Return (min, max) variant price, or None when there are no variants."""
    if not variants:
        return None
    prices = [v.price for v in variants]
    return min(prices), max(prices)


def _check_page_size(items: Sequence[object], limits: CatalogLimits) -> None:
    if len(items) > limits.max_items_per_page:
        raise ValidationError(
            f"A page can hold at most {limits.max_items_per_page} products",
            field="items",
        )


# ============================================================================
# Storefront projection
# ============================================================================


@dataclass(frozen=True)
class ProductListItem:
    """A product as shown in the storefront list.

    Attributes:
        product: The product.
        category: Category the product is listed under.
        thumbnail_image_url: URL of the first image, if any.
        min_price: Lowest variant price.
        max_price: Highest variant price.
        variant_count: Number of variants.
    """

    product: Product
    category: Category
    thumbnail_image_url: str | None
    min_price: Money
    max_price: Money
    variant_count: int

    @classmethod
    def create(
        cls,
        product: Product,
        category: Category,
        images: Sequence[ProductImage],
        variants: Sequence[ProductVariant],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a storefront list item.

        Raises:
            ValidationError: If a variant belongs to another product or
                the product has no variants or too many.
        """
        _check_variant_ownership(product, variants)
        _check_variant_count(variants, 1, limits.max_variants_per_product)

        # Non-empty after the count check
        min_price, max_price = price_range(variants)  # type: ignore[misc]

        return cls(
            product=product,
            category=category,
            thumbnail_image_url=select_thumbnail(images),
            min_price=min_price,
            max_price=max_price,
            variant_count=len(variants),
        )


@dataclass(frozen=True)
class ProductList:
    """One page of storefront list items."""

    items: tuple[ProductListItem, ...]

    @classmethod
    def create(
        cls,
        items: Sequence[ProductListItem],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a storefront page, checking its size."""
        _check_page_size(items, limits)
        return cls(items=tuple(items))

    @property
    def count(self) -> int:
        return len(self.items)


# ============================================================================
# Admin projection
# ============================================================================


@dataclass(frozen=True)
class AdminProductListItem:
    """A product as shown in the admin list.

    Unlike the storefront item, products still being drafted may have
    no variants; their price range is then None.
    """

    product: Product
    category: Category
    thumbnail_image_url: str | None
    min_price: Money | None
    max_price: Money | None
    variant_count: int

    @classmethod
    def create(
        cls,
        product: Product,
        category: Category,
        images: Sequence[ProductImage],
        variants: Sequence[ProductVariant],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create an admin list item.

        Raises:
            ValidationError: If a variant belongs to another product or
                there are too many variants.
        """
        _check_variant_ownership(product, variants)
        _check_variant_count(variants, 0, limits.max_variants_per_product)

        prices = price_range(variants)
        min_price, max_price = prices if prices else (None, None)

        return cls(
            product=product,
            category=category,
            thumbnail_image_url=select_thumbnail(images),
            min_price=min_price,
            max_price=max_price,
            variant_count=len(variants),
        )

    def is_publishable(self) -> bool:
        """Whether the product's current state is consistent for publishing.

        A published product without variants is not.
        """
        return not (
            self.product.status is ProductStatus.PUBLISHED and self.variant_count == 0
        )


@dataclass(frozen=True)
class AdminProductList:
    """One page of admin list items."""

    items: tuple[AdminProductListItem, ...]

    @classmethod
    def create(
        cls,
        items: Sequence[AdminProductListItem],
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create an admin page, checking its size."""
        _check_page_size(items, limits)
        return cls(items=tuple(items))

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def draft_count(self) -> int:
        return sum(1 for i in self.items if i.product.status is ProductStatus.DRAFT)

    @property
    def published_count(self) -> int:
        return sum(1 for i in self.items if i.product.status is ProductStatus.PUBLISHED)
