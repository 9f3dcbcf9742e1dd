"""Domain entities for the catalog.

Leaf entities are self-validating records. Each is built through a
``create`` classmethod that trims declared string fields, validates
every field in declaration order and raises ValidationError on the
first violated rule. Instances are frozen.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Self

from catalog_api.domain.base import Entity
from catalog_api.domain.exceptions import ValidationError
from catalog_api.domain.limits import DEFAULT_LIMITS, CatalogLimits
from catalog_api.domain.rules import (
    BARCODE_PATTERN,
    SKU_PATTERN,
    optional_text,
    require_count,
    require_id,
    require_int,
    require_pattern,
    require_text,
    require_timestamps,
)
from catalog_api.domain.value_objects import Money, ProductStatus


# ============================================================================
# Category Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class Category(Entity):
    """A node of the category hierarchy.

    Attributes:
        id: Category identifier.
        name: Trimmed display name.
        parent_id: Parent category, None for a root category.
        display_order: Position among siblings.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    name: str
    parent_id: str | None
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        parent_id: str | None,
        display_order: int,
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated category.

        Raises:
            ValidationError: If the name is blank or too long, the category
                is its own parent, or display_order is negative.
        """
        require_id(id, "Category id", field="id")
        name = require_text(
            name, "Category name", limits.max_category_name_length, field="name"
        )
        if parent_id is not None and parent_id == id:
            raise ValidationError(
                "Category cannot be its own parent", field="parent_id"
            )
        require_int(display_order, "Display order", minimum=0, field="display_order")
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            name=name,
            parent_id=parent_id,
            display_order=display_order,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def is_root(self) -> bool:
        """Whether this category sits at the top of the hierarchy."""
        return self.parent_id is None


# ============================================================================
# Product Option Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class ProductOption(Entity):
    """An axis of variation of a product (e.g. "Size").

    Attributes:
        id: Option identifier.
        product_id: Owning product.
        option_name: Trimmed axis name.
        display_order: Position among the product's options.
    """

    product_id: str
    option_name: str
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        product_id: str,
        option_name: str,
        display_order: int,
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated product option."""
        require_id(id, "Option id", field="id")
        require_id(product_id, "Product id", field="product_id")
        option_name = require_text(
            option_name, "Option name", limits.max_option_name_length, field="option_name"
        )
        require_int(display_order, "Display order", minimum=0, field="display_order")
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            product_id=product_id,
            option_name=option_name,
            display_order=display_order,
            created_at=created_at,
            updated_at=updated_at,
        )


# ============================================================================
# Product Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class Product(Entity):
    """A catalog product.

    A product always declares at least one option axis; simple products
    use a single placeholder option such as "Title".

    Attributes:
        id: Product identifier.
        name: Trimmed product name.
        description: Trimmed product description.
        category_id: Category the product is listed under.
        status: Publication status.
        options: Option axes, in the order given.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    name: str
    description: str
    category_id: str
    status: ProductStatus
    options: tuple[ProductOption, ...]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        description: str,
        category_id: str,
        status: ProductStatus | str,
        options: list[ProductOption] | tuple[ProductOption, ...],
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated product.

        Raises:
            ValidationError: If any field violates its constraint or the
                option count is outside the allowed range.
        """
        require_id(id, "Product id", field="id")
        name = require_text(
            name, "Product name", limits.max_product_name_length, field="name"
        )
        description = require_text(
            description,
            "Product description",
            limits.max_product_description_length,
            field="description",
        )
        require_id(category_id, "Category id", field="category_id")
        try:
            status = ProductStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in ProductStatus)
            raise ValidationError(
                f"Product status must be one of: {allowed}", field="status"
            ) from None
        require_count(
            options,
            "Product options",
            limits.min_options_per_product,
            limits.max_options_per_product,
            field="options",
        )
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            name=name,
            description=description,
            category_id=category_id,
            status=status,
            options=tuple(options),
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def option_names(self) -> frozenset[str]:
        """Names of all option axes declared by the product."""
        return frozenset(option.option_name for option in self.options)

    @property
    def is_published(self) -> bool:
        return self.status is ProductStatus.PUBLISHED


# ============================================================================
# Product Variant Option Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class ProductVariantOption(Entity):
    """Binds a variant to one value of an option axis (e.g. Size = M)."""

    product_variant_id: str
    option_name: str
    option_value: str
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        product_variant_id: str,
        option_name: str,
        option_value: str,
        display_order: int,
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated variant option."""
        require_id(id, "Variant option id", field="id")
        require_id(product_variant_id, "Variant id", field="product_variant_id")
        option_name = require_text(
            option_name, "Option name", limits.max_option_name_length, field="option_name"
        )
        option_value = require_text(
            option_value,
            "Option value",
            limits.max_option_value_length,
            field="option_value",
        )
        require_int(display_order, "Display order", minimum=0, field="display_order")
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            product_variant_id=product_variant_id,
            option_name=option_name,
            option_value=option_value,
            display_order=display_order,
            created_at=created_at,
            updated_at=updated_at,
        )


# ============================================================================
# Product Variant Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class ProductVariant(Entity):
    """A concrete purchasable SKU within a product.

    Attributes:
        id: Variant identifier.
        product_id: Owning product.
        sku: Trimmed stock keeping unit.
        barcode: JAN/CODE39 barcode, if any.
        image_url: Variant-specific image, if any.
        price: Unit price.
        display_order: Position among the product's variants.
        options: Option values identifying this variant.
    """

    product_id: str
    sku: str
    barcode: str | None
    image_url: str | None
    price: Money
    display_order: int
    options: tuple[ProductVariantOption, ...]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        product_id: str,
        sku: str,
        barcode: str | None,
        image_url: str | None,
        price: Money,
        display_order: int,
        options: list[ProductVariantOption] | tuple[ProductVariantOption, ...],
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated variant.

        Raises:
            ValidationError: If the SKU or barcode is malformed, the price
                or display order is out of range, or the option count is
                outside the allowed range.
        """
        require_id(id, "Variant id", field="id")
        require_id(product_id, "Product id", field="product_id")
        sku = require_text(sku, "SKU", limits.max_sku_length, field="sku")
        require_pattern(
            sku,
            SKU_PATTERN,
            "SKU may only contain letters, digits, hyphens and underscores",
            field="sku",
        )
        barcode = optional_text(
            barcode, "Barcode", limits.max_barcode_length, field="barcode"
        )
        if barcode is not None:
            require_pattern(
                barcode,
                BARCODE_PATTERN,
                "Barcode must use the JAN/CODE39 character set "
                "(letters, digits, '-', '.', '$', '/', '+', '%', space)",
                field="barcode",
            )
        image_url = optional_text(
            image_url, "Image URL", limits.max_image_url_length, field="image_url"
        )
        if not isinstance(price, Money):
            raise ValidationError("Price must be a Money value", field="price")
        if price.amount > limits.max_price:
            raise ValidationError(
                f"Price must be between 0 and {limits.max_price}", field="price"
            )
        require_int(
            display_order,
            "Variant display order",
            minimum=0,
            maximum=limits.max_variant_display_order,
            field="display_order",
        )
        require_count(
            options,
            "Variant options",
            limits.min_options_per_variant,
            limits.max_options_per_variant,
            field="options",
        )
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            product_id=product_id,
            sku=sku,
            barcode=barcode,
            image_url=image_url,
            price=price,
            display_order=display_order,
            options=tuple(options),
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def name(self) -> str:
        """Display name built from the option values, e.g. "M / Red"."""
        ordered = sorted(self.options, key=lambda o: o.display_order)
        return " / ".join(o.option_value for o in ordered)


# ============================================================================
# Product Image Entity
# ============================================================================


@dataclass(frozen=True, kw_only=True)
class ProductImage(Entity):
    """An image attached to a product, optionally to one of its variants."""

    product_id: str
    product_variant_id: str | None
    image_url: str
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        id: str,
        product_id: str,
        product_variant_id: str | None,
        image_url: str,
        display_order: int,
        created_at: datetime,
        updated_at: datetime,
        limits: CatalogLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Create a validated image."""
        require_id(id, "Image id", field="id")
        require_id(product_id, "Product id", field="product_id")
        if (
            not isinstance(image_url, str)
            or not image_url
            or len(image_url) > limits.max_image_url_length
        ):
            raise ValidationError(
                f"Image URL must be between 1 and {limits.max_image_url_length} characters",
                field="image_url",
            )
        require_int(
            display_order,
            "Image display order",
            minimum=limits.min_image_display_order,
            field="display_order",
        )
        require_timestamps(created_at, updated_at)

        return cls(
            id=id,
            product_id=product_id,
            product_variant_id=product_variant_id,
            image_url=image_url,
            display_order=display_order,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def is_variant_image(self) -> bool:
        return self.product_variant_id is not None
