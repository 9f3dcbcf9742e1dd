"""Test data builders for catalog entities."""

from datetime import datetime, timedelta, timezone
from itertools import count

from catalog_api.domain import (
    DEFAULT_LIMITS,
    CatalogLimits,
    Category,
    Money,
    Product,
    ProductAggregate,
    ProductImage,
    ProductOption,
    ProductStatus,
    ProductVariant,
    ProductVariantOption,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

_ids = count(1)


def next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids)}"


def make_category(
    id: str = "cat-1",
    name: str = "Apparel",
    parent_id: str | None = None,
    display_order: int = 0,
) -> Category:
    return Category.create(
        id=id,
        name=name,
        parent_id=parent_id,
        display_order=display_order,
        created_at=NOW,
        updated_at=NOW,
    )


def make_option(
    product_id: str = "prod-1", option_name: str = "Size", display_order: int = 0
) -> ProductOption:
    return ProductOption.create(
        id=next_id("opt"),
        product_id=product_id,
        option_name=option_name,
        display_order=display_order,
        created_at=NOW,
        updated_at=NOW,
    )


def make_variant_option(
    variant_id: str,
    option_name: str = "Size",
    option_value: str = "M",
    display_order: int = 0,
) -> ProductVariantOption:
    return ProductVariantOption.create(
        id=next_id("vopt"),
        product_variant_id=variant_id,
        option_name=option_name,
        option_value=option_value,
        display_order=display_order,
        created_at=NOW,
        updated_at=NOW,
    )


def make_variant(
    product_id: str = "prod-1",
    sku: str = "SKU-1",
    price: int = 1000,
    barcode: str | None = None,
    display_order: int = 0,
    option_name: str = "Size",
    option_value: str = "M",
) -> ProductVariant:
    variant_id = next_id("var")
    return ProductVariant.create(
        id=variant_id,
        product_id=product_id,
        sku=sku,
        barcode=barcode,
        image_url=None,
        price=Money.create(price),
        display_order=display_order,
        options=[make_variant_option(variant_id, option_name, option_value)],
        created_at=NOW,
        updated_at=NOW,
    )


def make_product(
    id: str = "prod-1",
    name: str = "Cotton T-Shirt",
    description: str = "A soft cotton tee",
    category_id: str = "cat-1",
    status: ProductStatus | str = ProductStatus.PUBLISHED,
    option_names: tuple[str, ...] = ("Size",),
    created_at: datetime = NOW,
    limits: CatalogLimits = DEFAULT_LIMITS,
) -> Product:
    return Product.create(
        id=id,
        name=name,
        description=description,
        category_id=category_id,
        status=status,
        options=[
            make_option(id, option_name, index)
            for index, option_name in enumerate(option_names)
        ],
        created_at=created_at,
        updated_at=created_at,
        limits=limits,
    )


def make_image(
    product_id: str = "prod-1",
    display_order: int = 1,
    image_url: str | None = None,
    product_variant_id: str | None = None,
) -> ProductImage:
    image_id = next_id("img")
    return ProductImage.create(
        id=image_id,
        product_id=product_id,
        product_variant_id=product_variant_id,
        image_url=image_url or f"https://cdn.example.com/{image_id}.jpg",
        display_order=display_order,
        created_at=NOW,
        updated_at=NOW,
    )


def make_aggregate(
    id: str,
    name: str = "Cotton T-Shirt",
    description: str = "A soft cotton tee",
    category_id: str = "cat-1",
    status: ProductStatus = ProductStatus.PUBLISHED,
    prices: tuple[int, ...] = (1000,),
    minutes: int = 0,
    images: tuple[ProductImage, ...] = (),
) -> ProductAggregate:
    """Build a product aggregate with one variant per price.

    ``minutes`` offsets created_at from NOW so tests can control ordering.
    """
    product = make_product(
        id=id,
        name=name,
        description=description,
        category_id=category_id,
        status=status,
        created_at=NOW + timedelta(minutes=minutes),
    )
    variants = tuple(
        make_variant(
            product_id=id,
            sku=f"{id}-{index}",
            price=price,
            display_order=index,
            option_value=f"V{index}",
        )
        for index, price in enumerate(prices)
    )
    return ProductAggregate(product=product, variants=variants, images=images)
