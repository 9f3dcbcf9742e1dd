"""Demo catalog data.

Seeds a small category tree and a handful of products. Products go
through CreateProductUseCase, so seeded data obeys every catalog rule.
"""

from datetime import datetime, timezone
from uuid import uuid4

import structlog

from catalog_api.application.dto import (
    CreateProductOptionRequest,
    CreateProductRequest,
    CreateVariantOptionRequest,
    CreateVariantRequest,
)
from catalog_api.application.ports import ProductRepository
from catalog_api.application.use_cases import CreateProductUseCase
from catalog_api.domain import Category, ProductStatus
from catalog_api.infrastructure.memory import InMemoryCategoryRepository
from catalog_api.infrastructure.repositories import SqlCategoryRepository

logger = structlog.get_logger()


# (name, parent name, display order)
DEMO_CATEGORIES: list[tuple[str, str | None, int]] = [
    ("Apparel", None, 0),
    ("Tops", "Apparel", 0),
    ("T-Shirts", "Tops", 0),
    ("Outerwear", "Apparel", 1),
    ("Electronics", None, 1),
    ("Audio", "Electronics", 0),
]


def demo_categories(now: datetime) -> list[Category]:
    """Build the demo category tree as a flat, parent-first list."""
    ids: dict[str, str] = {}
    categories = []
    for name, parent, display_order in DEMO_CATEGORIES:
        ids[name] = str(uuid4())
        categories.append(
            Category.create(
                id=ids[name],
                name=name,
                parent_id=ids[parent] if parent else None,
                display_order=display_order,
                created_at=now,
                updated_at=now,
            )
        )
    return categories


def _sized_variants(
    sku_prefix: str, sizes: list[str], price: int
) -> list[CreateVariantRequest]:
    return [
        CreateVariantRequest(
            sku=f"{sku_prefix}-{size}",
            price=price,
            display_order=index,
            options=[CreateVariantOptionRequest(option_name="Size", option_value=size)],
        )
        for index, size in enumerate(sizes)
    ]


def demo_products(category_ids: dict[str, str]) -> list[CreateProductRequest]:
    """Build create requests for the demo products."""
    return [
        CreateProductRequest(
            name="Organic Cotton T-Shirt",
            description="Soft crew-neck tee made from organic cotton.",
            category_id=category_ids["T-Shirts"],
            status=ProductStatus.PUBLISHED,
            options=[CreateProductOptionRequest(option_name="Size")],
            variants=_sized_variants("TEE-ORG", ["S", "M", "L"], 2900),
        ),
        CreateProductRequest(
            name="Rain Shell Jacket",
            description="Lightweight waterproof jacket with a packable hood.",
            category_id=category_ids["Outerwear"],
            status=ProductStatus.PUBLISHED,
            options=[CreateProductOptionRequest(option_name="Size")],
            variants=_sized_variants("JKT-RAIN", ["M", "L"], 12800),
        ),
        CreateProductRequest(
            name="Wireless Earbuds",
            description="True wireless earbuds with a charging case.",
            category_id=category_ids["Audio"],
            status=ProductStatus.PUBLISHED,
            options=[CreateProductOptionRequest(option_name="Color")],
            variants=[
                CreateVariantRequest(
                    sku="EAR-WL-BLK",
                    barcode="4901234567894",
                    price=8900,
                    display_order=0,
                    options=[
                        CreateVariantOptionRequest(
                            option_name="Color", option_value="Black"
                        )
                    ],
                ),
                CreateVariantRequest(
                    sku="EAR-WL-WHT",
                    barcode="4901234567900",
                    price=9400,
                    display_order=1,
                    options=[
                        CreateVariantOptionRequest(
                            option_name="Color", option_value="White"
                        )
                    ],
                ),
            ],
        ),
        CreateProductRequest(
            name="Studio Headphones",
            description="Closed-back headphones for monitoring. Coming soon.",
            category_id=category_ids["Audio"],
            status=ProductStatus.DRAFT,
            options=[CreateProductOptionRequest(option_name="Title")],
            variants=[
                CreateVariantRequest(
                    sku="HP-STUDIO",
                    price=19900,
                    options=[
                        CreateVariantOptionRequest(
                            option_name="Title", option_value="Default"
                        )
                    ],
                )
            ],
        ),
    ]


async def seed_catalog(
    category_repo: SqlCategoryRepository | InMemoryCategoryRepository,
    product_repo: ProductRepository,
) -> dict[str, int]:
    """Seed the demo categories and products.

    Args:
        category_repo: Repository the categories are saved to.
        product_repo: Repository the products are created in.

    Returns:
        Number of categories and products created.
    """
    now = datetime.now(timezone.utc)
    categories = demo_categories(now)
    for category in categories:
        await category_repo.save(category)

    use_case = CreateProductUseCase(category_repo, product_repo)
    requests = demo_products({c.name: c.id for c in categories})
    for request in requests:
        await use_case.execute(request)

    logger.info(
        "Catalog seeded",
        categories=len(categories),
        products=len(requests),
    )
    return {"categories": len(categories), "products": len(requests)}
