"""Tests for the product list projections."""

import pytest

from catalog_api.domain import (
    AdminProductList,
    AdminProductListItem,
    CatalogLimits,
    Money,
    ProductList,
    ProductListItem,
    ProductStatus,
    ValidationError,
)
from catalog_api.domain.product_list import price_range, select_thumbnail
from factories import make_category, make_image, make_product, make_variant


def make_item(**overrides) -> ProductListItem:
    fields = {
        "product": make_product(),
        "category": make_category(),
        "images": [],
        "variants": [make_variant(price=1000)],
    }
    fields.update(overrides)
    return ProductListItem.create(**fields)


class TestSelectThumbnail:
    """Tests for thumbnail selection."""

    def test_no_images(self) -> None:
        assert select_thumbnail([]) is None

    def test_lowest_display_order_wins(self) -> None:
        images = [
            make_image(display_order=3, image_url="https://x/3.jpg"),
            make_image(display_order=1, image_url="https://x/1.jpg"),
            make_image(display_order=2, image_url="https://x/2.jpg"),
        ]
        assert select_thumbnail(images) == "https://x/1.jpg"

    def test_ties_go_to_first_in_input(self) -> None:
        images = [
            make_image(display_order=1, image_url="https://x/first.jpg"),
            make_image(display_order=1, image_url="https://x/second.jpg"),
        ]
        assert select_thumbnail(images) == "https://x/first.jpg"


class TestPriceRange:
    def test_empty(self) -> None:
        assert price_range([]) is None

    def test_min_and_max(self) -> None:
        variants = [
            make_variant(sku="A", price=3000),
            make_variant(sku="B", price=1000),
            make_variant(sku="C", price=2000),
        ]
        assert price_range(variants) == (Money.create(1000), Money.create(3000))


class TestProductListItem:
    """Tests for ProductListItem.create()."""

    def test_create(self) -> None:
        item = make_item(
            variants=[make_variant(sku="A", price=2500), make_variant(sku="B", price=1500)],
            images=[make_image(display_order=2), make_image(display_order=1, image_url="https://x/t.jpg")],
        )
        assert item.min_price == Money.create(1500)
        assert item.max_price == Money.create(2500)
        assert item.variant_count == 2
        assert item.thumbnail_image_url == "https://x/t.jpg"

    def test_single_variant_price_range(self) -> None:
        item = make_item(variants=[make_variant(price=1200)])
        assert item.min_price == item.max_price == Money.create(1200)

    def test_requires_a_variant(self) -> None:
        with pytest.raises(ValidationError, match="Product must have at least one variant"):
            make_item(variants=[])

    def test_variant_count_limit(self) -> None:
        limits = CatalogLimits(max_variants_per_product=1)
        variants = [make_variant(sku="A"), make_variant(sku="B")]
        with pytest.raises(ValidationError, match="Product can have at most 1 variants"):
            make_item(variants=variants, limits=limits)

    def test_variants_must_belong_to_product(self) -> None:
        with pytest.raises(
            ValidationError, match="All variants must belong to the same product"
        ):
            make_item(variants=[make_variant(product_id="other")])


class TestProductList:
    def test_count(self) -> None:
        product_list = ProductList.create([make_item(), make_item()])
        assert product_list.count == 2

    def test_page_size_limit(self) -> None:
        limits = CatalogLimits(max_items_per_page=1)
        with pytest.raises(ValidationError, match="A page can hold at most 1 products"):
            ProductList.create([make_item(), make_item()], limits=limits)


class TestAdminProductList:
    """Tests for the admin projection."""

    def test_item_without_variants(self) -> None:
        item = AdminProductListItem.create(
            product=make_product(status=ProductStatus.DRAFT),
            category=make_category(),
            images=[],
            variants=[],
        )
        assert item.min_price is None
        assert item.max_price is None
        assert item.variant_count == 0
        assert item.is_publishable()

    def test_published_without_variants_is_not_publishable(self) -> None:
        item = AdminProductListItem.create(
            product=make_product(status=ProductStatus.PUBLISHED),
            category=make_category(),
            images=[],
            variants=[],
        )
        assert not item.is_publishable()

    def test_status_counts(self) -> None:
        def admin_item(product_id: str, status: ProductStatus) -> AdminProductListItem:
            return AdminProductListItem.create(
                product=make_product(id=product_id, status=status),
                category=make_category(),
                images=[],
                variants=[make_variant(product_id=product_id, sku=product_id)],
            )

        product_list = AdminProductList.create(
            [
                admin_item("p1", ProductStatus.DRAFT),
                admin_item("p2", ProductStatus.PUBLISHED),
                admin_item("p3", ProductStatus.PUBLISHED),
                admin_item("p4", ProductStatus.ARCHIVED),
            ]
        )
        assert product_list.count == 4
        assert product_list.draft_count == 1
        assert product_list.published_count == 2
