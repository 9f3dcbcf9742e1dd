"""Converters from domain objects to response DTOs."""

from collections.abc import Iterable
from math import ceil

from catalog_api.application.dto import (
    AdminProductListItemDTO,
    CategoryTreeNodeDTO,
    CreateProductResponse,
    PaginationDTO,
    ProductDetailResponse,
    ProductImageDTO,
    ProductListItemDTO,
    ProductOptionDTO,
    ProductVariantDTO,
    VariantOptionDTO,
)
from catalog_api.domain import (
    AdminProductListItem,
    Category,
    CategoryTreeNode,
    Product,
    ProductAggregate,
    ProductDetails,
    ProductListItem,
    ProductVariant,
)


def pagination(page: int, per_page: int, total: int) -> PaginationDTO:
    """Build pagination info; total_pages is ceil(total / per_page)."""
    return PaginationDTO(
        page=page,
        per_page=per_page,
        total=total,
        total_pages=ceil(total / per_page) if total else 0,
    )


def category_node_to_dto(node: CategoryTreeNode) -> CategoryTreeNodeDTO:
    """Convert a tree node and its descendants."""
    category = node.category
    return CategoryTreeNodeDTO(
        id=category.id,
        name=category.name,
        parent_id=category.parent_id,
        display_order=category.display_order,
        created_at=category.created_at.isoformat(),
        updated_at=category.updated_at.isoformat(),
        children=[category_node_to_dto(child) for child in node.children],
    )


def list_item_to_dto(item: ProductListItem) -> ProductListItemDTO:
    return ProductListItemDTO(
        id=item.product.id,
        name=item.product.name,
        description=item.product.description,
        category_id=item.category.id,
        category_name=item.category.name,
        status=item.product.status,
        image_url=item.thumbnail_image_url,
        min_price=item.min_price.to_int(),
        max_price=item.max_price.to_int(),
        variant_count=item.variant_count,
        created_at=item.product.created_at,
        updated_at=item.product.updated_at,
    )


def admin_list_item_to_dto(item: AdminProductListItem) -> AdminProductListItemDTO:
    return AdminProductListItemDTO(
        id=item.product.id,
        name=item.product.name,
        description=item.product.description,
        category_id=item.category.id,
        category_name=item.category.name,
        status=item.product.status,
        image_url=item.thumbnail_image_url,
        min_price=item.min_price.to_int() if item.min_price else None,
        max_price=item.max_price.to_int() if item.max_price else None,
        variant_count=item.variant_count,
        is_publishable=item.is_publishable(),
        created_at=item.product.created_at,
        updated_at=item.product.updated_at,
    )


def _variant_to_dto(variant: ProductVariant) -> ProductVariantDTO:
    return ProductVariantDTO(
        id=variant.id,
        sku=variant.sku,
        barcode=variant.barcode,
        image_url=variant.image_url,
        price=variant.price.to_int(),
        display_order=variant.display_order,
        options=[
            VariantOptionDTO(
                id=option.id,
                option_name=option.option_name,
                option_value=option.option_value,
                display_order=option.display_order,
            )
            for option in variant.options
        ],
    )


def _product_fields(product: Product, variants: Iterable[ProductVariant]) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "category_id": product.category_id,
        "status": product.status,
        "options": [
            ProductOptionDTO(
                id=option.id,
                option_name=option.option_name,
                display_order=option.display_order,
            )
            for option in product.options
        ],
        "variants": [_variant_to_dto(v) for v in variants],
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def details_to_create_response(details: ProductDetails) -> CreateProductResponse:
    return CreateProductResponse(**_product_fields(details.product, details.variants))


def aggregate_to_detail_response(
    aggregate: ProductAggregate, category: Category
) -> ProductDetailResponse:
    """Convert a stored product for display.

    Stored products are shown as they are; drafts without variants
    come back with an empty variant list.
    """
    images = sorted(aggregate.images, key=lambda image: image.display_order)
    return ProductDetailResponse(
        **_product_fields(aggregate.product, aggregate.variants),
        category_name=category.name,
        images=[
            ProductImageDTO(
                id=image.id,
                product_variant_id=image.product_variant_id,
                image_url=image.image_url,
                display_order=image.display_order,
            )
            for image in images
        ],
    )
