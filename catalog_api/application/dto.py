"""Data transfer objects for the catalog use cases.

Pydantic models for use-case input and output. The HTTP layer uses
them directly as request bodies and response models; JSON field names
are camelCase.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.domain import ProductStatus


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Common Schemas
# ============================================================================


class PaginationDTO(CamelModel):
    """Pagination information for a list response."""

    page: int = Field(..., description="Current page number (1-based)")
    per_page: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="Total number of pages")


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryTreeNodeDTO(CamelModel):
    """A category with its children, recursively."""

    id: str
    name: str
    parent_id: str | None = None
    display_order: int
    created_at: str = Field(..., description="ISO-8601 timestamp")
    updated_at: str = Field(..., description="ISO-8601 timestamp")
    children: list["CategoryTreeNodeDTO"] = Field(default_factory=list)


class CategoryListResponse(CamelModel):
    """Response for the category tree."""

    categories: list[CategoryTreeNodeDTO]


# ============================================================================
# Product List Schemas
# ============================================================================


class ProductListItemDTO(CamelModel):
    """A product in the storefront list."""

    id: str
    name: str
    description: str
    category_id: str
    category_name: str
    status: ProductStatus
    image_url: str | None = Field(default=None, description="Thumbnail image URL")
    min_price: int
    max_price: int
    variant_count: int
    created_at: datetime
    updated_at: datetime


class ProductListResponse(CamelModel):
    """Paginated storefront product list."""

    items: list[ProductListItemDTO]
    pagination: PaginationDTO


class AdminProductListItemDTO(CamelModel):
    """A product in the admin list; prices are null without variants."""

    id: str
    name: str
    description: str
    category_id: str
    category_name: str
    status: ProductStatus
    image_url: str | None = None
    min_price: int | None = None
    max_price: int | None = None
    variant_count: int
    is_publishable: bool
    created_at: datetime
    updated_at: datetime


class AdminProductListResponse(CamelModel):
    """Paginated admin product list with status counts for the page."""

    items: list[AdminProductListItemDTO]
    pagination: PaginationDTO
    draft_count: int = 0
    published_count: int = 0


# ============================================================================
# Product Detail Schemas
# ============================================================================


class ProductOptionDTO(CamelModel):
    id: str
    option_name: str
    display_order: int


class VariantOptionDTO(CamelModel):
    id: str
    option_name: str
    option_value: str
    display_order: int


class ProductVariantDTO(CamelModel):
    id: str
    sku: str
    barcode: str | None = None
    image_url: str | None = None
    price: int
    display_order: int
    options: list[VariantOptionDTO]


class ProductImageDTO(CamelModel):
    id: str
    product_variant_id: str | None = None
    image_url: str
    display_order: int


class CreateProductResponse(CamelModel):
    """A newly created product with its options and variants."""

    id: str
    name: str
    description: str
    category_id: str
    status: ProductStatus
    options: list[ProductOptionDTO]
    variants: list[ProductVariantDTO]
    created_at: datetime
    updated_at: datetime


class ProductDetailResponse(CreateProductResponse):
    """A product with options, variants, images and category name."""

    category_name: str
    images: list[ProductImageDTO]


# ============================================================================
# Create Product Request
# ============================================================================


class CreateProductOptionRequest(CamelModel):
    option_name: str
    display_order: int = 0


class CreateVariantOptionRequest(CamelModel):
    option_name: str
    option_value: str
    display_order: int = 0


class CreateVariantRequest(CamelModel):
    sku: str
    barcode: str | None = None
    image_url: str | None = None
    price: int
    display_order: int = 0
    options: list[CreateVariantOptionRequest] = Field(default_factory=list)


class CreateProductRequest(CamelModel):
    """Input for creating a product.

    Field limits are enforced by the domain entities so that every
    rule violation surfaces with the same message format.
    """

    name: str
    description: str
    category_id: str
    status: ProductStatus = ProductStatus.DRAFT
    options: list[CreateProductOptionRequest] = Field(default_factory=list)
    variants: list[CreateVariantRequest] = Field(default_factory=list)
