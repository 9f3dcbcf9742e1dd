"""Catalog business limits.

Every numeric bound enforced by the domain lives here so that
tests can shrink a limit instead of building hundreds of objects.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogLimits:
    """Bounds enforced by entities, aggregates and projections."""

    # Category
    max_category_name_length: int = 50

    # Product
    max_product_name_length: int = 200
    max_product_description_length: int = 4096
    min_options_per_product: int = 1
    max_options_per_product: int = 5

    # Options
    max_option_name_length: int = 50
    max_option_value_length: int = 50

    # Variant
    max_sku_length: int = 50
    max_barcode_length: int = 30
    max_image_url_length: int = 500
    max_price: int = 999_999
    max_variant_display_order: int = 500
    min_options_per_variant: int = 1
    max_options_per_variant: int = 5

    # Image
    min_image_display_order: int = 1

    # Category tree
    max_tree_depth: int = 3
    max_root_categories: int = 20
    max_children_per_category: int = 30

    # Lists
    max_items_per_page: int = 100
    max_variants_per_product: int = 100


DEFAULT_LIMITS = CatalogLimits()
