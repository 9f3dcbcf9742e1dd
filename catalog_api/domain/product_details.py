"""Product aggregate root.

ProductDetails owns a Product together with its variants and images
and enforces the rules that span those entities. ProductAggregate is
the plain composite the product repository hands back on reads.
"""

from dataclasses import dataclass
from typing import Self

from catalog_api.domain.base import AggregateRoot
from catalog_api.domain.entities import Product, ProductImage, ProductVariant
from catalog_api.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ProductAggregate:
    """A product with its variants and images already attached.

    Built by repositories from joined rows; validated later by the
    aggregate roots and list projections.
    """

    product: Product
    variants: tuple[ProductVariant, ...] = ()
    images: tuple[ProductImage, ...] = ()

    @property
    def id(self) -> str:
        return self.product.id

    @property
    def category_id(self) -> str:
        return self.product.category_id


@dataclass(frozen=True)
class ProductDetails(AggregateRoot):
    """Aggregate root for a whole product.

    Use ``ProductDetails.create()``; it runs every cross-entity rule in
    order and either returns a consistent aggregate or raises.

    Attributes:
        product: The product entity.
        variants: Purchasable variants of the product.
        images: Images of the product and its variants.
    """

    product: Product
    variants: tuple[ProductVariant, ...]
    images: tuple[ProductImage, ...]

    @classmethod
    def create(
        cls,
        product: Product,
        variants: list[ProductVariant] | tuple[ProductVariant, ...],
        images: list[ProductImage] | tuple[ProductImage, ...],
    ) -> Self:
        """Create a product aggregate, enforcing all business rules.

        Args:
            product: Validated product entity.
            variants: Validated variants.
            images: Validated images.

        Returns:
            Immutable ProductDetails.

        Raises:
            ValidationError: On the first violated rule.
        """
        details = cls(product=product, variants=tuple(variants), images=tuple(images))
        details._validate_business_rules()
        return details

    @classmethod
    def from_aggregate(cls, aggregate: ProductAggregate) -> Self:
        """Validate a repository aggregate as a full product."""
        return cls.create(aggregate.product, aggregate.variants, aggregate.images)

    def _validate_business_rules(self) -> None:
        has_options = len(self.product.options) > 0
        has_variants = len(self.variants) > 0

        if has_options and not has_variants:
            raise ValidationError(
                "Product with options must have at least one variant",
                field="variants",
            )

        if has_variants and not has_options:
            raise ValidationError(
                "Product with variants must define options", field="options"
            )

        option_names = self.product.option_names
        for variant in self.variants:
            for variant_option in variant.options:
                if variant_option.option_name not in option_names:
                    raise ValidationError(
                        f'Variant option "{variant_option.option_name}" '
                        "is not defined on the product",
                        field="variants",
                    )

        seen_skus: set[str] = set()
        for variant in self.variants:
            if variant.sku in seen_skus:
                raise ValidationError(f'Duplicate SKU "{variant.sku}"', field="sku")
            seen_skus.add(variant.sku)

        seen_barcodes: set[str] = set()
        for variant in self.variants:
            if variant.barcode is None:
                continue
            if variant.barcode in seen_barcodes:
                raise ValidationError(
                    f'Duplicate barcode "{variant.barcode}"', field="barcode"
                )
            seen_barcodes.add(variant.barcode)

        if self.product.is_published and not has_variants:
            raise ValidationError(
                "Published product must have at least one variant",
                field="status",
            )
