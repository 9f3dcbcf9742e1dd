"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from catalog_api.domain.base import ValueObject
from catalog_api.domain.exceptions import ValidationError


# ============================================================================
# Product Status
# ============================================================================


class ProductStatus(str, Enum):
    """Publication status of a product."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True, order=True)
class Money(ValueObject):
    """Represents a non-negative monetary amount.

    The catalog is single-currency, so Money only wraps an integer
    amount in the smallest unit the storefront displays.

    Attributes:
        amount: Amount in the smallest currency unit.
    """

    amount: int

    def __post_init__(self) -> None:
        """Validate money constraints."""
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError("Money amount must be an integer", field="amount")
        if self.amount < 0:
            raise ValidationError("Money amount must be >= 0", field="amount")

    @classmethod
    def create(cls, amount: int) -> Self:
        """Create money from an integer amount.

        Args:
            amount: Non-negative amount.

        Returns:
            Money instance.

        Raises:
            ValidationError: If amount is negative.
        """
        return cls(amount=amount)

    @classmethod
    def zero(cls) -> Self:
        """Create zero amount money."""
        return cls(amount=0)

    def add(self, other: "Money") -> "Money":
        """Add two money amounts.

        Args:
            other: Money to add.

        Returns:
            New Money with sum.
        """
        return Money(amount=self.amount + other.amount)

    def scale(self, factor: int) -> "Money":
        """Multiply money by a non-negative quantity.

        Args:
            factor: Multiplier.

        Returns:
            New Money with product.

        Raises:
            ValidationError: If factor is negative.
        """
        if factor < 0:
            raise ValidationError("Quantity must be >= 0", field="factor")
        return Money(amount=self.amount * factor)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __mul__(self, factor: int) -> "Money":
        return self.scale(factor)

    def __rmul__(self, factor: int) -> "Money":
        return self.scale(factor)

    def to_int(self) -> int:
        """Return the plain numeric amount."""
        return self.amount

    def __str__(self) -> str:
        return str(self.amount)
