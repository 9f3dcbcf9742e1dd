"""Domain exceptions.

All domain-level errors that represent business rule violations.
These exceptions are raised by entities and aggregates when
invariants are violated, and by use cases when a referenced
entity does not exist.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when an entity or aggregate rejects its construction input.

    The message names the violated rule and is suitable for direct
    display to API clients.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Rule-specific message.
            field: Name of the offending field, when there is one.
        """
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for missing-entity errors raised by use cases."""

    error_code = "NOT_FOUND"


class CategoryNotFoundError(NotFoundError):
    """Raised when a referenced category does not exist."""

    error_code = "CATEGORY_NOT_FOUND"

    def __init__(self, category_id: str) -> None:
        """Initialize category not found error.

        Args:
            category_id: ID of the missing category.
        """
        super().__init__(
            f"Category not found: {category_id}",
            details={"category_id": category_id},
        )


class ProductNotFoundError(NotFoundError):
    """Raised when a requested product does not exist."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: ID of the missing product.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )
