"""Field-level guard functions shared by the catalog entities.

Each guard either returns the (possibly normalized) value or raises
ValidationError carrying a message that names the field and the rule.
"""

import re
from collections.abc import Sized
from datetime import datetime

from catalog_api.domain.exceptions import ValidationError

SKU_PATTERN = re.compile(r"^[A-Za-z0-9\-_]+$")
# JAN and CODE39 character set
BARCODE_PATTERN = re.compile(r"^[A-Za-z0-9\-.$/ +%]+$")


def require_text(value: str, label: str, max_length: int, field: str | None = None) -> str:
    """Trim a string and check it is non-blank and short enough.

    Args:
        value: Raw input.
        label: Human-readable field name used in messages.
        max_length: Maximum length after trimming.
        field: Machine field name reported in error details.

    Returns:
        The trimmed value.

    Raises:
        ValidationError: If the value is not a string, blank, or too long.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string", field=field)
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{label} must not be blank", field=field)
    if len(trimmed) > max_length:
        raise ValidationError(
            f"{label} must be at most {max_length} characters", field=field
        )
    return trimmed


def require_int(
    value: int,
    label: str,
    minimum: int | None = None,
    maximum: int | None = None,
    field: str | None = None,
) -> int:
    """Check an integer lies within optional inclusive bounds."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer", field=field)
    if minimum is not None and maximum is not None and not minimum <= value <= maximum:
        raise ValidationError(
            f"{label} must be between {minimum} and {maximum}", field=field
        )
    if minimum is not None and value < minimum:
        raise ValidationError(f"{label} must be >= {minimum}", field=field)
    if maximum is not None and value > maximum:
        raise ValidationError(f"{label} must be <= {maximum}", field=field)
    return value


def require_id(value: str, label: str, field: str | None = None) -> str:
    """Check an identifier is a non-empty string."""
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{label} is required", field=field)
    return value


def require_count(
    items: Sized,
    label: str,
    minimum: int,
    maximum: int,
    field: str | None = None,
) -> None:
    """Check a collection size lies within inclusive bounds."""
    size = len(items)
    if size < minimum or size > maximum:
        raise ValidationError(
            f"{label} must contain between {minimum} and {maximum} items, got {size}",
            field=field,
        )


def require_pattern(
    value: str,
    pattern: re.Pattern[str],
    message: str,
    field: str | None = None,
) -> str:
    """Check a string fully matches a compiled pattern."""
    if not pattern.fullmatch(value):
        raise ValidationError(message, field=field)
    return value


def optional_text(value: str | None, label: str, max_length: int, field: str | None = None) -> str | None:
    """Length-check an optional string without trimming it."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string", field=field)
    if len(value) > max_length:
        raise ValidationError(
            f"{label} must be at most {max_length} characters", field=field
        )
    return value


def require_timestamps(created_at: datetime, updated_at: datetime) -> None:
    """Check both audit timestamps are datetimes."""
    for name, value in (("created_at", created_at), ("updated_at", updated_at)):
        if not isinstance(value, datetime):
            raise ValidationError(f"{name} must be a datetime", field=name)
