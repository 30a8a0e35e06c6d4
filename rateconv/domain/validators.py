"""Input validation utilities for rate conversion."""

import math

from rateconv.domain.exceptions import MissingArgumentError, ValidationError


def validate_quantity(quantity: float) -> None:
    """Validate a rate quantity.

    Args:
        quantity: Numeric quantity of a rate

    Raises:
        ValidationError: If quantity is not a finite number
    """
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        raise ValidationError(f"Quantity must be numeric, got {type(quantity)}")

    if not math.isfinite(quantity):
        raise ValidationError(f"Quantity must be finite, got {quantity}")


def validate_decimal_places(decimal_places: int) -> None:
    """Validate output precision.

    Args:
        decimal_places: Number of digits after the decimal point

    Raises:
        ValidationError: If decimal_places is not a non-negative integer
    """
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise ValidationError(
            f"Decimal places must be an integer, got {type(decimal_places)}"
        )

    if decimal_places < 0:
        raise ValidationError(
            f"Decimal places must be non-negative, got {decimal_places}"
        )


def validate_rate_argument(value: str | None, name: str) -> str:
    """Check that a required rate argument was supplied.

    Raises:
        MissingArgumentError: If the value is None or blank
    """
    if value is None or not value.strip():
        raise MissingArgumentError(f"Required argument {name} is missing or empty")
    return value
