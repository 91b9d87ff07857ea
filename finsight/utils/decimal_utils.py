"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value. ``None`` becomes zero, while
        ``NaN`` and negative values pass through unchanged.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def is_nan(value: Decimal) -> bool:
    """Return True when the Decimal is a NaN."""
    return value.is_nan()


__all__ = ["coerce_decimal", "is_nan"]
