"""Shared helpers for environment-driven CLI adapters."""

from datetime import date


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_int(value: str | None, default: int, logger) -> int:
    """Parse an integer, falling back to ``default`` when invalid."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid number '{value}'. Using {default}.")
        return default


__all__ = ["parse_date", "parse_int"]
