"""Calendar period helpers for monthly and yearly views."""

import calendar
from datetime import date

MONTHLY = "monthly"
YEARLY = "yearly"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year: int) -> tuple[date, date]:
    """Return the first and last day of a year."""
    return date(year, 1, 1), date(year, 12, 31)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def period_bounds(period: str, year: int, month: int = 1) -> tuple[date, date]:
    """Return the date range of a monthly or yearly period.

    Raises:
        ValueError: If the period is neither monthly nor yearly.
    """
    if period == MONTHLY:
        return month_bounds(year, month)
    if period == YEARLY:
        return year_bounds(year)
    raise ValueError(
        f"Unsupported period: {period}. Expected monthly or yearly."
    )


def previous_period(
    period: str,
    year: int,
    month: int = 1,
) -> tuple[date, date]:
    """Return the range preceding the given period.

    The previous month for monthly views, the previous calendar year for
    yearly views.
    """
    if period == MONTHLY:
        prev_year, prev_month = shift_month(year, month, -1)
        return month_bounds(prev_year, prev_month)
    if period == YEARLY:
        return year_bounds(year - 1)
    raise ValueError(
        f"Unsupported period: {period}. Expected monthly or yearly."
    )


def last_n_months(today: date, n: int) -> list[tuple[int, int]]:
    """Return the last ``n`` (year, month) pairs ending with today, oldest first."""
    return [
        shift_month(today.year, today.month, -offset)
        for offset in range(n - 1, -1, -1)
    ]


__all__ = [
    "MONTHLY",
    "YEARLY",
    "month_bounds",
    "year_bounds",
    "shift_month",
    "period_bounds",
    "previous_period",
    "last_n_months",
]
