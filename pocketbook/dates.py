"""Date utilities for pocketbook.

Pure functions for month ranges, transaction date parsing and normalisation.
"""

import calendar
from datetime import date, datetime

import pandas as pd


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    """Calculate the inclusive bounds of a calendar month.

    Args:
        month: Month number (1-12).
        year: Four digit year.

    Returns:
        Tuple of (start, end) where start is the first day at 00:00:00 and
        end is the last day at 23:59:59.

    Raises:
        ValueError: If month is outside 1-12.
    """
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime(year, month, last_day, 23, 59, 59)


def month_label(month: int, year: int) -> str:
    """Human-readable month, e.g. "January 2025"."""
    return datetime(year, month, 1).strftime("%B %Y")


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string.

    Returns:
        Tuple of (month, year).

    Raises:
        ValueError: If the value is not a valid YYYY-MM month.
    """
    dt = datetime.strptime(value, "%Y-%m")
    return dt.month, dt.year


def parse_transaction_date(value: str) -> datetime | None:
    """Parse a stored transaction date.

    Accepts ISO dates ("2024-01-05") and ISO datetimes, with or without an
    offset. Values with an offset are converted to local time, then made
    naive so they compare against naive month bounds.

    Returns:
        Parsed datetime, or None if the value cannot be parsed.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.replace(tzinfo=None)


def normalize_date(raw_date: str) -> str:
    """Normalize a user-entered date to ISO format (YYYY-MM-DD).

    ISO dates are taken as they are. Anything else goes through
    pandas.to_datetime so European and other common formats are accepted,
    with ambiguous day/month orders read day first.

    Raises:
        ValueError: If the date cannot be parsed.
    """
    try:
        return date.fromisoformat(raw_date.strip()).isoformat()
    except (AttributeError, ValueError):
        pass

    try:
        parsed_date = pd.to_datetime(raw_date, dayfirst=True)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e
    if pd.isna(parsed_date):
        raise ValueError(f"Could not parse date '{raw_date}'")
    return parsed_date.strftime("%Y-%m-%d")


def recent_months(today: date, count: int) -> list[tuple[int, int]]:
    """The last count calendar months up to and including today's month.

    Returns:
        List of (month, year) tuples, oldest first. Crosses year boundaries,
        e.g. two months from 2025-01-10 gives [(12, 2024), (1, 2025)].

    Raises:
        ValueError: If count is less than 1.
    """
    if count < 1:
        raise ValueError(f"Month count must be at least 1, got {count}")
    current = today.year * 12 + today.month - 1
    return [(index % 12 + 1, index // 12) for index in range(current - count + 1, current + 1)]
