"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15/01/2024", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if not date_str:
        raise ValueError("Empty date string")
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str == "last month":
        return (today - relativedelta(months=1)).replace(day=1)
    if date_str == "this month":
        return month_start(today)
    if date_str == "last week":
        return today - timedelta(days=today.weekday() + 7)
    if date_str == "this week":
        return today - timedelta(days=today.weekday())

    # ISO dates are year-month-day
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Slashed dates are day-first, matching the dd/mm/yyyy display format
    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_start(today: date) -> date:
    """Return the first day of the month containing today."""
    return today.replace(day=1)


def trailing_window(end: date, days: int) -> list[date]:
    """Return the ``days`` calendar days ending on ``end``, oldest first."""
    return [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
