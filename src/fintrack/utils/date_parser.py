"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative words "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month_period(period: str) -> tuple[int, int]:
    """Parse a "YYYY-MM" period identifier into (year, month).

    Raises:
        ValueError: If the identifier is malformed or the month is out of range
    """
    parts = period.strip().split("-")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid month period '{period}', expected YYYY-MM")

    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month} in period '{period}'")
    return year, month


def parse_year_period(period: str) -> int:
    """Parse a "YYYY" period identifier."""
    period = period.strip()
    if not period.isdigit():
        raise ValueError(f"Invalid year period '{period}', expected YYYY")
    return int(period)


def window_start(window: str, today: Optional[date] = None) -> Optional[date]:
    """Return the first date included by a recency window.

    "week" covers the last 7 days including today, "month" starts the day
    after the same day of the previous month. Returns None for "all".
    """
    today = today or date.today()
    if window == "week":
        return today - timedelta(days=6)
    if window == "month":
        return today - relativedelta(months=1) + timedelta(days=1)
    return None


def recent_months(count: int, today: Optional[date] = None) -> list[tuple[int, int]]:
    """Return the ``count`` most recent (year, month) pairs, newest first."""
    first_of_month = (today or date.today()).replace(day=1)
    months = []
    for offset in range(count):
        d = first_of_month - relativedelta(months=offset)
        months.append((d.year, d.month))
    return months
