"""Presentation formatting helpers.

Rounding happens only here; stored and intermediate values keep full
precision.
"""

from datetime import date
from decimal import Decimal

from fintrack.domain.entities import Progress, TransactionKind

DEFAULT_CURRENCY = "₱"


def format_currency(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount like "₱1,234.50" or "-₱12.00"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"


def format_signed_amount(
    kind: TransactionKind, amount: Decimal, currency: str = DEFAULT_CURRENCY
) -> str:
    """Format an amount with "+" for income and "-" for expenses."""
    sign = "+" if kind == TransactionKind.INCOME else "-"
    return f"{sign}{format_currency(amount, currency)}"


def format_percentage(progress: Progress) -> str:
    if progress.percentage is None:
        return "N/A"
    return f"{progress.percentage:.1f}%"


def format_short_date(value: date) -> str:
    """Format a date like "Mar 15"."""
    return f"{value:%b} {value.day}"


def progress_bar(progress: Progress, width: int = 20) -> str:
    """Render a text progress bar, clamped to 100%."""
    filled = int(round(progress.clamped() / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"
