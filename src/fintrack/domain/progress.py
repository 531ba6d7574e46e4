"""Progress and deadline computations shared by budgets and goals."""

from datetime import date
from decimal import Decimal

from fintrack.domain.entities import Progress


def compute_progress(numerator: Decimal, denominator: Decimal) -> Progress:
    """Return ``numerator / denominator`` as a percentage.

    The percentage is not capped. A denominator of zero or less has no
    meaningful ratio and yields the undefined variant.
    """
    if not denominator.is_finite() or denominator <= 0 or not numerator.is_finite():
        return Progress(percentage=None)
    return Progress(percentage=float(numerator / denominator * 100))


def days_remaining(deadline: date, today: date) -> int:
    """Whole days from ``today`` until ``deadline``; negative once it has passed."""
    return (deadline - today).days
