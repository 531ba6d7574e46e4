"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
how they are serialized. Budget spending and goal progress are projections
computed from the stored records and are never persisted.
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionKind(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class RecencyWindow(str, Enum):
    """Recency filters offered for the transaction list."""

    WEEK = "week"
    MONTH = "month"
    ALL = "all"


class ReportKind(str, Enum):
    """Report granularity."""

    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    kind: TransactionKind
    amount: Decimal
    description: str
    category: str
    date: date
    created_at: datetime


@dataclass(frozen=True)
class BudgetCategory:
    """Named monthly spending limit."""

    id: int
    name: str
    limit: Decimal


@dataclass(frozen=True)
class Goal:
    """Savings goal with an accumulated amount."""

    id: int
    name: str
    target: Decimal
    current: Decimal
    deadline: date


@dataclass(frozen=True)
class Progress:
    """Ratio expressed as a percentage.

    ``percentage`` is None when the denominator is zero, which is the
    explicit "undefined progress" state.
    """

    percentage: Optional[float]

    @property
    def is_defined(self) -> bool:
        return self.percentage is not None

    def clamped(self) -> float:
        """Percentage capped to the 0-100 range used by progress bars."""
        if self.percentage is None:
            return 0.0
        return max(0.0, min(self.percentage, 100.0))


@dataclass(frozen=True)
class BudgetStatus:
    """Budget category together with its recomputed spending."""

    budget: BudgetCategory
    spent: Decimal
    progress: Progress

    @property
    def is_over_budget(self) -> bool:
        return self.progress.percentage is not None and self.progress.percentage > 100

    @property
    def overage(self) -> Decimal:
        if not self.is_over_budget:
            return Decimal("0")
        return self.spent - self.budget.limit

    @property
    def remaining(self) -> Decimal:
        return max(self.budget.limit - self.spent, Decimal("0"))


@dataclass(frozen=True)
class GoalProgress:
    """Savings goal together with its progress and deadline distance."""

    goal: Goal
    progress: Progress
    days_remaining: int

    @property
    def is_deadline_passed(self) -> bool:
        return self.days_remaining <= 0


@dataclass(frozen=True)
class PeriodSummary:
    """Income/expense totals for the current calendar month."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal
    balance: Decimal
    total_savings: Decimal
    transaction_count: int


@dataclass(frozen=True)
class MonthTotals:
    """One row of the per-month breakdown in a yearly report."""

    month: int
    income: Decimal
    expenses: Decimal
    balance: Decimal

    @property
    def label(self) -> str:
        return calendar.month_abbr[self.month]


@dataclass(frozen=True)
class MonthlyReport:
    """Report payload for a single calendar month."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal
    balance: Decimal
    category_breakdown: dict[str, Decimal]
    transactions: tuple[Transaction, ...] = ()

    @property
    def title(self) -> str:
        return f"Monthly Report - {calendar.month_name[self.month]} {self.year}"


@dataclass(frozen=True)
class YearlyReport:
    """Report payload for a calendar year, including a 12-month breakdown."""

    year: int
    income: Decimal
    expenses: Decimal
    balance: Decimal
    category_breakdown: dict[str, Decimal]
    monthly_breakdown: tuple[MonthTotals, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    @property
    def title(self) -> str:
        return f"Yearly Report - {self.year}"
