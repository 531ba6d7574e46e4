"""Summary and report domain service."""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Union

from fintrack.database.store import RecordStore
from fintrack.domain.entities import (
    MonthlyReport,
    MonthTotals,
    PeriodSummary,
    ReportKind,
    Transaction,
    TransactionKind,
    YearlyReport,
)
from fintrack.domain.errors import InvalidInputError
from fintrack.utils.date_parser import parse_month_period, parse_year_period, recent_months

MONTHLY_REPORT_PERIODS = 12
YEARLY_REPORT_PERIODS = 5


def transactions_in_month(
    transactions: Iterable[Transaction], year: int, month: int
) -> list[Transaction]:
    """Filter transactions to one calendar month, keeping their order."""
    return [t for t in transactions if t.date.year == year and t.date.month == month]


def transactions_in_year(transactions: Iterable[Transaction], year: int) -> list[Transaction]:
    return [t for t in transactions if t.date.year == year]


def total_for_kind(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    """Sum amounts of transactions of one kind."""
    return sum((t.amount for t in transactions if t.kind == kind), Decimal("0"))


def category_totals(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Running expense total per category name.

    Income is ignored. Categories appear in order of first occurrence.
    """
    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE:
            continue
        totals[txn.category] = totals.get(txn.category, Decimal("0")) + txn.amount
    return totals


class SummaryService:
    """Service for dashboard summaries and periodic reports."""

    def __init__(self, store: RecordStore):
        """Initialize summary service.

        Args:
            store: Record store to aggregate over
        """
        self.store = store

    def current_period_summary(self, today: Optional[date] = None) -> PeriodSummary:
        """Summarize the calendar month containing ``today``.

        Args:
            today: Reference date, defaults to the current date

        Returns:
            PeriodSummary with income, expenses, balance and total savings
        """
        today = today or date.today()
        monthly = transactions_in_month(self.store.transactions, today.year, today.month)
        income = total_for_kind(monthly, TransactionKind.INCOME)
        expenses = total_for_kind(monthly, TransactionKind.EXPENSE)
        total_savings = sum((g.current for g in self.store.goals), Decimal("0"))

        return PeriodSummary(
            year=today.year,
            month=today.month,
            income=income,
            expenses=expenses,
            balance=income - expenses,
            total_savings=total_savings,
            transaction_count=len(monthly),
        )

    def dashboard_breakdown(self, today: Optional[date] = None) -> dict[str, Decimal]:
        """Expense totals per category for the current month."""
        today = today or date.today()
        return category_totals(
            transactions_in_month(self.store.transactions, today.year, today.month)
        )

    def monthly_report(self, year: int, month: int) -> MonthlyReport:
        """Build the report for one calendar month.

        Raises:
            InvalidInputError: If month is outside 1-12
        """
        if not 1 <= month <= 12:
            raise InvalidInputError(f"Month must be between 1 and 12, got {month}")

        monthly = transactions_in_month(self.store.transactions, year, month)
        income = total_for_kind(monthly, TransactionKind.INCOME)
        expenses = total_for_kind(monthly, TransactionKind.EXPENSE)

        return MonthlyReport(
            year=year,
            month=month,
            income=income,
            expenses=expenses,
            balance=income - expenses,
            category_breakdown=category_totals(monthly),
            transactions=tuple(monthly),
        )

    def yearly_report(self, year: int) -> YearlyReport:
        """Build the report for one calendar year with a 12-month breakdown."""
        yearly = transactions_in_year(self.store.transactions, year)
        income = total_for_kind(yearly, TransactionKind.INCOME)
        expenses = total_for_kind(yearly, TransactionKind.EXPENSE)

        monthly_breakdown = []
        for month in range(1, 13):
            month_txns = [t for t in yearly if t.date.month == month]
            month_income = total_for_kind(month_txns, TransactionKind.INCOME)
            month_expenses = total_for_kind(month_txns, TransactionKind.EXPENSE)
            monthly_breakdown.append(
                MonthTotals(
                    month=month,
                    income=month_income,
                    expenses=month_expenses,
                    balance=month_income - month_expenses,
                )
            )

        return YearlyReport(
            year=year,
            income=income,
            expenses=expenses,
            balance=income - expenses,
            category_breakdown=category_totals(yearly),
            monthly_breakdown=tuple(monthly_breakdown),
            transactions=tuple(yearly),
        )

    def report_periods(
        self, kind: Union[ReportKind, str], today: Optional[date] = None
    ) -> list[str]:
        """Period identifiers offered for report selection, newest first.

        Monthly reports offer the last 12 months as "YYYY-MM", yearly reports
        the last 5 years as "YYYY".
        """
        kind = self._require_report_kind(kind)
        today = today or date.today()
        if kind == ReportKind.MONTHLY:
            return [
                f"{year:04d}-{month:02d}"
                for year, month in recent_months(MONTHLY_REPORT_PERIODS, today)
            ]
        return [str(today.year - offset) for offset in range(YEARLY_REPORT_PERIODS)]

    def generate_report(
        self, kind: Union[ReportKind, str], period: str
    ) -> Union[MonthlyReport, YearlyReport]:
        """Build a report from a report kind and a period identifier.

        Raises:
            InvalidInputError: If the kind or period identifier is invalid
        """
        kind = self._require_report_kind(kind)
        try:
            if kind == ReportKind.MONTHLY:
                year, month = parse_month_period(period)
                return self.monthly_report(year, month)
            return self.yearly_report(parse_year_period(period))
        except InvalidInputError:
            raise
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

    @staticmethod
    def _require_report_kind(kind: Union[ReportKind, str]) -> ReportKind:
        try:
            return ReportKind(kind)
        except ValueError:
            raise InvalidInputError(
                f"Report type must be 'monthly' or 'yearly', got '{kind}'"
            )
