"""Budget category domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.store import RecordStore, without_record
from fintrack.domain.entities import BudgetCategory, BudgetStatus, TransactionKind
from fintrack.domain.progress import compute_progress
from fintrack.domain.summary import transactions_in_month
from fintrack.domain.validation import AmountLike, require_positive_amount, require_text


class BudgetService:
    """Service for managing budget categories and their spending."""

    def __init__(self, store: RecordStore):
        """Initialize budget service.

        Args:
            store: Record store instance
        """
        self.store = store

    def add_budget_category(self, name: str, limit: AmountLike) -> BudgetCategory:
        """Create a budget category.

        The name is matched against expense categories by exact string
        comparison when spending is computed.

        Raises:
            InvalidInputError: If the name is blank or the limit is not positive
        """
        name = require_text(name, "Name")
        limit = require_positive_amount(limit, "Limit")
        budget = BudgetCategory(id=self.store.next_id(), name=name, limit=limit)
        self.store.commit(budget_categories=(*self.store.budget_categories, budget))
        return budget

    def delete_budget_category(self, budget_id: int) -> bool:
        """Delete a budget category. Unknown IDs are ignored.

        Returns:
            True if a budget category was removed
        """
        remaining = without_record(self.store.budget_categories, budget_id)
        if remaining is None:
            return False
        self.store.commit(budget_categories=remaining)
        return True

    def list_budget_categories(self) -> list[BudgetCategory]:
        return list(self.store.budget_categories)

    def budget_statuses(self, today: Optional[date] = None) -> list[BudgetStatus]:
        """Recompute spending for every budget category.

        Spending is the sum of this month's expenses whose category equals
        the budget name. Expenses in categories without a budget are not
        counted anywhere.
        """
        today = today or date.today()
        expenses = [
            t
            for t in transactions_in_month(self.store.transactions, today.year, today.month)
            if t.kind == TransactionKind.EXPENSE
        ]

        statuses = []
        for budget in self.store.budget_categories:
            spent = sum(
                (t.amount for t in expenses if t.category == budget.name), Decimal("0")
            )
            statuses.append(
                BudgetStatus(
                    budget=budget,
                    spent=spent,
                    progress=compute_progress(spent, budget.limit),
                )
            )
        return statuses
