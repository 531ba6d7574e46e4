"""Domain layer for fintrack application."""

from fintrack.domain.transaction import TransactionService
from fintrack.domain.budget import BudgetService
from fintrack.domain.goal import GoalService
from fintrack.domain.summary import SummaryService

__all__ = [
    "TransactionService",
    "BudgetService",
    "GoalService",
    "SummaryService",
]
