"""Savings goal domain service."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.store import RecordStore, without_record
from fintrack.domain.entities import Goal, GoalProgress
from fintrack.domain.errors import NotFoundError, goal_not_found
from fintrack.domain.progress import compute_progress, days_remaining
from fintrack.domain.validation import (
    AmountLike,
    require_date,
    require_positive_amount,
    require_text,
)


class GoalService:
    """Service for managing savings goals."""

    def __init__(self, store: RecordStore):
        """Initialize goal service.

        Args:
            store: Record store instance
        """
        self.store = store

    def add_goal(self, name: str, target: AmountLike, deadline: date) -> Goal:
        """Create a savings goal with nothing saved yet.

        Raises:
            InvalidInputError: If the name is blank, the target is not positive
                or the deadline is not a date
        """
        name = require_text(name, "Name")
        target = require_positive_amount(target, "Target")
        deadline = require_date(deadline, "Deadline")

        goal = Goal(
            id=self.store.next_id(),
            name=name,
            target=target,
            current=Decimal("0"),
            deadline=deadline,
        )
        self.store.commit(goals=(*self.store.goals, goal))
        return goal

    def get_goal(self, goal_id: int) -> Optional[Goal]:
        for goal in self.store.goals:
            if goal.id == goal_id:
                return goal
        return None

    def delete_goal(self, goal_id: int) -> bool:
        """Delete a goal. Unknown IDs are ignored.

        Returns:
            True if a goal was removed
        """
        remaining = without_record(self.store.goals, goal_id)
        if remaining is None:
            return False
        self.store.commit(goals=remaining)
        return True

    def deposit_to_goal(self, goal_id: int, amount: AmountLike) -> Goal:
        """Add money to a goal.

        Only positive deposits are accepted; there is no withdrawal.

        Returns:
            The updated Goal

        Raises:
            InvalidInputError: If the amount is not a positive finite number
            NotFoundError: If the goal doesn't exist
        """
        deposit = require_positive_amount(amount, "Deposit")

        goals = list(self.store.goals)
        for index, goal in enumerate(goals):
            if goal.id == goal_id:
                updated = replace(goal, current=goal.current + deposit)
                goals[index] = updated
                self.store.commit(goals=goals)
                return updated

        raise NotFoundError(goal_not_found(goal_id))

    def list_goals(self) -> list[Goal]:
        return list(self.store.goals)

    def goal_progress(self, today: Optional[date] = None) -> list[GoalProgress]:
        """Progress and days remaining for every goal."""
        today = today or date.today()
        return [
            GoalProgress(
                goal=goal,
                progress=compute_progress(goal.current, goal.target),
                days_remaining=days_remaining(goal.deadline, today),
            )
            for goal in self.store.goals
        ]
