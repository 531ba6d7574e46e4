"""Mapper functions to convert between domain entities and stored records.

Stored records are JSON-compatible dicts. Field names follow the layout
used by the browser edition of the tracker so its saved data can be
imported unchanged. Money is written as decimal strings; numbers are
accepted on read.
"""

from datetime import date, datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any

from fintrack.domain import entities as domain


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Field '{field_name}' is not a number: {value!r}")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Field '{field_name}' is not a number: {value!r}")
    if not number.is_finite():
        raise ValueError(f"Field '{field_name}' is not a finite number: {value!r}")
    return number


def _to_positive_decimal(value: Any, field_name: str) -> Decimal:
    number = _to_decimal(value, field_name)
    if number <= 0:
        raise ValueError(f"Field '{field_name}' must be positive: {value!r}")
    return number


def _to_non_negative_decimal(value: Any, field_name: str) -> Decimal:
    # Zero limits and targets from older data are kept; their progress is undefined
    number = _to_decimal(value, field_name)
    if number < 0:
        raise ValueError(f"Field '{field_name}' must not be negative: {value!r}")
    return number


def _to_date(value: Any) -> date:
    # Browser data may carry full ISO timestamps where a date is expected
    return date.fromisoformat(str(value)[:10])


def _to_datetime(value: Any) -> datetime:
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def transaction_to_record(txn: domain.Transaction) -> dict[str, Any]:
    """Convert domain Transaction entity to a stored record."""
    return {
        "id": txn.id,
        "type": txn.kind.value,
        "amount": str(txn.amount),
        "description": txn.description,
        "category": txn.category,
        "date": txn.date.isoformat(),
        "timestamp": txn.created_at.isoformat(),
    }


def transaction_from_record(record: dict[str, Any]) -> domain.Transaction:
    """Convert a stored record to a domain Transaction entity."""
    txn_date = _to_date(record["date"])
    created_at = record.get("timestamp")
    return domain.Transaction(
        id=int(record["id"]),
        kind=domain.TransactionKind(record["type"]),
        amount=_to_positive_decimal(record["amount"], "amount"),
        description=record.get("description") or "",
        category=record.get("category") or "",
        date=txn_date,
        created_at=(
            _to_datetime(created_at)
            if created_at
            else datetime(txn_date.year, txn_date.month, txn_date.day, tzinfo=UTC)
        ),
    )


def budget_category_to_record(budget: domain.BudgetCategory) -> dict[str, Any]:
    """Convert domain BudgetCategory entity to a stored record.

    Spending is derived from transactions and is never written.
    """
    return {
        "id": budget.id,
        "name": budget.name,
        "limit": str(budget.limit),
    }


def budget_category_from_record(record: dict[str, Any]) -> domain.BudgetCategory:
    """Convert a stored record to a domain BudgetCategory entity.

    A legacy ``spent`` field is ignored.
    """
    return domain.BudgetCategory(
        id=int(record["id"]),
        name=record["name"],
        limit=_to_non_negative_decimal(record["limit"], "limit"),
    )


def goal_to_record(goal: domain.Goal) -> dict[str, Any]:
    """Convert domain Goal entity to a stored record."""
    return {
        "id": goal.id,
        "name": goal.name,
        "target": str(goal.target),
        "current": str(goal.current),
        "deadline": goal.deadline.isoformat(),
    }


def goal_from_record(record: dict[str, Any]) -> domain.Goal:
    """Convert a stored record to a domain Goal entity."""
    return domain.Goal(
        id=int(record["id"]),
        name=record["name"],
        target=_to_non_negative_decimal(record["target"], "target"),
        current=_to_non_negative_decimal(record.get("current", 0), "current"),
        deadline=_to_date(record["deadline"]),
    )
