"""Input validation shared by the mutation services."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Union

from fintrack.domain.categories import categories_for
from fintrack.domain.entities import TransactionKind
from fintrack.domain.errors import InvalidInputError, unknown_category

AmountLike = Union[Decimal, int, float, str]


def require_positive_amount(value: AmountLike, field_name: str) -> Decimal:
    """Convert ``value`` to a Decimal and require it to be finite and > 0.

    Raises:
        InvalidInputError: If the value is not numeric, not finite or not positive
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a number")
    try:
        # str() keeps floats at their shortest repr instead of binary expansion
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidInputError(f"{field_name} must be a number, got '{value}'")

    if not amount.is_finite():
        raise InvalidInputError(f"{field_name} must be a finite number")
    if amount <= 0:
        raise InvalidInputError(f"{field_name} must be greater than zero")
    return amount


def require_text(value: str, field_name: str) -> str:
    """Require a non-blank string and return it stripped."""
    if value is None or not str(value).strip():
        raise InvalidInputError(f"{field_name} must not be empty")
    return str(value).strip()


def require_kind(kind: Union[TransactionKind, str]) -> TransactionKind:
    """Coerce ``kind`` to a TransactionKind."""
    try:
        return TransactionKind(kind)
    except ValueError:
        raise InvalidInputError(
            f"Transaction type must be 'income' or 'expense', got '{kind}'"
        )


def require_category(kind: TransactionKind, category: str) -> str:
    """Require ``category`` to be one of the fixed categories for ``kind``."""
    allowed = categories_for(kind)
    category = require_text(category, "Category")
    if category not in allowed:
        raise InvalidInputError(unknown_category(category, kind.value, allowed))
    return category


def require_date(value: date, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidInputError(f"{field_name} must be a date")
    return value
