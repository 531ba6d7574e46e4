"""Fixed category lists offered for each transaction kind."""

from fintrack.domain.entities import TransactionKind

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Food",
    "Transportation",
    "Entertainment",
    "Shopping",
    "Bills",
    "Healthcare",
    "Other",
)

INCOME_CATEGORIES: tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Investment",
    "Gift",
    "Other",
)


def categories_for(kind: TransactionKind) -> tuple[str, ...]:
    """Return the categories a transaction of the given kind may use."""
    if kind == TransactionKind.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES
