"""Transaction domain service."""

from datetime import date, datetime, UTC
from typing import Optional, Union

from fintrack.database.store import RecordStore, without_record
from fintrack.domain.entities import RecencyWindow, Transaction, TransactionKind
from fintrack.domain.errors import InvalidInputError
from fintrack.domain.validation import (
    AmountLike,
    require_category,
    require_date,
    require_kind,
    require_positive_amount,
    require_text,
)
from fintrack.utils.date_parser import window_start

RECENT_TRANSACTIONS_LIMIT = 5


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, store: RecordStore):
        """Initialize transaction service.

        Args:
            store: Record store instance
        """
        self.store = store

    def add_transaction(
        self,
        kind: Union[TransactionKind, str],
        amount: AmountLike,
        description: str,
        category: str,
        date: date,
    ) -> Transaction:
        """Record a transaction and put it at the front of the list.

        Args:
            kind: "income" or "expense"
            amount: Positive amount
            description: Free-text description
            category: One of the fixed categories for the kind
            date: Transaction date

        Returns:
            The stored Transaction

        Raises:
            InvalidInputError: If any field is invalid
            PersistenceError: If the store cannot be written
        """
        txn_kind = require_kind(kind)
        txn_amount = require_positive_amount(amount, "Amount")
        txn_description = require_text(description, "Description")
        txn_category = require_category(txn_kind, category)
        txn_date = require_date(date, "Date")

        transaction = Transaction(
            id=self.store.next_id(),
            kind=txn_kind,
            amount=txn_amount,
            description=txn_description,
            category=txn_category,
            date=txn_date,
            created_at=datetime.now(UTC),
        )
        self.store.commit(transactions=(transaction, *self.store.transactions))
        return transaction

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Returns:
            Transaction entity or None if not found
        """
        for txn in self.store.transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction.

        Deleting an unknown ID is a no-op.

        Returns:
            True if a transaction was removed
        """
        remaining = without_record(self.store.transactions, transaction_id)
        if remaining is None:
            return False
        self.store.commit(transactions=remaining)
        return True

    def list_transactions(
        self,
        kind: Optional[Union[TransactionKind, str]] = None,
        window: Union[RecencyWindow, str] = RecencyWindow.ALL,
        today: Optional[date] = None,
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            kind: Optional kind filter; None lists both
            window: Recency window (week, month or all)
            today: Reference date for the window, defaults to the current date

        Returns:
            List of transaction entities
        """
        transactions = list(self.store.transactions)
        if kind is not None:
            txn_kind = require_kind(kind)
            transactions = [t for t in transactions if t.kind == txn_kind]

        try:
            window = RecencyWindow(window)
        except ValueError:
            raise InvalidInputError(
                f"Period must be one of week, month or all, got '{window}'"
            )

        start = window_start(window, today)
        if start is not None:
            transactions = [t for t in transactions if t.date >= start]
        return transactions

    def recent_transactions(self, limit: int = RECENT_TRANSACTIONS_LIMIT) -> list[Transaction]:
        """Most recently recorded transactions."""
        return list(self.store.transactions[:limit])
