"""Record store holding transactions, budget categories and goals.

The three lists are loaded from a key-value storage medium and written back
as one snapshot on every commit.
"""

import json
import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from fintrack.database.base import Storage
from fintrack.database.mappers import (
    budget_category_from_record,
    budget_category_to_record,
    goal_from_record,
    goal_to_record,
    transaction_from_record,
    transaction_to_record,
)
from fintrack.domain.entities import BudgetCategory, Goal, Transaction
from fintrack.domain.errors import PersistenceError, unsupported_schema_version
from fintrack.utils.id_generator import IdGenerator

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "transactions"
BUDGET_CATEGORIES_KEY = "budgetCategories"
GOALS_KEY = "goals"
SCHEMA_VERSION_KEY = "schemaVersion"

SCHEMA_VERSION = 1


def _decode_list(key: str, raw: Optional[str]) -> list[dict[str, Any]]:
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Stored '{key}' is not valid JSON: {e}") from e
    if data is None:
        return []
    if not isinstance(data, list):
        raise PersistenceError(f"Stored '{key}' is not a list")
    return data


def _map_records(key: str, records: Iterable[Any], mapper: Callable[[dict], Any]) -> list:
    entities = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise PersistenceError(f"Entry {index} of '{key}' is not an object")
        try:
            entities.append(mapper(record))
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Entry {index} of '{key}' is malformed: {e}") from e
    return entities


def without_record(records: Sequence, record_id: int) -> Optional[list]:
    """Return ``records`` minus the first one with ``record_id``, or None if absent."""
    for index, record in enumerate(records):
        if record.id == record_id:
            return [*records[:index], *records[index + 1 :]]
    return None


def _check_schema_version(raw: Any) -> None:
    # Absent version means data written before versioning; it is read as v1
    if raw is None:
        return
    try:
        version = int(raw)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Invalid schema version {raw!r}") from e
    if version > SCHEMA_VERSION:
        raise PersistenceError(unsupported_schema_version(version, SCHEMA_VERSION))


class RecordStore:
    """In-memory record lists with write-through persistence.

    The lists are exposed as tuples; services replace them through
    :meth:`commit`, which persists the candidate snapshot before making it
    visible, so a failed write leaves the previous state untouched.
    """

    def __init__(self, storage: Storage, id_generator: Optional[IdGenerator] = None):
        self.storage = storage
        self.id_generator = id_generator or IdGenerator()
        self._transactions: tuple[Transaction, ...] = ()
        self._budget_categories: tuple[BudgetCategory, ...] = ()
        self._goals: tuple[Goal, ...] = ()

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transactions, newest first."""
        return self._transactions

    @property
    def budget_categories(self) -> tuple[BudgetCategory, ...]:
        return self._budget_categories

    @property
    def goals(self) -> tuple[Goal, ...]:
        return self._goals

    def load(self) -> "RecordStore":
        """Load all lists from storage. Missing keys yield empty lists.

        Raises:
            PersistenceError: If stored data cannot be read or decoded
        """
        _check_schema_version(self.storage.read(SCHEMA_VERSION_KEY))
        self._set_lists(
            _map_records(
                TRANSACTIONS_KEY,
                _decode_list(TRANSACTIONS_KEY, self.storage.read(TRANSACTIONS_KEY)),
                transaction_from_record,
            ),
            _map_records(
                BUDGET_CATEGORIES_KEY,
                _decode_list(
                    BUDGET_CATEGORIES_KEY, self.storage.read(BUDGET_CATEGORIES_KEY)
                ),
                budget_category_from_record,
            ),
            _map_records(
                GOALS_KEY,
                _decode_list(GOALS_KEY, self.storage.read(GOALS_KEY)),
                goal_from_record,
            ),
        )
        logger.debug(
            "Loaded %d transactions, %d budget categories, %d goals",
            len(self._transactions),
            len(self._budget_categories),
            len(self._goals),
        )
        return self

    def persist(self) -> None:
        """Write all lists to storage unconditionally."""
        self._write(self._transactions, self._budget_categories, self._goals)

    def commit(
        self,
        transactions: Optional[Sequence[Transaction]] = None,
        budget_categories: Optional[Sequence[BudgetCategory]] = None,
        goals: Optional[Sequence[Goal]] = None,
    ) -> None:
        """Persist a new snapshot and make it current.

        Lists passed as None keep their current contents.

        Raises:
            PersistenceError: If storage cannot be written; in-memory state is
                left as it was
        """
        new_transactions = (
            self._transactions if transactions is None else tuple(transactions)
        )
        new_budgets = (
            self._budget_categories
            if budget_categories is None
            else tuple(budget_categories)
        )
        new_goals = self._goals if goals is None else tuple(goals)

        self._write(new_transactions, new_budgets, new_goals)
        self._set_lists(new_transactions, new_budgets, new_goals)

    def next_id(self) -> int:
        return self.id_generator.next_id()

    def export_snapshot(self) -> dict[str, Any]:
        """Return all lists as one JSON-compatible dict."""
        return {
            SCHEMA_VERSION_KEY: SCHEMA_VERSION,
            TRANSACTIONS_KEY: [transaction_to_record(t) for t in self._transactions],
            BUDGET_CATEGORIES_KEY: [
                budget_category_to_record(b) for b in self._budget_categories
            ],
            GOALS_KEY: [goal_to_record(g) for g in self._goals],
        }

    def import_snapshot(self, snapshot: dict[str, Any]) -> None:
        """Replace every list with the contents of ``snapshot``.

        Accepts the output of :meth:`export_snapshot` as well as a dump of
        the browser edition's local storage, whose values may still be JSON
        text rather than lists.

        Raises:
            PersistenceError: If the snapshot is malformed or too new
        """
        if not isinstance(snapshot, dict):
            raise PersistenceError("Snapshot must be a JSON object")
        _check_schema_version(snapshot.get(SCHEMA_VERSION_KEY))

        def records(key: str) -> list:
            value = snapshot.get(key)
            if isinstance(value, str):
                return _decode_list(key, value)
            if value is None:
                return []
            if not isinstance(value, list):
                raise PersistenceError(f"Snapshot '{key}' is not a list")
            return value

        transactions = _map_records(
            TRANSACTIONS_KEY, records(TRANSACTIONS_KEY), transaction_from_record
        )
        budgets = _map_records(
            BUDGET_CATEGORIES_KEY,
            records(BUDGET_CATEGORIES_KEY),
            budget_category_from_record,
        )
        goals = _map_records(GOALS_KEY, records(GOALS_KEY), goal_from_record)
        self.commit(transactions=transactions, budget_categories=budgets, goals=goals)
        logger.info(
            "Imported %d transactions, %d budget categories, %d goals",
            len(transactions),
            len(budgets),
            len(goals),
        )

    def _set_lists(
        self,
        transactions: Sequence[Transaction],
        budget_categories: Sequence[BudgetCategory],
        goals: Sequence[Goal],
    ) -> None:
        self._transactions = tuple(transactions)
        self._budget_categories = tuple(budget_categories)
        self._goals = tuple(goals)
        for record in (*self._transactions, *self._budget_categories, *self._goals):
            self.id_generator.seed(record.id)

    def _write(
        self,
        transactions: Sequence[Transaction],
        budget_categories: Sequence[BudgetCategory],
        goals: Sequence[Goal],
    ) -> None:
        self.storage.write_many(
            {
                TRANSACTIONS_KEY: json.dumps(
                    [transaction_to_record(t) for t in transactions]
                ),
                BUDGET_CATEGORIES_KEY: json.dumps(
                    [budget_category_to_record(b) for b in budget_categories]
                ),
                GOALS_KEY: json.dumps([goal_to_record(g) for g in goals]),
                SCHEMA_VERSION_KEY: json.dumps(SCHEMA_VERSION),
            }
        )
