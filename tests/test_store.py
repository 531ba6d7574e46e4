"""Tests for the record store."""

import json
import pytest
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Storage
from fintrack.database.store import (
    BUDGET_CATEGORIES_KEY,
    GOALS_KEY,
    SCHEMA_VERSION,
    SCHEMA_VERSION_KEY,
    TRANSACTIONS_KEY,
    RecordStore,
    without_record,
)
from fintrack.domain.errors import PersistenceError
from fintrack.domain.goal import GoalService
from fintrack.domain.transaction import TransactionService
from fintrack.domain.budget import BudgetService


class FailingStorage(Storage):
    """Storage whose writes can be switched to fail."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.fail_writes = False

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def write_many(self, entries: dict[str, str]) -> None:
        if self.fail_writes:
            raise PersistenceError("disk full")
        self.data.update(entries)

    def keys(self) -> list[str]:
        return sorted(self.data)


def _populate(store):
    TransactionService(store).add_transaction("income", "5000", "Salary", "Salary", date(2024, 3, 1))
    TransactionService(store).add_transaction("expense", "12.30", "Lunch", "Food", date(2024, 3, 2))
    BudgetService(store).add_budget_category("Food", "1000")
    goal = GoalService(store).add_goal("Vacation", "10000", date(2025, 1, 1))
    GoalService(store).deposit_to_goal(goal.id, "250.50")


def test_load_empty_storage(store):
    assert store.transactions == ()
    assert store.budget_categories == ()
    assert store.goals == ()


def test_persist_and_reload_round_trip(temp_db, store):
    _populate(store)

    reloaded = RecordStore(temp_db).load()

    assert reloaded.transactions == store.transactions
    assert reloaded.budget_categories == store.budget_categories
    assert reloaded.goals == store.goals


def test_persist_empty_lists_round_trip(temp_db, store):
    store.persist()

    reloaded = RecordStore(temp_db).load()

    assert reloaded.transactions == ()
    assert reloaded.budget_categories == ()
    assert reloaded.goals == ()
    assert json.loads(temp_db.read(TRANSACTIONS_KEY)) == []


def test_persist_writes_all_keys(temp_db, store):
    store.persist()
    assert sorted(temp_db.keys()) == sorted(
        [TRANSACTIONS_KEY, BUDGET_CATEGORIES_KEY, GOALS_KEY, SCHEMA_VERSION_KEY]
    )
    assert json.loads(temp_db.read(SCHEMA_VERSION_KEY)) == SCHEMA_VERSION


def test_budget_spent_is_not_persisted(temp_db, store):
    _populate(store)
    records = json.loads(temp_db.read(BUDGET_CATEGORIES_KEY))
    assert all("spent" not in record for record in records)


def test_load_rejects_newer_schema_version(temp_db):
    temp_db.write_many({SCHEMA_VERSION_KEY: json.dumps(SCHEMA_VERSION + 1)})
    with pytest.raises(PersistenceError, match="schema version"):
        RecordStore(temp_db).load()


def test_load_rejects_corrupted_json(temp_db):
    temp_db.write_many({TRANSACTIONS_KEY: "[{not json"})
    with pytest.raises(PersistenceError, match="not valid JSON"):
        RecordStore(temp_db).load()


def test_load_rejects_malformed_record(temp_db):
    temp_db.write_many({GOALS_KEY: json.dumps([{"id": 1, "name": "No target"}])})
    with pytest.raises(PersistenceError, match="malformed"):
        RecordStore(temp_db).load()


def test_failed_commit_leaves_state_untouched():
    storage = FailingStorage()
    store = RecordStore(storage).load()
    service = TransactionService(store)
    service.add_transaction("income", "100", "Gift", "Gift", date(2024, 3, 1))
    before = store.transactions
    saved = dict(storage.data)

    storage.fail_writes = True
    with pytest.raises(PersistenceError):
        service.add_transaction("expense", "20", "Snack", "Food", date(2024, 3, 2))
    with pytest.raises(PersistenceError):
        service.delete_transaction(before[0].id)

    assert store.transactions == before
    assert storage.data == saved


def test_ids_are_unique_within_same_millisecond():
    store = RecordStore(FailingStorage()).load()
    service = TransactionService(store)
    ids = {
        service.add_transaction("expense", "1", "Gum", "Food", date(2024, 3, 1)).id
        for _ in range(50)
    }
    assert len(ids) == 50


def test_ids_continue_after_existing_records(temp_db):
    temp_db.write_many(
        {
            GOALS_KEY: json.dumps(
                [{"id": 99999999999999, "name": "Big", "target": 1, "current": 0, "deadline": "2030-01-01"}]
            )
        }
    )
    store = RecordStore(temp_db).load()

    goal = GoalService(store).add_goal("Next", "10", date(2030, 1, 1))

    assert goal.id > 99999999999999


def test_export_import_snapshot(temp_db, store):
    _populate(store)
    snapshot = store.export_snapshot()

    other = RecordStore(FailingStorage()).load()
    other.import_snapshot(json.loads(json.dumps(snapshot)))

    assert other.transactions == store.transactions
    assert other.budget_categories == store.budget_categories
    assert other.goals == store.goals


def test_import_browser_local_storage_dump(store):
    dump = {
        "transactions": json.dumps(
            [
                {
                    "id": 1709280000001,
                    "type": "expense",
                    "amount": 1200,
                    "description": "Groceries",
                    "category": "Food",
                    "date": "2024-03-15",
                    "timestamp": "2024-03-15T10:00:00.000Z",
                }
            ]
        ),
        "budgetCategories": json.dumps(
            [{"id": 1709280000002, "name": "Food", "limit": 1000, "spent": 1200}]
        ),
        "goals": None,
    }

    store.import_snapshot(dump)

    assert len(store.transactions) == 1
    assert store.transactions[0].amount == Decimal("1200")
    assert store.budget_categories[0].limit == Decimal("1000")
    assert store.goals == ()


def test_import_rejects_non_object(store):
    with pytest.raises(PersistenceError):
        store.import_snapshot(["not", "a", "dict"])


def test_import_rejects_malformed_records_without_changes(store):
    _populate(store)
    before = store.transactions

    with pytest.raises(PersistenceError):
        store.import_snapshot({"transactions": [{"id": 1}]})

    assert store.transactions == before


def test_import_rejects_non_finite_and_negative_money(store):
    snapshot = {
        "transactions": [
            {"id": 1, "type": "expense", "amount": "NaN", "category": "Food", "date": "2024-03-01"},
        ],
        "goals": [
            {"id": 2, "name": "Trip", "target": "Infinity", "current": "-5", "deadline": "2024-12-31"},
        ],
    }

    with pytest.raises(PersistenceError, match="malformed"):
        store.import_snapshot(snapshot)

    assert store.transactions == ()
    assert store.goals == ()


def test_load_rejects_negative_stored_amount(temp_db):
    temp_db.write_many(
        {
            TRANSACTIONS_KEY: json.dumps(
                [{"id": 1, "type": "expense", "amount": "-50", "category": "Food", "date": "2024-03-01"}]
            )
        }
    )
    with pytest.raises(PersistenceError, match="positive"):
        RecordStore(temp_db).load()


def test_without_record_removes_first_match_only():
    class R:
        def __init__(self, id):
            self.id = id

    records = (R(1), R(2), R(3))
    remaining = without_record(records, 2)
    assert [r.id for r in remaining] == [1, 3]
    assert without_record(records, 42) is None
