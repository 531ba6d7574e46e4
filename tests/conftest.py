"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
import pytest

from fintrack.database.factories import create_sqlite_storage
from fintrack.database.store import RecordStore
from fintrack.domain.budget import BudgetService
from fintrack.domain.goal import GoalService
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary SQLite storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_db):
    """Create an empty RecordStore backed by the temporary storage."""
    return RecordStore(temp_db).load()


@pytest.fixture
def transaction_service(store):
    return TransactionService(store)


@pytest.fixture
def budget_service(store):
    return BudgetService(store)


@pytest.fixture
def goal_service(store):
    return GoalService(store)


@pytest.fixture
def summary_service(store):
    return SummaryService(store)


@pytest.fixture
def march_2024():
    """Reference date used as "today" by period-sensitive tests."""
    return date(2024, 3, 20)


@pytest.fixture
def sample_transactions(transaction_service):
    """Income and expenses spread over early 2024."""
    service = transaction_service
    return [
        service.add_transaction("income", "5000", "March salary", "Salary", date(2024, 3, 1)),
        service.add_transaction("expense", "1200", "Groceries", "Food", date(2024, 3, 15)),
        service.add_transaction("expense", "300.50", "Bus pass", "Transportation", date(2024, 3, 2)),
        service.add_transaction("expense", "80", "Takeout", "Food", date(2024, 2, 27)),
        service.add_transaction("income", "750", "Logo design", "Freelance", date(2024, 2, 10)),
        service.add_transaction("expense", "45.25", "Pharmacy", "Healthcare", date(2023, 12, 30)),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
