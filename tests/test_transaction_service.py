"""Tests for the transaction service."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from fintrack.domain.entities import RecencyWindow, TransactionKind
from fintrack.domain.errors import InvalidInputError


def test_add_transaction(transaction_service):
    txn = transaction_service.add_transaction(
        kind="expense",
        amount="1200",
        description="Groceries",
        category="Food",
        date=date(2024, 3, 15),
    )

    assert txn.kind == TransactionKind.EXPENSE
    assert txn.amount == Decimal("1200")
    assert txn.category == "Food"
    assert txn.date == date(2024, 3, 15)
    assert txn.created_at.tzinfo is not None
    assert transaction_service.get_transaction(txn.id) == txn


def test_new_transactions_are_prepended(transaction_service):
    first = transaction_service.add_transaction("income", 10, "A", "Gift", date(2024, 1, 1))
    second = transaction_service.add_transaction("income", 20, "B", "Gift", date(2023, 1, 1))

    assert transaction_service.list_transactions() == [second, first]


def test_add_then_delete_restores_list(transaction_service, sample_transactions):
    before = transaction_service.list_transactions()

    txn = transaction_service.add_transaction("expense", "9.99", "Movie", "Entertainment", date(2024, 3, 5))
    assert transaction_service.delete_transaction(txn.id) is True

    assert transaction_service.list_transactions() == before


def test_delete_unknown_id_is_noop(transaction_service, sample_transactions, temp_db):
    before = transaction_service.list_transactions()
    stored = temp_db.read("transactions")

    assert transaction_service.delete_transaction(123) is False
    assert transaction_service.list_transactions() == before
    assert temp_db.read("transactions") == stored


def test_float_amount_keeps_short_representation(transaction_service):
    txn = transaction_service.add_transaction("expense", 0.1, "Candy", "Food", date(2024, 3, 1))
    assert txn.amount == Decimal("0.1")


def test_datetime_is_reduced_to_date(transaction_service):
    txn = transaction_service.add_transaction(
        "expense", 5, "Parking", "Transportation", datetime(2024, 3, 1, 18, 45)
    )
    assert txn.date == date(2024, 3, 1)


@pytest.mark.parametrize("amount", ["abc", "NaN", float("nan"), float("inf"), 0, "-5", None, True])
def test_invalid_amount_rejected(transaction_service, amount):
    with pytest.raises(InvalidInputError):
        transaction_service.add_transaction("expense", amount, "Bad", "Food", date(2024, 3, 1))
    assert transaction_service.list_transactions() == []


def test_invalid_kind_rejected(transaction_service):
    with pytest.raises(InvalidInputError, match="income"):
        transaction_service.add_transaction("transfer", 5, "Move", "Other", date(2024, 3, 1))


def test_category_must_match_kind(transaction_service):
    with pytest.raises(InvalidInputError, match="Unknown income category"):
        transaction_service.add_transaction("income", 5, "Lunch", "Food", date(2024, 3, 1))


def test_other_is_valid_for_both_kinds(transaction_service):
    transaction_service.add_transaction("income", 5, "Refund", "Other", date(2024, 3, 1))
    transaction_service.add_transaction("expense", 5, "Misc", "Other", date(2024, 3, 1))
    assert len(transaction_service.list_transactions()) == 2


def test_blank_description_rejected(transaction_service):
    with pytest.raises(InvalidInputError, match="Description"):
        transaction_service.add_transaction("expense", 5, "   ", "Food", date(2024, 3, 1))


def test_non_date_rejected(transaction_service):
    with pytest.raises(InvalidInputError, match="Date"):
        transaction_service.add_transaction("expense", 5, "Lunch", "Food", "2024-03-01")


def test_list_by_kind(transaction_service, sample_transactions):
    income = transaction_service.list_transactions(kind="income")
    expenses = transaction_service.list_transactions(kind=TransactionKind.EXPENSE)

    assert {t.description for t in income} == {"March salary", "Logo design"}
    assert all(t.kind == TransactionKind.EXPENSE for t in expenses)
    assert len(income) + len(expenses) == len(sample_transactions)


def test_list_by_window(transaction_service, sample_transactions, march_2024):
    week = transaction_service.list_transactions(window=RecencyWindow.WEEK, today=march_2024)
    month = transaction_service.list_transactions(window="month", today=march_2024)

    assert {t.description for t in week} == {"Groceries"}
    assert {t.description for t in month} == {
        "March salary",
        "Groceries",
        "Bus pass",
        "Takeout",
    }


def test_week_window_spans_seven_days(transaction_service, march_2024):
    for day in range(11, 21):
        transaction_service.add_transaction(
            "expense", "10", f"Day {day}", "Food", date(2024, 3, day)
        )

    week = transaction_service.list_transactions(window="week", today=march_2024)

    assert sorted(t.date.day for t in week) == list(range(14, 21))


def test_month_window_excludes_same_day_last_month(transaction_service, march_2024):
    transaction_service.add_transaction("expense", "10", "Edge", "Food", date(2024, 2, 20))
    transaction_service.add_transaction("expense", "10", "Inside", "Food", date(2024, 2, 21))

    month = transaction_service.list_transactions(window="month", today=march_2024)

    assert [t.description for t in month] == ["Inside"]


def test_list_with_invalid_window(transaction_service):
    with pytest.raises(InvalidInputError, match="Period"):
        transaction_service.list_transactions(window="decade")


def test_recent_transactions(transaction_service, sample_transactions):
    recent = transaction_service.recent_transactions()

    assert len(recent) == 5
    assert recent[0] == sample_transactions[-1]
