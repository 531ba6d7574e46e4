"""Storage layer for fintrack application."""

from fintrack.database.base import Storage
from fintrack.database.factories import create_sqlite_storage
from fintrack.database.store import RecordStore

__all__ = ["Storage", "create_sqlite_storage", "RecordStore"]
