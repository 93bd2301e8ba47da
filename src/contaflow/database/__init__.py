"""Database layer for contaflow application."""

from contaflow.database.base import Database
from contaflow.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
