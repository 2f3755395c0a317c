"""Database layer for finscore."""

from finscore.database.base import Database
from finscore.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
