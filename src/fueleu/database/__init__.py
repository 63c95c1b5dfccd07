"""Database layer for fueleu application."""

from fueleu.database.base import Database
from fueleu.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
