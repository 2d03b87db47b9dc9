"""SQLite adapter module - local reminder store."""

from remindctl.adapters.sqlite.connection import DatabaseConnection, get_connection
from remindctl.adapters.sqlite.reminder_store import SqliteRemindersStore

__all__ = [
    "DatabaseConnection",
    "get_connection",
    "SqliteRemindersStore",
]
