"""Database connection management for the local reminder store.

A single process-wide connection is kept per database path, with WAL mode
and foreign key enforcement switched on and migrations applied on open.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from remindctl.adapters.sqlite.migrations import ALL_MIGRATIONS
from remindctl.adapters.sqlite.migrations.runner import MigrationRunner


class DatabaseConnection:
    """Singleton connection manager for the reminder database.

    Provides:
    - Single connection per process (connection reuse)
    - WAL mode and foreign key enforcement
    - Owner-only file permissions on new databases
    - Cleanup on interpreter exit
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None

    def __new__(cls) -> DatabaseConnection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path) -> sqlite3.Connection:
        """Get or create the connection for ``db_path``.

        Opening a different path closes the previous connection.
        """
        instance = cls()
        db_path = Path(db_path)

        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        if instance._connection is not None:
            cls.close_connection()

        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        connection = sqlite3.connect(
            str(db_path),
            check_same_thread=False,
            timeout=30.0,
        )
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(db_path, 0o600)

        MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)

        instance._connection = connection
        instance._db_path = db_path
        atexit.register(cls.close_connection)

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Commit and close the open connection, if any."""
        instance = cls()
        if instance._connection is None:
            return
        try:
            instance._connection.commit()
            instance._connection.close()
        finally:
            instance._connection = None
            instance._db_path = None

    @classmethod
    def get_db_path(cls) -> Path | None:
        """Get current database path."""
        return cls()._db_path


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Helper function to get the database connection."""
    return DatabaseConnection.get_connection(db_path)
