"""Initial database schema: lists, reminders and the default list."""

import sqlite3

from remindctl.adapters.sqlite import schema
from remindctl.adapters.sqlite.utils import generate_uuid, now_iso

from .runner import Migration


class InitialSchemaMigration(Migration):
    """Migration 001: Create lists and reminders."""

    @property
    def version(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Initial database schema"

    def up(self, connection: sqlite3.Connection) -> None:
        for create_statement in schema.ALL_TABLES:
            connection.execute(create_statement)
        for index_statement in schema.CREATE_REMINDER_INDEXES:
            connection.execute(index_statement)

        now = now_iso()
        connection.execute(
            """INSERT INTO lists (id, title, is_system, created_at, updated_at)
               VALUES (?, ?, 1, ?, ?)""",
            (generate_uuid(), schema.DEFAULT_LIST_TITLE, now, now),
        )


initial_migration = InitialSchemaMigration()
