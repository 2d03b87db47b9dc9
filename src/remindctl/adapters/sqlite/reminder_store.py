"""SQLite implementation of RemindersStore."""

from __future__ import annotations

import dataclasses
import sqlite3
from pathlib import Path
from typing import Any

from remindctl.adapters.sqlite.connection import get_connection
from remindctl.adapters.sqlite.utils import (
    generate_uuid,
    now_iso,
    parse_datetime,
    to_db_datetime,
)
from remindctl.models import (
    ListNotFoundError,
    OperationFailedError,
    Recurrence,
    ReminderDraft,
    ReminderItem,
    ReminderList,
    ReminderNotFoundError,
    ReminderPriority,
    ReminderUpdate,
)
from remindctl.recurrence import ExternalRule, from_external_rule, to_external_rule
from remindctl.recurrence.external import ExternalRecurrenceEnd
from remindctl.repositories import RemindersStore
from remindctl.utils import date_parsing
from remindctl.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_PERMISSION_DENIED
from remindctl.utils.logger import get_logger

_SELECT_REMINDERS = """
    SELECT r.*, l.title AS list_title FROM reminders r
    JOIN lists l ON l.id = r.list_id
"""


class SqliteRemindersStore(RemindersStore):
    """Reminder store backed by a local SQLite database."""

    def __init__(self, db_path: str | Path):
        """Initialize the store.

        Args:
            db_path: Database file; created and migrated on first use
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    # Lists

    async def lists(self) -> list[ReminderList]:
        cursor = self.connection.execute(
            "SELECT id, title FROM lists ORDER BY title COLLATE NOCASE"
        )
        return [ReminderList(id=row["id"], title=row["title"]) for row in cursor]

    async def default_list_name(self) -> str:
        row = self.connection.execute(
            "SELECT title FROM lists ORDER BY is_system DESC, created_at ASC LIMIT 1"
        ).fetchone()
        if row is None:
            raise OperationFailedError("No reminder lists found")
        return row["title"]

    async def create_list(self, name: str) -> ReminderList:
        title = _clean_list_name(name)
        if self._find_list(title) is not None:
            raise OperationFailedError(
                f'List already exists: "{title}"', exit_code=ERROR_INVALID_ARGS
            )

        list_id = generate_uuid()
        now = now_iso()
        self.connection.execute(
            """INSERT INTO lists (id, title, is_system, created_at, updated_at)
               VALUES (?, ?, 0, ?, ?)""",
            (list_id, title, now, now),
        )
        self.connection.commit()
        get_logger("store").info("Created list %s", list_id)
        return ReminderList(id=list_id, title=title)

    async def rename_list(self, old_name: str, new_name: str) -> ReminderList:
        row = self._get_list(old_name)
        _ensure_user_list(row, "renamed")

        title = _clean_list_name(new_name)
        existing = self._find_list(title)
        if existing is not None and existing["id"] != row["id"]:
            raise OperationFailedError(
                f'List already exists: "{title}"', exit_code=ERROR_INVALID_ARGS
            )

        self.connection.execute(
            "UPDATE lists SET title = ?, updated_at = ? WHERE id = ?",
            (title, now_iso(), row["id"]),
        )
        self.connection.commit()
        return ReminderList(id=row["id"], title=title)

    async def delete_list(self, name: str) -> None:
        row = self._get_list(name)
        _ensure_user_list(row, "deleted")

        self.connection.execute("DELETE FROM lists WHERE id = ?", (row["id"],))
        self.connection.commit()
        get_logger("store").info("Deleted list %s", row["id"])

    # Reminders

    async def reminders(self, list_name: str | None = None) -> list[ReminderItem]:
        query = _SELECT_REMINDERS
        params: list[Any] = []
        if list_name is not None:
            list_row = self._get_list(list_name)
            query += " WHERE r.list_id = ?"
            params.append(list_row["id"])
        query += " ORDER BY r.created_at ASC"

        cursor = self.connection.execute(query, params)
        return [self._row_to_item(row) for row in cursor.fetchall()]

    async def create_reminder(
        self, draft: ReminderDraft, list_name: str
    ) -> ReminderItem:
        list_row = self._get_list(list_name)
        reminder_id = generate_uuid()
        now = now_iso()

        self.connection.execute(
            """INSERT INTO reminders (
                id, list_id, title, notes, is_completed, priority,
                due_date, recurrence_rule, created_at, updated_at
            ) VALUES (?, ?, ?, ?, 0, ?, ?, ?, ?, ?)""",
            (
                reminder_id,
                list_row["id"],
                draft.title,
                draft.notes,
                draft.priority.store_value,
                to_db_datetime(draft.due_date),
                _encode_recurrence(draft.recurrence),
                now,
                now,
            ),
        )
        self.connection.commit()
        return self._get_item(reminder_id)

    async def update_reminder(
        self, reminder_id: str, update: ReminderUpdate
    ) -> ReminderItem:
        self._get_row(reminder_id)

        changes: dict[str, Any] = {}
        if update.title is not None:
            changes["title"] = update.title
        if update.notes is not None:
            changes["notes"] = update.notes
        if update.priority is not None:
            changes["priority"] = update.priority.store_value
        if update.list_name is not None:
            changes["list_id"] = self._get_list(update.list_name)["id"]
        if update.due_date is not None:
            changes["due_date"] = to_db_datetime(update.due_date.value)
        if update.recurrence is not None:
            changes["recurrence_rule"] = _encode_recurrence(update.recurrence.value)
        if update.is_completed is not None:
            changes["is_completed"] = update.is_completed
            changes["completion_date"] = now_iso() if update.is_completed else None

        if changes:
            set_parts = [f"{key} = ?" for key in changes]
            params = list(changes.values())
            set_parts.append("updated_at = ?")
            params.append(now_iso())
            params.append(reminder_id)
            self.connection.execute(
                f"UPDATE reminders SET {', '.join(set_parts)} WHERE id = ?", params
            )
            self.connection.commit()

        return self._get_item(reminder_id)

    async def complete_reminders(self, ids: list[str]) -> list[ReminderItem]:
        completed = []
        try:
            for reminder_id in ids:
                self._complete_one(self._get_row(reminder_id))
                completed.append(reminder_id)
            self.connection.commit()
        except Exception:
            self.connection.rollback()
            raise
        return [self._get_item(reminder_id) for reminder_id in completed]

    async def delete_reminders(self, ids: list[str]) -> int:
        if not ids:
            return 0
        placeholders = ", ".join("?" for _ in ids)
        cursor = self.connection.execute(
            f"DELETE FROM reminders WHERE id IN ({placeholders})", list(ids)
        )
        self.connection.commit()
        return cursor.rowcount

    # Helpers

    def _complete_one(self, row: sqlite3.Row) -> None:
        """Complete a reminder, or move a recurring one to its next occurrence."""
        now = now_iso()
        rule = _safe_rule(row["id"], row["recurrence_rule"])
        due = parse_datetime(row["due_date"])

        if rule is not None and due is not None and not row["is_completed"]:
            local_tz = date_parsing.get_local_timezone()
            next_due = rule.occurrence_after(due, tz=local_tz)
            if next_due is not None:
                if rule.is_occurrence(due, tz=local_tz):
                    rule = _advance(rule)
                self.connection.execute(
                    """UPDATE reminders
                       SET due_date = ?, recurrence_rule = ?, updated_at = ?
                       WHERE id = ?""",
                    (to_db_datetime(next_due), rule.to_rrule(), now, row["id"]),
                )
                get_logger("store").debug("Advanced recurring reminder %s to %s", row["id"], next_due)
                return

        self.connection.execute(
            """UPDATE reminders
               SET is_completed = 1, completion_date = ?, updated_at = ?
               WHERE id = ?""",
            (now, now, row["id"]),
        )

    def _find_list(self, name: str) -> sqlite3.Row | None:
        return self.connection.execute(
            "SELECT * FROM lists WHERE title = ? COLLATE NOCASE", (name.strip(),)
        ).fetchone()

    def _get_list(self, name: str) -> sqlite3.Row:
        row = self._find_list(name)
        if row is None:
            raise ListNotFoundError(name)
        return row

    def _get_row(self, reminder_id: str) -> sqlite3.Row:
        row = self.connection.execute(
            _SELECT_REMINDERS + " WHERE r.id = ?", (reminder_id,)
        ).fetchone()
        if row is None:
            raise ReminderNotFoundError(reminder_id)
        return row

    def _get_item(self, reminder_id: str) -> ReminderItem:
        return self._row_to_item(self._get_row(reminder_id))

    def _row_to_item(self, row: sqlite3.Row) -> ReminderItem:
        return ReminderItem(
            id=row["id"],
            title=row["title"],
            notes=row["notes"],
            is_completed=bool(row["is_completed"]),
            completion_date=parse_datetime(row["completion_date"]),
            priority=ReminderPriority.from_store_value(row["priority"]),
            due_date=parse_datetime(row["due_date"]),
            recurrence=_decode_recurrence(row["id"], row["recurrence_rule"]),
            list_id=row["list_id"],
            list_name=row["list_title"],
        )


def _clean_list_name(name: str) -> str:
    title = name.strip()
    if not title:
        raise OperationFailedError("List name cannot be empty", exit_code=ERROR_INVALID_ARGS)
    return title


def _ensure_user_list(row: sqlite3.Row, action: str) -> None:
    if row["is_system"]:
        raise OperationFailedError(
            f'List "{row["title"]}" is a system list and cannot be {action}',
            exit_code=ERROR_PERMISSION_DENIED,
        )


def _encode_recurrence(recurrence: Recurrence | None) -> str | None:
    if recurrence is None:
        return None
    return to_external_rule(recurrence).to_rrule()


def _decode_rule(text: str | None) -> ExternalRule | None:
    if not text:
        return None
    return ExternalRule.from_rrule(text)


def _safe_rule(reminder_id: str, text: str | None) -> ExternalRule | None:
    try:
        return _decode_rule(text)
    except ValueError as e:
        get_logger("store").warning("Ignoring unreadable rule on reminder %s: %s", reminder_id, e)
        return None


def _decode_recurrence(reminder_id: str, text: str | None) -> Recurrence | None:
    rule = _safe_rule(reminder_id, text)
    if rule is None:
        return None
    return from_external_rule(rule)


def _advance(rule: ExternalRule) -> ExternalRule:
    """Consume one occurrence of a counted rule.

    The stored rule restarts at the next due date, so its COUNT is what is
    left of the series including that date.
    """
    end = rule.recurrence_end
    if end is None or end.occurrence_count <= 1:
        return rule
    return dataclasses.replace(
        rule, recurrence_end=ExternalRecurrenceEnd.with_count(end.occurrence_count - 1)
    )

