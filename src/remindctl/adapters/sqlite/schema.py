"""Table definitions for the local reminder store."""

from __future__ import annotations

DEFAULT_LIST_TITLE = "Reminders"

# Lists table. A system list is created by the store itself and cannot be
# renamed or deleted.
CREATE_LISTS_TABLE = """
CREATE TABLE IF NOT EXISTS lists (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL UNIQUE COLLATE NOCASE,
    is_system BOOLEAN NOT NULL DEFAULT 0,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
)
"""

# Reminders table. recurrence_rule holds RRULE text, e.g.
# FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=4
CREATE_REMINDERS_TABLE = """
CREATE TABLE IF NOT EXISTS reminders (
    id TEXT PRIMARY KEY,
    list_id TEXT NOT NULL,
    title TEXT NOT NULL,
    notes TEXT,
    is_completed BOOLEAN NOT NULL DEFAULT 0,
    completion_date DATETIME,
    priority INTEGER NOT NULL DEFAULT 0,
    due_date DATETIME,
    recurrence_rule TEXT,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL,
    FOREIGN KEY (list_id) REFERENCES lists(id) ON DELETE CASCADE
)
"""

CREATE_REMINDER_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_reminders_list ON reminders(list_id)",
    "CREATE INDEX IF NOT EXISTS idx_reminders_due ON reminders(due_date)",
    "CREATE INDEX IF NOT EXISTS idx_reminders_completed ON reminders(is_completed)",
]

ALL_TABLES = [
    CREATE_LISTS_TABLE,
    CREATE_REMINDERS_TABLE,
]
