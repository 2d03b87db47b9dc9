"""Tests for the SQLite reminder store."""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from dateutil.tz import gettz

from remindctl.models import (
    Change,
    CountEnd,
    ListNotFoundError,
    OperationFailedError,
    ReminderDraft,
    ReminderNotFoundError,
    ReminderPriority,
    ReminderUpdate,
)
from remindctl.recurrence import RepeatInput, parse_recurrence
from remindctl.utils.exit_codes import ERROR_PERMISSION_DENIED

DUE = datetime(2026, 1, 14, 9, 0, tzinfo=UTC)


def weekly_mon_fri(count: str | None = None):
    return parse_recurrence(RepeatInput(frequency="weekly", on="mon,fri", count=count))


class TestLists:
    @pytest.mark.asyncio
    async def test_default_list_seeded(self, store):
        lists = await store.lists()
        assert [lst.title for lst in lists] == ["Reminders"]
        assert await store.default_list_name() == "Reminders"

    @pytest.mark.asyncio
    async def test_create_list(self, store):
        created = await store.create_list("  Work ")
        assert created.title == "Work"
        assert [lst.title for lst in await store.lists()] == ["Reminders", "Work"]

    @pytest.mark.asyncio
    async def test_create_duplicate_is_case_insensitive(self, store):
        await store.create_list("Work")
        with pytest.raises(OperationFailedError, match="already exists"):
            await store.create_list("work")

    @pytest.mark.asyncio
    async def test_create_blank_name(self, store):
        with pytest.raises(OperationFailedError, match="cannot be empty"):
            await store.create_list("  ")

    @pytest.mark.asyncio
    async def test_rename_list(self, store):
        await store.create_list("Work")
        renamed = await store.rename_list("work", "Office")
        assert renamed.title == "Office"
        with pytest.raises(ListNotFoundError):
            await store.reminders("Work")

    @pytest.mark.asyncio
    async def test_system_list_protected(self, store):
        with pytest.raises(OperationFailedError) as exc:
            await store.rename_list("Reminders", "Inbox")
        assert exc.value.exit_code == ERROR_PERMISSION_DENIED
        with pytest.raises(OperationFailedError, match="system list"):
            await store.delete_list("Reminders")

    @pytest.mark.asyncio
    async def test_delete_list_removes_reminders(self, store):
        await store.create_list("Work")
        await store.create_reminder(ReminderDraft(title="Report"), "Work")
        await store.delete_list("Work")
        assert await store.reminders() == []

    @pytest.mark.asyncio
    async def test_unknown_list(self, store):
        with pytest.raises(ListNotFoundError, match='List not found: "Nope"'):
            await store.create_reminder(ReminderDraft(title="x"), "Nope")


class TestReminders:
    @pytest.mark.asyncio
    async def test_create_and_read_back(self, store):
        rec = weekly_mon_fri(count="4")
        created = await store.create_reminder(
            ReminderDraft(
                title="Standup",
                notes="room 4",
                due_date=DUE,
                priority=ReminderPriority.HIGH,
                recurrence=rec,
            ),
            "Reminders",
        )
        assert created.title == "Standup"
        assert created.list_name == "Reminders"
        assert created.priority is ReminderPriority.HIGH
        assert created.due_date == DUE
        assert created.recurrence == rec
        assert not created.is_completed

        [fetched] = await store.reminders("Reminders")
        assert fetched == created

    @pytest.mark.asyncio
    async def test_rule_stored_as_rrule_text(self, store, db_path):
        created = await store.create_reminder(
            ReminderDraft(title="Standup", due_date=DUE, recurrence=weekly_mon_fri()),
            "Reminders",
        )
        row = store.connection.execute(
            "SELECT recurrence_rule, priority FROM reminders WHERE id = ?", (created.id,)
        ).fetchone()
        assert row["recurrence_rule"] == "FREQ=WEEKLY;BYDAY=MO,FR"
        assert row["priority"] == 0

    @pytest.mark.asyncio
    async def test_until_survives_round_trip(self, store):
        rec = parse_recurrence(
            RepeatInput(frequency="daily", until="2026-03-01T10:00:00.500Z")
        )
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=rec), "Reminders"
        )
        [fetched] = await store.reminders()
        assert created.recurrence == rec
        assert fetched.recurrence == rec

    @pytest.mark.asyncio
    async def test_unsupported_stored_rule_reads_as_none(self, store):
        created = await store.create_reminder(ReminderDraft(title="x"), "Reminders")
        store.connection.execute(
            "UPDATE reminders SET recurrence_rule = 'FREQ=HOURLY' WHERE id = ?", (created.id,)
        )
        [fetched] = await store.reminders()
        assert fetched.recurrence is None

    @pytest.mark.asyncio
    async def test_unreadable_stored_rule_reads_as_none(self, store):
        created = await store.create_reminder(ReminderDraft(title="x"), "Reminders")
        store.connection.execute(
            "UPDATE reminders SET recurrence_rule = 'garbage' WHERE id = ?", (created.id,)
        )
        [fetched] = await store.reminders()
        assert fetched.recurrence is None

    @pytest.mark.asyncio
    async def test_update_fields(self, store):
        await store.create_list("Work")
        created = await store.create_reminder(ReminderDraft(title="Old"), "Reminders")
        updated = await store.update_reminder(
            created.id,
            ReminderUpdate(
                title="New",
                notes="n",
                priority=ReminderPriority.LOW,
                list_name="Work",
                due_date=Change.set(DUE),
            ),
        )
        assert updated.title == "New"
        assert updated.notes == "n"
        assert updated.priority is ReminderPriority.LOW
        assert updated.list_name == "Work"
        assert updated.due_date == DUE

    @pytest.mark.asyncio
    async def test_update_clears_due_and_recurrence(self, store):
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=weekly_mon_fri()), "Reminders"
        )
        updated = await store.update_reminder(
            created.id,
            ReminderUpdate(due_date=Change.clear(), recurrence=Change.clear()),
        )
        assert updated.due_date is None
        assert updated.recurrence is None

    @pytest.mark.asyncio
    async def test_update_leaves_unset_fields(self, store):
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=weekly_mon_fri()), "Reminders"
        )
        updated = await store.update_reminder(created.id, ReminderUpdate(title="y"))
        assert updated.due_date == DUE
        assert updated.recurrence == created.recurrence

    @pytest.mark.asyncio
    async def test_update_completion(self, store):
        created = await store.create_reminder(ReminderDraft(title="x"), "Reminders")
        done = await store.update_reminder(created.id, ReminderUpdate(is_completed=True))
        assert done.is_completed and done.completion_date is not None
        reopened = await store.update_reminder(created.id, ReminderUpdate(is_completed=False))
        assert not reopened.is_completed and reopened.completion_date is None

    @pytest.mark.asyncio
    async def test_update_missing(self, store):
        with pytest.raises(ReminderNotFoundError):
            await store.update_reminder("NOPE", ReminderUpdate(title="x"))

    @pytest.mark.asyncio
    async def test_delete(self, store):
        a = await store.create_reminder(ReminderDraft(title="a"), "Reminders")
        await store.create_reminder(ReminderDraft(title="b"), "Reminders")
        assert await store.delete_reminders([a.id, "missing"]) == 1
        assert [r.title for r in await store.reminders()] == ["b"]
        assert await store.delete_reminders([]) == 0


class TestCompletion:
    @pytest.mark.asyncio
    async def test_plain_reminder_completes(self, store):
        created = await store.create_reminder(ReminderDraft(title="x", due_date=DUE), "Reminders")
        [done] = await store.complete_reminders([created.id])
        assert done.is_completed
        assert done.completion_date is not None
        assert done.due_date == DUE

    @pytest.mark.asyncio
    async def test_recurring_reminder_advances(self, store):
        # Wednesday 2026-01-14 -> Friday 2026-01-16
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=weekly_mon_fri()), "Reminders"
        )
        [next_one] = await store.complete_reminders([created.id])
        assert not next_one.is_completed
        assert next_one.due_date == datetime(2026, 1, 16, 9, 0, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_count_consumed_until_exhausted(self, store):
        daily = parse_recurrence(RepeatInput(frequency="daily", count="2"))
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=daily), "Reminders"
        )
        [second] = await store.complete_reminders([created.id])
        assert not second.is_completed
        assert second.recurrence.end == CountEnd(count=1)
        [final] = await store.complete_reminders([created.id])
        assert final.is_completed

    @pytest.mark.asyncio
    async def test_recurring_without_due_completes(self, store):
        created = await store.create_reminder(
            ReminderDraft(title="x", recurrence=weekly_mon_fri()), "Reminders"
        )
        [done] = await store.complete_reminders([created.id])
        assert done.is_completed

    @pytest.mark.asyncio
    async def test_advance_follows_local_calendar(self, store):
        tokyo = gettz("Asia/Tokyo")
        with patch("remindctl.utils.date_parsing.get_local_timezone", return_value=tokyo):
            created = await store.create_reminder(
                ReminderDraft(
                    title="x",
                    due_date=datetime(2026, 1, 5, 8, 0, tzinfo=tokyo),
                    recurrence=parse_recurrence(RepeatInput(frequency="weekly", on="mon")),
                ),
                "Reminders",
            )
            [next_one] = await store.complete_reminders([created.id])

        local_due = next_one.due_date.astimezone(tokyo)
        assert local_due == datetime(2026, 1, 12, 8, 0, tzinfo=tokyo)
        assert local_due.strftime("%a") == "Mon"

    @pytest.mark.asyncio
    async def test_count_starts_at_first_matching_occurrence(self, store):
        # Wednesday due date, repeating on Mondays twice
        monday_twice = parse_recurrence(RepeatInput(frequency="weekly", on="mon", count="2"))
        created = await store.create_reminder(
            ReminderDraft(title="x", due_date=DUE, recurrence=monday_twice), "Reminders"
        )
        [first] = await store.complete_reminders([created.id])
        assert first.due_date == datetime(2026, 1, 19, 9, 0, tzinfo=UTC)
        assert first.recurrence.end == CountEnd(count=2)

        [second] = await store.complete_reminders([created.id])
        assert second.due_date == datetime(2026, 1, 26, 9, 0, tzinfo=UTC)
        assert second.recurrence.end == CountEnd(count=1)

        [final] = await store.complete_reminders([created.id])
        assert final.is_completed

    @pytest.mark.asyncio
    async def test_missing_id_rolls_back(self, store):
        created = await store.create_reminder(ReminderDraft(title="x"), "Reminders")
        with pytest.raises(ReminderNotFoundError):
            await store.complete_reminders([created.id, "NOPE"])
        [fetched] = await store.reminders()
        assert not fetched.is_completed


def test_database_file_permissions(store, db_path):
    assert isinstance(store.connection, sqlite3.Connection)
    assert db_path.exists()
    assert db_path.stat().st_mode & 0o777 == 0o600
