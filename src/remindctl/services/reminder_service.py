"""Reminder service - business logic for reminder operations.

This service sits between commands and the store: it applies defaults
(target list, due date for recurring reminders), filtering and ID
resolution, and leaves persistence to ``RemindersStore``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from datetime import UTC, datetime

from remindctl.models import (
    Change,
    ListSummary,
    ReminderDraft,
    ReminderItem,
    ReminderList,
    ReminderUpdate,
)
from remindctl.repositories import RemindersStore
from remindctl.services.reminder_filtering import DEFAULT_FILTER, ReminderFiltering
from remindctl.utils.id_resolver import IDResolver


class ReminderService:
    """Service for reminder business logic."""

    def __init__(self, store: RemindersStore, default_list: str | None = None):
        """Initialize the reminder service.

        Args:
            store: RemindersStore implementation for data access
            default_list: List used when a command names none; the store's
                default list when None
        """
        self.store = store
        self.default_list = default_list

    async def target_list(self, list_name: str | None = None) -> str:
        """Resolve the list a new reminder goes to."""
        if list_name:
            return list_name
        if self.default_list:
            return self.default_list
        return await self.store.default_list_name()

    async def all_reminders(self, list_name: str | None = None) -> list[ReminderItem]:
        """Every reminder, sorted in display order."""
        return ReminderFiltering.sort(await self.store.reminders(list_name))

    async def list_reminders(
        self,
        list_name: str | None = None,
        filter_name: str = DEFAULT_FILTER,
        now: datetime | None = None,
    ) -> list[ReminderItem]:
        """Reminders matching ``filter_name``, sorted in display order."""
        reminders = await self.store.reminders(list_name)
        return ReminderFiltering.apply(reminders, filter_name, now=now)

    async def resolve(
        self, inputs: Sequence[str], list_name: str | None = None
    ) -> list[ReminderItem]:
        """Resolve indexes and ID prefixes against the sorted reminders."""
        return IDResolver.resolve(inputs, await self.all_reminders(list_name))

    async def create(
        self,
        draft: ReminderDraft,
        list_name: str | None = None,
        now: datetime | None = None,
    ) -> ReminderItem:
        """Create a reminder.

        A recurring reminder without a due date is anchored at ``now``.
        """
        if draft.recurrence is not None and draft.due_date is None:
            draft = draft.model_copy(update={"due_date": now or datetime.now(UTC)})
        return await self.store.create_reminder(draft, await self.target_list(list_name))

    async def update(
        self,
        reminder: ReminderItem,
        update: ReminderUpdate,
        now: datetime | None = None,
    ) -> ReminderItem:
        """Apply ``update`` to ``reminder``.

        When the result would repeat without a due date, the due date is set
        to ``now``.
        """
        recurrence = reminder.recurrence
        if update.recurrence is not None:
            recurrence = update.recurrence.value

        due = reminder.due_date
        if update.due_date is not None:
            due = update.due_date.value

        if recurrence is not None and due is None:
            update = dataclasses.replace(
                update, due_date=Change.set(now or datetime.now(UTC))
            )
        return await self.store.update_reminder(reminder.id, update)

    async def complete(self, reminders: Sequence[ReminderItem]) -> list[ReminderItem]:
        """Complete reminders; recurring ones advance to their next occurrence."""
        return await self.store.complete_reminders([r.id for r in reminders])

    async def delete(self, reminders: Sequence[ReminderItem]) -> int:
        """Delete reminders and return how many were removed."""
        return await self.store.delete_reminders([r.id for r in reminders])

    async def lists(self) -> list[ReminderList]:
        return await self.store.lists()

    async def list_summaries(self, now: datetime | None = None) -> list[ListSummary]:
        """Open and overdue reminder counts for every list."""
        if now is None:
            now = datetime.now(UTC)
        lists = await self.store.lists()
        reminders = await self.store.reminders()

        summaries = []
        for reminder_list in lists:
            open_items = [
                r for r in reminders if r.list_id == reminder_list.id and not r.is_completed
            ]
            overdue = [r for r in open_items if r.due_date is not None and r.due_date < now]
            summaries.append(
                ListSummary(
                    id=reminder_list.id,
                    title=reminder_list.title,
                    reminder_count=len(open_items),
                    overdue_count=len(overdue),
                )
            )
        return sorted(summaries, key=lambda s: s.title.casefold())

    async def create_list(self, name: str) -> ReminderList:
        return await self.store.create_list(name)

    async def rename_list(self, old_name: str, new_name: str) -> ReminderList:
        return await self.store.rename_list(old_name, new_name)

    async def delete_list(self, name: str) -> None:
        await self.store.delete_list(name)


def get_reminder_service() -> ReminderService:
    """Build a ReminderService over the configured SQLite store."""
    from remindctl.adapters.sqlite import SqliteRemindersStore
    from remindctl.services.config_service import get_config_service

    config_service = get_config_service()
    store = SqliteRemindersStore(config_service.get_db_path())
    return ReminderService(store, default_list=config_service.config.default_list)
