"""Store abstraction for reminders and reminder lists.

Business logic depends only on ``RemindersStore`` so the persistence
backend can be swapped without touching the service or command layers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from remindctl.models import (
    ReminderDraft,
    ReminderItem,
    ReminderList,
    ReminderUpdate,
)


class RemindersStore(ABC):
    """Abstract base class for reminder persistence operations."""

    @abstractmethod
    async def lists(self) -> list[ReminderList]:
        """List all reminder lists, ordered by title."""
        raise NotImplementedError("RemindersStore.lists() must be implemented by adapter")

    @abstractmethod
    async def default_list_name(self) -> str:
        """Return the title of the list new reminders go to by default."""
        raise NotImplementedError(
            "RemindersStore.default_list_name() must be implemented by adapter"
        )

    @abstractmethod
    async def reminders(self, list_name: str | None = None) -> list[ReminderItem]:
        """Fetch reminders, optionally restricted to one list.

        Args:
            list_name: Title of the list to read, or None for every list

        Raises:
            ListNotFoundError: If ``list_name`` does not exist
        """
        raise NotImplementedError(
            "RemindersStore.reminders() must be implemented by adapter"
        )

    @abstractmethod
    async def create_list(self, name: str) -> ReminderList:
        """Create a new list.

        Raises:
            OperationFailedError: If a list with that title already exists
        """
        raise NotImplementedError(
            "RemindersStore.create_list() must be implemented by adapter"
        )

    @abstractmethod
    async def rename_list(self, old_name: str, new_name: str) -> ReminderList:
        """Rename a list.

        Raises:
            ListNotFoundError: If ``old_name`` does not exist
            OperationFailedError: If the list is a system list or the new
                title is taken
        """
        raise NotImplementedError(
            "RemindersStore.rename_list() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_list(self, name: str) -> None:
        """Delete a list together with its reminders.

        Raises:
            ListNotFoundError: If ``name`` does not exist
            OperationFailedError: If the list is a system list
        """
        raise NotImplementedError(
            "RemindersStore.delete_list() must be implemented by adapter"
        )

    @abstractmethod
    async def create_reminder(
        self, draft: ReminderDraft, list_name: str
    ) -> ReminderItem:
        """Create a reminder in ``list_name``.

        Raises:
            ListNotFoundError: If ``list_name`` does not exist
        """
        raise NotImplementedError(
            "RemindersStore.create_reminder() must be implemented by adapter"
        )

    @abstractmethod
    async def update_reminder(
        self, reminder_id: str, update: ReminderUpdate
    ) -> ReminderItem:
        """Apply ``update`` to a reminder and return the stored result.

        Raises:
            ReminderNotFoundError: If the reminder does not exist
            ListNotFoundError: If ``update.list_name`` does not exist
        """
        raise NotImplementedError(
            "RemindersStore.update_reminder() must be implemented by adapter"
        )

    @abstractmethod
    async def complete_reminders(self, ids: list[str]) -> list[ReminderItem]:
        """Mark reminders completed.

        A recurring reminder with a due date moves on to its next occurrence
        and stays open until its rule is exhausted.
        """
        raise NotImplementedError(
            "RemindersStore.complete_reminders() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_reminders(self, ids: list[str]) -> int:
        """Delete reminders and return how many were removed."""
        raise NotImplementedError(
            "RemindersStore.delete_reminders() must be implemented by adapter"
        )
