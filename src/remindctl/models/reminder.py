"""Reminder data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from remindctl.models.recurrence import Recurrence

T = TypeVar("T")


class ReminderPriority(str, Enum):
    """Reminder priority, mapped to the store's 0-9 integer scale."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_store_value(cls, value: int) -> ReminderPriority:
        if 1 <= value <= 4:
            return cls.HIGH
        if value == 5:
            return cls.MEDIUM
        if 6 <= value <= 9:
            return cls.LOW
        return cls.NONE

    @property
    def store_value(self) -> int:
        return {
            ReminderPriority.NONE: 0,
            ReminderPriority.HIGH: 1,
            ReminderPriority.MEDIUM: 5,
            ReminderPriority.LOW: 9,
        }[self]


class ReminderList(BaseModel):
    """A reminder list (calendar) in the store.

    Attributes:
        id: Unique identifier for the list
        title: Display name, unique within the store
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str


class ListSummary(BaseModel):
    """Per-list counts shown by ``remindctl list``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    reminder_count: int = 0
    overdue_count: int = 0


class ReminderItem(BaseModel):
    """A reminder as read back from the store.

    Attributes:
        id: Unique identifier for the reminder
        title: Reminder title
        notes: Optional free-form notes
        is_completed: Completion status
        completion_date: When the reminder was completed
        priority: Priority level
        due_date: Optional due date (timezone-aware, UTC)
        recurrence: Optional repeat schedule
        list_id: ID of the containing list
        list_name: Title of the containing list
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    notes: str | None = None
    is_completed: bool = False
    completion_date: datetime | None = None
    priority: ReminderPriority = ReminderPriority.NONE
    due_date: datetime | None = None
    recurrence: Recurrence | None = None
    list_id: str = Field(..., alias="listID")
    list_name: str


class ReminderDraft(BaseModel):
    """Fields for creating a new reminder."""

    title: str
    notes: str | None = None
    due_date: datetime | None = None
    priority: ReminderPriority = ReminderPriority.NONE
    recurrence: Recurrence | None = None


@dataclass(frozen=True)
class Change(Generic[T]):
    """An explicit change to an optional field.

    ``ReminderUpdate`` fields of type ``Change[...] | None`` are tri-state:
    ``None`` leaves the field alone, ``Change.clear()`` removes the value and
    ``Change.set(value)`` replaces it.
    """

    value: T | None

    @classmethod
    def set(cls, value: T) -> Change[T]:
        return cls(value)

    @classmethod
    def clear(cls) -> Change[T]:
        return cls(None)

    @property
    def is_clear(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class ReminderUpdate:
    """Fields for updating an existing reminder.

    Plain optional fields are left unchanged when ``None``. ``due_date`` and
    ``recurrence`` can also be cleared, so they use ``Change``.
    """

    title: str | None = None
    notes: str | None = None
    due_date: Change[datetime] | None = None
    priority: ReminderPriority | None = None
    recurrence: Change[Recurrence] | None = None
    list_name: str | None = None
    is_completed: bool | None = None

    @property
    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (
                self.title,
                self.notes,
                self.due_date,
                self.priority,
                self.recurrence,
                self.list_name,
                self.is_completed,
            )
        )
