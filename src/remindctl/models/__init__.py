"""Data models for remindctl."""

from .config_models import AppConfig, OutputConfig
from .exceptions import (
    AmbiguousReminderError,
    InvalidDateError,
    ListNotFoundError,
    OperationFailedError,
    RecurrenceValidationError,
    ReminderNotFoundError,
    RemindCoreError,
)
from .recurrence import (
    CountEnd,
    Recurrence,
    RecurrenceEnd,
    RecurrenceFrequency,
    UntilEnd,
    Weekday,
)
from .reminder import (
    Change,
    ListSummary,
    ReminderDraft,
    ReminderItem,
    ReminderList,
    ReminderPriority,
    ReminderUpdate,
)

__all__ = [
    "AppConfig",
    "OutputConfig",
    "RemindCoreError",
    "OperationFailedError",
    "RecurrenceValidationError",
    "InvalidDateError",
    "ReminderNotFoundError",
    "AmbiguousReminderError",
    "ListNotFoundError",
    "RecurrenceFrequency",
    "Weekday",
    "CountEnd",
    "UntilEnd",
    "RecurrenceEnd",
    "Recurrence",
    "ReminderPriority",
    "ReminderList",
    "ListSummary",
    "ReminderItem",
    "ReminderDraft",
    "Change",
    "ReminderUpdate",
]
