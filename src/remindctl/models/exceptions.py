"""Error hierarchy shared by the recurrence core, the store and the commands.

Every error carries a semantic exit code (see ``remindctl.utils.exit_codes``)
so the command layer can terminate with a status scripts can act on.
"""

from __future__ import annotations

from remindctl.utils import exit_codes


class RemindCoreError(Exception):
    """Base class for all classified remindctl errors."""

    exit_code = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class OperationFailedError(RemindCoreError):
    """A command or store operation could not be carried out."""


class RecurrenceValidationError(RemindCoreError):
    """Invalid repeat flags: bad token, bad combination or bad end condition."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class InvalidDateError(RemindCoreError):
    """A date string could not be parsed."""

    exit_code = exit_codes.ERROR_INVALID_ARGS

    def __init__(self, value: str):
        super().__init__(f'Invalid date: "{value}"')
        self.value = value


class ReminderNotFoundError(RemindCoreError):
    """No reminder matches the given index or ID."""

    exit_code = exit_codes.ERROR_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__(f'Reminder not found: "{identifier}"')
        self.identifier = identifier


class AmbiguousReminderError(RemindCoreError):
    """An ID prefix matches more than one reminder."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class ListNotFoundError(RemindCoreError):
    """No reminder list has the given name."""

    exit_code = exit_codes.ERROR_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f'List not found: "{name}"')
        self.name = name
