"""Sorting and ``show`` filters for reminders."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta

from remindctl.models import InvalidDateError, ReminderItem
from remindctl.utils.date_parsing import parse_user_date, start_of_day

FILTER_NAMES = (
    "open",
    "today",
    "tomorrow",
    "week",
    "overdue",
    "upcoming",
    "completed",
    "all",
)
DEFAULT_FILTER = "open"

_FAR_FUTURE = datetime.max.replace(tzinfo=UTC)


def _sort_key(reminder: ReminderItem):
    due = reminder.due_date
    return (
        reminder.is_completed,
        due is None,
        due.astimezone(UTC) if due is not None else _FAR_FUTURE,
        reminder.title.casefold(),
    )


class ReminderFiltering:
    """Ordering and filtering rules shared by ``show`` and index resolution."""

    @staticmethod
    def sort(reminders: Iterable[ReminderItem]) -> list[ReminderItem]:
        """Incomplete first, then by due date (undated last), then by title."""
        return sorted(reminders, key=_sort_key)

    @staticmethod
    def predicate(
        name: str, now: datetime | None = None
    ) -> Callable[[ReminderItem], bool]:
        """Build the predicate for filter ``name``.

        Anything that is not a known filter name is read as a date and
        selects incomplete reminders due on that day.

        Raises:
            InvalidDateError: If ``name`` is neither a filter nor a date
        """
        if now is None:
            now = datetime.now(UTC)
        today = start_of_day(now)
        tomorrow = today + timedelta(days=1)
        day_after = today + timedelta(days=2)
        week_end = today + timedelta(days=7)

        def due_between(start: datetime, end: datetime):
            def check(r: ReminderItem) -> bool:
                return (
                    not r.is_completed
                    and r.due_date is not None
                    and start <= r.due_date < end
                )

            return check

        key = name.strip().lower()
        if key == "open":
            return lambda r: not r.is_completed
        if key == "all":
            return lambda r: True
        if key == "completed":
            return lambda r: r.is_completed
        if key == "today":
            return lambda r: (
                not r.is_completed and r.due_date is not None and r.due_date < tomorrow
            )
        if key == "tomorrow":
            return due_between(tomorrow, day_after)
        if key == "week":
            return due_between(today, week_end)
        if key == "overdue":
            return lambda r: (
                not r.is_completed and r.due_date is not None and r.due_date < now
            )
        if key == "upcoming":
            return lambda r: (
                not r.is_completed and r.due_date is not None and r.due_date >= tomorrow
            )

        date = parse_user_date(name, now=now)
        if date is None:
            raise InvalidDateError(name)
        day = start_of_day(date)
        return due_between(day, day + timedelta(days=1))

    @classmethod
    def apply(
        cls,
        reminders: Iterable[ReminderItem],
        name: str = DEFAULT_FILTER,
        now: datetime | None = None,
    ) -> list[ReminderItem]:
        """Filter ``reminders`` by ``name`` and return them sorted."""
        keep = cls.predicate(name, now=now)
        return cls.sort(r for r in reminders if keep(r))
