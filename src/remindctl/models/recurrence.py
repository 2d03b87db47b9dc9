"""Recurrence models for repeating reminders.

A ``Recurrence`` is an immutable value: the parser builds it from command-line
flags, the adapter builds it from a stored rule, and edits produce a new
instance via ``model_copy(update=...)``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecurrenceFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Weekday(str, Enum):
    """Day of the week, valued by its display abbreviation."""

    MONDAY = "mon"
    TUESDAY = "tue"
    WEDNESDAY = "wed"
    THURSDAY = "thu"
    FRIDAY = "fri"
    SATURDAY = "sat"
    SUNDAY = "sun"

    @property
    def display_order(self) -> int:
        """Canonical position, Monday=1 through Sunday=7."""
        return _DISPLAY_ORDER[self]


_DISPLAY_ORDER = {day: index for index, day in enumerate(Weekday, start=1)}


class CountEnd(BaseModel):
    """Stop after ``count`` occurrences."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["count"] = "count"
    count: int = Field(..., ge=1)


class UntilEnd(BaseModel):
    """Stop after ``date``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["until"] = "until"
    date: datetime


RecurrenceEnd = Annotated[CountEnd | UntilEnd, Field(discriminator="kind")]


def _canonical_ints(values: tuple[int, ...] | None) -> tuple[int, ...] | None:
    if not values:
        return None
    return tuple(sorted(set(values)))


class Recurrence(BaseModel):
    """Normalized repeating schedule.

    Collections are canonicalized on construction: duplicates dropped,
    weekdays ordered Monday..Sunday, integers ascending, and an empty
    collection stored as absent. Which modifiers are legal for which
    frequency is checked by ``remindctl.recurrence.parsing``.

    Attributes:
        frequency: Repeat unit
        interval: Repeat every N units of ``frequency``
        days_of_week: Weekdays (weekly, or monthly with set positions)
        days_of_month: Days 1-31 (monthly)
        set_positions: Ordinals -1 or 1-4 selecting the nth weekday (monthly)
        months_of_year: Months 1-12 (yearly)
        weeks_of_year: ISO weeks 1-53 (yearly)
        end: Optional occurrence count or end date
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    frequency: RecurrenceFrequency
    interval: int = Field(default=1, ge=1)
    days_of_week: tuple[Weekday, ...] | None = None
    days_of_month: tuple[int, ...] | None = None
    set_positions: tuple[int, ...] | None = None
    months_of_year: tuple[int, ...] | None = None
    weeks_of_year: tuple[int, ...] | None = None
    end: RecurrenceEnd | None = None

    @field_validator("days_of_week")
    @classmethod
    def _sort_weekdays(
        cls, value: tuple[Weekday, ...] | None
    ) -> tuple[Weekday, ...] | None:
        if not value:
            return None
        return tuple(sorted(set(value), key=lambda day: day.display_order))

    @field_validator(
        "days_of_month", "set_positions", "months_of_year", "weeks_of_year"
    )
    @classmethod
    def _sort_numbers(cls, value: tuple[int, ...] | None) -> tuple[int, ...] | None:
        return _canonical_ints(value)
