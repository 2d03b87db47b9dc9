"""Parse repeat flags into a validated ``Recurrence``.

The flags arrive as raw strings (``--repeat``, ``--interval``, ``--on``,
``--month-day``, ``--setpos``, ``--month``, ``--week``, ``--count``,
``--until``). List flags are comma separated; tokens are de-duplicated and
stored in canonical order. Which modifiers a frequency accepts is described
by ``MODIFIER_RULES``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import TypeVar

from remindctl.models.exceptions import InvalidDateError, RecurrenceValidationError
from remindctl.models.recurrence import (
    CountEnd,
    Recurrence,
    RecurrenceEnd,
    RecurrenceFrequency,
    UntilEnd,
    Weekday,
)
from remindctl.models.reminder import Change
from remindctl.utils.date_parsing import parse_user_date

T = TypeVar("T")

CLEAR_KEYWORD = "none"

WEEKDAY_NAMES: dict[str, Weekday] = {
    "mon": Weekday.MONDAY,
    "monday": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "tues": Weekday.TUESDAY,
    "tuesday": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "weds": Weekday.WEDNESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY,
    "thurs": Weekday.THURSDAY,
    "thursday": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "friday": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "saturday": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
    "sunday": Weekday.SUNDAY,
}

MONTH_NAMES: dict[str, int] = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

SET_POSITIONS = frozenset({-1, 1, 2, 3, 4})

_INTEGER = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class RepeatInput:
    """Raw repeat flag values as typed on the command line."""

    frequency: str
    interval: str | None = None
    count: str | None = None
    until: str | None = None
    on: str | None = None
    month_day: str | None = None
    setpos: str | None = None
    month: str | None = None
    week: str | None = None

    @property
    def has_modifiers(self) -> bool:
        return any(
            getattr(self, f.name) is not None
            for f in fields(self)
            if f.name != "frequency"
        )


@dataclass(frozen=True)
class ModifierRule:
    """Legality of one list modifier.

    Attributes:
        flag: Command-line flag, used in error messages
        field: ``Recurrence`` field the flag fills
        frequencies: Frequencies the flag may be used with
        requires: Flag that must accompany this one, if any
        requires_for: Frequencies for which ``requires`` applies
    """

    flag: str
    field: str
    frequencies: frozenset[RecurrenceFrequency]
    requires: str | None = None
    requires_for: frozenset[RecurrenceFrequency] = frozenset()


MODIFIER_RULES: tuple[ModifierRule, ...] = (
    ModifierRule(
        "--on",
        "days_of_week",
        frozenset({RecurrenceFrequency.WEEKLY, RecurrenceFrequency.MONTHLY}),
        requires="--setpos",
        requires_for=frozenset({RecurrenceFrequency.MONTHLY}),
    ),
    ModifierRule(
        "--month-day",
        "days_of_month",
        frozenset({RecurrenceFrequency.MONTHLY}),
    ),
    ModifierRule(
        "--setpos",
        "set_positions",
        frozenset({RecurrenceFrequency.MONTHLY}),
        requires="--on",
        requires_for=frozenset({RecurrenceFrequency.MONTHLY}),
    ),
    ModifierRule(
        "--month",
        "months_of_year",
        frozenset({RecurrenceFrequency.YEARLY}),
    ),
    ModifierRule(
        "--week",
        "weeks_of_year",
        frozenset({RecurrenceFrequency.YEARLY}),
    ),
)

_FIELD_BY_FLAG = {rule.flag: rule.field for rule in MODIFIER_RULES}


def check_modifiers(
    frequency: RecurrenceFrequency, modifiers: dict[str, tuple | None]
) -> None:
    """Apply ``MODIFIER_RULES`` in order.

    Args:
        frequency: Parsed frequency
        modifiers: Parsed list values keyed by ``Recurrence`` field name

    Raises:
        RecurrenceValidationError: On the first rule that is violated
    """
    for rule in MODIFIER_RULES:
        if modifiers.get(rule.field) is None:
            continue
        if frequency not in rule.frequencies:
            allowed = "|".join(
                f.value for f in RecurrenceFrequency if f in rule.frequencies
            )
            raise RecurrenceValidationError(
                f"{rule.flag} requires --repeat {allowed} (got {frequency.value})"
            )
        if (
            rule.requires is not None
            and frequency in rule.requires_for
            and modifiers.get(_FIELD_BY_FLAG[rule.requires]) is None
        ):
            raise RecurrenceValidationError(
                f"{rule.flag} with --repeat {frequency.value} requires {rule.requires}"
            )


def parse_frequency(value: str) -> RecurrenceFrequency:
    try:
        return RecurrenceFrequency(value.strip().lower())
    except ValueError:
        allowed = "|".join(f.value for f in RecurrenceFrequency)
        raise RecurrenceValidationError(
            f'Invalid repeat frequency: "{value}" (use {allowed})'
        ) from None


def _to_int(token: str) -> int | None:
    """ASCII digits with an optional minus sign; None for anything else."""
    if _INTEGER.fullmatch(token) is None:
        return None
    return int(token)


def _parse_positive(value: str, label: str) -> int:
    number = _to_int(value.strip()) or 0
    if number <= 0:
        raise RecurrenceValidationError(
            f'Invalid {label}: "{value}" (use a positive integer)'
        )
    return number


def parse_interval(value: str) -> int:
    return _parse_positive(value, "interval")


def parse_count(value: str) -> int:
    return _parse_positive(value, "count")


def _parse_int_in(value: str, allowed: Callable[[int], bool]) -> int | None:
    number = _to_int(value)
    if number is None:
        return None
    return number if allowed(number) else None


def parse_weekday(token: str) -> Weekday:
    day = WEEKDAY_NAMES.get(token.lower())
    if day is None:
        raise RecurrenceValidationError(
            f'Invalid weekday: "{token}" (use mon,tue,wed,thu,fri,sat,sun)'
        )
    return day


def parse_month_day(token: str) -> int:
    day = _parse_int_in(token, lambda n: 1 <= n <= 31)
    if day is None:
        raise RecurrenceValidationError(f'Invalid month day: "{token}" (use 1-31)')
    return day


def parse_set_position(token: str) -> int:
    position = _parse_int_in(token, lambda n: n in SET_POSITIONS)
    if position is None:
        raise RecurrenceValidationError(
            f'Invalid set position: "{token}" (use -1 or 1-4)'
        )
    return position


def parse_month(token: str) -> int:
    month = MONTH_NAMES.get(token.lower())
    if month is None:
        month = _parse_int_in(token, lambda n: 1 <= n <= 12)
    if month is None:
        raise RecurrenceValidationError(
            f'Invalid month: "{token}" (use 1-12 or jan-dec)'
        )
    return month


def parse_week(token: str) -> int:
    week = _parse_int_in(token, lambda n: 1 <= n <= 53)
    if week is None:
        raise RecurrenceValidationError(f'Invalid week: "{token}" (use 1-53)')
    return week


def parse_list(
    value: str | None,
    flag: str,
    parse_token: Callable[[str], T],
    sort_key: Callable[[T], int],
) -> tuple[T, ...] | None:
    """Parse a comma-separated flag value.

    Returns None when the flag was not given; otherwise the de-duplicated
    tokens in canonical order.
    """
    if value is None:
        return None
    tokens = [token.strip() for token in value.split(",")]
    tokens = [token for token in tokens if token]
    if not tokens:
        raise RecurrenceValidationError(f'Invalid {flag} value: "{value}" (empty list)')
    parsed = list(dict.fromkeys(parse_token(token) for token in tokens))
    return tuple(sorted(parsed, key=sort_key))


def parse_end(count: str | None, until: str | None) -> RecurrenceEnd | None:
    if count is not None:
        return CountEnd(count=parse_count(count))
    if until is not None:
        parsed = parse_user_date(until)
        if parsed is None:
            raise InvalidDateError(until)
        # RRULE UNTIL has whole-second precision
        return UntilEnd(date=parsed.replace(microsecond=0))
    return None


def parse_recurrence(repeat: RepeatInput) -> Recurrence:
    """Build a validated ``Recurrence`` from raw flag values.

    Raises:
        RecurrenceValidationError: On a bad token or an illegal combination
        InvalidDateError: If ``--until`` is not a date
    """
    if repeat.count is not None and repeat.until is not None:
        raise RecurrenceValidationError("Use either --count or --until, not both")

    frequency = parse_frequency(repeat.frequency)
    interval = parse_interval(repeat.interval) if repeat.interval is not None else 1

    modifiers = {
        "days_of_week": parse_list(
            repeat.on, "--on", parse_weekday, lambda day: day.display_order
        ),
        "days_of_month": parse_list(
            repeat.month_day, "--month-day", parse_month_day, int
        ),
        "set_positions": parse_list(repeat.setpos, "--setpos", parse_set_position, int),
        "months_of_year": parse_list(repeat.month, "--month", parse_month, int),
        "weeks_of_year": parse_list(repeat.week, "--week", parse_week, int),
    }
    check_modifiers(frequency, modifiers)

    end = parse_end(repeat.count, repeat.until)

    return Recurrence(frequency=frequency, interval=interval, end=end, **modifiers)


def is_clear_keyword(value: str) -> bool:
    return value.strip().lower() == CLEAR_KEYWORD


def parse_recurrence_update(repeat: RepeatInput) -> Change[Recurrence]:
    """Parse ``--repeat`` on the edit path, where ``none`` clears the recurrence."""
    if is_clear_keyword(repeat.frequency):
        return Change.clear()
    return Change.set(parse_recurrence(repeat))
