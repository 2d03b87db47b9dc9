"""Option types and argument helpers shared by the commands."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Annotated

import typer

from remindctl.models import InvalidDateError, OperationFailedError, ReminderPriority
from remindctl.recurrence import RepeatInput
from remindctl.utils.date_parsing import parse_user_date
from remindctl.utils.exit_codes import ERROR_INVALID_ARGS

OutputOpt = Annotated[
    str | None,
    typer.Option(
        "--output", "-o", help="Output format: standard|plain|json|yaml|quiet"
    ),
]
JsonOpt = Annotated[
    bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
]
PlainOpt = Annotated[
    bool, typer.Option("--plain", help="Tab-separated output (alias for --output plain)")
]
ListOpt = Annotated[str | None, typer.Option("--list", "-l", help="Reminder list name")]

IntervalOpt = Annotated[
    str | None, typer.Option("--interval", help="Repeat every N periods")
]
OnOpt = Annotated[
    str | None, typer.Option("--on", help="Weekdays, e.g. mon,wed,fri")
]
MonthDayOpt = Annotated[
    str | None, typer.Option("--month-day", help="Days of the month (1-31), e.g. 1,15")
]
SetposOpt = Annotated[
    str | None,
    typer.Option("--setpos", help="Week of the month for --on: 1-4 or -1 (last)"),
]
MonthOpt = Annotated[
    str | None, typer.Option("--month", help="Months (1-12 or jan..dec), e.g. jan,jul")
]
WeekOpt = Annotated[
    str | None, typer.Option("--week", help="Weeks of the year (1-53)")
]
CountOpt = Annotated[
    str | None, typer.Option("--count", help="Stop after N occurrences")
]
UntilOpt = Annotated[
    str | None, typer.Option("--until", help="Stop repeating after this date")
]

REPEAT_MODIFIERS = "--interval, --on, --month-day, --setpos, --month, --week, --count, or --until"


def repeat_input(
    repeat: str | None,
    interval: str | None = None,
    count: str | None = None,
    until: str | None = None,
    on: str | None = None,
    month_day: str | None = None,
    setpos: str | None = None,
    month: str | None = None,
    week: str | None = None,
) -> RepeatInput | None:
    """Collect the repeat flags.

    Returns None when no ``--repeat`` was given.

    Raises:
        OperationFailedError: If modifiers are given without ``--repeat``
    """
    collected = RepeatInput(
        frequency=repeat or "",
        interval=interval,
        count=count,
        until=until,
        on=on,
        month_day=month_day,
        setpos=setpos,
        month=month,
        week=week,
    )
    if repeat is None:
        if collected.has_modifiers:
            raise OperationFailedError(
                f"Use --repeat with {REPEAT_MODIFIERS}", exit_code=ERROR_INVALID_ARGS
            )
        return None
    return collected


def parse_due(value: str) -> datetime:
    """Parse a ``--due`` value.

    Raises:
        InvalidDateError: If the text is not a date
    """
    parsed = parse_user_date(value)
    if parsed is None:
        raise InvalidDateError(value)
    return parsed


def parse_priority(value: str) -> ReminderPriority:
    try:
        return ReminderPriority(value.strip().lower())
    except ValueError:
        raise OperationFailedError(
            f'Invalid priority: "{value}" (use none|low|medium|high)',
            exit_code=ERROR_INVALID_ARGS,
        ) from None


def exclusive(first: bool, second: bool, first_flag: str, second_flag: str) -> None:
    if first and second:
        raise OperationFailedError(
            f"Use either {first_flag} or {second_flag}, not both",
            exit_code=ERROR_INVALID_ARGS,
        )


def resolve_title(argument: str | None, option: str | None) -> str:
    """Pick the title from the argument or ``--title``, prompting on a TTY.

    Raises:
        OperationFailedError: If both or neither are given (and no TTY)
    """
    exclusive(bool(argument), bool(option), "a title argument", "--title")
    title = (argument or option or "").strip()
    if not title and sys.stdin.isatty():
        title = typer.prompt("Title").strip()
    if not title:
        raise OperationFailedError("Title is required", exit_code=ERROR_INVALID_ARGS)
    return title
