"""Command 'add' of remindctl"""

from typing import Annotated

import typer

from remindctl.models import ReminderDraft, ReminderPriority
from remindctl.recurrence import parse_recurrence
from remindctl.services.reminder_service import get_reminder_service
from remindctl.utils.typer_helpers import resolve_output_format
from remindctl.utils.ui.formatters import render_reminder

from .decorators import command_wrapper
from .options import (
    CountOpt,
    IntervalOpt,
    JsonOpt,
    ListOpt,
    MonthDayOpt,
    MonthOpt,
    OnOpt,
    OutputOpt,
    PlainOpt,
    SetposOpt,
    UntilOpt,
    WeekOpt,
    parse_due,
    parse_priority,
    repeat_input,
    resolve_title,
)

app = typer.Typer()


@app.command("add")
@command_wrapper
async def add(
    title_arg: Annotated[str | None, typer.Argument(metavar="TITLE", help="Reminder title")] = None,
    title: Annotated[str | None, typer.Option("--title", "-t", help="Reminder title")] = None,
    list_name: ListOpt = None,
    due: Annotated[
        str | None, typer.Option("--due", "-d", help='Due date, e.g. "tomorrow 9am"')
    ] = None,
    notes: Annotated[str | None, typer.Option("--notes", "-n", help="Notes")] = None,
    priority: Annotated[
        str | None, typer.Option("--priority", "-p", help="none|low|medium|high")
    ] = None,
    repeat: Annotated[
        str | None, typer.Option("--repeat", "-r", help="daily|weekly|monthly|yearly")
    ] = None,
    interval: IntervalOpt = None,
    on: OnOpt = None,
    month_day: MonthDayOpt = None,
    setpos: SetposOpt = None,
    month: MonthOpt = None,
    week: WeekOpt = None,
    count: CountOpt = None,
    until: UntilOpt = None,
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Add a reminder.

    Examples:
      remindctl add "Pay rent" --due "2026-02-01" --repeat monthly --month-day 1
      remindctl add "Standup" --due "tomorrow 9am" --repeat weekly --on mon,wed,fri
      remindctl add "Board meeting" --repeat monthly --on tue --setpos 2 --count 6
    """
    output_format = resolve_output_format(output, json_opt, plain_opt)
    repeat_flags = repeat_input(
        repeat, interval, count, until, on, month_day, setpos, month, week
    )

    draft = ReminderDraft(
        title=resolve_title(title_arg, title),
        notes=notes,
        due_date=parse_due(due) if due is not None else None,
        priority=parse_priority(priority) if priority is not None else ReminderPriority.NONE,
        recurrence=parse_recurrence(repeat_flags) if repeat_flags is not None else None,
    )

    service = get_reminder_service()
    reminder = await service.create(draft, list_name)
    render_reminder(reminder, output_format)
