"""Command 'edit' of remindctl"""

from typing import Annotated

import typer

from remindctl.models import Change, OperationFailedError, ReminderUpdate
from remindctl.recurrence import parse_recurrence_update
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
    exclusive,
    parse_due,
    parse_priority,
    repeat_input,
)

app = typer.Typer()


@app.command("edit")
@command_wrapper
async def edit(
    reminder_id: Annotated[str, typer.Argument(metavar="ID", help="Index or ID prefix")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    list_name: Annotated[
        str | None, typer.Option("--list", "-l", help="Move to this list")
    ] = None,
    due: Annotated[str | None, typer.Option("--due", "-d", help="New due date")] = None,
    clear_due: Annotated[
        bool, typer.Option("--clear-due", help="Remove the due date")
    ] = False,
    notes: Annotated[str | None, typer.Option("--notes", "-n", help="New notes")] = None,
    priority: Annotated[
        str | None, typer.Option("--priority", "-p", help="none|low|medium|high")
    ] = None,
    repeat: Annotated[
        str | None,
        typer.Option("--repeat", "-r", help="daily|weekly|monthly|yearly|none"),
    ] = None,
    interval: IntervalOpt = None,
    on: OnOpt = None,
    month_day: MonthDayOpt = None,
    setpos: SetposOpt = None,
    month: MonthOpt = None,
    week: WeekOpt = None,
    count: CountOpt = None,
    until: UntilOpt = None,
    complete: Annotated[
        bool, typer.Option("--complete", help="Mark completed")
    ] = False,
    incomplete: Annotated[
        bool, typer.Option("--incomplete", help="Mark not completed")
    ] = False,
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Edit a reminder. Use --repeat none to stop it repeating."""
    output_format = resolve_output_format(output, json_opt, plain_opt)

    exclusive(due is not None, clear_due, "--due", "--clear-due")
    exclusive(complete, incomplete, "--complete", "--incomplete")

    due_change = None
    if due is not None:
        due_change = Change.set(parse_due(due))
    elif clear_due:
        due_change = Change.clear()

    repeat_flags = repeat_input(
        repeat, interval, count, until, on, month_day, setpos, month, week
    )

    update = ReminderUpdate(
        title=title,
        notes=notes,
        due_date=due_change,
        priority=parse_priority(priority) if priority is not None else None,
        recurrence=(
            parse_recurrence_update(repeat_flags) if repeat_flags is not None else None
        ),
        list_name=list_name,
        is_completed=True if complete else (False if incomplete else None),
    )
    if not update.has_changes:
        raise OperationFailedError("No changes specified")

    service = get_reminder_service()
    reminder = (await service.resolve([reminder_id]))[0]
    updated = await service.update(reminder, update)
    render_reminder(updated, output_format)
