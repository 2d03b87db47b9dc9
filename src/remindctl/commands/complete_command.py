"""Command 'complete' of remindctl"""

from typing import Annotated

import typer

from remindctl.services.reminder_service import get_reminder_service
from remindctl.utils.typer_helpers import resolve_output_format
from remindctl.utils.ui.formatters import render_completed

from .decorators import command_wrapper
from .options import JsonOpt, OutputOpt, PlainOpt

app = typer.Typer()


@app.command("complete")
@command_wrapper
async def complete(
    reminder_ids: Annotated[
        list[str], typer.Argument(metavar="IDS...", help="Indexes or ID prefixes")
    ],
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Mark one or more reminders as completed.

    Recurring reminders move to their next occurrence instead.
    """
    output_format = resolve_output_format(output, json_opt, plain_opt)
    service = get_reminder_service()
    reminders = await service.resolve(reminder_ids)
    completed = await service.complete(reminders)
    render_completed(completed, output_format)
