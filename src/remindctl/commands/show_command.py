"""Command 'show' of remindctl"""

from typing import Annotated

import typer

from remindctl.services.reminder_filtering import DEFAULT_FILTER
from remindctl.services.reminder_service import get_reminder_service
from remindctl.utils.typer_helpers import resolve_output_format
from remindctl.utils.ui.formatters import render_reminders

from .decorators import command_wrapper
from .options import JsonOpt, ListOpt, OutputOpt, PlainOpt

app = typer.Typer()


@app.command("show")
@command_wrapper
async def show(
    filter_name: Annotated[
        str,
        typer.Argument(
            metavar="FILTER",
            help="open|today|tomorrow|week|overdue|upcoming|completed|all or a date",
        ),
    ] = DEFAULT_FILTER,
    list_name: ListOpt = None,
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Show reminders.

    Examples:
      remindctl show
      remindctl show today --list Work
      remindctl show 2026-02-01 --json
    """
    output_format = resolve_output_format(output, json_opt, plain_opt)
    service = get_reminder_service()
    reminders = await service.list_reminders(list_name, filter_name)
    render_reminders(reminders, output_format)
