"""Command 'delete' of remindctl"""

import sys
from typing import Annotated

import typer

from remindctl.services.reminder_service import get_reminder_service
from remindctl.utils.typer_helpers import resolve_output_format
from remindctl.utils.ui.formatters import render_delete_result

from .decorators import command_wrapper
from .options import JsonOpt, OutputOpt, PlainOpt

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete(
    reminder_ids: Annotated[
        list[str], typer.Argument(metavar="IDS...", help="Indexes or ID prefixes")
    ],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation")
    ] = False,
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Delete one or more reminders."""
    output_format = resolve_output_format(output, json_opt, plain_opt)
    service = get_reminder_service()
    reminders = await service.resolve(reminder_ids)

    if not force and sys.stdin.isatty():
        titles = ", ".join(r.title for r in reminders)
        if not typer.confirm(f"Delete {len(reminders)} reminder(s): {titles}?"):
            raise typer.Exit(0)

    deleted = await service.delete(reminders)
    render_delete_result(deleted, output_format)
