"""Command 'list' of remindctl"""

import sys
from typing import Annotated

import typer

from remindctl.models import OperationFailedError
from remindctl.services.reminder_service import get_reminder_service
from remindctl.utils.exit_codes import ERROR_INVALID_ARGS
from remindctl.utils.typer_helpers import resolve_output_format
from remindctl.utils.ui.formatters import (
    render_list_change,
    render_lists,
    render_reminders,
)

from .decorators import command_wrapper
from .options import JsonOpt, OutputOpt, PlainOpt

app = typer.Typer()


@app.command("list")
@command_wrapper
async def list_lists(
    name: Annotated[str | None, typer.Argument(help="List name")] = None,
    create: Annotated[bool, typer.Option("--create", help="Create the list")] = False,
    rename: Annotated[
        str | None, typer.Option("--rename", help="Rename the list to this name")
    ] = None,
    delete: Annotated[
        bool, typer.Option("--delete", help="Delete the list and its reminders")
    ] = False,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation")
    ] = False,
    output: OutputOpt = None,
    json_opt: JsonOpt = False,
    plain_opt: PlainOpt = False,
) -> None:
    """Show lists, show one list's reminders, or manage a list.

    Examples:
      remindctl list
      remindctl list Work
      remindctl list Groceries --create
      remindctl list Work --rename Office
    """
    output_format = resolve_output_format(output, json_opt, plain_opt)
    actions = sum([create, rename is not None, delete])
    if actions > 1:
        raise OperationFailedError(
            "Use only one of --create, --rename, or --delete",
            exit_code=ERROR_INVALID_ARGS,
        )
    if actions and not name:
        raise OperationFailedError("A list name is required", exit_code=ERROR_INVALID_ARGS)

    service = get_reminder_service()

    if name is None:
        render_lists(await service.list_summaries(), output_format)
    elif create:
        render_list_change(await service.create_list(name), "Created", output_format)
    elif rename is not None:
        render_list_change(await service.rename_list(name, rename), "Renamed", output_format)
    elif delete:
        target = next(
            (lst for lst in await service.lists() if lst.title.casefold() == name.casefold()),
            None,
        )
        if target is not None and not force and sys.stdin.isatty():
            if not typer.confirm(f'Delete list "{target.title}" and all its reminders?'):
                raise typer.Exit(0)
        await service.delete_list(name)
        if target is not None:
            render_list_change(target, "Deleted", output_format)
    else:
        render_reminders(await service.list_reminders(name, "all"), output_format)
