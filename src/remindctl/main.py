"""Main entry point for remindctl."""

from typing import Annotated

import typer

from remindctl import __version__
from remindctl.commands import (
    add_command,
    complete_command,
    delete_command,
    edit_command,
    list_command,
    show_command,
)
from remindctl.utils.exit_codes import exit_codes_help
from remindctl.utils.typer_helpers import SuggestingGroup
from remindctl.utils.ui.console import get_console

app = typer.Typer(
    name="remindctl",
    cls=SuggestingGroup,
    help="Manage reminders and their repeat schedules from the command line",
    no_args_is_help=True,
    epilog=exit_codes_help(),
)

app.command("show")(show_command.show)
app.command("add")(add_command.add)
app.command("edit")(edit_command.edit)
app.command("complete")(complete_command.complete)
app.command("delete")(delete_command.delete)
app.command("list")(list_command.list_lists)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"remindctl {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """remindctl - reminders with recurrence from the terminal."""


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
