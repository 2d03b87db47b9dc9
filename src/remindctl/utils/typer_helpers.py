"""Typer helper utilities."""

from __future__ import annotations

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from remindctl.models.exceptions import OperationFailedError
from remindctl.utils.exit_codes import ERROR_INVALID_ARGS
from remindctl.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped command with "Did you mean ...?"."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                suggestions = get_close_matches(
                    attempted, list(self.commands.keys()), n=3, cutoff=0.6
                )
                if suggestions:
                    console = get_console(stderr=True)
                    console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    console.print()
                    if len(suggestions) == 1:
                        console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        console.print(f"        {suggestion}")
                    raise typer.Exit(2) from e
            raise


OUTPUT_FORMATS = ("standard", "plain", "json", "yaml", "quiet")


def resolve_output_format(
    output: str | None, json_opt: bool = False, plain_opt: bool = False
) -> str:
    """Apply the ``--json`` / ``--plain`` aliases to ``--output``.

    Falls back to the configured default when no format flag is given.
    """
    if json_opt and plain_opt:
        raise OperationFailedError(
            "Use either --json or --plain, not both", exit_code=ERROR_INVALID_ARGS
        )
    if json_opt:
        return "json"
    if plain_opt:
        return "plain"
    if output is None:
        from remindctl.services.config_service import get_config_service

        return get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise OperationFailedError(
            f"Unknown output format '{output}' (use {'|'.join(OUTPUT_FORMATS)})",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output
