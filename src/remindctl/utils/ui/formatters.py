"""Output renderers for every ``--output`` format.

``standard`` is for people and goes through Rich. ``plain``, ``json`` and
``yaml`` are for scripts and are written with ``print`` so no markup or
wrapping ever leaks into them. ``quiet`` prints counts only.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console
from rich.text import Text

from remindctl.models import ListSummary, ReminderItem, ReminderList, ReminderPriority
from remindctl.recurrence import summary
from remindctl.services.reminder_filtering import ReminderFiltering
from remindctl.utils.date_parsing import format_display, format_iso
from remindctl.utils.ui.console import get_console

PRIORITY_STYLES = {
    ReminderPriority.HIGH: "bold red",
    ReminderPriority.MEDIUM: "yellow",
    ReminderPriority.LOW: "cyan",
}


def _color_enabled() -> bool:
    from remindctl.services.config_service import get_config_service

    try:
        return get_config_service().config.output.color
    except RuntimeError:
        return True


def _console(stderr: bool = False) -> Console:
    return get_console(stderr=stderr, no_color=not _color_enabled())


def _to_data(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, (list, tuple)):
        return [_to_data(item) for item in payload]
    return payload


def print_json(payload: Any) -> None:
    """Print ``payload`` as pretty JSON with sorted keys."""
    print(json.dumps(_to_data(payload), indent=2, sort_keys=True, ensure_ascii=False))


def print_yaml(payload: Any) -> None:
    """Print ``payload`` as block-style YAML."""
    print(
        yaml.safe_dump(
            _to_data(payload), default_flow_style=False, sort_keys=True, allow_unicode=True
        ),
        end="",
    )


def _due_text(reminder: ReminderItem) -> str:
    return format_display(reminder.due_date) if reminder.due_date else "no due date"


def _recurrence_text(reminder: ReminderItem, use_iso: bool) -> str:
    if reminder.recurrence is None:
        return ""
    return summary(reminder.recurrence, use_iso=use_iso)


def plain_line(reminder: ReminderItem) -> str:
    """Tab-separated: id, list, completed, priority, due, recurrence, title."""
    return "\t".join(
        [
            reminder.id,
            reminder.list_name,
            "1" if reminder.is_completed else "0",
            reminder.priority.value,
            format_iso(reminder.due_date) if reminder.due_date else "",
            _recurrence_text(reminder, use_iso=True),
            reminder.title,
        ]
    )


def standard_line(reminder: ReminderItem, index: int | None = None) -> Text:
    """``[n] [x] title [list] - due priority=.. <recurrence>``."""
    line = Text()
    if index is not None:
        line.append(f"[{index}] ", style="dim")
        line.append("[x] " if reminder.is_completed else "[ ] ")
    else:
        line.append("✓ ", style="green")
    line.append(reminder.title, style="dim" if reminder.is_completed else "bold")
    line.append(f" [{reminder.list_name}]", style="blue")
    line.append(f" - {_due_text(reminder)}")
    if reminder.priority is not ReminderPriority.NONE:
        line.append(
            f" priority={reminder.priority.value}",
            style=PRIORITY_STYLES.get(reminder.priority),
        )
    recurrence = _recurrence_text(reminder, use_iso=False)
    if recurrence:
        line.append(f" {recurrence}", style="magenta")
    return line


def render_reminders(reminders: Sequence[ReminderItem], output_format: str) -> None:
    """Render a reminder listing, sorted in display order."""
    ordered = ReminderFiltering.sort(reminders)
    if output_format == "json":
        print_json(ordered)
    elif output_format == "yaml":
        print_yaml(ordered)
    elif output_format == "plain":
        for reminder in ordered:
            print(plain_line(reminder))
    elif output_format == "quiet":
        print(len(ordered))
    else:
        console = _console()
        if not ordered:
            console.print("No reminders found", style="yellow")
            return
        for index, reminder in enumerate(ordered, start=1):
            console.print(standard_line(reminder, index), soft_wrap=True)


def render_reminder(reminder: ReminderItem, output_format: str) -> None:
    """Render one created or updated reminder."""
    if output_format == "json":
        print_json(reminder)
    elif output_format == "yaml":
        print_yaml(reminder)
    elif output_format == "plain":
        print(plain_line(reminder))
    elif output_format == "quiet":
        return
    else:
        _console().print(standard_line(reminder), soft_wrap=True)


def render_completed(reminders: Sequence[ReminderItem], output_format: str) -> None:
    """Render the result of ``complete``."""
    if output_format == "quiet":
        print(len(reminders))
    elif output_format in ("json", "yaml"):
        (print_json if output_format == "json" else print_yaml)(list(reminders))
    else:
        for reminder in reminders:
            render_reminder(reminder, output_format)


def render_lists(summaries: Sequence[ListSummary], output_format: str) -> None:
    """Render list summaries sorted by title."""
    ordered = sorted(summaries, key=lambda s: s.title.casefold())
    if output_format == "json":
        print_json(ordered)
    elif output_format == "yaml":
        print_yaml(ordered)
    elif output_format == "plain":
        for item in ordered:
            print(f"{item.title}\t{item.reminder_count}\t{item.overdue_count}")
    elif output_format == "quiet":
        print(len(ordered))
    else:
        console = _console()
        if not ordered:
            console.print("No reminder lists found", style="yellow")
            return
        for item in ordered:
            line = Text(item.title, style="bold")
            line.append(f" - {item.reminder_count} reminders")
            if item.overdue_count > 0:
                line.append(f" ({item.overdue_count} overdue)", style="red")
            console.print(line, soft_wrap=True)


def render_list_change(reminder_list: ReminderList, action: str, output_format: str) -> None:
    """Render a created, renamed or deleted list."""
    if output_format == "json":
        print_json(reminder_list)
    elif output_format == "yaml":
        print_yaml(reminder_list)
    elif output_format == "plain":
        print(reminder_list.title)
    elif output_format == "quiet":
        return
    else:
        format_success(f'{action} list "{reminder_list.title}"')


def render_delete_result(count: int, output_format: str) -> None:
    if output_format == "json":
        print_json({"deleted": count})
    elif output_format == "yaml":
        print_yaml({"deleted": count})
    elif output_format == "plain":
        print(count)
    elif output_format == "quiet":
        return
    else:
        _console().print(f"Deleted {count} reminder(s)")


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    _console(stderr=True).print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)


def format_success(message: str) -> None:
    """Format and display a success message."""
    _console().print(Text.assemble(("✓ ", "bold green"), message))
