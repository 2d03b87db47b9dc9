"""Tests for the output renderers."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import yaml

from remindctl.models import (
    ListSummary,
    Recurrence,
    RecurrenceFrequency,
    ReminderItem,
    ReminderList,
    ReminderPriority,
)
from remindctl.utils.ui.formatters import (
    format_error,
    plain_line,
    render_delete_result,
    render_list_change,
    render_lists,
    render_reminders,
    standard_line,
)

DUE = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


def make_item(**overrides) -> ReminderItem:
    values = {
        "id": "ABCDEF12-0000-0000-0000-000000000001",
        "title": "Pay rent",
        "list_id": "L1",
        "list_name": "Home",
        "due_date": DUE,
        "priority": ReminderPriority.HIGH,
        "recurrence": Recurrence(frequency=RecurrenceFrequency.MONTHLY),
    }
    values.update(overrides)
    return ReminderItem(**values)


def test_plain_line_columns():
    fields = plain_line(make_item()).split("\t")
    assert fields == [
        "ABCDEF12-0000-0000-0000-000000000001",
        "Home",
        "0",
        "high",
        "2026-01-15T09:30:00.000Z",
        "repeat=monthly",
        "Pay rent",
    ]


def test_plain_line_without_due():
    fields = plain_line(make_item(due_date=None, recurrence=None)).split("\t")
    assert fields[4] == ""
    assert fields[5] == ""


def test_standard_line_text():
    text = standard_line(make_item(), index=1).plain
    assert text == "[1] [ ] Pay rent [Home] - Jan 15, 2026 at 09:30 priority=high repeat=monthly"


def test_standard_line_completed_without_index():
    item = make_item(
        is_completed=True, due_date=None, priority=ReminderPriority.NONE, recurrence=None
    )
    assert standard_line(item).plain == "✓ Pay rent [Home] - no due date"
    assert standard_line(item, index=3).plain.startswith("[3] [x] ")


def test_render_json_uses_camel_case(capsys):
    render_reminders([make_item()], "json")
    [data] = json.loads(capsys.readouterr().out)
    assert data["listID"] == "L1"
    assert data["isCompleted"] is False
    assert data["recurrence"]["frequency"] == "monthly"


def test_render_yaml(capsys):
    render_reminders([make_item()], "yaml")
    [data] = yaml.safe_load(capsys.readouterr().out)
    assert data["title"] == "Pay rent"


def test_render_quiet_prints_count(capsys):
    render_reminders([make_item(), make_item(id="X")], "quiet")
    assert capsys.readouterr().out == "2\n"


def test_render_standard_empty(capsys):
    render_reminders([], "standard")
    assert "No reminders found" in capsys.readouterr().out


def test_render_standard_sorted_and_indexed(capsys):
    later = make_item(id="B", title="Later", due_date=datetime(2026, 2, 1, tzinfo=UTC))
    render_reminders([later, make_item()], "standard")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("[1] [ ] Pay rent")
    assert lines[1].startswith("[2] [ ] Later")


def test_render_lists(capsys):
    summaries = [
        ListSummary(id="2", title="work", reminder_count=3, overdue_count=1),
        ListSummary(id="1", title="Home", reminder_count=0),
    ]
    render_lists(summaries, "plain")
    assert capsys.readouterr().out == "Home\t0\t0\nwork\t3\t1\n"

    render_lists(summaries, "standard")
    out = capsys.readouterr().out
    assert "Home - 0 reminders" in out
    assert "work - 3 reminders (1 overdue)" in out


def test_render_list_change(capsys):
    render_list_change(ReminderList(id="1", title="Work"), "Created", "standard")
    assert 'Created list "Work"' in capsys.readouterr().out


def test_render_delete_result(capsys):
    render_delete_result(2, "json")
    assert json.loads(capsys.readouterr().out) == {"deleted": 2}
    render_delete_result(2, "standard")
    assert "Deleted 2 reminder(s)" in capsys.readouterr().out


def test_errors_go_to_stderr(capsys):
    format_error("boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: boom" in captured.err
