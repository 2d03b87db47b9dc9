"""Tests for the add command."""

from __future__ import annotations

import json


def test_add_minimal(add_json):
    data = add_json("Buy milk")
    assert data["title"] == "Buy milk"
    assert data["listName"] == "Reminders"
    assert data["priority"] == "none"
    assert data["dueDate"] is None
    assert data["recurrence"] is None


def test_add_title_option(add_json):
    assert add_json("--title", "From option")["title"] == "From option"


def test_add_all_fields(cli, add_json):
    cli("list", "Work", "--create")
    data = add_json(
        "Standup",
        "--list", "Work",
        "--due", "2026-03-02 09:00",
        "--notes", "room 4",
        "--priority", "high",
        "--repeat", "weekly",
        "--on", "mon,fri",
        "--count", "10",
    )
    assert data["listName"] == "Work"
    assert data["dueDate"].startswith("2026-03-02T09:00:00")
    assert data["notes"] == "room 4"
    assert data["priority"] == "high"
    assert data["recurrence"]["frequency"] == "weekly"
    assert data["recurrence"]["daysOfWeek"] == ["mon", "fri"]
    assert data["recurrence"]["end"] == {"kind": "count", "count": 10}


def test_recurring_without_due_gets_due(add_json):
    assert add_json("Water plants", "--repeat", "daily")["dueDate"] is not None


def test_standard_output(cli):
    result = cli("add", "Call mom", "--priority", "low")
    assert result.exit_code == 0
    assert "Call mom [Reminders] - no due date priority=low" in result.stdout


def test_missing_title(cli):
    result = cli("add")
    assert result.exit_code == 2
    assert "Title is required" in result.output


def test_modifier_without_repeat(cli):
    result = cli("add", "x", "--on", "mon")
    assert result.exit_code == 2
    assert "Use --repeat with" in result.output


def test_illegal_combination(cli):
    result = cli("add", "x", "--repeat", "daily", "--on", "mon")
    assert result.exit_code == 2


def test_count_and_until(cli):
    result = cli(
        "add", "x", "--repeat", "daily", "--count", "2", "--until", "2026-12-31"
    )
    assert result.exit_code == 2


def test_invalid_due(cli):
    result = cli("add", "x", "--due", "xyzzy")
    assert result.exit_code == 2
    assert 'Invalid date: "xyzzy"' in result.output


def test_invalid_priority(cli):
    result = cli("add", "x", "--priority", "urgent")
    assert result.exit_code == 2
    assert "Invalid priority" in result.output


def test_unknown_list(cli):
    result = cli("add", "x", "--list", "Nope")
    assert result.exit_code == 5
    assert 'List not found: "Nope"' in result.output


def test_plain_output(cli):
    result = cli("add", "Tabbed", "--plain")
    fields = result.stdout.rstrip("\n").split("\t")
    assert fields[1:] == ["Reminders", "0", "none", "", "", "Tabbed"]


def test_quiet_output(cli):
    result = cli("add", "Silent", "--output", "quiet")
    assert result.exit_code == 0
    assert result.stdout == ""
    shown = cli("show", "--json")
    assert [r["title"] for r in json.loads(shown.stdout)] == ["Silent"]
