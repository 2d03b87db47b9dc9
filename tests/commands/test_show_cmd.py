"""Tests for the show command."""

from __future__ import annotations

import json


def titles(result) -> list[str]:
    assert result.exit_code == 0, result.output
    return [r["title"] for r in json.loads(result.stdout)]


def test_empty(cli):
    result = cli("show")
    assert result.exit_code == 0
    assert "No reminders found" in result.stdout


def test_default_filter_hides_completed(cli, add_json):
    add_json("open one")
    add_json("done one")
    # both undated, so ordered by title
    cli("complete", "1")
    assert titles(cli("show", "--json")) == ["open one"]
    assert titles(cli("show", "completed", "--json")) == ["done one"]
    assert sorted(titles(cli("show", "all", "--json"))) == ["done one", "open one"]


def test_sorted_by_due(cli, add_json):
    add_json("no due")
    add_json("later", "--due", "2030-02-01")
    add_json("sooner", "--due", "2030-01-01")
    assert titles(cli("show", "--json")) == ["sooner", "later", "no due"]


def test_overdue_and_upcoming(cli, add_json):
    add_json("past", "--due", "2000-01-01")
    add_json("future", "--due", "2099-01-01")
    assert titles(cli("show", "overdue", "--json")) == ["past"]
    assert titles(cli("show", "upcoming", "--json")) == ["future"]


def test_specific_date(cli, add_json):
    add_json("on the day", "--due", "2030-06-15 10:00")
    add_json("day after", "--due", "2030-06-16 10:00")
    assert titles(cli("show", "2030-06-15", "--json")) == ["on the day"]


def test_list_option(cli, add_json):
    cli("list", "Work", "--create")
    add_json("home task")
    add_json("work task", "--list", "Work")
    assert titles(cli("show", "--list", "Work", "--json")) == ["work task"]


def test_invalid_filter(cli):
    result = cli("show", "xyzzy")
    assert result.exit_code == 2
    assert 'Invalid date: "xyzzy"' in result.output


def test_standard_indexed(cli, add_json):
    add_json("first", "--due", "2030-01-01 09:00")
    result = cli("show")
    assert "[1] [ ] first [Reminders] - Jan 01, 2030 at 09:00" in result.stdout


def test_quiet_count(cli, add_json):
    add_json("a")
    add_json("b")
    assert cli("show", "-o", "quiet").stdout == "2\n"


def test_yaml(cli, add_json):
    add_json("a")
    assert "title: a" in cli("show", "--output", "yaml").stdout
