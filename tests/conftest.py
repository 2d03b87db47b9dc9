"""Shared test fixtures and configuration.

Every test runs with config, data and log directories under ``tmp_path``.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from remindctl.adapters.sqlite.connection import DatabaseConnection
from remindctl.services.config_service import get_config_service
from remindctl.utils.logger import reset_logger


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs at tmp_path and reset cached singletons."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    reset_logger()
    with (
        patch("remindctl.services.config_service.user_config_dir", return_value=str(config_dir)),
        patch("remindctl.services.config_service.user_data_dir", return_value=str(data_dir)),
        patch("remindctl.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path
    DatabaseConnection.close_connection()
    reset_logger()
    get_config_service.cache_clear()


@pytest.fixture(autouse=True)
def utc_local_time():
    """Run with UTC as the local time zone so day boundaries are stable."""
    with patch("remindctl.utils.date_parsing.get_local_timezone", return_value=UTC):
        yield


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "reminders.db"


@pytest.fixture()
def store(db_path):
    from remindctl.adapters.sqlite import SqliteRemindersStore

    return SqliteRemindersStore(db_path)


@pytest.fixture()
def now():
    """A fixed reference time: Wednesday 2026-01-14 12:00 UTC."""
    return datetime(2026, 1, 14, 12, 0, tzinfo=UTC)


@pytest.fixture()
def cli():
    """Invoke remindctl against the store in tmp_path."""
    from remindctl.main import app

    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(app, list(args))

    return invoke


@pytest.fixture()
def add_json(cli):
    """Add a reminder and return its JSON payload."""

    def add(*args: str) -> dict:
        result = cli("add", *args, "--json")
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)

    return add
