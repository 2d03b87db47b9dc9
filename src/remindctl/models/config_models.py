"""Configuration models for remindctl."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

OutputFormatName = Literal["standard", "plain", "json", "yaml", "quiet"]


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormatName = Field(default="standard")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Top-level application configuration.

    Attributes:
        db_path: Reminder database file; None uses the platform data dir
        default_list: List new reminders go to when ``--list`` is omitted
        output: Output preferences
    """

    db_path: str | None = Field(default=None, description="Reminder database path")
    default_list: str = Field(default="Reminders", description="Default list title")
    output: OutputConfig = Field(default_factory=OutputConfig)
