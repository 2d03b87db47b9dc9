"""CLI commands for remindctl."""
