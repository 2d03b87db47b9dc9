"""Service layer for remindctl."""
