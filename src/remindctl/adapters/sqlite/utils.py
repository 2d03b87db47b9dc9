"""Utility functions for the SQLite adapter."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime


def generate_uuid() -> str:
    """Generate a new upper-case UUID string."""
    return str(uuid.uuid4()).upper()


def now_iso() -> str:
    """Get current UTC timestamp in ISO format."""
    return datetime.now(UTC).isoformat()


def to_db_datetime(value: datetime | None) -> str | None:
    """Store datetimes as UTC ISO text; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def parse_datetime(value: str | datetime | None) -> datetime | None:
    """Parse a stored datetime back into an aware UTC value."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
