"""Due-date parsing and date display.

``parse_user_date`` accepts ISO-8601 timestamps and dates, a small set of
keywords (today, tomorrow, next week, in N days, weekday names, "at 3pm")
and falls back to dateparser for anything else. Results are timezone-aware
and normalized to UTC; naive input is read in the local time zone.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, tzinfo

import dateparser
import tzlocal

_WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

_TIME_PATTERN = re.compile(r"\bat (\d{1,2})(?::(\d{2}))?\s*(am|pm)?\b")


def get_local_timezone() -> tzinfo:
    """Return the machine's local time zone."""
    return tzlocal.get_localzone()


def parse_user_date(value: str, now: datetime | None = None) -> datetime | None:
    """Parse a user-supplied date.

    Args:
        value: Date text, e.g. "2026-01-03T12:34:56Z", "2026-01-03",
            "tomorrow at 9am", "next friday"
        now: Reference time for relative phrases (defaults to current time)

    Returns:
        Timezone-aware UTC datetime, or None if the text is not a date
    """
    text = value.strip()
    if not text:
        return None

    local_tz = get_local_timezone()
    if now is None:
        now = datetime.now(local_tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=local_tz)
    else:
        now = now.astimezone(local_tz)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is not None:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=local_tz)
        return parsed.astimezone(UTC)

    simple = _simple_date_parse(text.lower(), now)
    if simple is not None:
        return simple.astimezone(UTC)

    parsed = dateparser.parse(
        text,
        settings={
            "PREFER_DATES_FROM": "future",
            "RELATIVE_BASE": now.replace(tzinfo=None),
            "RETURN_AS_TIMEZONE_AWARE": False,
        },
    )
    if parsed is None:
        return None
    return parsed.replace(tzinfo=local_tz).astimezone(UTC)


def _simple_date_parse(text: str, now: datetime) -> datetime | None:
    """Keyword parsing for the common relative phrases."""
    time_hour: int | None = None
    time_minute = 0
    time_match = _TIME_PATTERN.search(text)
    if time_match:
        time_hour = int(time_match.group(1))
        time_minute = int(time_match.group(2)) if time_match.group(2) else 0
        meridiem = time_match.group(3)
        if meridiem == "pm" and time_hour < 12:
            time_hour += 12
        elif meridiem == "am" and time_hour == 12:
            time_hour = 0
        if time_hour > 23 or time_minute > 59:
            return None

    def _apply_time(dt: datetime) -> datetime:
        if time_hour is not None:
            return dt.replace(hour=time_hour, minute=time_minute, second=0, microsecond=0)
        return dt.replace(hour=23, minute=59, second=59, microsecond=0)

    if re.search(r"\btoday\b", text):
        return _apply_time(now)

    if re.search(r"\btomorrow\b", text):
        return _apply_time(now + timedelta(days=1))

    if re.search(r"\bnext week\b", text):
        return _apply_time(now + timedelta(days=7))

    match = re.search(r"\bin (\d+) days?\b", text)
    if match:
        return _apply_time(now + timedelta(days=int(match.group(1))))

    for day_name, day_num in _WEEKDAYS.items():
        if re.search(rf"\b{day_name}\b", text):
            days_ahead = (day_num - now.weekday()) % 7
            if days_ahead == 0:
                days_ahead = 7
            return _apply_time(now + timedelta(days=days_ahead))

    # Time only ("at 22") means today
    if time_hour is not None and time_match and time_match.group(0) == text:
        return _apply_time(now)

    return None


def _as_aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def format_iso(value: datetime) -> str:
    """Render as ISO-8601 UTC with millisecond precision, e.g. 1970-01-01T00:00:00.000Z."""
    utc = _as_aware(value).astimezone(UTC)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def format_display(value: datetime) -> str:
    """Render in the local time zone for humans, e.g. "Jan 03, 2026 at 13:34"."""
    local = _as_aware(value).astimezone(get_local_timezone())
    return local.strftime("%b %d, %Y at %H:%M")


def start_of_day(value: datetime) -> datetime:
    """Local midnight of the day containing ``value``."""
    local = _as_aware(value).astimezone(get_local_timezone())
    return local.replace(hour=0, minute=0, second=0, microsecond=0)
