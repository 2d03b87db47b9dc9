"""Render a ``Recurrence`` as a ``key=value`` token line.

The token order and key names are relied on by scripts reading plain
output: repeat, interval, on, month-day, setpos, month, week, count|until.
"""

from __future__ import annotations

from remindctl.models.recurrence import CountEnd, Recurrence
from remindctl.utils.date_parsing import format_display, format_iso


def _join(values) -> str:
    return ",".join(str(v) for v in values)


def summary(recurrence: Recurrence, use_iso: bool) -> str:
    """Summarize ``recurrence``.

    Args:
        recurrence: Recurrence to render
        use_iso: Render ``until`` as ISO-8601 UTC instead of local display

    Returns:
        e.g. ``repeat=weekly interval=2 on=mon,wed count=4``
    """
    parts = [f"repeat={recurrence.frequency.value}"]

    if recurrence.interval != 1:
        parts.append(f"interval={recurrence.interval}")

    if recurrence.days_of_week:
        parts.append("on=" + _join(day.value for day in recurrence.days_of_week))

    if recurrence.days_of_month:
        parts.append("month-day=" + _join(recurrence.days_of_month))

    if recurrence.set_positions:
        parts.append("setpos=" + _join(recurrence.set_positions))

    if recurrence.months_of_year:
        parts.append("month=" + _join(recurrence.months_of_year))

    if recurrence.weeks_of_year:
        parts.append("week=" + _join(recurrence.weeks_of_year))

    end = recurrence.end
    if isinstance(end, CountEnd):
        parts.append(f"count={end.count}")
    elif end is not None:
        date = format_iso(end.date) if use_iso else format_display(end.date)
        parts.append(f"until={date}")

    return " ".join(parts)
