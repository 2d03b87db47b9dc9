"""Tests for the key=value recurrence summary."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from remindctl.models import CountEnd, Recurrence, RecurrenceFrequency, UntilEnd, Weekday
from remindctl.recurrence import summary


@pytest.mark.parametrize(
    "recurrence,expected",
    [
        (Recurrence(frequency=RecurrenceFrequency.DAILY), "repeat=daily"),
        (
            Recurrence(
                frequency=RecurrenceFrequency.WEEKLY,
                interval=2,
                days_of_week=(Weekday.MONDAY, Weekday.WEDNESDAY),
                end=CountEnd(count=4),
            ),
            "repeat=weekly interval=2 on=mon,wed count=4",
        ),
        (
            Recurrence(
                frequency=RecurrenceFrequency.MONTHLY,
                days_of_week=(Weekday.TUESDAY,),
                set_positions=(2,),
            ),
            "repeat=monthly on=tue setpos=2",
        ),
        (
            Recurrence(frequency=RecurrenceFrequency.MONTHLY, days_of_month=(1, 15)),
            "repeat=monthly month-day=1,15",
        ),
        (
            Recurrence(
                frequency=RecurrenceFrequency.YEARLY,
                months_of_year=(1, 7),
                weeks_of_year=(10,),
            ),
            "repeat=yearly month=1,7 week=10",
        ),
    ],
)
def test_summary_tokens(recurrence, expected):
    assert summary(recurrence, use_iso=False) == expected
    assert summary(recurrence, use_iso=True) == expected


def test_interval_one_omitted():
    assert "interval" not in summary(Recurrence(frequency="daily", interval=1), use_iso=True)


def test_until_iso():
    rec = Recurrence(
        frequency=RecurrenceFrequency.DAILY,
        end=UntilEnd(date=datetime(2026, 1, 3, 12, 34, 56, 789000, tzinfo=UTC)),
    )
    assert summary(rec, use_iso=True) == "repeat=daily until=2026-01-03T12:34:56.789Z"


def test_until_display_uses_local_time():
    rec = Recurrence(
        frequency=RecurrenceFrequency.DAILY,
        end=UntilEnd(date=datetime(2026, 1, 3, 13, 34, tzinfo=UTC)),
    )
    assert summary(rec, use_iso=False) == "repeat=daily until=Jan 03, 2026 at 13:34"


def test_epoch_until():
    rec = Recurrence(
        frequency=RecurrenceFrequency.WEEKLY,
        end=UntilEnd(date=datetime(1970, 1, 1, tzinfo=UTC)),
    )
    assert summary(rec, use_iso=True) == "repeat=weekly until=1970-01-01T00:00:00.000Z"
