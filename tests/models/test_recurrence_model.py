"""Tests for the Recurrence value type."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from remindctl.models import CountEnd, Recurrence, RecurrenceFrequency, UntilEnd, Weekday


def test_defaults():
    rec = Recurrence(frequency=RecurrenceFrequency.DAILY)
    assert rec.interval == 1
    assert rec.days_of_week is None
    assert rec.end is None


def test_collections_canonicalized():
    rec = Recurrence(
        frequency=RecurrenceFrequency.WEEKLY,
        days_of_week=[Weekday.SUNDAY, Weekday.MONDAY, Weekday.SUNDAY],
        days_of_month=[15, 1, 1],
    )
    assert rec.days_of_week == (Weekday.MONDAY, Weekday.SUNDAY)
    assert rec.days_of_month == (1, 15)


def test_empty_collection_is_absent():
    rec = Recurrence(frequency=RecurrenceFrequency.WEEKLY, days_of_week=[])
    assert rec.days_of_week is None


def test_interval_must_be_positive():
    with pytest.raises(ValidationError):
        Recurrence(frequency=RecurrenceFrequency.DAILY, interval=0)


def test_count_must_be_positive():
    with pytest.raises(ValidationError):
        CountEnd(count=0)


def test_frozen():
    rec = Recurrence(frequency=RecurrenceFrequency.DAILY)
    with pytest.raises(ValidationError):
        rec.interval = 3


def test_model_copy_makes_new_value():
    rec = Recurrence(frequency=RecurrenceFrequency.DAILY)
    changed = rec.model_copy(update={"interval": 2})
    assert rec.interval == 1
    assert changed.interval == 2


def test_json_uses_camel_case_and_kind():
    rec = Recurrence(
        frequency=RecurrenceFrequency.MONTHLY,
        days_of_week=[Weekday.TUESDAY],
        set_positions=[2],
        end=CountEnd(count=6),
    )
    data = rec.model_dump(mode="json", by_alias=True)
    assert data["daysOfWeek"] == ["tue"]
    assert data["setPositions"] == [2]
    assert data["end"] == {"kind": "count", "count": 6}


def test_end_discriminator_round_trip():
    rec = Recurrence(
        frequency=RecurrenceFrequency.DAILY,
        end=UntilEnd(date=datetime(2026, 1, 3, tzinfo=UTC)),
    )
    restored = Recurrence.model_validate_json(rec.model_dump_json(by_alias=True))
    assert restored == rec
    assert isinstance(restored.end, UntilEnd)


def test_weekday_display_order():
    assert [day.display_order for day in Weekday] == [1, 2, 3, 4, 5, 6, 7]
    assert Weekday.SUNDAY.display_order == 7
