"""Map ``Recurrence`` to and from the store's ``ExternalRule``.

This is the only place the two weekday numberings meet: remindctl orders
weekdays Monday=1..Sunday=7, the store numbers them Sunday=1..Saturday=7.
For every valid ``Recurrence`` r, ``from_external_rule(to_external_rule(r)) == r``.
"""

from __future__ import annotations

from remindctl.models.recurrence import (
    CountEnd,
    Recurrence,
    RecurrenceEnd,
    RecurrenceFrequency,
    UntilEnd,
    Weekday,
)
from remindctl.recurrence.external import (
    ExternalDayOfWeek,
    ExternalFrequency,
    ExternalRecurrenceEnd,
    ExternalRule,
    ExternalWeekday,
)

_TO_EXTERNAL_FREQUENCY = {
    RecurrenceFrequency.DAILY: ExternalFrequency.DAILY,
    RecurrenceFrequency.WEEKLY: ExternalFrequency.WEEKLY,
    RecurrenceFrequency.MONTHLY: ExternalFrequency.MONTHLY,
    RecurrenceFrequency.YEARLY: ExternalFrequency.YEARLY,
}
_FROM_EXTERNAL_FREQUENCY = {v: k for k, v in _TO_EXTERNAL_FREQUENCY.items()}

_TO_EXTERNAL_WEEKDAY = {
    Weekday.SUNDAY: ExternalWeekday.SUNDAY,
    Weekday.MONDAY: ExternalWeekday.MONDAY,
    Weekday.TUESDAY: ExternalWeekday.TUESDAY,
    Weekday.WEDNESDAY: ExternalWeekday.WEDNESDAY,
    Weekday.THURSDAY: ExternalWeekday.THURSDAY,
    Weekday.FRIDAY: ExternalWeekday.FRIDAY,
    Weekday.SATURDAY: ExternalWeekday.SATURDAY,
}
_FROM_EXTERNAL_WEEKDAY = {v: k for k, v in _TO_EXTERNAL_WEEKDAY.items()}


def to_external_rule(recurrence: Recurrence) -> ExternalRule:
    """Build the store rule for ``recurrence``."""
    return ExternalRule(
        frequency=_TO_EXTERNAL_FREQUENCY[recurrence.frequency],
        interval=max(recurrence.interval, 1),
        days_of_the_week=_external_days(recurrence),
        days_of_the_month=_sorted_list(recurrence.days_of_month),
        months_of_the_year=_sorted_list(recurrence.months_of_year),
        weeks_of_the_year=_sorted_list(recurrence.weeks_of_year),
        set_positions=_sorted_list(recurrence.set_positions),
        recurrence_end=_external_end(recurrence.end),
    )


def from_external_rule(rule: ExternalRule) -> Recurrence | None:
    """Read a store rule back.

    Returns None for frequencies remindctl does not support (e.g. hourly).
    """
    frequency = _FROM_EXTERNAL_FREQUENCY.get(rule.frequency)
    if frequency is None:
        return None

    days = rule.days_of_the_week or []
    set_positions = rule.set_positions
    if (
        frequency is RecurrenceFrequency.MONTHLY
        and not set_positions
        and len(days) == 1
        and days[0].week_number != 0
    ):
        # "2MO" written by another client: same meaning as BYDAY=MO;BYSETPOS=2
        set_positions = [days[0].week_number]

    weekdays = [_FROM_EXTERNAL_WEEKDAY[d.day_of_the_week] for d in days]
    return Recurrence(
        frequency=frequency,
        interval=max(rule.interval, 1),
        days_of_week=sorted(weekdays, key=lambda day: day.display_order) or None,
        days_of_month=_sorted_list(rule.days_of_the_month),
        set_positions=_sorted_list(set_positions),
        months_of_year=_sorted_list(rule.months_of_the_year),
        weeks_of_year=_sorted_list(rule.weeks_of_the_year),
        end=_recurrence_end(rule.recurrence_end),
    )


def _external_days(recurrence: Recurrence) -> list[ExternalDayOfWeek] | None:
    if not recurrence.days_of_week:
        return None
    ordered = sorted(recurrence.days_of_week, key=lambda day: day.display_order)
    # Week number 0 in both encodings: with set positions the nth-weekday
    # relationship is carried by the rule's BYSETPOS, never per day.
    return [ExternalDayOfWeek(_TO_EXTERNAL_WEEKDAY[day], week_number=0) for day in ordered]


def _sorted_list(values) -> list[int] | None:
    if not values:
        return None
    return sorted(values)


def _external_end(end: RecurrenceEnd | None) -> ExternalRecurrenceEnd | None:
    if end is None:
        return None
    if isinstance(end, CountEnd):
        return ExternalRecurrenceEnd.with_count(max(end.count, 1))
    return ExternalRecurrenceEnd.with_end_date(end.date)


def _recurrence_end(end: ExternalRecurrenceEnd | None) -> RecurrenceEnd | None:
    if end is None:
        return None
    if end.occurrence_count > 0:
        return CountEnd(count=end.occurrence_count)
    if end.end_date is not None:
        return UntilEnd(date=end.end_date)
    return None
