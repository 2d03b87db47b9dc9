"""The reminder store's native recurrence rule.

``ExternalRule`` mirrors the rule object a platform calendar store exposes:
finer-grained frequencies than remindctl supports, weekdays numbered from
Sunday=1 with an optional per-day week number, set positions, and an end
expressed as an occurrence count or an end date. It is persisted as
RFC 5545 RRULE text, e.g. ``FREQ=MONTHLY;BYDAY=MO;BYSETPOS=2;COUNT=6``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from enum import Enum, IntEnum

from dateutil.rrule import rrulestr


class ExternalFrequency(str, Enum):
    SECONDLY = "SECONDLY"
    MINUTELY = "MINUTELY"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class ExternalWeekday(IntEnum):
    """Weekday numbering used by the store: Sunday=1 through Saturday=7."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def code(self) -> str:
        return _WEEKDAY_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> ExternalWeekday:
        return _CODE_WEEKDAYS[code.upper()]


_WEEKDAY_CODES = {
    ExternalWeekday.SUNDAY: "SU",
    ExternalWeekday.MONDAY: "MO",
    ExternalWeekday.TUESDAY: "TU",
    ExternalWeekday.WEDNESDAY: "WE",
    ExternalWeekday.THURSDAY: "TH",
    ExternalWeekday.FRIDAY: "FR",
    ExternalWeekday.SATURDAY: "SA",
}
_CODE_WEEKDAYS = {code: day for day, code in _WEEKDAY_CODES.items()}

_BYDAY_PATTERN = re.compile(r"^([+-]?\d{1,2})?(SU|MO|TU|WE|TH|FR|SA)$")


@dataclass(frozen=True)
class ExternalDayOfWeek:
    """A weekday in a rule; ``week_number`` 0 means every week of the period."""

    day_of_the_week: ExternalWeekday
    week_number: int = 0

    def to_rrule(self) -> str:
        prefix = str(self.week_number) if self.week_number else ""
        return f"{prefix}{self.day_of_the_week.code}"

    @classmethod
    def from_rrule(cls, token: str) -> ExternalDayOfWeek:
        match = _BYDAY_PATTERN.match(token.strip().upper())
        if match is None:
            raise ValueError(f"Invalid BYDAY value: {token!r}")
        number, code = match.groups()
        return cls(ExternalWeekday.from_code(code), int(number) if number else 0)


@dataclass(frozen=True)
class ExternalRecurrenceEnd:
    """End of a rule. A positive ``occurrence_count`` takes precedence."""

    end_date: datetime | None = None
    occurrence_count: int = 0

    @classmethod
    def with_count(cls, count: int) -> ExternalRecurrenceEnd:
        return cls(occurrence_count=count)

    @classmethod
    def with_end_date(cls, end_date: datetime) -> ExternalRecurrenceEnd:
        return cls(end_date=end_date)


@dataclass(frozen=True)
class ExternalRule:
    frequency: ExternalFrequency
    interval: int = 1
    days_of_the_week: list[ExternalDayOfWeek] | None = None
    days_of_the_month: list[int] | None = None
    months_of_the_year: list[int] | None = None
    weeks_of_the_year: list[int] | None = None
    days_of_the_year: list[int] | None = None
    set_positions: list[int] | None = None
    recurrence_end: ExternalRecurrenceEnd | None = field(default=None)

    def to_rrule(self) -> str:
        """Serialize as RRULE text (without the ``RRULE:`` prefix)."""
        parts = [f"FREQ={self.frequency.value}"]
        if self.interval != 1:
            parts.append(f"INTERVAL={self.interval}")
        if self.days_of_the_week:
            parts.append("BYDAY=" + ",".join(d.to_rrule() for d in self.days_of_the_week))
        for key, values in (
            ("BYMONTHDAY", self.days_of_the_month),
            ("BYMONTH", self.months_of_the_year),
            ("BYWEEKNO", self.weeks_of_the_year),
            ("BYYEARDAY", self.days_of_the_year),
            ("BYSETPOS", self.set_positions),
        ):
            if values:
                parts.append(f"{key}=" + ",".join(str(v) for v in values))
        end = self.recurrence_end
        if end is not None:
            if end.occurrence_count > 0:
                parts.append(f"COUNT={end.occurrence_count}")
            elif end.end_date is not None:
                until = _as_utc(end.end_date)
                parts.append(f"UNTIL={until.strftime('%Y%m%dT%H%M%SZ')}")
        return ";".join(parts)

    @classmethod
    def from_rrule(cls, text: str) -> ExternalRule:
        """Parse RRULE text.

        Raises:
            ValueError: If FREQ is missing or a component is malformed
        """
        body = text.strip()
        if body.upper().startswith("RRULE:"):
            body = body[len("RRULE:") :]

        parts: dict[str, str] = {}
        for part in body.split(";"):
            if "=" in part:
                key, value = part.split("=", 1)
                parts[key.strip().upper()] = value.strip()

        freq = parts.get("FREQ")
        if not freq:
            raise ValueError("RRULE must have FREQ component")
        try:
            frequency = ExternalFrequency(freq.upper())
        except ValueError:
            raise ValueError(f"Unknown frequency: {freq}") from None

        days = None
        if parts.get("BYDAY"):
            days = [ExternalDayOfWeek.from_rrule(t) for t in parts["BYDAY"].split(",")]

        end = None
        if "COUNT" in parts:
            end = ExternalRecurrenceEnd.with_count(int(parts["COUNT"]))
        elif "UNTIL" in parts:
            end = ExternalRecurrenceEnd.with_end_date(_parse_until(parts["UNTIL"]))

        return cls(
            frequency=frequency,
            interval=int(parts.get("INTERVAL", 1)),
            days_of_the_week=days,
            days_of_the_month=_int_list(parts.get("BYMONTHDAY")),
            months_of_the_year=_int_list(parts.get("BYMONTH")),
            weeks_of_the_year=_int_list(parts.get("BYWEEKNO")),
            days_of_the_year=_int_list(parts.get("BYYEARDAY")),
            set_positions=_int_list(parts.get("BYSETPOS")),
            recurrence_end=end,
        )

    def occurrence_after(
        self,
        dtstart: datetime,
        after: datetime | None = None,
        tz: tzinfo | None = None,
    ) -> datetime | None:
        """Next occurrence strictly after ``after`` for a series starting at ``dtstart``.

        The rule is expanded on the wall clock of ``tz`` (UTC when None), so
        weekdays and month days follow that calendar across DST changes.
        Returns the occurrence in UTC, or None once the rule is exhausted.
        """
        start = self._local_start(dtstart, tz)
        rule = rrulestr(self.to_rrule(), dtstart=start)
        found = rule.after(_as_utc(after) if after is not None else start)
        return found.astimezone(UTC) if found is not None else None

    def is_occurrence(self, dtstart: datetime, tz: tzinfo | None = None) -> bool:
        """Whether ``dtstart`` itself matches the rule.

        A start that does not match (e.g. a Wednesday for ``BYDAY=MO``) is not
        counted by ``COUNT``.
        """
        start = self._local_start(dtstart, tz)
        rule = rrulestr(self.to_rrule(), dtstart=start)
        return rule.after(start, inc=True) == start

    @staticmethod
    def _local_start(dtstart: datetime, tz: tzinfo | None) -> datetime:
        return _as_utc(dtstart).astimezone(tz or UTC)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _int_list(value: str | None) -> list[int] | None:
    if not value:
        return None
    return [int(v) for v in value.split(",") if v.strip()]


def _parse_until(value: str) -> datetime:
    if "T" not in value:
        # Date-only UNTIL includes the whole day
        return datetime.strptime(value, "%Y%m%d").replace(
            hour=23, minute=59, second=59, tzinfo=UTC
        )
    if value.endswith("Z"):
        return datetime.strptime(value, "%Y%m%dT%H%M%SZ").replace(tzinfo=UTC)
    return datetime.strptime(value, "%Y%m%dT%H%M%S").replace(tzinfo=UTC)
