#!/usr/bin/env python3
"""Calendar system capability and day-granularity helpers for rangecal."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Optional, Protocol, Sequence, Tuple, Union

from models import ValidationError

DAYS_PER_WEEK = 7
REFERENCE_HOUR = 12

DateLike = Union[date, datetime]


def to_day(value: DateLike) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_date(value: DateLike) -> datetime:
    """Return the day of ``value`` pinned to the reference hour.

    Noon keeps the timestamp away from daylight-saving transitions, which
    happen around midnight.
    """
    return datetime.combine(to_day(value), time(hour=REFERENCE_HOUR))


class CalendarSystem(Protocol):
    first_weekday: int

    def weekday(self, day: date) -> int: ...

    def components(self, day: date) -> Tuple[int, int, int, int]: ...

    def date_from_components(self, year: int, month: int, day: int) -> date: ...

    def add(self, day: date, *, days: int = 0, months: int = 0, years: int = 0) -> date: ...

    def days_in_month(self, day: date) -> int: ...

    def weeks_in_month(self, day: date) -> int: ...

    def short_weekday_names(self) -> Sequence[str]: ...

    def month_names(self) -> Sequence[str]: ...

    def format_month_year(self, day: date) -> str: ...


class GregorianCalendar:
    """Proleptic Gregorian calendar with a configurable first weekday.

    Weekdays are numbered 1..7 starting from Sunday. Weekday and month names
    come from the process locale unless passed in explicitly.
    """

    def __init__(
        self,
        first_weekday: int = 2,
        *,
        weekday_names: Optional[Sequence[str]] = None,
        month_names: Optional[Sequence[str]] = None,
    ) -> None:
        if not 1 <= first_weekday <= DAYS_PER_WEEK:
            raise ValidationError(
                f"first_weekday must be between 1 and 7, got {first_weekday}"
            )
        if weekday_names is not None and len(weekday_names) != DAYS_PER_WEEK:
            raise ValidationError("weekday_names must contain 7 entries (Sunday first)")
        if month_names is not None and len(month_names) != 12:
            raise ValidationError("month_names must contain 12 entries")
        self.first_weekday = first_weekday
        self._weekday_names = tuple(weekday_names) if weekday_names else None
        self._month_names = tuple(month_names) if month_names else None

    def __repr__(self) -> str:
        return f"GregorianCalendar(first_weekday={self.first_weekday})"

    def weekday(self, day: date) -> int:
        # date.weekday(): Monday == 0
        return (to_day(day).weekday() + 1) % DAYS_PER_WEEK + 1

    def components(self, day: date) -> Tuple[int, int, int, int]:
        d = to_day(day)
        return d.year, d.month, d.day, self.weekday(d)

    def date_from_components(self, year: int, month: int, day: int) -> date:
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise ValidationError(f"Invalid date {year:04d}-{month:02d}-{day:02d}") from exc

    def add(self, day: date, *, days: int = 0, months: int = 0, years: int = 0) -> date:
        d = to_day(day)
        if months or years:
            index = d.year * 12 + (d.month - 1) + years * 12 + months
            year, month = divmod(index, 12)
            month += 1
            last = calendar.monthrange(year, month)[1]
            d = date(year, month, min(d.day, last))
        if days:
            d = date.fromordinal(d.toordinal() + days)
        return d

    def days_in_month(self, day: date) -> int:
        d = to_day(day)
        return calendar.monthrange(d.year, d.month)[1]

    def weeks_in_month(self, day: date) -> int:
        d = to_day(day)
        weeks = calendar.Calendar(firstweekday=self._python_first_weekday()).monthdatescalendar(
            d.year, d.month
        )
        return len(weeks)

    def short_weekday_names(self) -> Sequence[str]:
        if self._weekday_names is not None:
            return self._weekday_names
        # calendar.day_abbr is Monday-first
        names = list(calendar.day_abbr)
        return tuple(names[6:] + names[:6])

    def month_names(self) -> Sequence[str]:
        if self._month_names is not None:
            return self._month_names
        return tuple(calendar.month_name[1:])

    def format_month_year(self, day: date) -> str:
        d = to_day(day)
        name = self.month_names()[d.month - 1]
        return f"{name[:1].upper()}{name[1:]} {d.year}"

    def _python_first_weekday(self) -> int:
        # Sunday (1) -> 6, Monday (2) -> 0
        return (self.first_weekday - 2) % DAYS_PER_WEEK


__all__ = [
    "CalendarSystem",
    "GregorianCalendar",
    "DateLike",
    "DAYS_PER_WEEK",
    "REFERENCE_HOUR",
    "to_day",
    "normalize_date",
]
