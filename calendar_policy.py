#!/usr/bin/env python3
"""Month arithmetic and grid layout helpers.

Every function is pure and takes the calendar system explicitly; none of them
keep state between calls.
"""

from __future__ import annotations

from datetime import date
from typing import List

from calendar_system import DAYS_PER_WEEK, CalendarSystem, DateLike, to_day
from models import check_range


def first_day_of_month(cal: CalendarSystem, reference: DateLike) -> date:
    year, month, _, _ = cal.components(to_day(reference))
    return cal.date_from_components(year, month, 1)


def last_day_of_month(cal: CalendarSystem, reference: DateLike) -> date:
    first = first_day_of_month(cal, reference)
    return cal.add(first, days=cal.days_in_month(first) - 1)


def month_start(cal: CalendarSystem, minimum_date: DateLike, offset: int) -> date:
    """First day of the month ``offset`` months after ``minimum_date``'s month.

    The offset is not range checked; negative offsets walk backwards.
    """
    return cal.add(first_day_of_month(cal, minimum_date), months=offset)


def total_months(cal: CalendarSystem, minimum_date: DateLike, maximum_date: DateLike) -> int:
    """Inclusive number of months between the two dates' (year, month) pairs."""
    lo, hi = to_day(minimum_date), to_day(maximum_date)
    check_range(lo, hi)
    lo_year, lo_month, _, _ = cal.components(lo)
    hi_year, hi_month, _, _ = cal.components(hi)
    return (hi_year - lo_year) * 12 + (hi_month - lo_month) + 1


def month_offset_for(cal: CalendarSystem, minimum_date: DateLike, day: DateLike) -> int:
    """Offset of ``day``'s month from ``minimum_date``'s month (may be negative)."""
    lo_year, lo_month, _, _ = cal.components(to_day(minimum_date))
    year, month, _, _ = cal.components(to_day(day))
    return (year - lo_year) * 12 + (month - lo_month)


def weekday_offset(cal: CalendarSystem, first_of_month: DateLike) -> int:
    """Number of leading blank cells before the 1st, in [0, 6]."""
    return (cal.weekday(to_day(first_of_month)) - cal.first_weekday) % DAYS_PER_WEEK


def weeks_spanned(cal: CalendarSystem, first_of_month: DateLike) -> int:
    return cal.weeks_in_month(to_day(first_of_month))


def weekday_headers(cal: CalendarSystem) -> List[str]:
    names = list(cal.short_weekday_names())
    idx = cal.first_weekday - 1
    return names[idx:] + names[:idx]


__all__ = [
    "first_day_of_month",
    "last_day_of_month",
    "month_start",
    "total_months",
    "month_offset_for",
    "weekday_offset",
    "weeks_spanned",
    "weekday_headers",
]
