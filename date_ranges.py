#!/usr/bin/env python3
"""Selection windows for future-only and past-only pickers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from calendar_system import CalendarSystem


@dataclass(frozen=True)
class DateRange:
    start: Optional[date]
    end: Optional[date]


def _year_after(cal: CalendarSystem, day: date) -> date:
    return cal.add(day, years=1)


def _year_before(cal: CalendarSystem, day: date) -> date:
    return cal.add(day, years=-1)


def selection_window(cal: CalendarSystem, *, future_only: bool, today: date) -> DateRange:
    """Default bounds for a picker: one year ahead of or behind ``today``."""
    if future_only:
        return DateRange(today, _year_after(cal, today))
    return DateRange(_year_before(cal, today), today)


def days_between(start: date, end: date) -> List[date]:
    """Every day from ``start`` to ``end`` inclusive; empty if inverted."""
    span = (end - start).days
    return [start + timedelta(days=offset) for offset in range(span + 1)]


def contains(window: DateRange, day: date) -> bool:
    if window.start is not None and day < window.start:
        return False
    if window.end is not None and day > window.end:
        return False
    return True


__all__ = ["DateRange", "selection_window", "days_between", "contains"]
