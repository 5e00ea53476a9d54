#!/usr/bin/env python3
"""Week-row layout of a single month."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import calendar_policy
from calendar_system import DAYS_PER_WEEK, CalendarSystem
from models import SelectionBounds, ValidationError

# None marks a blank slot before the 1st or after the last day.
MonthGrid = List[List[Optional[date]]]


class MonthGridBuilder:
    def __init__(self, calendar_system: CalendarSystem) -> None:
        self.calendar = calendar_system

    def build_grid(self, bounds: SelectionBounds, month_offset: int) -> MonthGrid:
        """Rows of seven slots covering the month ``month_offset`` after the minimum date.

        Slots outside the month are None, never a day of a neighbouring month,
        and rows without any day are dropped.
        """
        cal = self.calendar
        first = calendar_policy.month_start(cal, bounds.minimum_date, month_offset)
        leading = calendar_policy.weekday_offset(cal, first)
        slot_count = calendar_policy.weeks_spanned(cal, first) * DAYS_PER_WEEK
        year, month, _, _ = cal.components(first)

        slots: List[Optional[date]] = []
        for index in range(slot_count):
            day = cal.add(first, days=index - leading)
            day_year, day_month, _, _ = cal.components(day)
            slots.append(day if (day_year, day_month) == (year, month) else None)

        rows: MonthGrid = []
        for row_start in range(0, slot_count, DAYS_PER_WEEK):
            row = slots[row_start : row_start + DAYS_PER_WEEK]
            if any(cell is not None for cell in row):
                rows.append(row)
        return rows

    def month_label(self, bounds: SelectionBounds, month_offset: int) -> str:
        try:
            first = calendar_policy.month_start(self.calendar, bounds.minimum_date, month_offset)
        except (ValueError, OverflowError, ValidationError):
            return ""
        return self.calendar.format_month_year(first)


__all__ = ["MonthGrid", "MonthGridBuilder"]
