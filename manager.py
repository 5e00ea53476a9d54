#!/usr/bin/env python3
"""Range selection state shared by the calendar views."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence

import calendar_policy
from calendar_system import CalendarSystem, DateLike, GregorianCalendar, to_day
from clock import Clock, SystemClock
from date_ranges import DateRange, contains, days_between, selection_window
from models import (
    DayState,
    SelectionBounds,
    SelectionPhase,
    SelectionRange,
    ValidationError,
    check_range,
)
from month_grid import MonthGrid, MonthGridBuilder

logger = logging.getLogger(__name__)

Listener = Callable[["CalendarManager"], None]


class CalendarManager:
    """Owns the selectable bounds and the two-tap range selection.

    ``select_date`` is the only mutation a view needs. Everything else is
    derived on demand, and "today" is read from the clock on every query, so
    enabled days can shift across midnight while a view is open.

    Not thread safe: drive it from a single event loop or guard it externally.
    """

    def __init__(
        self,
        is_future_selection_enabled: bool,
        *,
        calendar_system: Optional[CalendarSystem] = None,
        minimum_date: Optional[DateLike] = None,
        maximum_date: Optional[DateLike] = None,
        selected_dates: Sequence[DateLike] = (),
        disabled_dates: Iterable[DateLike] = (),
        clock: Optional[Clock] = None,
        strict_bounds: bool = False,
    ) -> None:
        self.calendar: CalendarSystem = calendar_system or GregorianCalendar()
        self.clock: Clock = clock or SystemClock()
        self.is_future_selection_enabled = is_future_selection_enabled
        self.strict_bounds = strict_bounds
        self._listeners: List[Listener] = []
        self._grid_builder = MonthGridBuilder(self.calendar)
        self._disabled: FrozenSet[date] = frozenset(to_day(d) for d in disabled_dates)

        if minimum_date is None and maximum_date is None:
            window = self._window()
            self.minimum_date, self.maximum_date = window.start, window.end
        elif minimum_date is None or maximum_date is None:
            raise ValidationError("minimum_date and maximum_date must be given together")
        else:
            lo, hi = to_day(minimum_date), to_day(maximum_date)
            check_range(lo, hi)
            self.minimum_date, self.maximum_date = lo, hi

        self._range = self._initial_range(selected_dates)

    @staticmethod
    def _initial_range(selected_dates: Sequence[DateLike]) -> SelectionRange:
        days = [to_day(d) for d in selected_dates]
        if len(days) > 2:
            raise ValidationError(
                f"selected_dates takes at most a start and an end, got {len(days)} dates"
            )
        if not days:
            return SelectionRange()
        if len(days) == 1:
            return SelectionRange(start=days[0])
        check_range(days[0], days[1])
        return SelectionRange(start=days[0], end=days[1])

    # Read accessors
    @property
    def start_date(self) -> Optional[date]:
        return self._range.start

    @property
    def end_date(self) -> Optional[date]:
        return self._range.end

    @property
    def selection(self) -> SelectionRange:
        return self._range

    @property
    def phase(self) -> SelectionPhase:
        return self._range.phase

    @property
    def disabled_dates(self) -> FrozenSet[date]:
        return self._disabled

    @property
    def bounds(self) -> SelectionBounds:
        return SelectionBounds(
            minimum_date=self.minimum_date,
            maximum_date=self.maximum_date,
            is_future_only=self.is_future_selection_enabled,
            disabled_dates=self._disabled,
        )

    def today(self) -> date:
        return self.clock.today()

    def selected_dates(self) -> List[date]:
        start, end = self._range.start, self._range.end
        if start is None:
            return []
        if end is None:
            return [start]
        return days_between(start, end)

    # Observation
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Predicates
    def is_date_disabled(self, day: DateLike) -> bool:
        return to_day(day) in self._disabled

    def is_enabled(self, day: DateLike) -> bool:
        d = to_day(day)
        if d < self.minimum_date or d > self.maximum_date:
            return False
        if d in self._disabled:
            return False
        today = self.today()
        if self.is_future_selection_enabled:
            return d >= today
        return d <= today

    def is_today(self, day: DateLike) -> bool:
        return to_day(day) == self.today()

    def is_selected(self, day: DateLike) -> bool:
        d = to_day(day)
        return d == self._range.start or d == self._range.end

    def is_between(self, day: DateLike) -> bool:
        start, end = self._range.start, self._range.end
        if start is None or end is None:
            return False
        return start <= to_day(day) <= end

    def classify(self, day: DateLike) -> DayState:
        d = to_day(day)
        return DayState(
            day=d,
            is_today=self.is_today(d),
            is_selected=self.is_selected(d),
            is_between=self.is_between(d),
            is_disabled=not self.is_enabled(d),
        )

    # Mutations
    def select_date(self, day: DateLike) -> bool:
        """Apply one tap; returns False when the day is not selectable."""
        d = to_day(day)
        if not self.is_enabled(d):
            logger.debug("Rejected tap on %s", d)
            return False

        current = self._range
        if current.phase == "complete":
            current = SelectionRange()

        if current.phase == "empty":
            updated = SelectionRange(start=d)
        elif current.start is not None and d < current.start:
            logger.debug("End %s precedes start %s; clearing selection", d, current.start)
            updated = SelectionRange()
        else:
            updated = SelectionRange(start=current.start, end=d)

        self._range = updated
        logger.debug("Selection is now %s (%s .. %s)", updated.phase, updated.start, updated.end)
        self._notify()
        return True

    def clear_selection(self) -> None:
        self._range = SelectionRange()
        self._notify()

    def update_range(self) -> None:
        """Reset bounds to one year forward or back from today, per the mode."""
        window = self._window()
        self._apply_bounds(window.start, window.end)

    def set_bounds(
        self,
        minimum_date: Optional[DateLike] = None,
        maximum_date: Optional[DateLike] = None,
        *,
        is_future_only: Optional[bool] = None,
    ) -> None:
        if minimum_date is None and maximum_date is None:
            if is_future_only is not None:
                self.is_future_selection_enabled = is_future_only
            self.update_range()
            return
        if minimum_date is None or maximum_date is None:
            raise ValidationError("minimum_date and maximum_date must be given together")
        lo, hi = to_day(minimum_date), to_day(maximum_date)
        check_range(lo, hi)
        if is_future_only is not None:
            self.is_future_selection_enabled = is_future_only
        self._apply_bounds(lo, hi)

    def toggle_future_only(self) -> None:
        self.is_future_selection_enabled = not self.is_future_selection_enabled
        self.update_range()

    def set_disabled_dates(self, days: Iterable[DateLike]) -> None:
        self._disabled = frozenset(to_day(d) for d in days)
        self._notify()

    def _window(self) -> DateRange:
        return selection_window(
            self.calendar,
            future_only=self.is_future_selection_enabled,
            today=self.today(),
        )

    def _apply_bounds(self, minimum_date: date, maximum_date: date) -> None:
        check_range(minimum_date, maximum_date)
        self.minimum_date, self.maximum_date = minimum_date, maximum_date
        logger.debug(
            "Bounds set to %s .. %s (future_only=%s)",
            minimum_date,
            maximum_date,
            self.is_future_selection_enabled,
        )
        if self.strict_bounds and not self._selection_within_bounds():
            logger.debug("Clearing selection outside new bounds")
            self._range = SelectionRange()
        self._notify()

    def _selection_within_bounds(self) -> bool:
        window = DateRange(self.minimum_date, self.maximum_date)
        return all(
            contains(window, d) for d in (self._range.start, self._range.end) if d is not None
        )

    # Month helpers
    def first_date_of_month(self) -> date:
        return calendar_policy.first_day_of_month(self.calendar, self.minimum_date)

    def month_start(self, offset: int) -> date:
        return calendar_policy.month_start(self.calendar, self.minimum_date, offset)

    def month_count(self) -> int:
        return calendar_policy.total_months(self.calendar, self.minimum_date, self.maximum_date)

    def month_offset_for(self, day: DateLike) -> int:
        return calendar_policy.month_offset_for(self.calendar, self.minimum_date, day)

    def build_grid(self, month_offset: int) -> MonthGrid:
        return self._grid_builder.build_grid(self.bounds, month_offset)

    def month_label(self, month_offset: int) -> str:
        return self._grid_builder.month_label(self.bounds, month_offset)

    def weekday_headers(self) -> List[str]:
        return calendar_policy.weekday_headers(self.calendar)


__all__ = ["CalendarManager", "Listener"]
