#!/usr/bin/env python3
"""Core models and validation helpers for rangecal."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Literal, Optional, Sequence

NOT_SELECTED_LABEL = "Not selected"

SelectionPhase = Literal["empty", "partial_start", "complete"]
DayStyle = Literal["disabled", "selected", "today", "between", "normal"]


class ValidationError(Exception):
    pass


class InvalidRangeError(ValidationError):
    """Raised when a maximum date precedes its minimum date."""


@dataclass(frozen=True)
class SelectionRange:
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def phase(self) -> SelectionPhase:
        if self.start is None:
            return "empty"
        if self.end is None:
            return "partial_start"
        return "complete"


@dataclass(frozen=True)
class SelectionBounds:
    minimum_date: date
    maximum_date: date
    is_future_only: bool
    disabled_dates: FrozenSet[date] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DayState:
    day: date
    is_today: bool = False
    is_selected: bool = False
    is_between: bool = False
    is_disabled: bool = False

    @property
    def text(self) -> str:
        return str(self.day.day)

    @property
    def style(self) -> DayStyle:
        # Endpoints are both selected and between; selected wins.
        if self.is_disabled:
            return "disabled"
        if self.is_selected:
            return "selected"
        if self.is_today:
            return "today"
        if self.is_between:
            return "between"
        return "normal"


def check_range(minimum_date: date, maximum_date: date) -> None:
    if maximum_date < minimum_date:
        raise InvalidRangeError(
            f"maximum date {maximum_date.isoformat()} precedes minimum date "
            f"{minimum_date.isoformat()}"
        )


def formatted_date(value: Optional[date], month_names: Optional[Sequence[str]] = None) -> str:
    """Label for a start/end header, e.g. "7 December"."""
    if value is None:
        return NOT_SELECTED_LABEL
    names = month_names or calendar.month_name[1:]
    return f"{value.day} {names[value.month - 1]}"


__all__ = [
    "SelectionRange",
    "SelectionBounds",
    "DayState",
    "SelectionPhase",
    "DayStyle",
    "ValidationError",
    "InvalidRangeError",
    "check_range",
    "formatted_date",
    "NOT_SELECTED_LABEL",
]
