from datetime import date

from helpers import MONTHS
from models import (
    DayState,
    SelectionRange,
    formatted_date,
)


def test_selection_range_phases() -> None:
    assert SelectionRange().phase == "empty"
    assert SelectionRange(start=date(2024, 12, 1)).phase == "partial_start"
    assert SelectionRange(date(2024, 12, 1), date(2024, 12, 3)).phase == "complete"


def test_day_state_style_precedence() -> None:
    day = date(2024, 12, 12)

    assert DayState(day, is_selected=True, is_between=True).style == "selected"
    assert DayState(day, is_disabled=True, is_selected=True).style == "disabled"
    assert DayState(day, is_today=True, is_between=True).style == "today"
    assert DayState(day, is_between=True).style == "between"
    assert DayState(day).style == "normal"
    assert DayState(day).text == "12"


def test_formatted_date() -> None:
    assert formatted_date(None) == "Not selected"
    assert formatted_date(date(2024, 12, 7), MONTHS) == "7 December"
