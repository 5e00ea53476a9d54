from datetime import date

import pytest

from calendar_policy import (
    first_day_of_month,
    last_day_of_month,
    month_offset_for,
    month_start,
    total_months,
    weekday_headers,
    weekday_offset,
)
from models import InvalidRangeError
from helpers import english_calendar


def test_first_and_last_day_of_month() -> None:
    cal = english_calendar()

    assert first_day_of_month(cal, date(2024, 12, 15)) == date(2024, 12, 1)
    assert last_day_of_month(cal, date(2024, 2, 10)) == date(2024, 2, 29)


def test_month_start_accepts_any_offset() -> None:
    cal = english_calendar()

    assert month_start(cal, date(2024, 12, 15), 0) == date(2024, 12, 1)
    assert month_start(cal, date(2024, 12, 15), 2) == date(2025, 2, 1)
    assert month_start(cal, date(2024, 12, 15), -12) == date(2023, 12, 1)


def test_total_months_is_inclusive() -> None:
    cal = english_calendar()

    assert total_months(cal, date(2024, 12, 1), date(2025, 12, 10)) == 13
    assert total_months(cal, date(2024, 12, 1), date(2024, 12, 31)) == 1
    assert total_months(cal, date(2024, 11, 30), date(2025, 1, 1)) == 3


def test_total_months_rejects_inverted_range() -> None:
    with pytest.raises(InvalidRangeError):
        total_months(english_calendar(), date(2025, 1, 1), date(2024, 12, 31))


def test_weekday_offset_counts_leading_blanks() -> None:
    # 2024-12-01 is a Sunday, 2025-01-01 a Wednesday.
    assert weekday_offset(english_calendar(1), date(2024, 12, 1)) == 0
    assert weekday_offset(english_calendar(2), date(2024, 12, 1)) == 6
    assert weekday_offset(english_calendar(1), date(2025, 1, 1)) == 3
    assert weekday_offset(english_calendar(2), date(2025, 1, 1)) == 2


def test_weekday_headers_rotate_to_first_weekday() -> None:
    assert weekday_headers(english_calendar(1))[0] == "Sun"
    assert weekday_headers(english_calendar(2)) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert weekday_headers(english_calendar(7))[:2] == ["Sat", "Sun"]


def test_month_offset_for() -> None:
    cal = english_calendar()

    assert month_offset_for(cal, date(2024, 12, 20), date(2025, 3, 5)) == 3
    assert month_offset_for(cal, date(2024, 12, 20), date(2024, 12, 1)) == 0
    assert month_offset_for(cal, date(2024, 12, 20), date(2024, 10, 31)) == -2
