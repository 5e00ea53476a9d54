from datetime import date, datetime

import pytest

from calendar_system import GregorianCalendar, normalize_date, to_day
from models import ValidationError
from helpers import english_calendar


def test_weekday_numbering_starts_on_sunday() -> None:
    cal = GregorianCalendar()

    assert cal.weekday(date(2024, 12, 1)) == 1  # Sunday
    assert cal.weekday(date(2024, 12, 2)) == 2  # Monday
    assert cal.weekday(date(2024, 12, 7)) == 7  # Saturday


def test_add_months_clamps_to_month_end() -> None:
    cal = GregorianCalendar()

    assert cal.add(date(2024, 1, 31), months=1) == date(2024, 2, 29)
    assert cal.add(date(2024, 2, 29), years=1) == date(2025, 2, 28)
    assert cal.add(date(2024, 12, 31), days=1) == date(2025, 1, 1)
    assert cal.add(date(2025, 1, 15), months=-2) == date(2024, 11, 15)


def test_weeks_in_month_depends_on_first_weekday() -> None:
    # February 2015 starts on a Sunday and has 28 days.
    assert GregorianCalendar(1).weeks_in_month(date(2015, 2, 1)) == 4
    assert GregorianCalendar(2).weeks_in_month(date(2015, 2, 1)) == 5
    assert GregorianCalendar(2).weeks_in_month(date(2024, 12, 1)) == 6


def test_invalid_first_weekday_rejected() -> None:
    with pytest.raises(ValidationError):
        GregorianCalendar(0)
    with pytest.raises(ValidationError):
        GregorianCalendar(8)


def test_format_month_year_capitalizes_injected_names() -> None:
    names = [m.lower() for m in english_calendar().month_names()]
    cal = GregorianCalendar(2, month_names=names)

    assert cal.format_month_year(date(2024, 12, 5)) == "December 2024"


def test_date_from_components_wraps_invalid_dates() -> None:
    with pytest.raises(ValidationError):
        GregorianCalendar().date_from_components(2025, 2, 29)


def test_day_normalization_ignores_time_of_day() -> None:
    late = datetime(2024, 3, 10, 23, 59)
    early = datetime(2024, 3, 10, 0, 1)

    assert to_day(late) == to_day(early) == date(2024, 3, 10)
    assert normalize_date(early) == datetime(2024, 3, 10, 12, 0)
