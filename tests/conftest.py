from datetime import date

import pytest

from clock import FixedClock
from helpers import english_calendar
from manager import CalendarManager


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(date(2024, 12, 10))


@pytest.fixture
def future_manager(clock: FixedClock) -> CalendarManager:
    return CalendarManager(
        True,
        calendar_system=english_calendar(),
        minimum_date=date(2024, 12, 1),
        maximum_date=date(2025, 12, 1),
        clock=clock,
    )
