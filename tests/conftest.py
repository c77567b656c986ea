from datetime import UTC, datetime

import pytest

from dayandtime.adapters.calendar_zone import ZoneCalendar
from dayandtime.adapters.clock import FrozenClock
from dayandtime.components.day_and_time import ChangeNotice, DayAndTime

# Mid-afternoon, mid-summer, off the hour grid.
FROZEN_NOW = datetime(2026, 6, 15, 12, 34, 56, tzinfo=UTC)


@pytest.fixture
def utc_calendar() -> ZoneCalendar:
    return ZoneCalendar("UTC")


@pytest.fixture
def london_calendar() -> ZoneCalendar:
    return ZoneCalendar("Europe/London")


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FROZEN_NOW)


@pytest.fixture
def sut(utc_calendar: ZoneCalendar, clock: FrozenClock) -> DayAndTime:
    """A cursor at the frozen instant under a fixed UTC calendar."""
    return DayAndTime(calendar=utc_calendar, clock=clock)


@pytest.fixture
def notices(sut: DayAndTime) -> list[ChangeNotice]:
    """Every notice published by sut, in order."""
    received: list[ChangeNotice] = []
    sut.will_change.subscribe(received.append)
    return received
