"""
Cursor invariants that must hold across arbitrary command sequences.
"""

from datetime import UTC, datetime, timedelta
from itertools import product

import pytest

from dayandtime.adapters.calendar_zone import ZoneCalendar
from dayandtime.adapters.clock import FrozenClock
from dayandtime.components.day_and_time import ChangeNotice, DayAndTime
from dayandtime.domain.interval import ClosedInterval

NOW = datetime(2026, 6, 15, 12, 34, 56, tzinfo=UTC)

COMMANDS = (
    "step_forward_one_hour",
    "step_back_one_hour",
    "step_forward_one_day",
    "step_backward_one_day",
)


@pytest.fixture(params=["UTC", "Europe/London", "America/New_York"])
def cursor(request):
    calendar = ZoneCalendar(request.param)
    sut = DayAndTime(calendar=calendar, clock=FrozenClock(NOW))
    sut.term = ClosedInterval(NOW - timedelta(days=2), NOW + timedelta(days=2))
    return sut


# --- Time stays inside the term ---
def test_time_stays_within_term(cursor):
    """Any sequence of steps keeps time inside a well-formed term."""
    for first, second in product(COMMANDS, repeat=2):
        for command in (first, second, first, first, second):
            getattr(cursor, command)()
            assert cursor.term.contains(cursor.time)


# --- Predicates agree with steps ---
def test_can_step_predicts_step(cursor):
    """can_step_* is True exactly when the matching step moves the cursor."""
    pairs = [
        ("can_step_forward_one_hour", "step_forward_one_hour"),
        ("can_step_back_one_hour", "step_back_one_hour"),
        ("can_step_forward_one_day", "step_forward_one_day"),
        ("can_step_backward_one_day", "step_backward_one_day"),
    ]
    for _ in range(30):
        for predicate, step in pairs:
            expected = getattr(cursor, predicate)()
            assert getattr(cursor, step)() is expected


# --- One notice per move ---
def test_one_notice_per_move(cursor):
    """Moves publish one notice each; no-ops publish none."""
    received: list[ChangeNotice] = []
    cursor.will_change.subscribe(received.append)

    moves = 0
    for command in COMMANDS * 10:
        if getattr(cursor, command)():
            moves += 1

    assert len(received) == moves


# --- Hour steps land on the hour grid ---
def test_hour_steps_land_on_hour_boundaries():
    """Forward and back hour steps always land on a whole hour."""
    calendar = ZoneCalendar("UTC")
    sut = DayAndTime(time=NOW, calendar=calendar, clock=FrozenClock(NOW))

    for step in ("step_forward_one_hour", "step_back_one_hour") * 5:
        getattr(sut, step)()
        parts = calendar.components(sut.time)
        assert parts.minute == 0
        assert parts.second == 0
        assert sut.time.microsecond == 0


# --- Day steps invert each other away from DST ---
@pytest.mark.parametrize("zone", ["UTC", "Europe/London", "Asia/Tokyo"])
def test_day_steps_round_trip(zone):
    """Stepping a day forward then back returns to the same instant."""
    sut = DayAndTime(time=NOW, calendar=ZoneCalendar(zone), clock=FrozenClock(NOW))

    sut.step_forward_one_day()
    sut.step_backward_one_day()

    assert sut.time == NOW
