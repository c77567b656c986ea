"""
dayandtime - a day/hour cursor for browsing weather data.
"""

from dayandtime.adapters.calendar_zone import ZoneCalendar, create_calendar
from dayandtime.adapters.clock import FrozenClock, SystemClock
from dayandtime.components.day_and_time import (
    ChangeNotice,
    DayAndTime,
    NoStepReason,
    create_day_and_time,
)
from dayandtime.components.day_range import day_range
from dayandtime.domain.interval import ALL_TIME, ClosedInterval
from dayandtime.rules.loader import load_cursor_rules, load_rules

__all__ = [
    "ALL_TIME",
    "ChangeNotice",
    "ClosedInterval",
    "DayAndTime",
    "FrozenClock",
    "NoStepReason",
    "SystemClock",
    "ZoneCalendar",
    "create_calendar",
    "create_day_and_time",
    "day_range",
    "load_cursor_rules",
    "load_rules",
]
