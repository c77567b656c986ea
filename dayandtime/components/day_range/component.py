"""
Day range component.

Maps an instant to the calendar day that contains it, as the closed
interval [start of day, start of next day].
"""

from __future__ import annotations

from datetime import datetime

from dayandtime.domain.interval import ClosedInterval
from dayandtime.ports.calendar import CalendarPort


def day_range(instant: datetime, calendar: CalendarPort) -> ClosedInterval[datetime] | None:
    """
    Get the day containing instant under calendar.

    The end is the start advanced by one calendar day, so DST days span
    23 or 25 hours.

    Returns:
        The day interval, or None if the calendar cannot express it
        (instants at the edges of the datetime range).
    """
    try:
        start = calendar.start_of_day(instant)
    except OverflowError:
        return None

    end = calendar.add_days(start, 1)
    if end is None:
        return None

    return ClosedInterval(start, end)
