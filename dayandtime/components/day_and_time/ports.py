"""
DayAndTime component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from dayandtime.ports.calendar import CalendarPort, TimeComponents
from dayandtime.ports.clock import ClockPort

from .models import ChangeNotice


class WillChangeListener(Protocol):
    """Callback invoked before the cursor mutates."""

    def __call__(self, notice: ChangeNotice) -> None: ...


__all__ = ["CalendarPort", "ClockPort", "TimeComponents", "WillChangeListener"]
