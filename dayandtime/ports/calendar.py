"""
Calendar port.

Protocol-based interface for the date arithmetic the cursor needs.
A calendar owns a time zone and applies its DST rules to every
operation; instants going in and out are aware UTC datetimes.

Key requirements:
- Days are calendar days, not fixed 86400 second spans
- Hours are elapsed hours
- Unrepresentable results are reported as None, never raised
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class TimeComponents:
    """Wall-clock components of an instant in a calendar's zone."""

    hour: int
    minute: int
    second: int

    @property
    def on_the_hour(self) -> bool:
        return self.minute == 0 and self.second == 0


class CalendarPort(Protocol):
    """
    Calendar system interface.

    Implementations must be substitutable: tests inject a fixed zone,
    production uses the host's local zone.
    """

    def start_of_day(self, instant: datetime) -> datetime:
        """
        Get the first instant of the calendar day containing instant.

        Raises:
            OverflowError: If the instant cannot be expressed in the
                calendar's zone (at the edges of the datetime range).
        """
        ...

    def add_days(self, instant: datetime, days: int) -> datetime | None:
        """
        Advance instant by a signed number of calendar days.

        Wall-clock time is preserved across DST transitions.

        Returns:
            The new instant (UTC), or None if it is not representable.
        """
        ...

    def add_hours(self, instant: datetime, hours: int) -> datetime | None:
        """
        Advance instant by a signed number of elapsed hours.

        Returns:
            The new instant (UTC), or None if it is not representable.
        """
        ...

    def components(self, instant: datetime) -> TimeComponents:
        """Decompose instant into hour/minute/second in the calendar's zone."""
        ...

    @property
    def timezone_name(self) -> str:
        """Get the calendar's zone name (e.g., 'Europe/London')."""
        ...
