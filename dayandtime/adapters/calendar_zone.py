"""
Zone Calendar Adapter.

Implements the CalendarPort interface over an IANA time zone.
Provides DST-safe day boundaries and day arithmetic for the cursor.

Key behaviors:
- start_of_day: local midnight, or the first instant after a midnight
  DST gap
- add_days: wall-clock arithmetic in the zone (a day may be 23/24/25h)
- add_hours: elapsed-time arithmetic
- Results that fall outside the datetime range are reported as None
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

import tzlocal

from dayandtime.domain.interval import ensure_utc
from dayandtime.ports.calendar import TimeComponents

logger = logging.getLogger(__name__)


class ZoneCalendar:
    """
    Calendar for a single time zone.

    Handles DST transitions through zoneinfo: nonexistent wall times
    (spring forward) resolve with fold=0, i.e. to the instant just after
    the gap; ambiguous ones (fall back) resolve to the first occurrence.
    """

    def __init__(self, tz: tzinfo | str = "UTC") -> None:
        """
        Initialize with a zone.

        Args:
            tz: IANA timezone name or a tzinfo instance
        """
        if isinstance(tz, str):
            tz = ZoneInfo(tz)
        self._tz = tz

    @property
    def timezone_name(self) -> str:
        """Get the zone name."""
        return getattr(self._tz, "key", None) or str(self._tz)

    def to_local(self, instant: datetime) -> datetime:
        """
        Convert an instant to the calendar's zone.

        If instant is naive, it's assumed to be UTC.
        """
        return ensure_utc(instant).astimezone(self._tz)

    def start_of_day(self, instant: datetime) -> datetime:
        local = self.to_local(instant)
        midnight = datetime(local.year, local.month, local.day, tzinfo=self._tz)
        return midnight.astimezone(UTC)

    def add_days(self, instant: datetime, days: int) -> datetime | None:
        """
        Advance by calendar days, keeping the wall-clock time.

        Aware datetime + timedelta is wall-clock arithmetic in Python, so
        the UTC offset is re-resolved for the target day.
        """
        try:
            shifted = self.to_local(instant) + timedelta(days=days)
            return shifted.astimezone(UTC)
        except OverflowError:
            return None

    def add_hours(self, instant: datetime, hours: int) -> datetime | None:
        try:
            return ensure_utc(instant) + timedelta(hours=hours)
        except OverflowError:
            return None

    def components(self, instant: datetime) -> TimeComponents:
        local = self.to_local(instant)
        return TimeComponents(hour=local.hour, minute=local.minute, second=local.second)

    def __repr__(self) -> str:
        return f"ZoneCalendar({self.timezone_name!r})"


def local_timezone_name() -> str:
    """Resolve the host's IANA zone name, falling back to UTC."""
    try:
        return tzlocal.get_localzone_name() or "UTC"
    except Exception as e:
        logger.warning("Could not determine local time zone, using UTC: %s", e)
        return "UTC"


def create_calendar(tz_name: str | None = None) -> ZoneCalendar:
    """
    Factory function to create a calendar.

    Args:
        tz_name: IANA timezone name; None selects the host's local zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If tz_name is not a known zone.
    """
    if tz_name is None:
        tz_name = local_timezone_name()
        logger.debug("Using local time zone %s", tz_name)
    return ZoneCalendar(ZoneInfo(tz_name))
