"""
DayAndTime component - the day/hour cursor behind the weather browser.

Holds a single instant constrained to a term, steps it by hour or by
calendar day, and publishes a will-change notice before every mutation.

Key behaviors:
- set_time clamps into the term and always notifies
- Hour steps snap to the hour grid of the current day: forward goes to
  the top of the next hour, back goes to the top of the current hour
  (or the previous one when already on the hour)
- Day steps move by one calendar day, keeping the wall-clock time
- A step with no valid candidate is a silent no-op; can_step_* tells
  the caller in advance
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from dayandtime.adapters.calendar_zone import create_calendar
from dayandtime.adapters.clock import SystemClock
from dayandtime.components.day_range import day_range
from dayandtime.domain.interval import ALL_TIME, ClosedInterval, ensure_utc
from dayandtime.rules.models import CursorRules

from ._publisher import WillChangePublisher
from .models import ChangeNotice, NoStepReason, StepCandidate
from .ports import CalendarPort, ClockPort

logger = logging.getLogger(__name__)

# How far from the current time the cursor may be and still count as "now"
DEFAULT_NOW_MARGIN = timedelta(seconds=5)

# Forward hour steps stop once the cursor is inside the day's final hour
FINAL_HOUR = timedelta(seconds=3599)


class DayAndTime:
    """
    A cursor over days and hours.

    Not thread-safe: confine an instance to one execution context.
    """

    def __init__(
        self,
        time: datetime | None = None,
        calendar: CalendarPort | None = None,
        showing_time: bool = False,
        *,
        clock: ClockPort | None = None,
        now_margin: timedelta = DEFAULT_NOW_MARGIN,
    ) -> None:
        """
        Initialize the cursor.

        Args:
            time: Initial instant (default: the clock's current instant).
            calendar: Calendar used for days and hours (default: host local zone).
            showing_time: Whether the UI is showing the time of day.
            clock: Source of the current instant (default: SystemClock).
            now_margin: Largest distance from now still reported by is_now.
        """
        self._clock: ClockPort = clock or SystemClock()
        self._calendar: CalendarPort = calendar or create_calendar()
        self._time = ensure_utc(time) if time is not None else self._clock.now_utc()
        self._term: ClosedInterval[datetime] = ALL_TIME
        self._showing_time = showing_time
        self._now_margin = now_margin
        self.will_change = WillChangePublisher()

    # --- Collaborators ---

    @property
    def calendar(self) -> CalendarPort:
        return self._calendar

    @property
    def clock(self) -> ClockPort:
        return self._clock

    @property
    def now_margin(self) -> timedelta:
        return self._now_margin

    # --- Published fields ---

    @property
    def time(self) -> datetime:
        return self._time

    @property
    def date(self) -> datetime:
        """Synonym for time."""
        return self._time

    @property
    def term(self) -> ClosedInterval[datetime]:
        """The interval the cursor is allowed to range over."""
        return self._term

    @term.setter
    def term(self, value: ClosedInterval[datetime]) -> None:
        # Not validated: a term with lower > upper gives undefined results.
        new = ClosedInterval(ensure_utc(value.lower), ensure_utc(value.upper))
        self.will_change.send(ChangeNotice("term", self._term, new))
        self._term = new

    @property
    def showing_time(self) -> bool:
        return self._showing_time

    @showing_time.setter
    def showing_time(self, value: bool) -> None:
        self.will_change.send(ChangeNotice("showing_time", self._showing_time, value))
        self._showing_time = value

    def _assign_time(self, new: datetime) -> None:
        self.will_change.send(ChangeNotice("time", self._time, new))
        self._time = new

    # --- Day queries ---

    @property
    def day(self) -> ClosedInterval[datetime] | None:
        """The calendar day containing time, or None if it cannot be computed."""
        return day_range(self._time, self._calendar)

    @property
    def start_of_day(self) -> datetime | None:
        day = self.day
        return day.lower if day is not None else None

    def matches_day(self, other: datetime) -> bool:
        """True if other falls on exactly the same calendar day as time."""
        day = self.day
        if day is None:
            return False
        return day == day_range(ensure_utc(other), self._calendar)

    @property
    def is_today(self) -> bool:
        return self.matches_day(self._clock.now_utc())

    @property
    def is_now(self) -> bool:
        """
        True if time is close enough to the current time to be considered
        "now" by a typical user.
        """
        return abs(self._clock.now_utc() - self._time) < self._now_margin

    # --- Setting ---

    def set_time(self, new_time: datetime | None = None) -> None:
        """
        Move the cursor to new_time, clamped into the term.

        Args:
            new_time: Target instant (default: the clock's current instant).
        """
        target = ensure_utc(new_time) if new_time is not None else self._clock.now_utc()
        self._assign_time(self._term.clamp(target))

    set_day_and_time = set_time

    def set_day(self, new_day: datetime | None = None) -> None:
        """
        Move the cursor to the day containing new_day, keeping the time
        elapsed since the start of the current day.

        Falls back to set_time(new_day) when either day cannot be computed.
        """
        target = ensure_utc(new_day) if new_day is not None else self._clock.now_utc()
        current = self.day
        target_day = day_range(target, self._calendar)
        if current is None or target_day is None:
            self.set_time(target)
            return

        try:
            moved = target_day.lower + (self._time - current.lower)
        except OverflowError:
            moved = target
        self.set_time(moved)

    # --- Hour stepping ---

    def _one_hour_forward(self) -> StepCandidate:
        day = self.day
        if day is None:
            return StepCandidate.none(NoStepReason.DAY_UNAVAILABLE)
        if self._time >= day.upper - FINAL_HOUR:
            return StepCandidate.none(NoStepReason.END_OF_DAY)

        hour = self._calendar.components(self._time).hour
        forward = self._calendar.add_hours(day.lower, hour + 1)
        if forward is None:
            return StepCandidate.none(NoStepReason.CALENDAR_OVERFLOW)

        out = min(forward, day.upper)
        if not self._term.contains(out):
            return StepCandidate.none(NoStepReason.OUTSIDE_TERM)
        return StepCandidate.to(out)

    def _one_hour_backward(self) -> StepCandidate:
        day = self.day
        if day is None:
            return StepCandidate.none(NoStepReason.DAY_UNAVAILABLE)
        if self._time <= day.lower:
            return StepCandidate.none(NoStepReason.START_OF_DAY)

        parts = self._calendar.components(self._time)
        hour = parts.hour - 1 if parts.on_the_hour else parts.hour

        backward = self._calendar.add_hours(day.lower, hour)
        if backward is None:
            return StepCandidate.none(NoStepReason.CALENDAR_OVERFLOW)

        out = min(backward, day.upper)
        if not self._term.contains(out):
            return StepCandidate.none(NoStepReason.OUTSIDE_TERM)
        return StepCandidate.to(out)

    def can_step_forward_one_hour(self) -> bool:
        return self._one_hour_forward().exists

    def step_forward_one_hour(self) -> bool:
        """Move the time forward to the next hour on the same day."""
        return self._apply(self._one_hour_forward(), "step_forward_one_hour")

    def can_step_back_one_hour(self) -> bool:
        return self._one_hour_backward().exists

    def step_back_one_hour(self) -> bool:
        """Move the time back to the previous hour on the same day."""
        return self._apply(self._one_hour_backward(), "step_back_one_hour")

    # --- Day stepping ---

    def _one_day(self, days: int) -> StepCandidate:
        moved = self._calendar.add_days(self._time, days)
        if moved is None:
            return StepCandidate.none(NoStepReason.CALENDAR_OVERFLOW)
        if not self._term.contains(moved):
            return StepCandidate.none(NoStepReason.OUTSIDE_TERM)
        return StepCandidate.to(moved)

    def can_step_forward_one_day(self) -> bool:
        return self._one_day(1).exists

    def step_forward_one_day(self) -> bool:
        return self._apply(self._one_day(1), "step_forward_one_day")

    def can_step_backward_one_day(self) -> bool:
        return self._one_day(-1).exists

    def step_backward_one_day(self) -> bool:
        return self._apply(self._one_day(-1), "step_backward_one_day")

    def _apply(self, candidate: StepCandidate, action: str) -> bool:
        if candidate.instant is None:
            logger.debug("%s: no-op (%s)", action, candidate.reason)
            return False
        logger.debug("%s: %s -> %s", action, self._time.isoformat(), candidate.instant.isoformat())
        self._assign_time(candidate.instant)
        return True

    def __repr__(self) -> str:
        return (
            f"DayAndTime(time={self._time.isoformat()}, "
            f"calendar={self._calendar.timezone_name!r}, "
            f"showing_time={self._showing_time})"
        )


def create_day_and_time(
    rules: CursorRules | None = None,
    *,
    clock: ClockPort | None = None,
    calendar: CalendarPort | None = None,
    time: datetime | None = None,
) -> DayAndTime:
    """
    Factory function to build a cursor from rules.

    Explicit arguments win over rules. When rules bound the term, the
    initial time is clamped into it.
    """
    if rules is None:
        rules = CursorRules()

    cursor = DayAndTime(
        time=time,
        calendar=calendar or create_calendar(rules.timezone),
        showing_time=rules.showing_time,
        clock=clock,
        now_margin=timedelta(seconds=rules.now_margin_seconds),
    )

    if rules.term.is_bounded:
        cursor.term = rules.term.to_interval()
        cursor.set_time(cursor.time)

    logger.info(
        "Created cursor at %s (zone=%s, term=%s..%s)",
        cursor.time.isoformat(),
        cursor.calendar.timezone_name,
        cursor.term.lower.isoformat(),
        cursor.term.upper.isoformat(),
    )
    return cursor
