"""
Closed intervals over instants.

Instants are timezone-aware datetimes normalised to UTC. Naive datetimes
are read as UTC, matching how the adapters treat them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Generic, TypeVar

T = TypeVar("T", datetime, float, int)

DISTANT_PAST = datetime.min.replace(tzinfo=UTC)
DISTANT_FUTURE = datetime.max.replace(tzinfo=UTC)


def ensure_utc(dt: datetime) -> datetime:
    """
    Return dt as an aware UTC datetime (naive values are assumed UTC).

    Aware values that fall outside the datetime range once shifted to UTC
    saturate to DISTANT_PAST or DISTANT_FUTURE.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    try:
        return dt.astimezone(UTC)
    except OverflowError:
        offset = dt.utcoffset() or timedelta(0)
        return DISTANT_PAST if offset > timedelta(0) else DISTANT_FUTURE


@dataclass(frozen=True)
class ClosedInterval(Generic[T]):
    """
    A closed interval [lower, upper].

    lower <= upper is expected but not enforced; a degenerate interval
    contains nothing and clamps everything to lower.
    """

    lower: T
    upper: T

    def contains(self, value: T) -> bool:
        return self.lower <= value <= self.upper

    def clamp(self, value: T) -> T:
        """Pull value into the interval: max(lower, min(value, upper))."""
        return max(self.lower, min(value, self.upper))

    def __contains__(self, value: T) -> bool:
        return self.contains(value)


ALL_TIME: ClosedInterval[datetime] = ClosedInterval(DISTANT_PAST, DISTANT_FUTURE)
