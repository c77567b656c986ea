"""
DayAndTime component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Literal

ChangedField = Literal["time", "term", "showing_time"]


class NoStepReason(str, Enum):
    """Why a step has no candidate."""

    DAY_UNAVAILABLE = "day_unavailable"
    END_OF_DAY = "end_of_day"
    START_OF_DAY = "start_of_day"
    CALENDAR_OVERFLOW = "calendar_overflow"
    OUTSIDE_TERM = "outside_term"


@dataclass(frozen=True)
class StepCandidate:
    """
    Result of computing a step.

    Exactly one of instant / reason is set.
    """

    instant: datetime | None = None
    reason: NoStepReason | None = None

    @classmethod
    def to(cls, instant: datetime) -> StepCandidate:
        return cls(instant=instant)

    @classmethod
    def none(cls, reason: NoStepReason) -> StepCandidate:
        return cls(reason=reason)

    @property
    def exists(self) -> bool:
        return self.instant is not None


@dataclass(frozen=True)
class ChangeNotice:
    """Published immediately before a field of the cursor is assigned."""

    field: ChangedField
    old: Any
    new: Any
