"""
DayAndTime component - day/hour cursor constrained to a term.
"""

from ._publisher import WillChangePublisher
from .component import (
    DEFAULT_NOW_MARGIN,
    DayAndTime,
    create_day_and_time,
)
from .models import ChangeNotice, NoStepReason, StepCandidate
from .ports import CalendarPort, ClockPort, TimeComponents, WillChangeListener

__all__ = [
    # Entry points
    "DayAndTime",
    "create_day_and_time",
    # Models
    "ChangeNotice",
    "NoStepReason",
    "StepCandidate",
    # Ports
    "CalendarPort",
    "ClockPort",
    "TimeComponents",
    "WillChangeListener",
    # Events
    "WillChangePublisher",
    # Constants
    "DEFAULT_NOW_MARGIN",
]
