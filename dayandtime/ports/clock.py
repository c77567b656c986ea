from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    def now_utc(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        ...
