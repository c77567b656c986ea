from datetime import UTC, datetime, timedelta


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """
    Clock that returns a fixed instant.

    Useful for deterministic testing of isNow/isToday style checks.
    """

    def __init__(self, frozen_utc: datetime) -> None:
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now_utc(self) -> datetime:
        return self._frozen_utc

    def set(self, frozen_utc: datetime) -> None:
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen_utc = self._frozen_utc + delta
