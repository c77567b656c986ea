from datetime import UTC, datetime, timedelta

from dayandtime.adapters.calendar_zone import ZoneCalendar
from dayandtime.components.day_range import day_range
from dayandtime.domain.interval import DISTANT_FUTURE, DISTANT_PAST, ClosedInterval

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class TestDayRange:
    def test_epoch_under_utc(self, utc_calendar: ZoneCalendar) -> None:
        day = day_range(EPOCH, utc_calendar)
        assert day == ClosedInterval(EPOCH, EPOCH + timedelta(seconds=86400))

    def test_any_instant_in_the_day_gives_same_range(self, utc_calendar: ZoneCalendar) -> None:
        morning = day_range(EPOCH + timedelta(hours=1), utc_calendar)
        night = day_range(EPOCH + timedelta(hours=23, minutes=59, seconds=59), utc_calendar)
        assert morning == night == day_range(EPOCH, utc_calendar)

    def test_end_of_day_belongs_to_next_day(self, utc_calendar: ZoneCalendar) -> None:
        next_day = day_range(EPOCH + timedelta(days=1), utc_calendar)
        assert next_day is not None
        assert next_day.lower == EPOCH + timedelta(days=1)

    def test_depends_on_calendar(
        self, utc_calendar: ZoneCalendar, london_calendar: ZoneCalendar
    ) -> None:
        instant = datetime(2026, 6, 15, 12, tzinfo=UTC)
        assert day_range(instant, utc_calendar) != day_range(instant, london_calendar)


class TestDaylightSavingDays:
    def test_spring_forward_day_is_23_hours(self, london_calendar: ZoneCalendar) -> None:
        day = day_range(datetime(2026, 3, 29, 12, tzinfo=UTC), london_calendar)
        assert day == ClosedInterval(
            datetime(2026, 3, 29, 0, tzinfo=UTC),
            datetime(2026, 3, 29, 23, tzinfo=UTC),
        )

    def test_fall_back_day_is_25_hours(self, london_calendar: ZoneCalendar) -> None:
        day = day_range(datetime(2026, 10, 25, 12, tzinfo=UTC), london_calendar)
        assert day is not None
        assert day.lower == datetime(2026, 10, 24, 23, tzinfo=UTC)
        assert day.upper - day.lower == timedelta(hours=25)


class TestUnavailableDay:
    def test_last_day_cannot_be_closed(self, utc_calendar: ZoneCalendar) -> None:
        assert day_range(DISTANT_FUTURE, utc_calendar) is None

    def test_zone_cannot_express_first_instant(self) -> None:
        assert day_range(DISTANT_PAST, ZoneCalendar("America/New_York")) is None
