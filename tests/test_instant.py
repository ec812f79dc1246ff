"""Tests for Instant and ZonedInstant.

These tests cover wall-clock field derivation, DST resolution of local
times, calendar-aware addition and the until()/since() difference engine.
"""

from __future__ import annotations

import pytest

from globaltime import Calendar, Duration, Instant, RangeError, ZonedInstant
from globaltime.errors import CalendarError, InvalidTimezoneError, TypeCoercionError

NY = "America/New_York"


class TestInstant:
    """Tests for the zone-less Instant."""

    def test_epoch_units(self) -> None:
        instant = Instant(1_500_000_123)
        assert instant.epoch_nanoseconds == 1_500_000_123
        assert instant.epoch_milliseconds == 1500
        assert instant.epoch_seconds == 1

    def test_milliseconds_floor(self) -> None:
        """Negative instants floor toward negative infinity."""
        assert Instant(-1).epoch_milliseconds == -1

    def test_from_epoch_milliseconds(self) -> None:
        assert Instant.from_epoch_milliseconds(1500).epoch_nanoseconds == 1_500_000_000

    def test_range_limit(self) -> None:
        limit = 100_000_000 * 86_400_000_000_000
        assert Instant(limit).epoch_nanoseconds == limit
        with pytest.raises(RangeError):
            Instant(limit + 1)

    def test_rejects_strings(self) -> None:
        with pytest.raises(TypeCoercionError):
            Instant("0")

    def test_ordering_and_hash(self) -> None:
        assert Instant(1) < Instant(2)
        assert Instant(5) == Instant(5)
        assert len({Instant(5), Instant(5)}) == 1

    def test_to_zoned(self) -> None:
        zoned = Instant(0).to_zoned("Asia/Tokyo")
        assert zoned.hour == 9
        assert zoned.timezone_id == "Asia/Tokyo"


class TestZonedInstantFields:
    """Tests for wall-clock fields."""

    def test_new_york_epoch(self) -> None:
        zi = ZonedInstant(0, NY)
        assert (zi.year, zi.month, zi.day, zi.hour) == (1969, 12, 31, 19)
        assert zi.offset_seconds == -18000
        assert zi.offset == "-05:00"
        assert zi.zone_abbreviation == "EST"
        assert zi.is_dst is False

    def test_sub_second_fields(self) -> None:
        zi = ZonedInstant(1_744_934_400_123_456_789, "UTC")
        assert (zi.millisecond, zi.microsecond, zi.nanosecond) == (123, 456, 789)

    def test_pre_epoch_sub_second_fields(self) -> None:
        """Fields of negative instants are floored, never negative."""
        zi = ZonedInstant(-1, "UTC")
        assert (zi.year, zi.second, zi.millisecond, zi.nanosecond) == (1969, 59, 999, 999)

    def test_derived_fields(self) -> None:
        zi = ZonedInstant.from_local(2025, 4, 18, timezone="UTC")
        assert zi.day_of_week == 5
        assert zi.day_of_year == 108
        assert zi.week_of_year == 16
        assert zi.year_of_week == 2025
        assert zi.days_in_week == 7
        assert zi.days_in_month == 30
        assert zi.days_in_year == 365
        assert zi.in_leap_year is False

    @pytest.mark.parametrize("day,hours", [(9, 23), (10, 24)])
    def test_hours_in_day_spring(self, day: int, hours: int) -> None:
        assert ZonedInstant.from_local(2025, 3, day, 12, timezone=NY).hours_in_day == hours

    def test_hours_in_day_autumn(self) -> None:
        assert ZonedInstant.from_local(2025, 11, 2, 12, timezone=NY).hours_in_day == 25

    def test_fields_record(self) -> None:
        fields = ZonedInstant(1_500_000_123, "UTC").fields()
        assert fields["second"] == 1
        assert fields["millisecond"] == 500
        assert fields["nanosecond"] == 123
        assert fields["month"] == 1

    def test_invalid_timezone(self) -> None:
        with pytest.raises(InvalidTimezoneError):
            ZonedInstant(0, "Mars/Olympus_Mons")

    def test_invalid_calendar(self) -> None:
        with pytest.raises(CalendarError):
            ZonedInstant(0, "UTC", "hebrew")


class TestZonedInstantFromLocal:
    """Tests for resolving wall-clock times."""

    def test_gap_pushes_forward(self) -> None:
        """02:30 does not exist on 2025-03-09 in New York; it becomes 03:30."""
        zi = ZonedInstant.from_local(2025, 3, 9, 2, 30, timezone=NY)
        assert (zi.hour, zi.minute) == (3, 30)
        assert zi.offset_seconds == -14400

    def test_fold_picks_earlier(self) -> None:
        """01:30 happens twice on 2025-11-02; the first one (EDT) is chosen."""
        zi = ZonedInstant.from_local(2025, 11, 2, 1, 30, timezone=NY)
        assert zi.hour == 1
        assert zi.offset_seconds == -14400

    def test_day_is_clamped(self) -> None:
        assert ZonedInstant.from_local(2025, 2, 31, timezone="UTC").day == 28

    def test_time_overflow(self) -> None:
        zi = ZonedInstant.from_local(2025, 4, 18, 25, timezone="UTC")
        assert (zi.day, zi.hour) == (19, 1)

    def test_invalid_month(self) -> None:
        with pytest.raises(ValueError):
            ZonedInstant.from_local(2025, 13, 1)


class TestZonedInstantConversions:
    def test_with_timezone_keeps_instant(self) -> None:
        zi = ZonedInstant(0, "UTC").with_timezone("Asia/Tokyo")
        assert zi.epoch_nanoseconds == 0
        assert zi.hour == 9

    def test_with_calendar(self) -> None:
        zi = ZonedInstant(0, "UTC").with_calendar("gregory")
        assert zi.calendar is Calendar.GREGORY
        assert zi.calendar_id == "gregory"
        assert zi.to_string().endswith("[UTC][u-ca=gregory]")

    def test_to_instant(self) -> None:
        assert ZonedInstant(42, NY).to_instant() == Instant(42)


class TestZonedInstantToString:
    def test_whole_seconds(self) -> None:
        assert ZonedInstant(0, NY).to_string() == "1969-12-31T19:00:00-05:00[America/New_York]"

    def test_fraction_trimmed(self) -> None:
        zi = ZonedInstant(1_500_000_123, "UTC")
        assert zi.to_string() == "1970-01-01T00:00:01.500000123+00:00[UTC]"
        assert ZonedInstant(1_500_000_000, "UTC").to_string() == "1970-01-01T00:00:01.5+00:00[UTC]"

    def test_expanded_year(self) -> None:
        zi = ZonedInstant.from_local(-1, 1, 1, timezone="UTC")
        assert zi.to_string() == "-000001-01-01T00:00:00+00:00[UTC]"

    def test_equality_includes_zone_and_calendar(self) -> None:
        assert ZonedInstant(0, "UTC") == ZonedInstant(0, "Z")
        assert ZonedInstant(0, "UTC") != ZonedInstant(0, "Asia/Tokyo")
        assert ZonedInstant(0, "UTC") != ZonedInstant(0, "UTC", "gregory")
        assert repr(ZonedInstant(0, "UTC")) == "ZonedInstant('1970-01-01T00:00:00+00:00[UTC]')"


class TestZonedInstantAdd:
    """Tests for add() and subtract()."""

    def test_month_end_constrained(self) -> None:
        jan31 = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
        assert jan31.add(months=1).day == 28
        assert jan31.add(years=-1, months=1).day == 29

    def test_exact_hours_across_gap(self) -> None:
        before = ZonedInstant.from_local(2025, 3, 9, 0, 30, timezone=NY)
        assert before.add(hours=5).hour == 6
        assert before.add(hours=5, wall_clock=True).hour == 5

    def test_wall_clock_minutes_stay_on_second_occurrence(self) -> None:
        """Inside the repeated hour a wall-clock step keeps the current offset."""
        first = ZonedInstant.from_local(2025, 11, 2, 1, 30, timezone=NY)
        second = first.add(hours=1)
        assert (second.hour, second.offset_seconds) == (1, -18000)
        later = second.add(minutes=15, wall_clock=True)
        assert (later.hour, later.minute, later.offset_seconds) == (1, 45, -18000)
        assert later.epoch_nanoseconds - second.epoch_nanoseconds == 15 * 60_000_000_000
        earlier = second.subtract(minutes=15, wall_clock=True)
        assert earlier.offset_seconds == -18000

    def test_days_keep_wall_clock_across_gap(self) -> None:
        """A calendar day across spring-forward is 23 exact hours."""
        start = ZonedInstant.from_local(2025, 3, 8, 12, timezone=NY)
        end = start.add(days=1)
        assert (end.day, end.hour) == (9, 12)
        assert end.epoch_nanoseconds - start.epoch_nanoseconds == 23 * 3_600_000_000_000

    def test_weeks(self) -> None:
        start = ZonedInstant.from_local(2025, 4, 18, timezone="UTC")
        assert start.add(weeks=2).day == 2

    def test_duration_and_keywords(self) -> None:
        start = ZonedInstant.from_local(2025, 4, 18, timezone="UTC")
        end = start.add(Duration(days=1), hours=2)
        assert (end.day, end.hour) == (19, 2)

    def test_subtract(self) -> None:
        start = ZonedInstant.from_local(2025, 3, 31, timezone="UTC")
        assert start.subtract(months=1).day == 28
        assert start.subtract(Duration(hours=1)).hour == 23

    def test_unknown_unit(self) -> None:
        with pytest.raises(ValueError):
            ZonedInstant(0).add(fortnights=1)

    def test_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            ZonedInstant(0).add(years=300_000)


class TestZonedInstantUntil:
    """Tests for until() and since()."""

    def test_default_largest_unit_is_hours(self) -> None:
        a = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
        b = ZonedInstant.from_local(2025, 3, 1, 12, timezone="UTC")
        assert a.until(b) == Duration(hours=708)

    def test_months_then_days(self) -> None:
        a = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
        b = ZonedInstant.from_local(2025, 3, 1, 12, timezone="UTC")
        assert a.until(b, largest_unit="month") == Duration(months=1, days=1, hours=12)

    def test_years(self) -> None:
        a = ZonedInstant.from_local(2020, 2, 29, timezone="UTC")
        b = ZonedInstant.from_local(2025, 3, 1, timezone="UTC")
        assert a.until(b, largest_unit="year") == Duration(years=5, days=1)

    def test_weeks(self) -> None:
        a = ZonedInstant.from_local(2025, 4, 1, timezone="UTC")
        b = ZonedInstant.from_local(2025, 4, 18, timezone="UTC")
        assert a.until(b, largest_unit="week") == Duration(weeks=2, days=3)

    def test_days_across_dst(self) -> None:
        """A wall-clock day across spring-forward counts as one day."""
        a = ZonedInstant.from_local(2025, 3, 8, 12, timezone=NY)
        b = ZonedInstant.from_local(2025, 3, 9, 12, timezone=NY)
        assert a.until(b, largest_unit="day") == Duration(days=1)
        assert a.until(b) == Duration(hours=23)

    def test_negative_difference(self) -> None:
        a = ZonedInstant.from_local(2025, 3, 1, timezone="UTC")
        b = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
        assert a.until(b, largest_unit="month") == Duration(months=-1, days=-1)

    def test_other_is_viewed_in_own_zone(self) -> None:
        a = ZonedInstant(0, "UTC")
        b = ZonedInstant(90_000_000_000, "Asia/Tokyo")
        assert a.until(b) == Duration(minutes=1, seconds=30)
        assert a.until(b.to_instant()) == Duration(minutes=1, seconds=30)

    def test_equal_instants(self) -> None:
        a = ZonedInstant(0, "UTC")
        assert a.until(a, largest_unit="year") == Duration()

    def test_rounding_time_units(self) -> None:
        a = ZonedInstant(0, "UTC")
        b = ZonedInstant(90_000_000_000, "UTC")
        assert a.until(b, smallest_unit="minute") == Duration(minutes=1)
        assert a.until(b, smallest_unit="minute", rounding_mode="halfExpand") == Duration(minutes=2)
        assert a.until(b, smallest_unit="second", rounding_increment=60, rounding_mode="ceil") == Duration(
            minutes=2
        )

    def test_rounding_carries_into_day(self) -> None:
        a = ZonedInstant.from_local(2025, 1, 1, timezone="UTC")
        b = ZonedInstant.from_local(2025, 1, 1, 23, 59, 40, timezone="UTC")
        result = a.until(b, largest_unit="day", smallest_unit="minute", rounding_mode="halfExpand")
        assert result == Duration(days=1)

    def test_rounding_calendar_units(self) -> None:
        a = ZonedInstant.from_local(2025, 1, 1, timezone="UTC")
        b = ZonedInstant.from_local(2025, 1, 20, timezone="UTC")
        assert a.until(b, largest_unit="month", smallest_unit="month") == Duration()
        assert a.until(
            b, largest_unit="month", smallest_unit="month", rounding_mode="halfExpand"
        ) == Duration(months=1)

    def test_smallest_larger_than_largest(self) -> None:
        a = ZonedInstant(0, "UTC")
        with pytest.raises(ValueError):
            a.until(a, largest_unit="minute", smallest_unit="hour")

    def test_invalid_increment(self) -> None:
        a = ZonedInstant(0, "UTC")
        with pytest.raises(ValueError):
            a.until(a, rounding_increment=0)

    @pytest.mark.parametrize("mode", ["trunc", "expand", "halfExpand", "halfTrunc", "halfEven"])
    def test_since_is_negated_until(self, mode: str) -> None:
        a = ZonedInstant.from_local(2025, 1, 31, 10, timezone=NY)
        b = ZonedInstant.from_local(2025, 3, 1, 12, 45, timezone=NY)
        options = {"largest_unit": "month", "smallest_unit": "hour", "rounding_mode": mode}
        assert a.since(b, **options) == -a.until(b, **options)

    def test_since_flips_directional_modes(self) -> None:
        """Directional modes apply to the sign of the since() result."""
        a = ZonedInstant(0, "UTC")
        b = ZonedInstant(90_000_000_000, "UTC")
        assert a.since(b, smallest_unit="minute", rounding_mode="ceil") == Duration(minutes=-1)
        assert a.since(b, smallest_unit="minute", rounding_mode="floor") == Duration(minutes=-2)

    def test_exact_units_are_antisymmetric(self) -> None:
        a = ZonedInstant.from_local(2025, 3, 8, 22, 15, timezone=NY)
        b = ZonedInstant.from_local(2025, 3, 9, 7, 40, 5, timezone="Europe/Amsterdam")
        assert a.until(b) == -b.until(a)
        assert a.until(b, largest_unit="minute") == -b.until(a, largest_unit="minute")
