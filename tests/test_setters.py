"""Tests for the set_* family and the overflow resolver.

Local setters resolve out-of-range components through wall-clock duration
arithmetic; UTC setters use fixed Gregorian millisecond arithmetic and
keep the sub-millisecond part of the instant.
"""

from __future__ import annotations

import math

import pytest

from globaltime import Datetime, EpochNanoseconds, TypeCoercionError, ZonedInstant
from globaltime.arithmetic import component_deltas, resolve_local, resolve_utc

FRIDAY_MS = 1_744_934_400_000
FRIDAY_NS = FRIDAY_MS * 1_000_000
HOUR_MS = 3_600_000
DAY_MS = 86_400_000
# 2025-01-31T00:00:00Z
JAN31_MS = 1_738_281_600_000
# 2024-02-29T00:00:00Z
LEAP_DAY_MS = 1_709_164_800_000
# 2025-03-09T00:00:00-05:00, the night New York springs forward
NY_SPRING_MIDNIGHT_MS = 1_741_496_400_000
# 2024-01-31T00:00:00Z
LEAP_JAN31_MS = 1_706_659_200_000
# 2025-11-02 01:30 in New York, first (EDT) and second (EST) occurrence
NY_FOLD_EDT_MS = 1_762_061_400_000
NY_FOLD_EST_MS = 1_762_065_000_000


class TestComponentDeltas:
    def test_deltas(self) -> None:
        deltas = component_deltas({"year": 2024, "month": 1, "day": 31}, {"month": 13})
        assert deltas == {"year": 0, "month": 12, "day": 0}

    def test_unknown_component(self) -> None:
        with pytest.raises(KeyError):
            component_deltas({"year": 2024}, {"weekday": 1})


class TestResolveLocal:
    def test_hour_overflow(self) -> None:
        zi = ZonedInstant.from_local(2024, 1, 31, 10, timezone="UTC")
        assert resolve_local(zi, {"hour": 25}).to_string() == "2024-02-01T01:00:00+00:00[UTC]"

    def test_month_clamps_day(self) -> None:
        zi = ZonedInstant.from_local(2024, 1, 31, 10, timezone="UTC")
        assert resolve_local(zi, {"month": 2}).day == 29

    def test_explicit_day_counts_from_clamped_month(self) -> None:
        zi = ZonedInstant.from_local(2024, 1, 31, 10, timezone="UTC")
        resolved = resolve_local(zi, {"month": 2, "day": 29})
        assert (resolved.month, resolved.day) == (2, 29)

    def test_input_unchanged(self) -> None:
        zi = ZonedInstant.from_local(2024, 1, 31, 10, timezone="UTC")
        resolve_local(zi, {"hour": 0})
        assert zi.hour == 10

    def test_no_overrides_is_identity(self) -> None:
        zi = ZonedInstant(FRIDAY_NS + 5, "Asia/Tokyo")
        assert resolve_local(zi, {}) == zi


class TestResolveUtc:
    def test_sub_millisecond_preserved(self) -> None:
        zi = ZonedInstant(1_000_123, "America/New_York")
        assert resolve_utc(zi, {"hour": 24}).epoch_nanoseconds == 86_400_001_000_123

    def test_zone_and_calendar_kept(self) -> None:
        zi = ZonedInstant(0, "Asia/Tokyo", "gregory")
        result = resolve_utc(zi, {"year": 2000})
        assert result.timezone_id == "Asia/Tokyo"
        assert result.calendar_id == "gregory"

    def test_unknown_component(self) -> None:
        with pytest.raises(KeyError):
            resolve_utc(ZonedInstant(0), {"day": 1})


class TestLocalSetters:
    """Tests for set_full_year, set_month, set_date and the clock setters."""

    def test_set_hours_overflow(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.set_hours(25) == FRIDAY_MS + 25 * HOUR_MS
        assert (dt.get_date(), dt.get_hours()) == (19, 1)

    def test_set_month_overflow_into_next_year(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.set_month(12) == 1_768_694_400_000
        assert (dt.get_full_year(), dt.get_month(), dt.get_date()) == (2026, 0, 18)

    def test_set_month_clamps_day(self) -> None:
        """Jan 31 moved to February lands on Feb 28, not in March."""
        dt = Datetime(JAN31_MS, "UTC")
        dt.set_month(1)
        assert (dt.get_month(), dt.get_date()) == (1, 28)

    def test_set_month_with_date(self) -> None:
        dt = Datetime(JAN31_MS, "UTC")
        dt.set_month(1, 3)
        assert (dt.get_month(), dt.get_date()) == (1, 3)

    def test_set_month_negative(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_month(-1)
        assert (dt.get_full_year(), dt.get_month()) == (2024, 11)

    def test_set_date_zero_is_last_day_of_previous_month(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_date(0)
        assert (dt.get_month(), dt.get_date()) == (2, 31)

    def test_set_date_overflow(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_date(31)
        assert (dt.get_month(), dt.get_date()) == (4, 1)

    def test_set_full_year_clamps_leap_day(self) -> None:
        dt = Datetime(LEAP_DAY_MS, "UTC")
        dt.set_full_year(2025)
        assert (dt.get_full_year(), dt.get_month(), dt.get_date()) == (2025, 1, 28)

    def test_set_full_year_with_month_overflow(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_full_year(2024, 12)
        assert (dt.get_full_year(), dt.get_month(), dt.get_date()) == (2025, 0, 18)

    def test_set_minutes_negative(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_minutes(-1)
        assert (dt.get_date(), dt.get_hours(), dt.get_minutes()) == (17, 23, 59)

    def test_set_hours_with_all_fields(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.set_hours(1, 2, 3, 4) == FRIDAY_MS + HOUR_MS + 2 * 60_000 + 3_004

    def test_set_seconds_and_milliseconds(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_seconds(61, 1001)
        assert (dt.get_minutes(), dt.get_seconds(), dt.get_milliseconds()) == (1, 2, 1)

    def test_set_hours_into_dst_gap(self) -> None:
        """02:00 does not exist on the spring-forward night; it becomes 03:00."""
        dt = Datetime(NY_SPRING_MIDNIGHT_MS, "America/New_York")
        dt.set_hours(2)
        assert dt.get_hours() == 3
        assert dt.get_timezone_offset() == 240

    def test_set_hours_keeps_wall_clock_across_dst(self) -> None:
        dt = Datetime(NY_SPRING_MIDNIGHT_MS, "America/New_York")
        dt.set_hours(12)
        assert dt.get_hours() == 12
        assert dt.get_time() == NY_SPRING_MIDNIGHT_MS + 11 * HOUR_MS

    def test_set_microseconds_carries(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 123_456_789), "UTC")
        dt.set_microseconds(1000)
        assert (dt.get_milliseconds(), dt.get_microseconds(), dt.get_nanoseconds()) == (124, 0, 789)

    def test_set_nanoseconds_borrows(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 123_456_789), "UTC")
        dt.set_nanoseconds(-1)
        assert (dt.get_milliseconds(), dt.get_microseconds(), dt.get_nanoseconds()) == (123, 455, 999)

    def test_set_milliseconds_keeps_sub_millisecond(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 123_456_789), "UTC")
        dt.set_milliseconds(7)
        assert dt.epoch_nanoseconds == FRIDAY_NS + 7_456_789

    def test_float_arguments_truncated(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_hours(1.9)
        assert dt.get_hours() == 1

    def test_none_keeps_optional_fields(self) -> None:
        dt = Datetime(FRIDAY_MS + 5 * 60_000, "UTC")
        dt.set_hours(3, None)
        assert (dt.get_hours(), dt.get_minutes()) == (3, 5)

    def test_calendar_preserved(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC", calendar="gregory")
        dt.set_month(5)
        assert dt.calendar_id == "gregory"


class TestExplicitDateFromMonthEnd:
    """An explicit date is applied to the month it names, not to a clamped day."""

    def test_set_month_to_leap_day(self) -> None:
        dt = Datetime(LEAP_JAN31_MS, "UTC")
        assert dt.set_month(1, 29) == LEAP_DAY_MS
        assert (dt.get_month(), dt.get_date()) == (1, 29)

    def test_set_month_date_past_month_end_rolls_over(self) -> None:
        dt = Datetime(LEAP_JAN31_MS, "UTC")
        dt.set_month(1, 31)
        assert (dt.get_month(), dt.get_date()) == (2, 2)

    def test_set_full_year_to_leap_day(self) -> None:
        dt = Datetime(JAN31_MS, "UTC")
        assert dt.set_full_year(2024, 1, 29) == LEAP_DAY_MS

    def test_set_full_year_leap_day_in_common_year(self) -> None:
        dt = Datetime(LEAP_JAN31_MS, "UTC")
        dt.set_full_year(2025, 1, 29)
        assert (dt.get_full_year(), dt.get_month(), dt.get_date()) == (2025, 2, 1)

    def test_without_date_still_clamps(self) -> None:
        dt = Datetime(LEAP_JAN31_MS, "UTC")
        dt.set_month(1)
        assert dt.get_time() == LEAP_DAY_MS


class TestSettersInRepeatedHour:
    """Setters inside the repeated 01:00-02:00 hour of 2025-11-02 in New York."""

    def test_set_milliseconds_on_second_occurrence(self) -> None:
        dt = Datetime(NY_FOLD_EST_MS, "America/New_York")
        assert dt.set_milliseconds(500) == NY_FOLD_EST_MS + 500
        assert dt.get_timezone_offset() == 300

    def test_set_seconds_on_second_occurrence(self) -> None:
        dt = Datetime(NY_FOLD_EST_MS, "America/New_York")
        assert dt.set_seconds(15) == NY_FOLD_EST_MS + 15_000
        assert dt.get_timezone_offset() == 300

    def test_set_minutes_on_second_occurrence(self) -> None:
        dt = Datetime(NY_FOLD_EST_MS, "America/New_York")
        assert dt.set_minutes(45) == NY_FOLD_EST_MS + 15 * 60_000
        assert (dt.get_hours(), dt.get_minutes()) == (1, 45)
        assert dt.get_timezone_offset() == 300

    def test_set_minutes_on_first_occurrence(self) -> None:
        dt = Datetime(NY_FOLD_EDT_MS, "America/New_York")
        assert dt.set_minutes(45) == NY_FOLD_EDT_MS + 15 * 60_000
        assert dt.get_timezone_offset() == 240

    def test_set_hours_within_repeated_hour_keeps_offset(self) -> None:
        dt = Datetime(NY_FOLD_EST_MS, "America/New_York")
        assert dt.set_hours(1, 0) == NY_FOLD_EST_MS - 30 * 60_000
        assert dt.get_timezone_offset() == 300

    def test_set_hours_into_repeated_hour_takes_earlier(self) -> None:
        """From outside the repeated hour, 01:30 resolves to its first occurrence."""
        dt = Datetime(NY_FOLD_EDT_MS - HOUR_MS, "America/New_York")
        assert dt.set_hours(1) == NY_FOLD_EDT_MS


class TestUtcSetters:
    """Tests for the set_utc_* family."""

    def test_set_utc_hours_preserves_sub_millisecond(self) -> None:
        dt = Datetime(EpochNanoseconds(FRIDAY_NS + 123_456_789), "America/New_York")
        dt.set_utc_hours(5)
        assert dt.epoch_nanoseconds == FRIDAY_NS + 5 * HOUR_MS * 1_000_000 + 123_456_789
        assert dt.timezone_id == "America/New_York"

    def test_set_utc_month_does_not_clamp(self) -> None:
        """Feb 31 in UTC arithmetic rolls over to March 3."""
        dt = Datetime(FRIDAY_MS, "UTC")
        dt.set_utc_month(1, 31)
        assert (dt.get_utc_month(), dt.get_utc_date()) == (2, 3)

    def test_set_utc_full_year_leap_day_rolls_over(self) -> None:
        dt = Datetime(LEAP_DAY_MS, "UTC")
        dt.set_utc_full_year(2025)
        assert (dt.get_utc_month(), dt.get_utc_date()) == (2, 1)

    def test_set_utc_date_zero(self) -> None:
        dt = Datetime(FRIDAY_MS, "Asia/Tokyo")
        dt.set_utc_date(0)
        assert (dt.get_utc_month(), dt.get_utc_date()) == (2, 31)

    def test_set_utc_minutes_seconds_milliseconds(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.set_utc_minutes(1, 2, 3) == FRIDAY_MS + 62_003
        assert dt.set_utc_seconds(0) == FRIDAY_MS + 60_003
        assert dt.set_utc_milliseconds(-1) == FRIDAY_MS + 59_999

    def test_utc_setters_ignore_local_zone(self) -> None:
        dt = Datetime(FRIDAY_MS, "Asia/Tokyo")
        dt.set_utc_hours(0)
        assert dt.get_time() == FRIDAY_MS
        assert dt.get_hours() == 9


class TestDirectReplacement:
    def test_set_time(self) -> None:
        dt = Datetime(FRIDAY_MS, "Asia/Tokyo")
        assert dt.set_time(0) == 0
        assert dt.epoch_nanoseconds == 0
        assert dt.timezone_id == "Asia/Tokyo"

    def test_set_epoch_nanoseconds(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.set_epoch_nanoseconds(1_999_999) == 1
        assert dt.epoch_nanoseconds == 1_999_999


class TestImmutableVariants:
    def test_with_hours_leaves_receiver(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        later = dt.with_hours(5)
        assert dt.get_hours() == 0
        assert later.get_hours() == 5
        assert later.timezone_id == "UTC"

    def test_with_month_and_utc_variant(self) -> None:
        dt = Datetime(JAN31_MS, "UTC")
        assert dt.with_month(1).get_date() == 28
        assert dt.with_utc_month(1).get_utc_date() == 3
        assert dt.get_month() == 0

    def test_with_time(self) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        assert dt.with_time(0).get_time() == 0
        assert dt.get_time() == FRIDAY_MS

    def test_variant_names(self) -> None:
        assert Datetime.with_full_year.__name__ == "with_full_year"
        assert Datetime.with_utc_hours.__name__ == "with_utc_hours"


class TestSetterCoercion:
    """Non-numeric arguments raise before any arithmetic runs."""

    @pytest.mark.parametrize(
        "method,args",
        [
            ("set_hours", ("noon",)),
            ("set_month", (None,)),
            ("set_date", (math.nan,)),
            ("set_minutes", (True,)),
            ("set_hours", (1, "2")),
            ("set_utc_hours", (math.inf,)),
            ("set_time", ("0",)),
            ("set_full_year", (2025, [1])),
        ],
    )
    def test_rejected(self, method: str, args: tuple) -> None:
        dt = Datetime(FRIDAY_MS, "UTC")
        with pytest.raises(TypeCoercionError):
            getattr(dt, method)(*args)
        assert dt.get_time() == FRIDAY_MS

    def test_type_coercion_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Datetime(0, "UTC").set_seconds("x")
