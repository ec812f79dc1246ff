"""Tests for UTC component arithmetic in globaltime.convert."""

from __future__ import annotations

import pytest

from globaltime.convert import (
    from_components_utc,
    make_day,
    make_time,
    utc_components_to_millis,
    utc_fields,
    zero_ms,
    zero_ns,
)
from globaltime.errors import RangeError, TypeCoercionError

FRIDAY_MS = 1_744_934_400_000


class TestMakeDay:
    def test_epoch(self) -> None:
        assert make_day(1970, 0, 1) == 0

    def test_month_overflow(self) -> None:
        assert make_day(1970, 12, 1) == make_day(1971, 0, 1)
        assert make_day(1970, -1, 1) == make_day(1969, 11, 1)

    def test_date_overflow(self) -> None:
        assert make_day(1970, 0, 0) == -1
        assert make_day(2025, 1, 29) == make_day(2025, 2, 1)

    def test_make_time(self) -> None:
        assert make_time(1, 2, 3, 4) == 3_723_004
        assert make_time(25, 0, 0, -1) == 25 * 3_600_000 - 1


class TestUtcFields:
    def test_friday(self) -> None:
        fields = utc_fields(FRIDAY_MS + 3_723_004)
        assert fields == {
            "year": 2025,
            "month": 3,
            "date": 18,
            "day": 5,
            "hour": 1,
            "minute": 2,
            "second": 3,
            "millisecond": 4,
        }

    def test_before_epoch(self) -> None:
        fields = utc_fields(-1)
        assert (fields["year"], fields["month"], fields["date"], fields["millisecond"]) == (1969, 11, 31, 999)

    def test_round_trip(self) -> None:
        fields = utc_fields(FRIDAY_MS + 123)
        fields.pop("day")
        assert utc_components_to_millis(**fields) == FRIDAY_MS + 123


class TestFromComponentsUtc:
    def test_basic(self) -> None:
        assert from_components_utc(2025, 3, 18) == FRIDAY_MS * 1_000_000

    def test_two_digit_years(self) -> None:
        assert from_components_utc(70) == 0
        assert from_components_utc(99, 11, 31) == from_components_utc(1999, 11, 31)

    def test_overflowing_fields(self) -> None:
        assert from_components_utc(2025, 3, 17, 24) == FRIDAY_MS * 1_000_000

    def test_nanoseconds_added(self) -> None:
        assert from_components_utc(1970, 0, 1, 0, 0, 0, 1, 5) == 1_000_005

    def test_float_arguments_truncated(self) -> None:
        assert from_components_utc(2025.9, 3.2, 18.7) == FRIDAY_MS * 1_000_000

    def test_non_numeric(self) -> None:
        with pytest.raises(TypeCoercionError):
            from_components_utc("2025")

    def test_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            from_components_utc(300_000)


class TestZero:
    def test_zero_ms_whole_seconds(self) -> None:
        assert zero_ms() % 1000 == 0

    def test_zero_ns_scaled(self) -> None:
        assert zero_ns() % 1_000_000_000 == 0
        assert zero_ns() > 0
