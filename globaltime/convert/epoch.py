"""Epoch conversion utilities.

This module provides the fixed-Gregorian millisecond arithmetic used by the
UTC accessor and setter families, and the clock helpers exposed as
``Datetime.now_ns()``, ``Datetime.zero_ms()`` and ``Datetime.zero_ns()``.

The UTC arithmetic works on milliseconds only and folds overflowing fields
into the next larger unit (month 12 is January of the next year, hour -1
is 23:00 of the previous day), as ``Date.UTC`` does.

Functions:
    make_day: Day number for a (year, zero-based month, date) triple.
    make_time: Milliseconds for an (hour, minute, second, ms) tuple.
    utc_components_to_millis: Combine make_day and make_time.
    utc_fields: Split epoch milliseconds into Gregorian UTC fields.
    from_components_utc: Epoch nanoseconds from UTC components.
    now_ns, zero_ms, zero_ns: Current time helpers.

Examples:
    >>> utc_components_to_millis(1970, 0, 1)
    0
    >>> utc_components_to_millis(2024, 12, 1)
    1735689600000
    >>> utc_fields(0)["year"]
    1970
"""

from __future__ import annotations

import time as _time

from globaltime._internal.calendar import epoch_days_to_ymd, iso_weekday, ymd_to_epoch_days
from globaltime._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from globaltime._internal.validation import coerce_integer, validate_epoch_nanoseconds


def make_day(year: int, month: int, date: int) -> int:
    """Return the epoch day number for a year, zero-based month and date.

    Months outside 0-11 carry into the year; dates outside the month carry
    into neighbouring months.

    Examples:
        >>> make_day(1970, 0, 1)
        0
        >>> make_day(1970, 12, 1) == make_day(1971, 0, 1)
        True
        >>> make_day(1970, 0, 0)
        -1
    """
    year += month // 12
    month %= 12
    return ymd_to_epoch_days(year, month + 1, 1) + date - 1


def make_time(hour: int, minute: int, second: int, millisecond: int) -> int:
    """Return the milliseconds for a time of day, without range checks."""
    return (
        hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def utc_components_to_millis(
    year: int,
    month: int,
    date: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Return epoch milliseconds for UTC components (zero-based month)."""
    return make_day(year, month, date) * MILLIS_PER_DAY + make_time(
        hour, minute, second, millisecond
    )


def utc_fields(epoch_ms: int) -> dict[str, int]:
    """Split epoch milliseconds into fixed-Gregorian UTC fields.

    Returns:
        A dict with year, month (zero-based), date, day (0=Sunday),
        hour, minute, second and millisecond.

    Examples:
        >>> utc_fields(-1)["year"], utc_fields(-1)["millisecond"]
        (1969, 999)
    """
    days, ms = divmod(epoch_ms, MILLIS_PER_DAY)
    year, month, day = epoch_days_to_ymd(days)
    hour, ms = divmod(ms, MILLIS_PER_HOUR)
    minute, ms = divmod(ms, MILLIS_PER_MINUTE)
    second, ms = divmod(ms, MILLIS_PER_SECOND)
    return {
        "year": year,
        "month": month - 1,
        "date": day,
        "day": iso_weekday(year, month, day) % 7,
        "hour": hour,
        "minute": minute,
        "second": second,
        "millisecond": ms,
    }


def from_components_utc(
    year: int,
    month: int = 0,
    date: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    nanosecond: int = 0,
) -> int:
    """Return epoch nanoseconds for UTC components.

    Follows ``Date.UTC``: the month is zero-based, fields overflow into
    larger units, and a year from 0 to 99 means 1900 to 1999. The
    nanosecond argument is added on top of the millisecond result.

    Raises:
        TypeCoercionError: If an argument is not a number.
        RangeError: If the result is outside the supported range.

    Examples:
        >>> from_components_utc(2025, 3, 18)
        1744934400000000000
        >>> from_components_utc(70) == 0
        True
    """
    values = [
        coerce_integer(value, name)
        for value, name in (
            (year, "year"),
            (month, "month"),
            (date, "date"),
            (hour, "hour"),
            (minute, "minute"),
            (second, "second"),
            (millisecond, "millisecond"),
        )
    ]
    if 0 <= values[0] <= 99:
        values[0] += 1900
    epoch_ns = utc_components_to_millis(*values) * NANOS_PER_MILLISECOND + coerce_integer(
        nanosecond, "nanosecond"
    )
    validate_epoch_nanoseconds(epoch_ns)
    return epoch_ns


def now_ns() -> int:
    """Return the current time in epoch nanoseconds."""
    return _time.time_ns()


def zero_ms() -> int:
    """Return the current time in epoch milliseconds with the sub-second part zeroed.

    Examples:
        >>> zero_ms() % 1000
        0
    """
    return _time.time_ns() // NANOS_PER_SECOND * MILLIS_PER_SECOND


def zero_ns() -> int:
    """Return zero_ms() as epoch nanoseconds."""
    return zero_ms() * NANOS_PER_MILLISECOND


__all__ = [
    "make_day",
    "make_time",
    "utc_components_to_millis",
    "utc_fields",
    "from_components_utc",
    "now_ns",
    "zero_ms",
    "zero_ns",
]
