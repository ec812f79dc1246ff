"""ISO 8601 / RFC 9557 formatting and strict parsing.

This module provides the strict parser behind ``Datetime.parse_strict``
and the UTC serializer behind ``Datetime.to_iso_string``.

Functions:
    parse_zoned: Parse a zoned date-time string into a ZonedInstant.
    format_utc_iso: Format epoch milliseconds as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

Accepted strict forms:
    - 2025-04-18T12:30:00+02:00[Europe/Amsterdam]
    - 2025-04-18T12:30[Europe/Amsterdam]          (offset resolved by zone)
    - 2025-04-18T10:30:00Z[Europe/Amsterdam]      (exact instant)
    - 2025-04-18[UTC]                             (start of day)
    - +012025-04-18T00:00:00.123456789+00:00[UTC][u-ca=gregory]

A bracketed timezone is required. When both an offset and a timezone are
given, the offset must be one the timezone actually uses at that wall-clock
time.

Examples:
    >>> parse_zoned("2025-04-18T00:00:00+00:00[UTC]").epoch_milliseconds
    1744934400000

    >>> format_utc_iso(0)
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import re

from globaltime._internal.calendar import days_in_month, epoch_days_to_ymd, ymd_to_epoch_days
from globaltime._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from globaltime.core.instant import ZonedInstant
from globaltime.errors import (
    CalendarError,
    InvalidTimezoneError,
    ParseError,
    RangeError,
)
from globaltime.units.calendar import DEFAULT_CALENDAR, Calendar
from globaltime.units.timezone import Timezone

_ZONED_PATTERN = re.compile(
    r"""
    ^
    (?P<year>[+-]\d{6}|\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        [Tt\x20]
        (?P<hour>\d{2})
        (?::(?P<minute>\d{2})
            (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?
        )?
    )?
    (?P<offset>[Zz]|[+-]\d{2}(?::?\d{2}(?::?\d{2}(?:[.,]\d{1,9})?)?)?)?
    \[!?(?P<zone>[^\]=\[]+)\]
    (?P<annotations>(?:\[!?[a-z_][a-z0-9_-]*=[A-Za-z0-9-]+\])*)
    $
    """,
    re.VERBOSE,
)

_ANNOTATION_PATTERN = re.compile(r"\[(!?)([a-z_][a-z0-9_-]*)=([A-Za-z0-9-]+)\]")
_OFFSET_PARTS = re.compile(
    r"^([+-])(\d{2})(?::?(\d{2})(?::?(\d{2})(?:[.,](\d{1,9}))?)?)?$"
)


def _parse_offset_nanos(text: str) -> tuple[int, bool]:
    """Return (offset in ns, has sub-minute precision) for an offset string."""
    match = _OFFSET_PARTS.match(text)
    if match is None:
        raise ParseError(f"invalid UTC offset: {text!r}")
    sign_str, hours, minutes, seconds, fraction = match.groups()
    if int(hours) > 23 or int(minutes or 0) > 59 or int(seconds or 0) > 59:
        raise ParseError(f"UTC offset out of range: {text!r}")
    total = (
        int(hours) * NANOS_PER_HOUR
        + int(minutes or 0) * NANOS_PER_MINUTE
        + int(seconds or 0) * NANOS_PER_SECOND
        + int((fraction or "0").ljust(9, "0"))
    )
    return (-total if sign_str == "-" else total), seconds is not None


def parse_zoned(text: str) -> ZonedInstant:
    """Parse a zoned date-time string.

    Args:
        text: An RFC 9557 string with a bracketed timezone.

    Returns:
        The ZonedInstant the string denotes.

    Raises:
        ParseError: If the string is malformed, has no timezone, names an
            unknown timezone or calendar, or carries an offset that the
            timezone does not use at that time.

    Examples:
        >>> parse_zoned("2025-03-09T02:30[America/New_York]").hour
        3

        >>> parse_zoned("2025-04-18T00:00:00+05:00[UTC]")
        Traceback (most recent call last):
        ...
        globaltime.errors.ParseError: offset +05:00 does not match UTC at 2025-04-18T00:00:00+05:00[UTC]
    """
    if not isinstance(text, str):
        raise ParseError(f"expected a string, got {type(text).__name__}")
    match = _ZONED_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(f"invalid zoned date-time string: {text!r}")

    groups = match.groupdict()
    year_str = groups["year"]
    if year_str == "-000000":
        raise ParseError("year -000000 is not allowed")
    year, month, day = int(year_str), int(groups["month"]), int(groups["day"])
    hour = int(groups["hour"] or 0)
    minute = int(groups["minute"] or 0)
    second = int(groups["second"] or 0)
    fraction = int((groups["fraction"] or "0").ljust(9, "0"))

    if not 1 <= month <= 12:
        raise ParseError(f"month out of range in {text!r}")
    if not 1 <= day <= days_in_month(year, month):
        raise ParseError(f"day out of range in {text!r}")
    if hour > 23 or minute > 59 or second > 60:
        raise ParseError(f"time out of range in {text!r}")
    # a leap second reads as the last second of the minute
    second = min(second, 59)

    try:
        tz = Timezone.from_id(groups["zone"])
    except InvalidTimezoneError as exc:
        raise ParseError(str(exc)) from exc

    calendar = DEFAULT_CALENDAR
    for _critical, key, value in _ANNOTATION_PATTERN.findall(groups["annotations"]):
        if key == "u-ca":
            try:
                calendar = Calendar.from_id(value)
            except CalendarError as exc:
                raise ParseError(str(exc)) from exc

    local_ns = (
        ymd_to_epoch_days(year, month, day) * NANOS_PER_DAY
        + hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + fraction
    )

    offset_text = groups["offset"]
    try:
        if offset_text is None:
            return ZonedInstant._from_local_ns(local_ns, tz, calendar)
        if offset_text in ("Z", "z"):
            return ZonedInstant(local_ns, tz, calendar)

        offset_ns, precise = _parse_offset_nanos(offset_text)
        candidate = ZonedInstant(local_ns - offset_ns, tz, calendar)
        actual_ns = candidate.offset_nanoseconds
        if actual_ns == offset_ns:
            return candidate
        if not precise and round(actual_ns / NANOS_PER_MINUTE) * NANOS_PER_MINUTE == offset_ns:
            return ZonedInstant(local_ns - actual_ns, tz, calendar)
    except RangeError as exc:
        raise ParseError(str(exc)) from exc
    raise ParseError(f"offset {offset_text} does not match {tz.id} at {text}")


def format_utc_iso(epoch_ms: int) -> str:
    """Format epoch milliseconds as a UTC ISO 8601 string with a ``Z`` suffix.

    Years outside 0-9999 use the expanded ``+YYYYYY``/``-YYYYYY`` form.

    Examples:
        >>> format_utc_iso(1744934400000)
        '2025-04-18T00:00:00.000Z'
        >>> format_utc_iso(-62198755200000)
        '-000001-01-01T00:00:00.000Z'
    """
    days, ms = divmod(epoch_ms, MILLIS_PER_DAY)
    year, month, day = epoch_days_to_ymd(days)
    hour, ms = divmod(ms, MILLIS_PER_HOUR)
    minute, ms = divmod(ms, MILLIS_PER_MINUTE)
    second, ms = divmod(ms, MILLIS_PER_SECOND)
    if 0 <= year <= 9999:
        year_str = f"{year:04d}"
    else:
        year_str = f"{'-' if year < 0 else '+'}{abs(year):06d}"
    return (
        f"{year_str}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{ms:03d}Z"
    )


__all__ = ["format_utc_iso", "parse_zoned"]
