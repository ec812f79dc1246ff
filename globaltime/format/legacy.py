"""Loose, ``Date.parse``-compatible string parsing.

This module provides the permissive parser used when a Datetime is built
from a string and by ``Datetime.parse``. It returns epoch milliseconds, or
NaN when the string cannot be read; it never raises for bad input.

Recognised forms:
    - ISO 8601: ``2025-04-18``, ``2025-04``, ``2025``,
      ``2025-04-18T12:30``, ``2025-04-18T12:30:00.123Z``,
      ``+012025-04-18T00:00:00+02:00``. Date-only forms are UTC; date-time
      forms without an offset are host-local time.
    - RFC 2822 / HTTP dates: ``Fri, 18 Apr 2025 12:30:00 GMT``.
    - The ``to_string`` form: ``Fri Apr 18 2025 12:30:00 UTC+0200 (Europe/Paris)``
      and the ``Date.prototype.toString`` form with ``GMT+0200``.

Examples:
    >>> parse_loose("2025-04-18")
    1744934400000
    >>> parse_loose("Fri, 18 Apr 2025 00:00:00 GMT")
    1744934400000
    >>> parse_loose("Fri Apr 18 2025 02:00:00 UTC+0200 (Europe/Paris)")
    1744934400000
    >>> parse_loose("not a date")
    nan
"""

from __future__ import annotations

import email.utils
import logging
import math
import re

from globaltime._internal.calendar import days_in_month, ymd_to_epoch_days
from globaltime._internal.constants import (
    MAX_EPOCH_DAYS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    NANOS_PER_MILLISECOND,
)
from globaltime.config import MONTH_NAMES
from globaltime.core.instant import ZonedInstant
from globaltime.errors import GlobaltimeError
from globaltime.units.calendar import DEFAULT_CALENDAR
from globaltime.units.timezone import Timezone, host_timezone_id

logger = logging.getLogger(__name__)

NAN = math.nan

_ISO_PATTERN = re.compile(
    r"""
    ^
    (?P<year>[+-]\d{6}|\d{4})
    (?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?
    (?:
        T(?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?
        (?P<offset>Z|[+-]\d{2}:\d{2})?
    )?
    $
    """,
    re.VERBOSE,
)

_TO_STRING_PATTERN = re.compile(
    r"""
    ^
    (?:[A-Za-z]{3},?\s+)?
    (?P<month>[A-Za-z]{3})\s+(?P<day>\d{1,2})\s+(?P<year>-?\d{1,6})
    (?:\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?
    (?:\s*(?:GMT|UTC)(?P<offset>[+-]\d{4})?)?
    (?:\s*\((?P<comment>[^)]*)\))?
    $
    """,
    re.VERBOSE,
)

_MONTHS = {name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)}


def _components_to_millis(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    offset_minutes: int | None,
) -> int | float:
    """Combine validated components; None offset means host-local time."""
    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
        return NAN
    if hour > 24 or minute > 59 or second > 59:
        return NAN
    if hour == 24 and (minute or second or millisecond):
        return NAN
    local_ms = (
        ymd_to_epoch_days(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )
    if offset_minutes is not None:
        millis = local_ms - offset_minutes * MILLIS_PER_MINUTE
        if abs(millis) > MAX_EPOCH_DAYS * MILLIS_PER_DAY:
            return NAN
        return millis
    tz = Timezone.from_id(host_timezone_id())
    try:
        zoned = ZonedInstant._from_local_ns(
            local_ms * NANOS_PER_MILLISECOND, tz, DEFAULT_CALENDAR
        )
    except GlobaltimeError:
        return NAN
    return zoned.epoch_milliseconds


def _parse_iso(text: str) -> int | float | None:
    match = _ISO_PATTERN.match(text)
    if match is None:
        return None
    groups = match.groupdict()
    if groups["year"] == "-000000":
        return NAN
    has_time = groups["hour"] is not None
    offset = groups["offset"]
    if offset is None:
        offset_minutes = None if has_time else 0
    elif offset == "Z":
        offset_minutes = 0
    else:
        sign = -1 if offset[0] == "-" else 1
        offset_minutes = sign * (int(offset[1:3]) * 60 + int(offset[4:6]))
    return _components_to_millis(
        int(groups["year"]),
        int(groups["month"] or 1),
        int(groups["day"] or 1),
        int(groups["hour"] or 0),
        int(groups["minute"] or 0),
        int(groups["second"] or 0),
        int((groups["fraction"] or "0").ljust(3, "0")[:3]),
        offset_minutes,
    )


def _parse_to_string(text: str) -> int | float | None:
    match = _TO_STRING_PATTERN.match(text)
    if match is None:
        return None
    groups = match.groupdict()
    month = _MONTHS.get(groups["month"].lower())
    if month is None:
        return None
    offset = groups["offset"]
    offset_minutes = None
    if offset is not None:
        sign = -1 if offset[0] == "-" else 1
        offset_minutes = sign * (int(offset[1:3]) * 60 + int(offset[3:5]))
    elif "GMT" in text or "UTC" in text.split("(")[0]:
        offset_minutes = 0
    return _components_to_millis(
        int(groups["year"]),
        month,
        int(groups["day"]),
        int(groups["hour"] or 0),
        int(groups["minute"] or 0),
        int(groups["second"] or 0),
        0,
        offset_minutes,
    )


def _parse_rfc2822(text: str) -> int | float | None:
    try:
        parsed = email.utils.parsedate_tz(text)
    except (ValueError, IndexError):
        return None
    if parsed is None:
        return None
    year, month, day, hour, minute, second = parsed[:6]
    offset_seconds = parsed[9]
    return _components_to_millis(
        year,
        month,
        day,
        hour,
        minute,
        second,
        0,
        None if offset_seconds is None else offset_seconds // 60,
    )


def parse_loose(text: str) -> int | float:
    """Parse a date string the way ``Date.parse`` does.

    Args:
        text: The string to parse.

    Returns:
        Epoch milliseconds as an int, or NaN if the string is not a
        recognised date.
    """
    if not isinstance(text, str):
        return NAN
    stripped = text.strip()
    for parser in (_parse_iso, _parse_to_string, _parse_rfc2822):
        result = parser(stripped)
        if result is not None:
            return result
    logger.debug("unparseable date string %r", text)
    return NAN


__all__ = ["parse_loose"]
