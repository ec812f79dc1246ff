"""Constructor input variants for Datetime.

A Datetime can be built from several kinds of value. Each kind is handled
by its own conversion function, and ``resolve_source`` picks the right one
before any other constructor logic runs. Every conversion yields an
exact epoch nanosecond count plus, where the source carries one, the
timezone and calendar to default to.

Variants:
    None                    the current time
    ZonedInstant            its instant, zone and calendar
    Instant                 its instant
    Datetime                its instant, zone and calendar
    EpochNanoseconds(n)     n nanoseconds since the epoch
    EpochMilliseconds(n)    n milliseconds since the epoch (floats truncated)
    int / float             milliseconds since the epoch
    str                     loose Date.parse-style parsing
    datetime.datetime       aware values as is; naive values as host-local

Examples:
    >>> resolve_source(EpochNanoseconds(5)).epoch_nanoseconds
    5
    >>> resolve_source(1_500).epoch_nanoseconds
    1500000000
"""

from __future__ import annotations

import datetime as _datetime
import math
import time as _time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from globaltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from globaltime._internal.validation import coerce_integer
from globaltime.core.instant import Instant, ZonedInstant
from globaltime.errors import ParseError, TypeCoercionError
from globaltime.format.legacy import parse_loose
from globaltime.units.calendar import Calendar
from globaltime.units.timezone import Timezone, host_timezone_id

if TYPE_CHECKING:
    from globaltime.core.datetime import Datetime

_EPOCH_UTC = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_EPOCH_NAIVE = _datetime.datetime(1970, 1, 1)


@dataclass(frozen=True)
class EpochNanoseconds:
    """A raw nanosecond count since 1970-01-01T00:00Z."""

    value: int


@dataclass(frozen=True)
class EpochMilliseconds:
    """A raw millisecond count since 1970-01-01T00:00Z."""

    value: Union[int, float]


DatetimeSource = Union[
    None,
    ZonedInstant,
    Instant,
    "Datetime",
    EpochNanoseconds,
    EpochMilliseconds,
    int,
    float,
    str,
    _datetime.datetime,
]


@dataclass(frozen=True)
class ResolvedSource:
    """The outcome of converting a constructor source.

    Attributes:
        epoch_nanoseconds: The exact instant.
        timezone: The source's own timezone, or None.
        calendar: The source's own calendar, or None.
    """

    epoch_nanoseconds: int
    timezone: Timezone | None = None
    calendar: Calendar | None = None


def from_now() -> ResolvedSource:
    return ResolvedSource(_time.time_ns())


def from_zoned_instant(source: ZonedInstant) -> ResolvedSource:
    return ResolvedSource(source.epoch_nanoseconds, source.timezone, source.calendar)


def from_instant(source: Instant) -> ResolvedSource:
    return ResolvedSource(source.epoch_nanoseconds)


def from_datetime(source: Datetime) -> ResolvedSource:
    return from_zoned_instant(source.to_zoned_instant())


def from_nanoseconds(source: EpochNanoseconds) -> ResolvedSource:
    return ResolvedSource(coerce_integer(source.value, "epoch nanoseconds"))


def from_milliseconds(value: int | float) -> ResolvedSource:
    """Convert a millisecond count, truncating fractional milliseconds."""
    return ResolvedSource(coerce_integer(value, "epoch milliseconds") * NANOS_PER_MILLISECOND)


def from_string(source: str) -> ResolvedSource:
    """Parse a string with the loose parser.

    Raises:
        ParseError: If the string is not a recognised date.
    """
    millis = parse_loose(source)
    if isinstance(millis, float) and math.isnan(millis):
        raise ParseError(f"cannot parse date string: {source!r}")
    return ResolvedSource(int(millis) * NANOS_PER_MILLISECOND)


def from_stdlib_datetime(source: _datetime.datetime) -> ResolvedSource:
    """Convert a standard library datetime.

    Aware values keep their instant. Naive values are read as wall-clock
    time in the host timezone.
    """
    if source.tzinfo is not None and source.utcoffset() is not None:
        delta = source - _EPOCH_UTC
        return ResolvedSource(_timedelta_nanoseconds(delta))

    local_ns = _timedelta_nanoseconds(source.replace(tzinfo=None) - _EPOCH_NAIVE)
    tz = Timezone.from_id(host_timezone_id())
    offset = tz.offset_seconds_for_local(local_ns // NANOS_PER_SECOND)
    return ResolvedSource(local_ns - offset * NANOS_PER_SECOND)


def _timedelta_nanoseconds(delta: _datetime.timedelta) -> int:
    return (
        delta.days * NANOS_PER_DAY
        + delta.seconds * NANOS_PER_SECOND
        + delta.microseconds * NANOS_PER_MICROSECOND
    )


def resolve_source(source: DatetimeSource) -> ResolvedSource:
    """Convert any supported constructor source.

    Raises:
        TypeCoercionError: If the source type is not supported.
        ParseError: If a string source cannot be parsed.
    """
    from globaltime.core.datetime import Datetime

    if source is None:
        return from_now()
    if isinstance(source, ZonedInstant):
        return from_zoned_instant(source)
    if isinstance(source, Instant):
        return from_instant(source)
    if isinstance(source, Datetime):
        return from_datetime(source)
    if isinstance(source, EpochNanoseconds):
        return from_nanoseconds(source)
    if isinstance(source, EpochMilliseconds):
        return from_milliseconds(source.value)
    if isinstance(source, str):
        return from_string(source)
    if isinstance(source, _datetime.datetime):
        return from_stdlib_datetime(source)
    if isinstance(source, (int, float)) and not isinstance(source, bool):
        return from_milliseconds(source)
    raise TypeCoercionError(f"cannot create a Datetime from {type(source).__name__}")


__all__ = [
    "DatetimeSource",
    "EpochMilliseconds",
    "EpochNanoseconds",
    "ResolvedSource",
    "resolve_source",
]
