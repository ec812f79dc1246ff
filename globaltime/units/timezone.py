"""Timezone resolution on top of the IANA database.

This module provides the Timezone class, which resolves a timezone
identifier (``UTC``, an IANA name such as ``Europe/Amsterdam``, or a
numeric offset string such as ``+05:30``) and answers offset questions
for instants and wall-clock times. Zone rules come from ``zoneinfo``,
backed by the ``tzdata`` distribution where the host has no database.
Wall-clock times are resolved to instants with ``whenever.ZonedDateTime``.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import os
import re
import time as _time
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from whenever import ZonedDateTime

from globaltime._internal.calendar import epoch_days_to_ymd
from globaltime._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    ZONE_LOOKUP_MAX_YEAR,
    ZONE_LOOKUP_MIN_YEAR,
)
from globaltime.errors import InvalidTimezoneError

logger = logging.getLogger(__name__)

_UTC = _datetime.timezone.utc
_EPOCH_UTC = _datetime.datetime(1970, 1, 1, tzinfo=_UTC)
_EPOCH_NAIVE = _datetime.datetime(1970, 1, 1)

# zoneinfo only covers datetime's year range; clamp lookups just inside it
_LOOKUP_MIN_SECONDS = int(
    (_datetime.datetime(ZONE_LOOKUP_MIN_YEAR, 1, 1) - _EPOCH_NAIVE).total_seconds()
)
_LOOKUP_MAX_SECONDS = int(
    (_datetime.datetime(ZONE_LOOKUP_MAX_YEAR, 12, 31) - _EPOCH_NAIVE).total_seconds()
)

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")


def _clamp_lookup(seconds: int) -> int:
    return max(_LOOKUP_MIN_SECONDS, min(_LOOKUP_MAX_SECONDS, seconds))


def _in_lookup_range(seconds: int) -> bool:
    return _LOOKUP_MIN_SECONDS <= seconds <= _LOOKUP_MAX_SECONDS


def format_offset(offset_seconds: int, separator: str = "") -> str:
    """Format a UTC offset as ``+HHMM``, or ``+HH:MM`` with a separator.

    Offsets with a seconds part (local mean time before 1900) are rounded
    to the nearest minute, half away from zero.

    Examples:
        >>> format_offset(19800)
        '+0530'
        >>> format_offset(-17762, ":")
        '-04:56'
    """
    sign = "+" if offset_seconds >= 0 else "-"
    hours, minutes = divmod((abs(offset_seconds) + 30) // 60, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def format_offset_id(offset_seconds: int) -> str:
    """Format an offset in seconds as a canonical ``+HH:MM`` identifier.

    Examples:
        >>> format_offset_id(19800)
        '+05:30'
        >>> format_offset_id(-28800)
        '-08:00'
    """
    return format_offset(offset_seconds, ":")


class Timezone:
    """A resolved timezone identifier.

    A Timezone is either a fixed UTC offset or an IANA zone with
    historical and future transition rules. Instances are immutable and
    cached per canonical identifier.

    Attributes:
        id: The canonical identifier (``UTC``, ``America/New_York``, ``+05:30``).
        is_fixed_offset: True for ``UTC`` and numeric offset identifiers.

    Examples:
        >>> Timezone.from_id("utc").id
        'UTC'

        >>> Timezone.from_id("+0530").id
        '+05:30'

        >>> Timezone.from_id("America/New_York").is_fixed_offset
        False
    """

    __slots__ = ("_id", "_tzinfo", "_fixed_offset")

    _cache: ClassVar[dict[str, Timezone]] = {}

    def __init__(
        self,
        identifier: str,
        tzinfo: _datetime.tzinfo,
        fixed_offset: int | None = None,
    ) -> None:
        """Create a Timezone. Use from_id() rather than calling this directly.

        Args:
            identifier: The canonical identifier.
            tzinfo: The tzinfo implementing the zone rules.
            fixed_offset: Offset in seconds for fixed-offset zones, else None.
        """
        self._id: str = identifier
        self._tzinfo: _datetime.tzinfo = tzinfo
        self._fixed_offset: int | None = fixed_offset

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone."""
        return cls.from_id("UTC")

    @classmethod
    def from_offset_seconds(cls, offset_seconds: int) -> Timezone:
        """Create a fixed-offset Timezone.

        Raises:
            InvalidTimezoneError: If the offset is not strictly within +/- 24 hours.
        """
        if abs(offset_seconds) >= MAX_UTC_OFFSET_SECONDS:
            raise InvalidTimezoneError(
                f"offset {offset_seconds}s is outside the valid range "
                f"(-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS})"
            )
        return cls.from_id(format_offset_id(offset_seconds))

    @classmethod
    def from_id(cls, identifier: object) -> Timezone:
        """Resolve a timezone identifier.

        Supported identifiers:
            - "UTC" (any case), "Z", "Etc/UTC"
            - "+HH:MM", "-HH:MM", "+HHMM", "-HHMM", "+HH", "-HH"
            - Any IANA zone name known to zoneinfo

        Args:
            identifier: The identifier to resolve. A Timezone is returned as is.

        Returns:
            The cached Timezone for the canonical identifier.

        Raises:
            InvalidTimezoneError: If the identifier cannot be resolved.

        Examples:
            >>> Timezone.from_id("Z").id
            'UTC'

            >>> Timezone.from_id("-05").id
            '-05:00'
        """
        if isinstance(identifier, Timezone):
            return identifier
        if not isinstance(identifier, str):
            raise InvalidTimezoneError(
                f"timezone identifier must be a string, got {type(identifier).__name__}"
            )

        key = identifier.strip()
        cached = cls._cache.get(key)
        if cached is not None:
            return cached

        resolved = cls._resolve(key)
        cls._cache[key] = resolved
        return resolved

    @classmethod
    def _resolve(cls, key: str) -> Timezone:
        if key.upper() in ("UTC", "Z", "ETC/UTC"):
            return cls("UTC", _UTC, 0)

        match = _OFFSET_PATTERN.match(key)
        if match:
            sign_str, hours_str, minutes_str = match.groups()
            hours = int(hours_str)
            minutes = int(minutes_str) if minutes_str else 0
            if hours > 23 or minutes > 59:
                raise InvalidTimezoneError(f"offset out of range: {key!r}")
            sign = 1 if sign_str == "+" else -1
            offset = sign * (hours * 3600 + minutes * 60)
            canonical = format_offset_id(offset)
            tzinfo = _datetime.timezone(_datetime.timedelta(seconds=offset))
            return cls(canonical, tzinfo, offset)

        if not key or key[0] in "+-":
            raise InvalidTimezoneError(f"cannot parse timezone identifier: {key!r}")

        try:
            zone = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise InvalidTimezoneError(f"unknown timezone identifier: {key!r}") from exc
        return cls(key, zone, None)

    @property
    def id(self) -> str:
        """Return the canonical identifier."""
        return self._id

    @property
    def is_fixed_offset(self) -> bool:
        """Return True if the offset never changes."""
        return self._fixed_offset is not None

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        """Return the stdlib tzinfo implementing this zone."""
        return self._tzinfo

    def _aware_at(self, epoch_seconds: int) -> _datetime.datetime:
        utc = _EPOCH_UTC + _datetime.timedelta(seconds=_clamp_lookup(epoch_seconds))
        return utc.astimezone(self._tzinfo)

    def offset_seconds_at(self, epoch_seconds: int) -> int:
        """Return the UTC offset in effect at an instant.

        Args:
            epoch_seconds: Seconds since the Unix epoch (floor).

        Returns:
            Offset in seconds, positive east of UTC.
        """
        if self._fixed_offset is not None:
            return self._fixed_offset
        offset = self._aware_at(epoch_seconds).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def resolve_local(self, local_ns: int, *, prefer: int | None = None) -> int:
        """Return the instant at which this zone's wall clock shows a time.

        Without ``prefer``, an ambiguous wall-clock time (a repeated hour)
        resolves to the earlier instant and a time inside a gap (a skipped
        hour) is pushed forward by the gap length ("compatible").

        With ``prefer``, the offset in effect at that instant is kept
        whenever it is valid for the wall-clock time, so moving within a
        repeated hour stays on the same side of the transition.

        Outside the years zone rules can be looked up for, the offset at
        the nearest supported instant is used.

        Args:
            local_ns: Wall-clock nanoseconds since 1970-01-01T00:00.
            prefer: Epoch nanoseconds of the instant whose offset to keep.

        Returns:
            Epoch nanoseconds.

        Examples:
            >>> ny = Timezone.from_id("America/New_York")
            >>> fold = 1_762_047_000 * 10**9  # 2025-11-02 01:30 wall clock
            >>> (fold - ny.resolve_local(fold)) // 10**9
            -14400
            >>> est = 1_762_065_000 * 10**9  # 01:30 EST, second occurrence
            >>> (fold - ny.resolve_local(fold, prefer=est)) // 10**9
            -18000
        """
        if self._fixed_offset is not None:
            return local_ns - self._fixed_offset * NANOS_PER_SECOND

        local_seconds = local_ns // NANOS_PER_SECOND
        if not _in_lookup_range(local_seconds):
            return local_ns - self.offset_seconds_at(local_seconds) * NANOS_PER_SECOND

        days, time_ns = divmod(local_ns, NANOS_PER_DAY)
        year, month, day = epoch_days_to_ymd(days)
        hour, time_ns = divmod(time_ns, NANOS_PER_HOUR)
        minute, time_ns = divmod(time_ns, NANOS_PER_MINUTE)
        second, nanosecond = divmod(time_ns, NANOS_PER_SECOND)

        if prefer is not None and _in_lookup_range(prefer // NANOS_PER_SECOND):
            # replace() keeps the current offset when it is valid, else "compatible"
            zoned = ZonedDateTime.from_timestamp_nanos(prefer, tz=self._id).replace(
                year=year,
                month=month,
                day=day,
                hour=hour,
                minute=minute,
                second=second,
                nanosecond=nanosecond,
            )
        else:
            zoned = ZonedDateTime(
                year,
                month,
                day,
                hour,
                minute,
                second,
                nanosecond=nanosecond,
                tz=self._id,
                disambiguate="compatible",
            )
        return zoned.timestamp_nanos()

    def offset_seconds_for_local(self, local_seconds: int) -> int:
        """Return the offset to subtract from a wall-clock time to reach UTC.

        Resolution follows resolve_local() without a preferred offset.

        Args:
            local_seconds: Wall-clock seconds since 1970-01-01T00:00 (floor).

        Returns:
            Offset in seconds, positive east of UTC.
        """
        local_ns = local_seconds * NANOS_PER_SECOND
        return (local_ns - self.resolve_local(local_ns)) // NANOS_PER_SECOND

    def is_dst_at(self, epoch_seconds: int) -> bool:
        """Return True if daylight saving time is in effect at an instant."""
        if self._fixed_offset is not None:
            return False
        dst = self._aware_at(epoch_seconds).dst()
        return bool(dst)

    def abbreviation_at(self, epoch_seconds: int) -> str:
        """Return the zone abbreviation at an instant (``EST``, ``CEST``).

        Fixed-offset zones return their identifier.
        """
        if self._fixed_offset is not None:
            return self._id
        return self._aware_at(epoch_seconds).tzname() or self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Timezone({self._id!r})"

    def __str__(self) -> str:
        return self._id


def host_timezone_id() -> str:
    """Discover the host's local timezone identifier.

    Looks at the ``TZ`` environment variable, then the ``/etc/localtime``
    symlink, and finally falls back to the fixed offset reported by the
    C library (``UTC`` when that is zero).

    Returns:
        A timezone identifier accepted by Timezone.from_id().
    """
    env = os.environ.get("TZ")
    if env:
        candidate = env.lstrip(":")
        try:
            return Timezone.from_id(candidate).id
        except InvalidTimezoneError:
            logger.debug("ignoring unresolvable TZ environment value %r", env)

    try:
        link = os.path.realpath("/etc/localtime")
    except OSError:
        link = ""
    if "zoneinfo/" in link:
        candidate = link.split("zoneinfo/", 1)[1]
        try:
            return Timezone.from_id(candidate).id
        except InvalidTimezoneError:
            logger.debug("ignoring unresolvable /etc/localtime target %r", link)

    offset = _time.localtime().tm_gmtoff
    if not offset:
        return "UTC"
    logger.debug("host zone unknown, using fixed offset %ss", offset)
    return format_offset_id(offset)


__all__ = ["Timezone", "format_offset", "format_offset_id", "host_timezone_id"]
