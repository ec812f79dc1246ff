"""Datetime: a Date-compatible value on top of a zoned instant.

This module provides the Datetime class. It holds exactly one ZonedInstant
and exposes the familiar ``Date`` accessor and setter families in
snake_case (``get_full_year``, ``set_utc_hours``, ``to_iso_string``), a
PHP-style ``format()``, and calendar-aware ``until()``/``since()``.

Setters mutate the Datetime in place by swapping its ZonedInstant and
return the new epoch milliseconds. Each has a ``with_*`` counterpart that
returns a new Datetime and leaves the receiver untouched.
"""

from __future__ import annotations

import datetime as _datetime
import functools
import html
from typing import Callable

from globaltime._internal.constants import (
    MILLIS_PER_SECOND,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from globaltime._internal.validation import coerce_arguments, coerce_integer
from globaltime.arithmetic.overflow import resolve_local, resolve_utc
from globaltime.arithmetic.rounding import RoundingMode
from globaltime.config import TO_STRING_PATTERN, FormatConfig, get_config
from globaltime.convert import epoch as _epoch
from globaltime.core.duration import Duration
from globaltime.core.instant import CalendarLike, Instant, TimezoneLike, ZonedInstant
from globaltime.core.source import DatetimeSource, EpochMilliseconds, EpochNanoseconds, resolve_source
from globaltime.errors import RangeError, TypeCoercionError
from globaltime.format.iso8601 import format_utc_iso, parse_zoned
from globaltime.format.legacy import parse_loose
from globaltime.format.pattern import FormatEngine
from globaltime.units.calendar import DEFAULT_CALENDAR
from globaltime.units.timeunit import TimeUnit
from globaltime.units.timezone import host_timezone_id


DISCORD_STYLES: tuple[str, ...] = ("t", "T", "d", "D", "f", "F", "R")

_EPOCH_UTC = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _immutable_variant(setter: Callable[..., int]) -> Callable[..., Datetime]:
    """Build a ``with_*`` method that applies a setter to a copy."""

    @functools.wraps(setter)
    def variant(self: Datetime, *args: object, **kwargs: object) -> Datetime:
        clone = self.copy()
        setter(clone, *args, **kwargs)
        return clone

    variant.__name__ = setter.__name__.replace("set_", "with_", 1)
    variant.__qualname__ = f"Datetime.{variant.__name__}"
    variant.__doc__ = (
        f"Return a copy with ``{setter.__name__}`` applied; the receiver is unchanged."
    )
    return variant


def _relative_phrase(difference_seconds: int) -> str:
    """Describe a signed number of seconds in the past (positive) or future."""
    if difference_seconds == 0:
        return "now"
    suffix = "ago" if difference_seconds > 0 else "from now"
    magnitude = abs(difference_seconds)
    for limit, size, label in (
        (SECONDS_PER_MINUTE, 1, "second"),
        (SECONDS_PER_HOUR, SECONDS_PER_MINUTE, "minute"),
        (SECONDS_PER_DAY, SECONDS_PER_HOUR, "hour"),
        (None, SECONDS_PER_DAY, "day"),
    ):
        if limit is None or magnitude < limit:
            count = magnitude // size
            return f"{count} {label}{'' if count == 1 else 's'} {suffix}"
    raise AssertionError("unreachable")


class Datetime:
    """A mutable date-time bound to a timezone and a calendar.

    Args:
        source: What to build the value from; see ``globaltime.core.source``.
            None means now. Bare ints and floats are epoch milliseconds.
        timezone: Timezone identifier. Defaults to the source's own zone
            (ZonedInstant or Datetime sources), else the host zone.
        calendar: Calendar identifier. Defaults to the source's own
            calendar, else ``iso8601``.
        config: Name tables and macros. Defaults to the process-wide
            configuration, read at each call.

    Raises:
        InvalidTimezoneError: If the timezone cannot be resolved.
        ParseError: If a string source cannot be parsed.
        RangeError: If the instant is outside the supported range.
        TypeCoercionError: If the source type is not supported.

    Examples:
        >>> dt = Datetime(EpochMilliseconds(1744934400000), "UTC")
        >>> dt.get_full_year(), dt.get_month(), dt.get_date()
        (2025, 3, 18)
        >>> str(dt)
        'Fri Apr 18 2025 00:00:00 UTC+0000 (UTC)'
        >>> dt.format("Y-m-d")
        '2025-04-18'
        >>> dt.set_hours(25)
        1745024400000
        >>> dt.to_iso_string()
        '2025-04-19T01:00:00.000Z'
    """

    __slots__ = ("_zoned", "_config")

    # mutable, so unhashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        source: DatetimeSource = None,
        timezone: TimezoneLike | None = None,
        *,
        calendar: CalendarLike | None = None,
        config: FormatConfig | None = None,
    ) -> None:
        resolved = resolve_source(source)
        if timezone is None:
            timezone = resolved.timezone or host_timezone_id()
        if calendar is None:
            calendar = resolved.calendar or DEFAULT_CALENDAR
        self._zoned: ZonedInstant = ZonedInstant(
            resolved.epoch_nanoseconds, timezone, calendar
        )
        self._config: FormatConfig | None = config

    # Class-level helpers

    @classmethod
    def now(
        cls,
        timezone: TimezoneLike | None = None,
        *,
        config: FormatConfig | None = None,
    ) -> Datetime:
        """Return the current time in a timezone (default: host zone)."""
        return cls(None, timezone, config=config)

    @classmethod
    def from_epoch_nanoseconds(
        cls, nanoseconds: int, timezone: TimezoneLike | None = None
    ) -> Datetime:
        return cls(EpochNanoseconds(nanoseconds), timezone)

    @classmethod
    def from_epoch_milliseconds(
        cls, milliseconds: int | float, timezone: TimezoneLike | None = None
    ) -> Datetime:
        return cls(EpochMilliseconds(milliseconds), timezone)

    @staticmethod
    def now_ns() -> int:
        """Return the current time in epoch nanoseconds."""
        return _epoch.now_ns()

    @staticmethod
    def zero_ms() -> int:
        """Return the current epoch milliseconds with the milliseconds zeroed."""
        return _epoch.zero_ms()

    @staticmethod
    def zero_ns() -> int:
        """Return ``zero_ms()`` in nanoseconds."""
        return _epoch.zero_ns()

    @staticmethod
    def parse(text: str) -> int | float:
        """Parse loosely like ``Date.parse``; returns epoch ms or NaN."""
        return parse_loose(text)

    @staticmethod
    def parse_strict(text: str) -> ZonedInstant:
        """Parse an RFC 9557 string with a bracketed timezone.

        Raises:
            ParseError: If the string is not a valid zoned date-time.
        """
        return parse_zoned(text)

    @staticmethod
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
        """Return epoch nanoseconds for UTC components, ``Date.UTC`` style.

        Examples:
            >>> Datetime.from_components_utc(2025, 3, 18)
            1744934400000000000
        """
        return _epoch.from_components_utc(
            year, month, date, hour, minute, second, millisecond, nanosecond
        )

    @staticmethod
    def get_utc_offset(offset: int | float) -> str:
        """Format an offset in minutes west of UTC as ``UTC+HHMM``.

        The sign follows ``get_timezone_offset``: a positive offset is west
        of UTC and prints as ``-``. NaN prints as ``UTC+Error``.

        Examples:
            >>> Datetime.get_utc_offset(-120)
            'UTC+0200'
            >>> Datetime.get_utc_offset(300)
            'UTC-0500'
            >>> Datetime.get_utc_offset(float("nan"))
            'UTC+Error'
        """
        if isinstance(offset, float) and offset != offset:
            return "UTC+Error"
        minutes = coerce_integer(offset, "offset")
        sign = "-" if minutes > 0 else "+"
        hours, rest = divmod(abs(minutes), 60)
        return f"UTC{sign}{hours:02d}{rest:02d}"

    # Internal state

    def _replace_instant(self, zoned: ZonedInstant) -> int:
        """Install a new ZonedInstant and return its epoch milliseconds."""
        self._zoned = zoned
        return zoned.epoch_milliseconds

    def copy(self) -> Datetime:
        """Return an independent Datetime for the same instant, zone and calendar."""
        return Datetime(self._zoned, config=self._config)

    __copy__ = copy

    def to_zoned_instant(self) -> ZonedInstant:
        return self._zoned

    def to_instant(self) -> Instant:
        return self._zoned.to_instant()

    @property
    def config(self) -> FormatConfig:
        """The configuration in effect for this value."""
        return self._config if self._config is not None else get_config()

    @property
    def epoch_nanoseconds(self) -> int:
        return self._zoned.epoch_nanoseconds

    @property
    def epoch_milliseconds(self) -> int:
        return self._zoned.epoch_milliseconds

    @property
    def timezone_id(self) -> str:
        return self._zoned.timezone_id

    @property
    def calendar_id(self) -> str:
        return self._zoned.calendar_id

    def get_time(self) -> int:
        """Return epoch milliseconds (floor)."""
        return self._zoned.epoch_milliseconds

    def value_of(self) -> int:
        return self._zoned.epoch_milliseconds

    # Local accessors

    def get_full_year(self) -> int:
        return self._zoned.year

    def get_year(self) -> int:
        """Return the year minus 1900."""
        return self._zoned.year - 1900

    def get_month(self) -> int:
        """Return the month, zero-based (0 = January)."""
        return self._zoned.month - 1

    def get_date(self) -> int:
        """Return the day of the month, 1-31."""
        return self._zoned.day

    def get_day(self) -> int:
        """Return the day of the week, 0 = Sunday to 6 = Saturday."""
        return self._zoned.day_of_week % self._zoned.days_in_week

    def get_hours(self) -> int:
        return self._zoned.hour

    def get_minutes(self) -> int:
        return self._zoned.minute

    def get_seconds(self) -> int:
        return self._zoned.second

    def get_milliseconds(self) -> int:
        return self._zoned.millisecond

    def get_microseconds(self) -> int:
        """Return the microsecond within the millisecond, 0-999."""
        return self._zoned.microsecond

    def get_nanoseconds(self) -> int:
        """Return the nanosecond within the microsecond, 0-999."""
        return self._zoned.nanosecond

    def get_timezone_offset(self) -> int:
        """Return the UTC offset in minutes, positive west of UTC.

        Examples:
            >>> Datetime(0, "Europe/Amsterdam").get_timezone_offset()
            -60
        """
        return -round(self._zoned.offset_seconds / 60)

    get_day_number_week = get_day
    get_day_number_month = get_date
    get_day_number = get_date

    # UTC accessors

    def _utc(self) -> dict[str, int]:
        return _epoch.utc_fields(self._zoned.epoch_milliseconds)

    def get_utc_full_year(self) -> int:
        return self._utc()["year"]

    def get_utc_year(self) -> int:
        return self._utc()["year"] - 1900

    def get_utc_month(self) -> int:
        return self._utc()["month"]

    def get_utc_date(self) -> int:
        return self._utc()["date"]

    def get_utc_day(self) -> int:
        return self._utc()["day"]

    def get_utc_hours(self) -> int:
        return self._utc()["hour"]

    def get_utc_minutes(self) -> int:
        return self._utc()["minute"]

    def get_utc_seconds(self) -> int:
        return self._utc()["second"]

    def get_utc_milliseconds(self) -> int:
        return self._utc()["millisecond"]

    def get_utc_nanoseconds(self) -> int:
        """Return the nanosecond within the microsecond; the same in every zone."""
        return self._zoned.nanosecond

    # Name lookups

    def get_day_name(self) -> str:
        return self.config.day_names[self.get_day()]

    def get_month_name(self) -> str:
        return self.config.month_names[self.get_month()]

    def get_full_day_name(self) -> str:
        return self.config.day_names_full[self.get_day()]

    def get_full_month_name(self) -> str:
        return self.config.month_names_full[self.get_month()]

    # Local setters

    def _set_local(self, **overrides: int | None) -> int:
        components = {unit: value for unit, value in overrides.items() if value is not None}
        return self._replace_instant(resolve_local(self._zoned, components))

    @coerce_arguments("year", "month", "date")
    def set_full_year(self, year: int, month: int | None = None, date: int | None = None) -> int:
        """Set the year, and optionally the zero-based month and the date.

        Out-of-range values carry over: ``set_full_year(2024, 12)`` is
        January 2025. A day that does not exist in the target month is
        clamped (2024-02-29 plus one year is 2025-02-28).

        Returns:
            The new epoch milliseconds.

        Raises:
            TypeCoercionError: If an argument is not a number.
        """
        return self._set_local(
            year=year, month=None if month is None else month + 1, day=date
        )

    @coerce_arguments("month", "date")
    def set_month(self, month: int, date: int | None = None) -> int:
        """Set the zero-based month, and optionally the date.

        Examples:
            >>> dt = Datetime(EpochMilliseconds(1744934400000), "UTC")
            >>> dt.set_month(12)
            1768694400000
            >>> dt.get_full_year(), dt.get_month()
            (2026, 0)
        """
        return self._set_local(month=month + 1, day=date)

    @coerce_arguments("date")
    def set_date(self, date: int) -> int:
        """Set the day of the month; 0 is the last day of the previous month."""
        return self._set_local(day=date)

    @coerce_arguments("hours", "minutes", "seconds", "milliseconds")
    def set_hours(
        self,
        hours: int,
        minutes: int | None = None,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> int:
        """Set the wall-clock hour, and optionally minutes, seconds and ms.

        Crossing a DST transition keeps the requested local hour; a time
        inside a DST gap is pushed forward by the length of the gap.
        """
        return self._set_local(
            hour=hours, minute=minutes, second=seconds, millisecond=milliseconds
        )

    @coerce_arguments("minutes", "seconds", "milliseconds")
    def set_minutes(
        self,
        minutes: int,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> int:
        return self._set_local(minute=minutes, second=seconds, millisecond=milliseconds)

    @coerce_arguments("seconds", "milliseconds")
    def set_seconds(self, seconds: int, milliseconds: int | None = None) -> int:
        return self._set_local(second=seconds, millisecond=milliseconds)

    @coerce_arguments("milliseconds")
    def set_milliseconds(self, milliseconds: int) -> int:
        return self._set_local(millisecond=milliseconds)

    @coerce_arguments("microseconds")
    def set_microseconds(self, microseconds: int) -> int:
        """Set the microsecond within the millisecond; 1000 carries into ms."""
        return self._set_local(microsecond=microseconds)

    @coerce_arguments("nanoseconds")
    def set_nanoseconds(self, nanoseconds: int) -> int:
        """Set the nanosecond within the microsecond; 1000 carries into us."""
        return self._set_local(nanosecond=nanoseconds)

    # UTC setters

    def _set_utc(self, **overrides: int | None) -> int:
        components = {unit: value for unit, value in overrides.items() if value is not None}
        return self._replace_instant(resolve_utc(self._zoned, components))

    @coerce_arguments("year", "month", "date")
    def set_utc_full_year(
        self, year: int, month: int | None = None, date: int | None = None
    ) -> int:
        """Set the UTC year with ``Date.UTC`` arithmetic (no day clamping)."""
        return self._set_utc(year=year, month=month, date=date)

    @coerce_arguments("month", "date")
    def set_utc_month(self, month: int, date: int | None = None) -> int:
        return self._set_utc(month=month, date=date)

    @coerce_arguments("date")
    def set_utc_date(self, date: int) -> int:
        return self._set_utc(date=date)

    @coerce_arguments("hours", "minutes", "seconds", "milliseconds")
    def set_utc_hours(
        self,
        hours: int,
        minutes: int | None = None,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> int:
        """Set the UTC hour; the sub-millisecond part is preserved."""
        return self._set_utc(
            hour=hours, minute=minutes, second=seconds, millisecond=milliseconds
        )

    @coerce_arguments("minutes", "seconds", "milliseconds")
    def set_utc_minutes(
        self,
        minutes: int,
        seconds: int | None = None,
        milliseconds: int | None = None,
    ) -> int:
        return self._set_utc(minute=minutes, second=seconds, millisecond=milliseconds)

    @coerce_arguments("seconds", "milliseconds")
    def set_utc_seconds(self, seconds: int, milliseconds: int | None = None) -> int:
        return self._set_utc(second=seconds, millisecond=milliseconds)

    @coerce_arguments("milliseconds")
    def set_utc_milliseconds(self, milliseconds: int) -> int:
        return self._set_utc(millisecond=milliseconds)

    # Direct replacement

    @coerce_arguments("milliseconds")
    def set_time(self, milliseconds: int) -> int:
        """Replace the instant with epoch milliseconds; zone and calendar are kept."""
        return self.set_epoch_nanoseconds(milliseconds * NANOS_PER_MILLISECOND)

    @coerce_arguments("nanoseconds")
    def set_epoch_nanoseconds(self, nanoseconds: int) -> int:
        """Replace the instant with epoch nanoseconds; returns epoch milliseconds."""
        return self._replace_instant(
            ZonedInstant(nanoseconds, self._zoned.timezone, self._zoned.calendar)
        )

    # Immutable variants

    with_full_year = _immutable_variant(set_full_year)
    with_month = _immutable_variant(set_month)
    with_date = _immutable_variant(set_date)
    with_hours = _immutable_variant(set_hours)
    with_minutes = _immutable_variant(set_minutes)
    with_seconds = _immutable_variant(set_seconds)
    with_milliseconds = _immutable_variant(set_milliseconds)
    with_microseconds = _immutable_variant(set_microseconds)
    with_nanoseconds = _immutable_variant(set_nanoseconds)
    with_utc_full_year = _immutable_variant(set_utc_full_year)
    with_utc_month = _immutable_variant(set_utc_month)
    with_utc_date = _immutable_variant(set_utc_date)
    with_utc_hours = _immutable_variant(set_utc_hours)
    with_utc_minutes = _immutable_variant(set_utc_minutes)
    with_utc_seconds = _immutable_variant(set_utc_seconds)
    with_utc_milliseconds = _immutable_variant(set_utc_milliseconds)
    with_time = _immutable_variant(set_time)
    with_epoch_nanoseconds = _immutable_variant(set_epoch_nanoseconds)

    # Conversions

    def to_timezone(self, timezone: TimezoneLike) -> Datetime:
        """Return a new Datetime for the same instant in another timezone."""
        return Datetime(self._zoned.with_timezone(timezone), config=self._config)

    def with_calendar(self, calendar: CalendarLike) -> Datetime:
        """Return a new Datetime for the same instant in another calendar."""
        return Datetime(self._zoned.with_calendar(calendar), config=self._config)

    def to_date(self) -> _datetime.datetime:
        """Return an aware standard library datetime in this timezone.

        Nanoseconds below the microsecond are dropped.

        Raises:
            RangeError: If the year is outside 1-9999.
        """
        micros = self._zoned.epoch_nanoseconds // NANOS_PER_MICROSECOND
        try:
            utc = _EPOCH_UTC + _datetime.timedelta(microseconds=micros)
            return utc.astimezone(self._zoned.timezone.tzinfo)
        except OverflowError as exc:
            raise RangeError(f"{self.to_json()} is outside the datetime range") from exc

    # Difference

    def _coerce_other(self, other: Datetime | ZonedInstant | Instant) -> ZonedInstant | Instant:
        if isinstance(other, Datetime):
            return other._zoned
        if isinstance(other, (ZonedInstant, Instant)):
            return other
        raise TypeCoercionError(
            f"expected Datetime, ZonedInstant or Instant, got {type(other).__name__}"
        )

    def until(
        self,
        other: Datetime | ZonedInstant | Instant,
        *,
        largest_unit: str | TimeUnit | None = None,
        smallest_unit: str | TimeUnit = TimeUnit.NANOSECOND,
        rounding_increment: int = 1,
        rounding_mode: str | RoundingMode = RoundingMode.TRUNC,
    ) -> Duration:
        """Return the duration from this value to other, in this value's zone.

        Examples:
            >>> a = Datetime(EpochMilliseconds(0), "UTC")
            >>> b = Datetime(EpochMilliseconds(90_000), "Asia/Tokyo")
            >>> a.until(b)
            Duration(minutes=1, seconds=30)
            >>> a.until(b, largest_unit="second").humanize()
            '90 seconds'
        """
        return self._zoned.until(
            self._coerce_other(other),
            largest_unit=largest_unit,
            smallest_unit=smallest_unit,
            rounding_increment=rounding_increment,
            rounding_mode=rounding_mode,
        )

    def since(
        self,
        other: Datetime | ZonedInstant | Instant,
        *,
        largest_unit: str | TimeUnit | None = None,
        smallest_unit: str | TimeUnit = TimeUnit.NANOSECOND,
        rounding_increment: int = 1,
        rounding_mode: str | RoundingMode = RoundingMode.TRUNC,
    ) -> Duration:
        """Return the duration from other to this value, in this value's zone."""
        return self._zoned.since(
            self._coerce_other(other),
            largest_unit=largest_unit,
            smallest_unit=smallest_unit,
            rounding_increment=rounding_increment,
            rounding_mode=rounding_mode,
        )

    def relative_time(self, now: Datetime | ZonedInstant | Instant | None = None) -> str:
        """Describe this value relative to now: ``"5 minutes ago"``, ``"2 days from now"``.

        Examples:
            >>> then = Datetime(EpochMilliseconds(0), "UTC")
            >>> then.relative_time(Datetime(EpochMilliseconds(90_000), "UTC"))
            '1 minute ago'
        """
        now_ms = (
            _epoch.now_ns() // NANOS_PER_MILLISECOND
            if now is None
            else self._coerce_other(now).epoch_milliseconds
        )
        difference_ms = now_ms - self._zoned.epoch_milliseconds
        seconds = abs(difference_ms) // MILLIS_PER_SECOND
        return _relative_phrase(seconds if difference_ms >= 0 else -seconds)

    # Serialization

    def format(self, pattern: str) -> str:
        """Format with PHP ``date()`` codes and ``[macro]`` tokens.

        Raises:
            UnsupportedPlaceholderError: If the pattern uses ``o``.

        Examples:
            >>> dt = Datetime(EpochMilliseconds(1744934400000), "UTC")
            >>> dt.format("\\\\Y-m-d")
            'Y-04-18'
            >>> dt.format("[rfc2822]")
            'Fri, 18 Apr 2025 00:00:00 +0000'
        """
        return FormatEngine(self._config).format(pattern, self._zoned, self)

    def to_iso_string(self) -> str:
        """Return the UTC ISO 8601 string with milliseconds and a ``Z`` suffix."""
        return format_utc_iso(self._zoned.epoch_milliseconds)

    def to_json(self) -> str:
        """Return the zone-qualified RFC 9557 string."""
        return self._zoned.to_string()

    def to_string(self) -> str:
        """Return ``"Fri Apr 18 2025 00:00:00 UTC+0000 (UTC)"`` in this zone."""
        return self.format(TO_STRING_PATTERN)

    def to_html(self) -> str:
        """Return a ``<time>`` element showing this instant in the host timezone."""
        local = self.to_timezone(host_timezone_id())
        return self._time_element(local.to_string())

    def to_html_string(self) -> str:
        """Return a ``<time>`` element showing this instant in its own timezone."""
        return self._time_element(self.to_string())

    def discord_text(self, style: str = "f") -> str:
        """Return the display text for one of Discord's timestamp styles.

        Styles:
            t  16:20
            T  16:20:30
            d  2025-04-18
            D  2025 April 18
            f  2025 April 18 16:20
            F  Friday, 2025 April 18 16:20
            R  relative time (``3 hours ago``)

        Raises:
            ValueError: If style is not one of the above.

        Examples:
            >>> Datetime(EpochMilliseconds(1744934400000), "UTC").discord_text("F")
            'Friday, 2025 April 18 00:00'
        """
        if style not in DISCORD_STYLES:
            raise ValueError(f"{style!r} is not a valid style; expected one of {DISCORD_STYLES}")
        zi = self._zoned
        clock = f"{zi.hour:02d}:{zi.minute:02d}"
        year = f"{zi.year:04d}"
        long_date = f"{year} {self.get_full_month_name()} {zi.day:02d}"
        return {
            "t": lambda: clock,
            "T": lambda: f"{clock}:{zi.second:02d}",
            "d": lambda: f"{year}-{zi.month:02d}-{zi.day:02d}",
            "D": lambda: long_date,
            "f": lambda: f"{long_date} {clock}",
            "F": lambda: f"{self.get_full_day_name()}, {long_date} {clock}",
            "R": lambda: self.relative_time(),
        }[style]()

    def to_html_discord_string(self, style: str = "f") -> str:
        """Return a ``<time>`` element showing ``discord_text(style)``.

        The element carries the style in ``data-discord-style`` and the full
        to_string form in ``title``.
        """
        return self._time_element(
            self.discord_text(style), ("data-discord-style", style), ("title", self.to_string())
        )

    def _time_element(self, text: str, *attributes: tuple[str, str]) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value)}"'
            for name, value in (("datetime", self.to_iso_string()), *attributes)
        )
        return f"<time{attrs}>{html.escape(text, quote=False)}</time>"

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Datetimes are equal when they denote the same instant."""
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._zoned.epoch_nanoseconds == other._zoned.epoch_nanoseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._zoned.epoch_nanoseconds < other._zoned.epoch_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._zoned.epoch_nanoseconds <= other._zoned.epoch_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._zoned.epoch_nanoseconds > other._zoned.epoch_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Datetime):
            return NotImplemented
        return self._zoned.epoch_nanoseconds >= other._zoned.epoch_nanoseconds

    def __repr__(self) -> str:
        return f"Datetime({self.to_json()!r})"

    def __str__(self) -> str:
        return self.to_string()


def datetime_string(
    source: DatetimeSource = None,
    timezone: TimezoneLike | None = None,
) -> str:
    """Return the default string form of a Datetime built from the arguments.

    Examples:
        >>> datetime_string(EpochMilliseconds(0), "UTC")
        'Thu Jan 01 1970 00:00:00 UTC+0000 (UTC)'
    """
    return Datetime(source, timezone).to_string()


__all__ = [
    "DISCORD_STYLES",
    "Datetime",
    "EpochMilliseconds",
    "EpochNanoseconds",
    "datetime_string",
]
