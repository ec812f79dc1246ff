"""Instant and ZonedInstant: the zoned-calendar primitive.

An Instant is an exact point on the timeline (nanoseconds since the Unix
epoch). A ZonedInstant pairs an instant with a timezone and a calendar,
which together determine its wall-clock fields. Both are immutable; every
operation returns a new value.

ZonedInstant arithmetic follows these rules:

- years and months move the wall-clock date and clamp the day to the
  target month ("constrain"); weeks and days move the wall-clock date.
- hours and smaller are exact time by default. With ``wall_clock=True``
  they move the wall-clock time instead.
- a wall-clock result keeps the starting offset when that offset is valid
  for it. Otherwise an ambiguous result (repeated hour) resolves to the
  earlier instant and one inside a gap (skipped hour) is pushed forward
  by the length of the gap ("compatible" disambiguation).
"""

from __future__ import annotations

import logging
import time as _time
from typing import Union

from globaltime._internal.calendar import (
    add_months,
    constrain_day,
    day_of_year,
    days_in_month,
    days_in_year,
    epoch_days_to_ymd,
    is_leap_year,
    iso_week,
    iso_weekday,
    ymd_to_epoch_days,
)
from globaltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from globaltime._internal.validation import coerce_integer, validate_epoch_nanoseconds
from globaltime.arithmetic.rounding import RoundingMode, round_to_increment
from globaltime.core.duration import Duration
from globaltime.units.calendar import DEFAULT_CALENDAR, Calendar
from globaltime.units.timeunit import TimeUnit
from globaltime.units.timezone import Timezone, format_offset

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, Timezone]
CalendarLike = Union[str, Calendar]


class Instant:
    """An exact point in time with nanosecond precision and no timezone.

    Examples:
        >>> Instant(0).epoch_milliseconds
        0
        >>> Instant.from_epoch_milliseconds(1_500).epoch_nanoseconds
        1500000000
    """

    __slots__ = ("_epoch_ns",)

    def __init__(self, epoch_nanoseconds: int) -> None:
        """Create an Instant.

        Raises:
            TypeCoercionError: If epoch_nanoseconds is not a number.
            RangeError: If the instant is outside the supported range.
        """
        epoch_ns = coerce_integer(epoch_nanoseconds, "epoch_nanoseconds")
        validate_epoch_nanoseconds(epoch_ns)
        self._epoch_ns: int = epoch_ns

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant from the system clock."""
        return cls(_time.time_ns())

    @classmethod
    def from_epoch_milliseconds(cls, milliseconds: int) -> Instant:
        return cls(coerce_integer(milliseconds, "milliseconds") * NANOS_PER_MILLISECOND)

    @property
    def epoch_nanoseconds(self) -> int:
        return self._epoch_ns

    @property
    def epoch_milliseconds(self) -> int:
        """Milliseconds since the epoch, rounded toward negative infinity."""
        return self._epoch_ns // NANOS_PER_MILLISECOND

    @property
    def epoch_seconds(self) -> int:
        return self._epoch_ns // NANOS_PER_SECOND

    def to_zoned(
        self,
        timezone: TimezoneLike,
        calendar: CalendarLike = DEFAULT_CALENDAR,
    ) -> ZonedInstant:
        """Return this instant viewed in a timezone and calendar."""
        return ZonedInstant(self._epoch_ns, timezone, calendar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._epoch_ns == other._epoch_ns

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._epoch_ns < other._epoch_ns

    def __hash__(self) -> int:
        return hash(self._epoch_ns)

    def __repr__(self) -> str:
        return f"Instant({self._epoch_ns})"


class ZonedInstant:
    """An immutable (epoch nanoseconds, timezone, calendar) triple.

    The wall-clock fields are computed once at construction.

    Attributes:
        epoch_nanoseconds: Exact position on the timeline.
        timezone_id: Canonical timezone identifier.
        calendar_id: Calendar identifier (``iso8601`` by default).
        year, month, day: Wall-clock date (month is 1-12).
        hour, minute, second: Wall-clock time.
        millisecond, microsecond, nanosecond: Sub-second fields, each 0-999.

    Examples:
        >>> zi = ZonedInstant(0, "America/New_York")
        >>> (zi.year, zi.month, zi.day, zi.hour)
        (1969, 12, 31, 19)
        >>> zi.offset_seconds
        -18000

        >>> zi.add(months=1).to_string()
        '1970-01-31T19:00:00-05:00[America/New_York]'
    """

    __slots__ = (
        "_epoch_ns",
        "_tz",
        "_calendar",
        "_offset",
        "_epoch_days",
        "_ymd",
        "_time_ns",
    )

    def __init__(
        self,
        epoch_nanoseconds: int,
        timezone: TimezoneLike = "UTC",
        calendar: CalendarLike = DEFAULT_CALENDAR,
    ) -> None:
        """Create a ZonedInstant.

        Args:
            epoch_nanoseconds: Nanoseconds since 1970-01-01T00:00Z.
            timezone: Timezone identifier or Timezone.
            calendar: Calendar identifier or Calendar.

        Raises:
            TypeCoercionError: If epoch_nanoseconds is not a number.
            RangeError: If the instant is outside the supported range.
            InvalidTimezoneError: If the timezone cannot be resolved.
            CalendarError: If the calendar is not supported.
        """
        epoch_ns = coerce_integer(epoch_nanoseconds, "epoch_nanoseconds")
        validate_epoch_nanoseconds(epoch_ns)
        tz = Timezone.from_id(timezone)
        cal = Calendar.from_id(calendar)

        offset = tz.offset_seconds_at(epoch_ns // NANOS_PER_SECOND)
        local_ns = epoch_ns + offset * NANOS_PER_SECOND
        epoch_days, time_ns = divmod(local_ns, NANOS_PER_DAY)

        self._epoch_ns: int = epoch_ns
        self._tz: Timezone = tz
        self._calendar: Calendar = cal
        self._offset: int = offset
        self._epoch_days: int = epoch_days
        self._ymd: tuple[int, int, int] = epoch_days_to_ymd(epoch_days)
        self._time_ns: int = time_ns

    @classmethod
    def from_local(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        *,
        timezone: TimezoneLike = "UTC",
        calendar: CalendarLike = DEFAULT_CALENDAR,
    ) -> ZonedInstant:
        """Resolve wall-clock fields in a timezone to a ZonedInstant.

        The day is clamped to the month. Time fields may overflow; they are
        added to the start of the day as exact wall-clock nanoseconds.

        Raises:
            ValueError: If month is not 1-12.

        Examples:
            >>> ZonedInstant.from_local(2025, 3, 9, 2, 30, timezone="America/New_York").hour
            3
        """
        if month < 1 or month > 12:
            raise ValueError(f"month must be 1-12, got {month}")
        epoch_days = ymd_to_epoch_days(year, month, constrain_day(year, month, max(day, 1)))
        time_ns = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + millisecond * NANOS_PER_MILLISECOND
            + microsecond * NANOS_PER_MICROSECOND
            + nanosecond
        )
        return cls._from_local_ns(
            epoch_days * NANOS_PER_DAY + time_ns,
            Timezone.from_id(timezone),
            Calendar.from_id(calendar),
        )

    @classmethod
    def _from_local_ns(
        cls,
        local_ns: int,
        tz: Timezone,
        calendar: Calendar,
        prefer: int | None = None,
    ) -> ZonedInstant:
        return cls(tz.resolve_local(local_ns, prefer=prefer), tz, calendar)

    @classmethod
    def now(
        cls,
        timezone: TimezoneLike = "UTC",
        calendar: CalendarLike = DEFAULT_CALENDAR,
    ) -> ZonedInstant:
        return cls(_time.time_ns(), timezone, calendar)

    # Exact time

    @property
    def epoch_nanoseconds(self) -> int:
        return self._epoch_ns

    @property
    def epoch_milliseconds(self) -> int:
        """Milliseconds since the epoch, rounded toward negative infinity."""
        return self._epoch_ns // NANOS_PER_MILLISECOND

    @property
    def epoch_seconds(self) -> int:
        return self._epoch_ns // NANOS_PER_SECOND

    def to_instant(self) -> Instant:
        return Instant(self._epoch_ns)

    # Zone and calendar

    @property
    def timezone(self) -> Timezone:
        return self._tz

    @property
    def timezone_id(self) -> str:
        return self._tz.id

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def calendar_id(self) -> str:
        return self._calendar.id

    @property
    def offset_seconds(self) -> int:
        """UTC offset in effect, in seconds east of UTC."""
        return self._offset

    @property
    def offset_nanoseconds(self) -> int:
        return self._offset * NANOS_PER_SECOND

    @property
    def offset(self) -> str:
        """UTC offset as ``+HH:MM``."""
        return format_offset(self._offset, ":")

    @property
    def is_dst(self) -> bool:
        return self._tz.is_dst_at(self.epoch_seconds)

    @property
    def zone_abbreviation(self) -> str:
        return self._tz.abbreviation_at(self.epoch_seconds)

    # Wall-clock fields

    @property
    def year(self) -> int:
        return self._ymd[0]

    @property
    def month(self) -> int:
        """Month of the year, 1-12."""
        return self._ymd[1]

    @property
    def day(self) -> int:
        return self._ymd[2]

    @property
    def hour(self) -> int:
        return self._time_ns // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._time_ns % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._time_ns % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return (self._time_ns % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Microsecond within the millisecond, 0-999."""
        return (self._time_ns % NANOS_PER_MILLISECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Nanosecond within the microsecond, 0-999."""
        return self._time_ns % NANOS_PER_MICROSECOND

    @property
    def day_of_week(self) -> int:
        """ISO day of week, Monday=1 to Sunday=7."""
        return iso_weekday(*self._ymd)

    @property
    def day_of_year(self) -> int:
        """Day of the year, 1-based."""
        return day_of_year(*self._ymd)

    @property
    def week_of_year(self) -> int:
        return iso_week(*self._ymd)[1]

    @property
    def year_of_week(self) -> int:
        return iso_week(*self._ymd)[0]

    @property
    def days_in_week(self) -> int:
        return self._calendar.days_in_week

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def days_in_year(self) -> int:
        return days_in_year(self.year)

    @property
    def in_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def hours_in_day(self) -> int:
        """Length of the current wall-clock day in whole hours (23, 24 or 25)."""
        start = ZonedInstant._from_local_ns(
            self._epoch_days * NANOS_PER_DAY, self._tz, self._calendar
        )
        end = ZonedInstant._from_local_ns(
            (self._epoch_days + 1) * NANOS_PER_DAY, self._tz, self._calendar
        )
        return (end._epoch_ns - start._epoch_ns) // NANOS_PER_HOUR

    def fields(self) -> dict[str, int]:
        """Return the wall-clock fields as a component record.

        Examples:
            >>> ZonedInstant(1_500_000_123, "UTC").fields()["millisecond"]
            500
        """
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
            "microsecond": self.microsecond,
            "nanosecond": self.nanosecond,
        }

    # Conversions

    def with_timezone(self, timezone: TimezoneLike) -> ZonedInstant:
        """Return the same instant viewed in another timezone."""
        return ZonedInstant(self._epoch_ns, timezone, self._calendar)

    def with_calendar(self, calendar: CalendarLike) -> ZonedInstant:
        """Return the same instant labelled with another calendar."""
        return ZonedInstant(self._epoch_ns, self._tz, calendar)

    # Arithmetic

    def add(
        self,
        duration: Duration | None = None,
        *,
        wall_clock: bool = False,
        **units: int,
    ) -> ZonedInstant:
        """Return this instant shifted by a duration.

        Args:
            duration: A Duration to add. Unit keywords are added on top.
            wall_clock: If True, hours and smaller move the wall-clock time
                rather than the exact time, so crossing a DST transition
                lands on the requested local hour.
            **units: Signed amounts keyed by plural unit name
                (``years=1, hours=-2``).

        Returns:
            A new ZonedInstant.

        Raises:
            RangeError: If the result is outside the supported range.

        Examples:
            >>> jan31 = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
            >>> jan31.add(months=1).day
            28

            >>> before = ZonedInstant.from_local(2025, 3, 9, 0, 30, timezone="America/New_York")
            >>> before.add(hours=5).hour
            6
            >>> before.add(hours=5, wall_clock=True).hour
            5
        """
        amounts = {unit.plural: 0 for unit in TimeUnit.descending()}
        if duration is not None:
            amounts.update(duration.to_dict())
        for name, value in units.items():
            unit = TimeUnit.from_name(name)
            amounts[unit.plural] += coerce_integer(value, name)

        time_ns = sum(
            amounts[unit.plural] * unit.nanoseconds
            for unit in TimeUnit.descending()
            if not unit.is_calendar_unit
        )
        has_date = any(
            amounts[unit.plural] for unit in TimeUnit.descending() if unit.is_calendar_unit
        )

        if not has_date and not wall_clock:
            return ZonedInstant(self._epoch_ns + time_ns, self._tz, self._calendar)

        epoch_days = self._shift_date(
            amounts["years"], amounts["months"], amounts["weeks"] * 7 + amounts["days"]
        )
        local_ns = epoch_days * NANOS_PER_DAY + self._time_ns
        if wall_clock:
            return ZonedInstant._from_local_ns(
                local_ns + time_ns, self._tz, self._calendar, prefer=self._epoch_ns
            )

        shifted = ZonedInstant._from_local_ns(
            local_ns, self._tz, self._calendar, prefer=self._epoch_ns
        )
        if time_ns:
            return ZonedInstant(shifted._epoch_ns + time_ns, self._tz, self._calendar)
        return shifted

    def subtract(
        self,
        duration: Duration | None = None,
        *,
        wall_clock: bool = False,
        **units: int,
    ) -> ZonedInstant:
        """Return this instant shifted back by a duration."""
        negated = duration.negated() if duration is not None else None
        return self.add(
            negated,
            wall_clock=wall_clock,
            **{name: -coerce_integer(value, name) for name, value in units.items()},
        )

    def _shift_date(self, years: int, months: int, days: int) -> int:
        year, month, day = self._ymd
        if years or months:
            year, month = add_months(year, month, years * 12 + months)
            day = constrain_day(year, month, day)
        return ymd_to_epoch_days(year, month, day) + days

    # Difference

    def until(
        self,
        other: ZonedInstant | Instant,
        *,
        largest_unit: str | TimeUnit | None = None,
        smallest_unit: str | TimeUnit = TimeUnit.NANOSECOND,
        rounding_increment: int = 1,
        rounding_mode: str | RoundingMode = RoundingMode.TRUNC,
    ) -> Duration:
        """Return the duration from this instant to another.

        The other instant is first moved into this instant's timezone and
        calendar. Calendar units (years, months, weeks, days) are counted
        on the wall clock; the remainder is exact time.

        Args:
            other: The end point.
            largest_unit: Largest unit of the result. Defaults to hours, or
                to smallest_unit when that is larger.
            smallest_unit: Smallest unit of the result.
            rounding_increment: Round the smallest unit to multiples of this.
            rounding_mode: How to round the smallest unit.

        Returns:
            A Duration with the sign of (other - self).

        Raises:
            ValueError: If the units or rounding options are invalid.

        Examples:
            >>> a = ZonedInstant.from_local(2025, 1, 31, timezone="UTC")
            >>> b = ZonedInstant.from_local(2025, 3, 1, 12, timezone="UTC")
            >>> a.until(b, largest_unit="month")
            Duration(months=1, days=1, hours=12)
            >>> a.until(b)
            Duration(hours=708)
        """
        smallest = TimeUnit.from_name(smallest_unit)
        if largest_unit is None:
            largest = smallest if smallest.larger_than(TimeUnit.HOUR) else TimeUnit.HOUR
        else:
            largest = TimeUnit.from_name(largest_unit)
        if smallest.larger_than(largest):
            raise ValueError(
                f"smallest_unit {smallest.value!r} is larger than largest_unit {largest.value!r}"
            )
        increment = coerce_integer(rounding_increment, "rounding_increment")
        if increment < 1:
            raise ValueError(f"rounding_increment must be at least 1, got {increment}")
        mode = RoundingMode.from_name(rounding_mode)

        end = ZonedInstant(other.epoch_nanoseconds, self._tz, self._calendar)

        if not largest.is_calendar_unit:
            total = round_to_increment(
                end._epoch_ns - self._epoch_ns, smallest.nanoseconds * increment, mode
            )
            return Duration.from_nanoseconds(total, largest)

        return self._calendar_difference(end, largest, smallest, increment, mode)

    def since(
        self,
        other: ZonedInstant | Instant,
        *,
        largest_unit: str | TimeUnit | None = None,
        smallest_unit: str | TimeUnit = TimeUnit.NANOSECOND,
        rounding_increment: int = 1,
        rounding_mode: str | RoundingMode = RoundingMode.TRUNC,
    ) -> Duration:
        """Return the duration from another instant to this one.

        This is ``until()`` in the other direction: the difference is
        measured from this instant's wall clock, then negated, with the
        rounding direction flipped so that ``a.since(b) == -a.until(b)``.
        """
        mode = RoundingMode.from_name(rounding_mode)
        return self.until(
            other,
            largest_unit=largest_unit,
            smallest_unit=smallest_unit,
            rounding_increment=rounding_increment,
            rounding_mode=mode.negated(),
        ).negated()

    def _calendar_difference(
        self,
        end: ZonedInstant,
        largest: TimeUnit,
        smallest: TimeUnit,
        increment: int,
        mode: RoundingMode,
    ) -> Duration:
        sign = (end._epoch_ns > self._epoch_ns) - (end._epoch_ns < self._epoch_ns)
        if sign == 0:
            return Duration()

        # Latest date (counting from self) whose same wall time does not pass end
        candidate = end._epoch_days
        while True:
            if candidate == self._epoch_days:
                intermediate = self
            else:
                intermediate = ZonedInstant._from_local_ns(
                    candidate * NANOS_PER_DAY + self._time_ns, self._tz, self._calendar
                )
            remainder = end._epoch_ns - intermediate._epoch_ns
            if remainder == 0 or (remainder > 0) == (sign > 0) or candidate == self._epoch_days:
                break
            candidate -= sign

        years, months, weeks, days = _date_difference(
            self._ymd, epoch_days_to_ymd(candidate), largest, smallest
        )
        fields = {"years": years, "months": months, "weeks": weeks, "days": days}

        if not smallest.is_calendar_unit:
            rounded = round_to_increment(remainder, smallest.nanoseconds * increment, mode)
            if rounded != remainder:
                next_day = ZonedInstant._from_local_ns(
                    (candidate + sign) * NANOS_PER_DAY + self._time_ns, self._tz, self._calendar
                )
                day_length = next_day._epoch_ns - intermediate._epoch_ns
                if (rounded - day_length) * sign >= 0:
                    # rounding carried into the next day; recount from the exact target
                    target = ZonedInstant(
                        intermediate._epoch_ns + rounded, self._tz, self._calendar
                    )
                    return self._calendar_difference(
                        target, largest, smallest, 1, RoundingMode.TRUNC
                    )
            fields.update(Duration.from_nanoseconds(rounded, TimeUnit.HOUR).to_dict())
            return Duration(**fields)

        # Calendar smallest unit: drop everything below it, then round
        for unit in (TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.WEEK, TimeUnit.DAY):
            if smallest.larger_than(unit):
                fields[unit.plural] = 0
        if mode is RoundingMode.TRUNC and increment == 1:
            return Duration(**fields)

        name = smallest.plural
        truncated = dict(fields)
        truncated[name] = _truncate_to_increment(fields[name], increment)
        lower = self.add(Duration(**truncated))
        upper_fields = dict(truncated)
        upper_fields[name] += sign * increment
        upper = self.add(Duration(**upper_fields))

        span = abs(upper._epoch_ns - lower._epoch_ns)
        progress = abs(end._epoch_ns - lower._epoch_ns)
        scaled = truncated[name] * span + sign * progress * increment
        rounded_units = round_to_increment(scaled, increment * span, mode) // span

        result = dict(truncated)
        result[name] = rounded_units
        target = self.add(Duration(**result))
        logger.debug("rounded %s difference to %s=%s", largest.value, name, rounded_units)
        return self._calendar_difference(target, largest, smallest, 1, RoundingMode.TRUNC)

    # Serialization

    def to_string(self) -> str:
        """Return the RFC 9557 string, e.g. ``2025-04-18T00:00:00+00:00[UTC]``.

        Fractional seconds are printed only when non-zero, without trailing
        zeros. Non-ISO calendars add a ``[u-ca=...]`` annotation.
        """
        year, month, day = self._ymd
        if 0 <= year <= 9999:
            date_str = f"{year:04d}-{month:02d}-{day:02d}"
        else:
            sign = "-" if year < 0 else "+"
            date_str = f"{sign}{abs(year):06d}-{month:02d}-{day:02d}"

        time_str = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        fraction = self._time_ns % NANOS_PER_SECOND
        if fraction:
            time_str += "." + f"{fraction:09d}".rstrip("0")

        result = f"{date_str}T{time_str}{self.offset}[{self._tz.id}]"
        if self._calendar is not Calendar.ISO8601:
            result += f"[u-ca={self._calendar.id}]"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedInstant):
            return NotImplemented
        return (
            self._epoch_ns == other._epoch_ns
            and self._tz == other._tz
            and self._calendar is other._calendar
        )

    def __hash__(self) -> int:
        return hash((self._epoch_ns, self._tz, self._calendar))

    def __repr__(self) -> str:
        return f"ZonedInstant({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()


def _truncate_to_increment(value: int, increment: int) -> int:
    magnitude = abs(value) // increment * increment
    return -magnitude if value < 0 else magnitude


def _date_difference(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    largest: TimeUnit,
    smallest: TimeUnit,
) -> tuple[int, int, int, int]:
    """Return (years, months, weeks, days) between two wall-clock dates.

    Months are counted so that adding them to start (with the day clamped)
    does not pass end; the remaining days are exact.
    """
    start_days = ymd_to_epoch_days(*start)
    end_days = ymd_to_epoch_days(*end)
    sign = (end_days > start_days) - (end_days < start_days)
    if sign == 0:
        return (0, 0, 0, 0)

    years = months = weeks = 0
    if largest in (TimeUnit.YEAR, TimeUnit.MONTH):
        total_months = (end[0] - start[0]) * 12 + (end[1] - start[1])

        def shifted(n: int) -> int:
            year, month = add_months(start[0], start[1], n)
            return ymd_to_epoch_days(year, month, constrain_day(year, month, start[2]))

        while total_months and (shifted(total_months) - end_days) * sign > 0:
            total_months -= sign
        days = end_days - shifted(total_months)
        if largest is TimeUnit.YEAR:
            years = sign * (abs(total_months) // 12)
            months = total_months - years * 12
        else:
            months = total_months
    else:
        days = end_days - start_days

    if largest is TimeUnit.WEEK or smallest is TimeUnit.WEEK:
        weeks = sign * (abs(days) // 7)
        days -= weeks * 7

    return (years, months, weeks, days)


__all__ = ["Instant", "ZonedInstant", "TimezoneLike", "CalendarLike"]
