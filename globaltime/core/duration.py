"""Duration class representing a signed per-unit breakdown of time.

This module provides the Duration class returned by ``until()`` and
``since()``. Unlike an exact nanosecond span, a Duration keeps each unit
separately (years, months, weeks, days, hours, ... nanoseconds) because
calendar units have no fixed length.
"""

from __future__ import annotations

from typing import Iterator

from globaltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from globaltime._internal.validation import coerce_integer
from globaltime.units.timeunit import TimeUnit

_FIELDS: tuple[str, ...] = tuple(unit.plural for unit in TimeUnit.descending())


class Duration:
    """A signed, per-unit breakdown of the difference between two instants.

    All non-zero components share the same sign. Components are not
    balanced against each other: ``Duration(hours=36)`` stays 36 hours.

    Attributes:
        years, months, weeks, days: Calendar components.
        hours, minutes, seconds: Clock components.
        milliseconds, microseconds, nanoseconds: Sub-second components.

    Examples:
        >>> d = Duration(days=1, hours=2)
        >>> d.days
        1
        >>> d.to_dict()
        {'days': 1, 'hours': 2}

        >>> Duration(hours=-3).sign
        -1

        >>> Duration(days=1, hours=-1)
        Traceback (most recent call last):
        ...
        ValueError: mixed-sign duration components are not allowed
    """

    __slots__ = ("_values",)

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        Raises:
            TypeCoercionError: If a component is not a number.
            ValueError: If components have different signs.
        """
        raw = (
            years, months, weeks, days, hours, minutes,
            seconds, milliseconds, microseconds, nanoseconds,
        )
        values = tuple(
            coerce_integer(value, name) for value, name in zip(raw, _FIELDS)
        )
        if any(v > 0 for v in values) and any(v < 0 for v in values):
            raise ValueError("mixed-sign duration components are not allowed")
        self._values: tuple[int, ...] = values

    @classmethod
    def from_dict(cls, components: dict[str, int]) -> Duration:
        """Create a Duration from a mapping of unit name to value.

        Singular and plural unit names are both accepted.
        """
        kwargs = {TimeUnit.from_name(name).plural: value for name, value in components.items()}
        return cls(**kwargs)

    @classmethod
    def from_nanoseconds(
        cls,
        nanoseconds: int,
        largest_unit: TimeUnit = TimeUnit.HOUR,
    ) -> Duration:
        """Balance an exact nanosecond span into clock components.

        Args:
            nanoseconds: The signed span.
            largest_unit: The largest clock unit to balance into
                (HOUR down to NANOSECOND).

        Examples:
            >>> Duration.from_nanoseconds(5_400_000_000_000)
            Duration(hours=1, minutes=30)

            >>> Duration.from_nanoseconds(5_400_000_000_000, TimeUnit.MINUTE)
            Duration(minutes=90)
        """
        if largest_unit.is_calendar_unit:
            raise ValueError(f"cannot balance exact time into {largest_unit.plural}")

        sign = -1 if nanoseconds < 0 else 1
        remaining = abs(nanoseconds)
        kwargs: dict[str, int] = {}
        for unit in TimeUnit.descending():
            if unit.larger_than(largest_unit):
                continue
            amount, remaining = divmod(remaining, unit.nanoseconds)
            kwargs[unit.plural] = sign * amount
        return cls(**kwargs)

    @property
    def years(self) -> int:
        return self._values[0]

    @property
    def months(self) -> int:
        return self._values[1]

    @property
    def weeks(self) -> int:
        return self._values[2]

    @property
    def days(self) -> int:
        return self._values[3]

    @property
    def hours(self) -> int:
        return self._values[4]

    @property
    def minutes(self) -> int:
        return self._values[5]

    @property
    def seconds(self) -> int:
        return self._values[6]

    @property
    def milliseconds(self) -> int:
        return self._values[7]

    @property
    def microseconds(self) -> int:
        return self._values[8]

    @property
    def nanoseconds(self) -> int:
        return self._values[9]

    def get(self, unit: str | TimeUnit) -> int:
        """Return the component for a unit name or TimeUnit."""
        return self._values[TimeUnit.from_name(unit).rank]

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1."""
        for value in self._values:
            if value:
                return 1 if value > 0 else -1
        return 0

    @property
    def blank(self) -> bool:
        """Return True if every component is zero."""
        return self.sign == 0

    @property
    def total_nanoseconds(self) -> int:
        """Return the exact span in nanoseconds, counting days as 24 hours.

        Raises:
            ValueError: If the duration has years, months or weeks.

        Examples:
            >>> Duration(seconds=1, nanoseconds=500).total_nanoseconds
            1000000500
        """
        if self.years or self.months or self.weeks:
            raise ValueError("years, months and weeks have no fixed length")
        return (
            self.days * NANOS_PER_DAY
            + sum(
                self.get(unit) * unit.nanoseconds
                for unit in TimeUnit.descending()
                if not unit.is_calendar_unit
            )
        )

    def negated(self) -> Duration:
        """Return the duration with every component's sign flipped."""
        return Duration(*(-value for value in self._values))

    def abs(self) -> Duration:
        """Return the duration with every component made non-negative."""
        return Duration(*(abs(value) for value in self._values))

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (unit name, value) for non-zero components, largest first."""
        for name, value in zip(_FIELDS, self._values):
            if value:
                yield name, value

    def to_dict(self) -> dict[str, int]:
        """Return the non-zero components, largest unit first."""
        return dict(self.items())

    def humanize(self) -> str:
        """Return a readable breakdown such as ``"1 year, 2 months, 3 days"``.

        Negative durations are prefixed with ``"minus "``.

        Examples:
            >>> Duration(days=1, hours=2).humanize()
            '1 day, 2 hours'
            >>> Duration(minutes=-5).humanize()
            'minus 5 minutes'
            >>> Duration().humanize()
            '0 seconds'
        """
        if self.blank:
            return "0 seconds"
        parts = []
        for name, value in self.items():
            magnitude = abs(value)
            label = name if magnitude != 1 else name[:-1]
            parts.append(f"{magnitude} {label}")
        text = ", ".join(parts)
        return f"minus {text}" if self.sign < 0 else text

    def to_iso_string(self) -> str:
        """Return the ISO 8601 duration string.

        Sub-second components are folded into a fractional seconds value.

        Examples:
            >>> Duration(years=1, months=2, days=3, hours=4, seconds=6, milliseconds=7).to_iso_string()
            'P1Y2M3DT4H6.007S'
            >>> Duration().to_iso_string()
            'PT0S'
            >>> Duration(hours=-1).to_iso_string()
            '-PT1H'
        """
        if self.blank:
            return "PT0S"

        magnitude = self.abs()
        date_part = ""
        for value, designator in (
            (magnitude.years, "Y"),
            (magnitude.months, "M"),
            (magnitude.weeks, "W"),
            (magnitude.days, "D"),
        ):
            if value:
                date_part += f"{value}{designator}"

        sub_nanos = (
            magnitude.milliseconds * NANOS_PER_MILLISECOND
            + magnitude.microseconds * NANOS_PER_MICROSECOND
            + magnitude.nanoseconds
        )
        whole_seconds = magnitude.seconds + sub_nanos // NANOS_PER_SECOND
        fraction = sub_nanos % NANOS_PER_SECOND

        time_part = ""
        if magnitude.hours:
            time_part += f"{magnitude.hours}H"
        if magnitude.minutes:
            time_part += f"{magnitude.minutes}M"
        if whole_seconds or fraction:
            seconds_str = str(whole_seconds)
            if fraction:
                seconds_str += "." + f"{fraction:09d}".rstrip("0")
            time_part += f"{seconds_str}S"

        result = "P" + date_part
        if time_part:
            result += "T" + time_part
        return ("-" if self.sign < 0 else "") + result

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """Component-wise equality.

        ``Duration(hours=24) != Duration(days=1)`` because days are calendar
        units whose length depends on the timezone.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __bool__(self) -> bool:
        return not self.blank

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={value}" for name, value in self.items())
        return f"Duration({inner})"

    def __str__(self) -> str:
        return self.to_iso_string()


__all__ = ["Duration"]
