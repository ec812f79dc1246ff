"""TimeUnit enumeration for standard time units.

This module provides the TimeUnit enum representing the units a
ZonedInstant can be shifted by and a Duration is broken down into,
from years down to nanoseconds.
"""

from __future__ import annotations

from enum import Enum

from globaltime._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class TimeUnit(Enum):
    """Standard time units for temporal operations.

    Members are declared largest first; ``TimeUnit.descending()`` relies on
    that order.

    Note:
        YEAR, MONTH, WEEK and DAY are calendar units: their length depends
        on the date and timezone they are applied to. ``nanoseconds``
        returns None for them.

    Examples:
        >>> TimeUnit.HOUR.nanoseconds
        3600000000000

        >>> TimeUnit.from_name("months")
        <TimeUnit.MONTH: 'month'>

        >>> TimeUnit.MONTH.is_calendar_unit
        True
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"

    @classmethod
    def from_name(cls, name: str | TimeUnit) -> TimeUnit:
        """Resolve a unit from its singular or plural name.

        Raises:
            ValueError: If the name is not a known unit.
        """
        if isinstance(name, TimeUnit):
            return name
        key = name.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown time unit: {name!r}") from None

    @classmethod
    def descending(cls) -> tuple[TimeUnit, ...]:
        """Return all units ordered from largest to smallest."""
        return tuple(cls)

    @property
    def plural(self) -> str:
        """Return the plural field name used by Duration (``"hours"``)."""
        return f"{self.value}s"

    @property
    def rank(self) -> int:
        """Return the position of this unit, 0 being the largest."""
        return _RANKS[self]

    @property
    def is_calendar_unit(self) -> bool:
        return self.rank <= TimeUnit.DAY.rank

    @property
    def nanoseconds(self) -> int | None:
        """Return the exact length of one unit, or None for calendar units."""
        return _NANOS.get(self)

    def larger_than(self, other: TimeUnit) -> bool:
        return self.rank < other.rank


_RANKS: dict[TimeUnit, int] = {unit: index for index, unit in enumerate(TimeUnit)}

_NANOS: dict[TimeUnit, int] = {
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.NANOSECOND: 1,
}


__all__ = ["TimeUnit"]
