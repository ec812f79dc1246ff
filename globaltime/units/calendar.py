"""Calendar identifiers.

Only calendars that share proleptic Gregorian arithmetic are supported:
``iso8601`` (the default) and ``gregory``. They differ only in how they
are labelled when serialized.
"""

from __future__ import annotations

from enum import Enum

from globaltime.errors import CalendarError


class Calendar(Enum):
    """Supported calendar systems.

    Examples:
        >>> Calendar.from_id("ISO8601")
        <Calendar.ISO8601: 'iso8601'>

        >>> Calendar.GREGORY.days_in_week
        7
    """

    ISO8601 = "iso8601"
    GREGORY = "gregory"

    @classmethod
    def from_id(cls, identifier: object) -> Calendar:
        """Resolve a calendar identifier (case-insensitive).

        Raises:
            CalendarError: If the calendar is unknown or unsupported.
        """
        if isinstance(identifier, Calendar):
            return identifier
        if not isinstance(identifier, str):
            raise CalendarError(
                f"calendar identifier must be a string, got {type(identifier).__name__}"
            )
        try:
            return cls(identifier.strip().lower())
        except ValueError:
            raise CalendarError(f"unsupported calendar: {identifier!r}") from None

    @property
    def id(self) -> str:
        return self.value

    @property
    def days_in_week(self) -> int:
        return 7


DEFAULT_CALENDAR = Calendar.ISO8601


__all__ = ["Calendar", "DEFAULT_CALENDAR"]
