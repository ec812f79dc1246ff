"""Globaltime exception hierarchy.

All Globaltime-specific exceptions inherit from GlobaltimeError. Each one
also derives from the closest built-in exception so callers can catch
``TypeError`` or ``ValueError`` without importing this module.
"""

from __future__ import annotations


class GlobaltimeError(Exception):
    """Base exception for all Globaltime errors."""

    pass


class InvalidTimezoneError(GlobaltimeError, ValueError):
    """Invalid or unknown timezone identifier.

    Raised by every operation that accepts a timezone.

    Examples:
        - Unknown IANA name ("Mars/Olympus_Mons")
        - Malformed offset string ("+5:3")
        - Offset outside +/- 24 hours
    """

    pass


class TypeCoercionError(GlobaltimeError, TypeError):
    """A value could not be coerced to a number.

    Raised by the ``set_*`` family before any calendar arithmetic runs.

    Examples:
        - ``dt.set_hours("noon")``
        - ``dt.set_month(None)``
        - ``dt.set_date(float("nan"))``
    """

    pass


class UnsupportedPlaceholderError(GlobaltimeError, ValueError):
    """A format code is recognised but deliberately not implemented.

    Currently only ``o`` (ISO week-numbering year) raises this.
    """

    pass


class ParseError(GlobaltimeError, ValueError):
    """Failed to parse string representation.

    Examples:
        - Missing bracketed timezone in a strict parse
        - Offset that disagrees with the bracketed timezone
        - A constructor string the loose parser cannot read
    """

    pass


class RangeError(GlobaltimeError, ValueError):
    """An instant fell outside the supported range.

    The engine supports 100,000,000 days on either side of the Unix epoch.
    """

    pass


class CalendarError(GlobaltimeError, ValueError):
    """Unknown or unsupported calendar identifier."""

    pass


__all__ = [
    "GlobaltimeError",
    "InvalidTimezoneError",
    "TypeCoercionError",
    "UnsupportedPlaceholderError",
    "ParseError",
    "RangeError",
    "CalendarError",
]
