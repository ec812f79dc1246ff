"""Globaltime: a Date-compatible date-time value with IANA timezones.

Globaltime wraps a zoned instant (epoch nanoseconds, timezone, calendar)
in a familiar ``Date``-style API: zone-aware getters, overflow-correct
setters, PHP ``date()``-style formatting and calendar-aware differences.

Core Types:
    Datetime: Mutable Date-compatible value
    ZonedInstant: Immutable zoned instant engine
    Instant: Exact instant with no timezone
    Duration: Per-unit difference between two instants

Units:
    Calendar: Supported calendars (iso8601, gregory)
    TimeUnit: Standard time units (YEAR, MONTH, DAY, etc.)
    Timezone: IANA and fixed-offset timezone
    RoundingMode: Rounding for until()/since()

Configuration:
    FormatConfig, get_config, set_config, reset_config

Exceptions:
    GlobaltimeError: Base exception
    InvalidTimezoneError, TypeCoercionError, UnsupportedPlaceholderError,
    ParseError, RangeError, CalendarError

Example:
    >>> from globaltime import Datetime, EpochMilliseconds
    >>> dt = Datetime(EpochMilliseconds(1744934400000), "Europe/Amsterdam")
    >>> dt.format("l jS F Y H:i T")
    'Friday 18th April 2025 02:00 CEST'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Configuration
from globaltime.config import FormatConfig, get_config, reset_config, set_config

# Core types
from globaltime.core.datetime import Datetime, datetime_string
from globaltime.core.duration import Duration
from globaltime.core.instant import Instant, ZonedInstant
from globaltime.core.source import EpochMilliseconds, EpochNanoseconds

# Units
from globaltime.arithmetic.rounding import RoundingMode
from globaltime.units.calendar import Calendar
from globaltime.units.timeunit import TimeUnit
from globaltime.units.timezone import Timezone

# Exceptions
from globaltime.errors import (
    CalendarError,
    GlobaltimeError,
    InvalidTimezoneError,
    ParseError,
    RangeError,
    TypeCoercionError,
    UnsupportedPlaceholderError,
)

# HTML bridge
from globaltime.html import TimeElement, html_to_current_time

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Datetime",
    "Duration",
    "EpochMilliseconds",
    "EpochNanoseconds",
    "Instant",
    "ZonedInstant",
    "datetime_string",
    # Units
    "Calendar",
    "RoundingMode",
    "TimeUnit",
    "Timezone",
    # Configuration
    "FormatConfig",
    "get_config",
    "reset_config",
    "set_config",
    # Exceptions
    "CalendarError",
    "GlobaltimeError",
    "InvalidTimezoneError",
    "ParseError",
    "RangeError",
    "TypeCoercionError",
    "UnsupportedPlaceholderError",
    # HTML bridge
    "TimeElement",
    "html_to_current_time",
]
