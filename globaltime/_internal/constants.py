"""Unit multipliers and range limits shared across the package."""

from __future__ import annotations

# Nanosecond multipliers
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR

# Millisecond multipliers, for Date-style epoch values
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3_600
SECONDS_PER_DAY: int = 86_400

# An instant may lie at most 100,000,000 days from the epoch (8.64e21 ns).
MAX_EPOCH_DAYS: int = 100_000_000
MAX_EPOCH_NANOS: int = MAX_EPOCH_DAYS * NANOS_PER_DAY

# Fixed offsets must be strictly inside +/- 24h.
MAX_UTC_OFFSET_SECONDS: int = SECONDS_PER_DAY

# zoneinfo cannot build datetimes outside years 1-9999; lookups are clamped.
ZONE_LOOKUP_MIN_YEAR: int = 2
ZONE_LOOKUP_MAX_YEAR: int = 9998


__all__ = [
    "MAX_EPOCH_DAYS",
    "MAX_EPOCH_NANOS",
    "MAX_UTC_OFFSET_SECONDS",
    "MILLIS_PER_DAY",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_SECOND",
    "NANOS_PER_DAY",
    "NANOS_PER_HOUR",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "ZONE_LOOKUP_MAX_YEAR",
    "ZONE_LOOKUP_MIN_YEAR",
]
