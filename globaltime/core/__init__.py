"""Core value types.

This module provides:
    - Duration: signed per-unit breakdown returned by until()/since()
    - Instant: exact point in time with no timezone
    - ZonedInstant: immutable (instant, timezone, calendar) triple
    - Datetime: mutable Date-compatible value holding one ZonedInstant
    - EpochNanoseconds, EpochMilliseconds: explicit constructor sources
"""

from __future__ import annotations

from globaltime.core.duration import Duration
from globaltime.core.instant import Instant, ZonedInstant
from globaltime.core.source import EpochMilliseconds, EpochNanoseconds
from globaltime.core.datetime import Datetime, datetime_string

__all__: list[str] = [
    "Datetime",
    "Duration",
    "EpochMilliseconds",
    "EpochNanoseconds",
    "Instant",
    "ZonedInstant",
    "datetime_string",
]
