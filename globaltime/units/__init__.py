"""Temporal units and enumerations.

This module provides:
    - Calendar: supported calendar systems (iso8601, gregory)
    - TimeUnit: standard time units (YEAR, MONTH, DAY, etc.)
    - Timezone: IANA and fixed-offset timezone resolution
"""

from __future__ import annotations

from globaltime.units.calendar import Calendar
from globaltime.units.timeunit import TimeUnit
from globaltime.units.timezone import Timezone, host_timezone_id

__all__: list[str] = [
    "Calendar",
    "TimeUnit",
    "Timezone",
    "host_timezone_id",
]
