"""Conversion between epoch values and calendar components.

This module provides:
    - Date.UTC-style millisecond arithmetic (make_day, make_time)
    - UTC field extraction from epoch milliseconds
    - Current-time helpers (now_ns, zero_ms, zero_ns)
"""

from __future__ import annotations

from globaltime.convert.epoch import (
    from_components_utc,
    make_day,
    make_time,
    now_ns,
    utc_components_to_millis,
    utc_fields,
    zero_ms,
    zero_ns,
)

__all__: list[str] = [
    "from_components_utc",
    "make_day",
    "make_time",
    "now_ns",
    "utc_components_to_millis",
    "utc_fields",
    "zero_ms",
    "zero_ns",
]
