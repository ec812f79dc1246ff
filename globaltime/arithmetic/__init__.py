"""Arithmetic support for Globaltime.

This module provides:
    - RoundingMode and round_to_increment for difference rounding
    - resolve_local and resolve_utc, the overflow-correct setters
"""

from __future__ import annotations

from globaltime.arithmetic.overflow import (
    component_deltas,
    resolve_local,
    resolve_utc,
)
from globaltime.arithmetic.rounding import RoundingMode, round_to_increment

__all__: list[str] = [
    "RoundingMode",
    "component_deltas",
    "resolve_local",
    "resolve_utc",
    "round_to_increment",
]
