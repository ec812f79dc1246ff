"""Formatting and parsing.

This module provides functions for converting zoned instants to and from
string representations:
    - PHP date()-style pattern formatting with macros
    - RFC 9557 strict parsing and UTC ISO 8601 output
    - Date.parse-compatible loose parsing

Examples:
    >>> from globaltime.format import parse_zoned, FormatEngine
    >>> zi = parse_zoned("2025-04-18T00:00:00+00:00[UTC]")
    >>> FormatEngine().format("D, d M Y", zi)
    'Fri, 18 Apr 2025'
"""

from __future__ import annotations

from globaltime.format.iso8601 import format_utc_iso, parse_zoned
from globaltime.format.legacy import parse_loose
from globaltime.format.pattern import (
    SUPPORTED_CODES,
    FormatEngine,
    escape_literal,
    format_offset,
)

__all__: list[str] = [
    # pattern
    "FormatEngine",
    "SUPPORTED_CODES",
    "escape_literal",
    "format_offset",
    # ISO 8601 / RFC 9557
    "format_utc_iso",
    "parse_zoned",
    # loose
    "parse_loose",
]
