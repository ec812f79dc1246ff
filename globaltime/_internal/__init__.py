"""Internal utilities for Globaltime.

This module contains private implementation details:
    - Numeric coercion and range validation
    - Constants and magic numbers
    - Proleptic Gregorian calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from globaltime._internal.validation import (
    coerce_arguments,
    coerce_integer,
    validate_epoch_nanoseconds,
)

__all__: list[str] = [
    "coerce_arguments",
    "coerce_integer",
    "validate_epoch_nanoseconds",
]
