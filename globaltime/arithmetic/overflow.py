"""Overflow-correct component resolution for the ``set_*`` family.

Setting a field to an out-of-range value (month 13, hour 25, day 0) must
produce a valid instant. Rather than clamping fields, the difference
between the requested and the current value of each unit is added to the
instant as calendar-aware duration arithmetic, largest unit first:

    current   2024-01-31 10:00   set hours=25
    delta     hours=+15
    result    2024-02-01 01:00

Two families exist and deliberately resolve differently:

- local setters go through ZonedInstant wall-clock addition, so month
  overflow clamps the day (``constrain``), DST gaps push forward and a
  value inside a repeated hour keeps its offset. An explicit day is
  applied after the month step, counted from the day it landed on.
- UTC setters use fixed Gregorian millisecond arithmetic (``Date.UTC``),
  then re-attach the sub-millisecond part of the old instant.

Examples:
    >>> from globaltime.core.instant import ZonedInstant
    >>> zi = ZonedInstant.from_local(2024, 1, 31, 10, timezone="UTC")
    >>> resolve_local(zi, {"hour": 25}).to_string()
    '2024-02-01T01:00:00+00:00[UTC]'
    >>> resolve_local(zi, {"month": 2}).day
    29
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from globaltime._internal.constants import MILLIS_PER_DAY, NANOS_PER_MILLISECOND
from globaltime.convert.epoch import utc_components_to_millis, utc_fields

if TYPE_CHECKING:
    from globaltime.core.instant import ZonedInstant

logger = logging.getLogger(__name__)

LOCAL_UNITS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
    "microsecond",
    "nanosecond",
)

UTC_UNITS: tuple[str, ...] = (
    "year",
    "month",
    "date",
    "hour",
    "minute",
    "second",
    "millisecond",
)


def component_deltas(
    current: Mapping[str, int], overrides: Mapping[str, int]
) -> dict[str, int]:
    """Return the signed per-unit change needed to reach the overridden record.

    Units missing from overrides keep their current value and so have a
    zero delta.

    Raises:
        KeyError: If overrides names a unit that is not a local unit.

    Examples:
        >>> component_deltas({"year": 2024, "month": 1, "day": 31}, {"month": 13})
        {'year': 0, 'month': 12, 'day': 0}
    """
    unknown = set(overrides) - set(LOCAL_UNITS)
    if unknown:
        raise KeyError(f"unknown component(s): {', '.join(sorted(unknown))}")
    target = dict(current)
    target.update(overrides)
    return {unit: target[unit] - current[unit] for unit in current}


def resolve_local(instant: ZonedInstant, overrides: Mapping[str, int]) -> ZonedInstant:
    """Apply component overrides through wall-clock duration arithmetic.

    Args:
        instant: The current zoned instant.
        overrides: Target values keyed by unit name (``year``, ``month``
            1-based, ``day``, ``hour`` ... ``nanosecond``). Values are not
            range checked.

    Returns:
        A new ZonedInstant; the input is not modified.

    Raises:
        RangeError: If the result is outside the supported range.

    Examples:
        An explicit day is counted from the day the month step lands on:

        >>> from globaltime.core.instant import ZonedInstant
        >>> jan31 = ZonedInstant.from_local(2024, 1, 31, timezone="UTC")
        >>> resolve_local(jan31, {"month": 2, "day": 29}).day
        29
    """
    deltas = component_deltas(instant.fields(), overrides)
    result = instant
    for unit in LOCAL_UNITS:
        delta = deltas[unit]
        if unit == "day" and "day" in overrides:
            # the month step may have clamped the day
            delta = overrides["day"] - result.day
            deltas["day"] = delta
        if delta:
            result = result.add(wall_clock=True, **{f"{unit}s": delta})
    logger.debug("resolved %s via %s -> %s", instant, deltas, result)
    return result


def resolve_utc(instant: ZonedInstant, overrides: Mapping[str, int]) -> ZonedInstant:
    """Apply UTC component overrides through fixed Gregorian arithmetic.

    Args:
        instant: The current zoned instant. Its zone and calendar are kept.
        overrides: Target values keyed by ``year``, ``month`` (zero-based),
            ``date``, ``hour``, ``minute``, ``second``, ``millisecond``.

    Returns:
        A new ZonedInstant whose sub-millisecond part equals the old one.

    Examples:
        >>> from globaltime.core.instant import ZonedInstant
        >>> zi = ZonedInstant(1_000_123, "America/New_York")
        >>> resolve_utc(zi, {"hour": 24}).epoch_nanoseconds
        86400001000123
    """
    from globaltime.core.instant import ZonedInstant

    unknown = set(overrides) - set(UTC_UNITS)
    if unknown:
        raise KeyError(f"unknown UTC component(s): {', '.join(sorted(unknown))}")

    epoch_ns = instant.epoch_nanoseconds
    epoch_ms, sub_ms = divmod(epoch_ns, NANOS_PER_MILLISECOND)
    target = utc_fields(epoch_ms)
    target.update(overrides)
    millis = utc_components_to_millis(*(target[unit] for unit in UTC_UNITS))
    logger.debug("UTC resolve moved %s days", (millis - epoch_ms) // MILLIS_PER_DAY)
    return ZonedInstant(
        millis * NANOS_PER_MILLISECOND + sub_ms, instant.timezone, instant.calendar
    )


__all__ = [
    "LOCAL_UNITS",
    "UTC_UNITS",
    "component_deltas",
    "resolve_local",
    "resolve_utc",
]
