"""Rounding of signed integer quantities to an increment.

Used by ZonedInstant.until()/since() to round the smallest unit of a
difference. All arithmetic is exact integer arithmetic on nanoseconds
or on scaled unit counts.
"""

from __future__ import annotations

from enum import Enum


class RoundingMode(Enum):
    """How a value between two increments is rounded.

    The "half" modes only differ on exact ties.

    Examples:
        >>> RoundingMode.from_name("halfExpand")
        <RoundingMode.HALF_EXPAND: 'halfExpand'>
    """

    CEIL = "ceil"
    FLOOR = "floor"
    EXPAND = "expand"
    TRUNC = "trunc"
    HALF_CEIL = "halfCeil"
    HALF_FLOOR = "halfFloor"
    HALF_EXPAND = "halfExpand"
    HALF_TRUNC = "halfTrunc"
    HALF_EVEN = "halfEven"

    @classmethod
    def from_name(cls, name: str | RoundingMode) -> RoundingMode:
        """Resolve a mode from its camelCase or snake_case name.

        Raises:
            ValueError: If the name is unknown.
        """
        if isinstance(name, RoundingMode):
            return name
        key = name.replace("_", "").lower()
        for mode in cls:
            if mode.value.lower() == key:
                return mode
        raise ValueError(f"unknown rounding mode: {name!r}")

    def negated(self) -> RoundingMode:
        """Return the mode that rounds the negated value the same way.

        Examples:
            >>> RoundingMode.CEIL.negated()
            <RoundingMode.FLOOR: 'floor'>
        """
        return _NEGATED.get(self, self)


_NEGATED: dict[RoundingMode, RoundingMode] = {
    RoundingMode.CEIL: RoundingMode.FLOOR,
    RoundingMode.FLOOR: RoundingMode.CEIL,
    RoundingMode.HALF_CEIL: RoundingMode.HALF_FLOOR,
    RoundingMode.HALF_FLOOR: RoundingMode.HALF_CEIL,
}


def _expands(mode: RoundingMode, negative: bool, remainder2: int, increment: int, odd: bool) -> bool:
    """Return True if the magnitude should round away from zero."""
    if mode is RoundingMode.TRUNC:
        return False
    if mode is RoundingMode.EXPAND:
        return True
    if mode is RoundingMode.CEIL:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative

    if remainder2 < increment:
        return False
    if remainder2 > increment:
        return True

    # exact tie
    if mode is RoundingMode.HALF_EXPAND:
        return True
    if mode is RoundingMode.HALF_TRUNC:
        return False
    if mode is RoundingMode.HALF_CEIL:
        return not negative
    if mode is RoundingMode.HALF_FLOOR:
        return negative
    return odd  # HALF_EVEN


def round_to_increment(value: int, increment: int, mode: RoundingMode) -> int:
    """Round a signed integer to a multiple of increment.

    Args:
        value: The value to round.
        increment: A positive increment.
        mode: The rounding mode.

    Returns:
        The rounded value, a multiple of increment.

    Examples:
        >>> round_to_increment(90, 60, RoundingMode.TRUNC)
        60
        >>> round_to_increment(-90, 60, RoundingMode.FLOOR)
        -120
        >>> round_to_increment(90, 60, RoundingMode.HALF_EVEN)
        120
    """
    if increment <= 0:
        raise ValueError(f"increment must be positive, got {increment}")

    negative = value < 0
    quotient, remainder = divmod(abs(value), increment)
    if remainder == 0:
        return value

    if _expands(mode, negative, remainder * 2, increment, quotient % 2 == 1):
        quotient += 1
    magnitude = quotient * increment
    return -magnitude if negative else magnitude


__all__ = ["RoundingMode", "round_to_increment"]
