"""Validation and coercion utilities for Globaltime.

This module provides the numeric coercion used by the ``set_*`` family
and range checks for instants and offsets.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import math
import numbers
from typing import Callable, ParamSpec, TypeVar

from globaltime._internal.constants import MAX_EPOCH_NANOS
from globaltime.errors import RangeError, TypeCoercionError

P = ParamSpec("P")
T = TypeVar("T")


def coerce_integer(value: object, name: str = "value") -> int:
    """Coerce a numeric argument to an int, truncating toward zero.

    Accepts ints and finite real numbers (floats, Decimals, Fractions).
    Booleans, strings, None and non-finite floats are rejected.

    Args:
        value: The value to coerce.
        name: Parameter name used in the error message.

    Returns:
        The truncated integer value.

    Raises:
        TypeCoercionError: If the value is not a finite real number.

    Examples:
        >>> coerce_integer(13)
        13
        >>> coerce_integer(-1.9)
        -1
        >>> coerce_integer("5")
        Traceback (most recent call last):
        ...
        globaltime.errors.TypeCoercionError: value must be a number, got str
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeCoercionError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        raise TypeCoercionError(f"{name} must be finite, got {value!r}")
    return math.trunc(value)


def coerce_arguments(
    *names: str,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator that coerces the named positional parameters with coerce_integer.

    Parameters passed as None are left alone so that callers can signal
    "keep the current value". The first name is required and may not be
    None.

    Args:
        *names: Parameter names in positional order, excluding ``self``.

    Examples:
        >>> class Clock:
        ...     @coerce_arguments("hours", "minutes")
        ...     def set(self, hours, minutes=None):
        ...         return hours, minutes
        >>> Clock().set(1.5)
        (1, None)
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = list(args)
            # args[0] is the instance
            for index, name in enumerate(names, start=1):
                if index < len(bound):
                    value = bound[index]
                elif name in kwargs:
                    value = kwargs[name]
                else:
                    continue
                if value is None and index > 1:
                    continue
                coerced = coerce_integer(value, name)
                if index < len(bound):
                    bound[index] = coerced
                else:
                    kwargs[name] = coerced
            return func(*bound, **kwargs)

        return wrapper

    return decorator


def validate_epoch_nanoseconds(epoch_ns: int) -> None:
    """Validate that an epoch nanosecond count is within the supported range.

    Raises:
        RangeError: If the instant is more than 1e8 days from the epoch.
    """
    if abs(epoch_ns) > MAX_EPOCH_NANOS:
        raise RangeError(
            f"epoch nanoseconds must be within +/-{MAX_EPOCH_NANOS}, got {epoch_ns}"
        )


__all__ = [
    "coerce_integer",
    "coerce_arguments",
    "validate_epoch_nanoseconds",
]
