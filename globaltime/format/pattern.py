"""PHP ``date()``-style pattern formatting.

A pattern is interpreted in two passes:

1. Macro expansion. Every ``[name]`` token whose name is in the macro
   table (case-insensitive) is replaced by its body, once; bodies are not
   scanned for further macros. Unknown ``[name]`` tokens are left alone.
   A callable macro body is called with the value being formatted and its
   result is inserted as literal text.

2. Placeholder substitution. Each maximal run of backslashes followed by a
   letter is examined. With an even number of backslashes (including none)
   the letter is active: half the backslashes are emitted, then the value
   for the letter. With an odd number the letter is escaped: half the
   backslashes (rounded down) are emitted, then the letter itself. Active
   letters without a code are emitted as is.

Supported Codes:
    Day:      d D j l N S w z
    Week:     W
    Month:    F m M n t
    Year:     L X x Y y (o is recognised but unsupported)
    Time:     a A B g G h H i s u v
    Timezone: e I O P p T Z
    Full:     c r U

Examples:
    >>> from globaltime.core.instant import ZonedInstant
    >>> engine = FormatEngine()
    >>> zi = ZonedInstant.from_local(2025, 4, 18, 14, 5, timezone="UTC")
    >>> engine.format("Y-m-d", zi)
    '2025-04-18'
    >>> engine.format("\\\\Y-m-d", zi)
    'Y-04-18'
    >>> engine.format("[mysql]", zi)
    '2025-04-18 14:05:00'
    >>> engine.format("l jS \\\\o\\\\f F", zi)
    'Friday 18th of April'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from globaltime._internal.constants import SECONDS_PER_DAY, SECONDS_PER_HOUR
from globaltime.config import FormatConfig, get_config
from globaltime.errors import UnsupportedPlaceholderError
from globaltime.units.timezone import format_offset

if TYPE_CHECKING:
    from globaltime.core.datetime import Datetime
    from globaltime.core.instant import ZonedInstant

_MACRO_PATTERN = re.compile(r"\[([A-Za-z_][A-Za-z0-9_-]*)\]")
_PLACEHOLDER_PATTERN = re.compile(r"(\\*)([A-Za-z])")

_ISO_PATTERN = "Y-m-d\\TH:i:sP"
_RFC2822_PATTERN = "D, d M Y H:i:s O"


def escape_literal(text: str) -> str:
    """Escape text so that pass 2 reproduces it unchanged.

    Examples:
        >>> escape_literal("now")
        '\\\\n\\\\o\\\\w'
    """
    return _PLACEHOLDER_PATTERN.sub(
        lambda match: match.group(1) * 2 + "\\" + match.group(2), text
    )


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of the month.

    Examples:
        >>> [ordinal_suffix(d) for d in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)]
        ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'rd']
    """
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_year(year: int, *, signed: str = "negative") -> str:
    """Format a year with at least four digits.

    Args:
        year: The year.
        signed: ``"always"`` prefixes ``+`` to non-negative years,
            ``"expanded"`` only to years beyond 9999, ``"negative"`` never.

    Examples:
        >>> format_year(2025), format_year(-44), format_year(2025, signed="always")
        ('2025', '-0044', '+2025')
        >>> format_year(12025, signed="expanded")
        '+12025'
    """
    if year < 0:
        return f"-{-year:04d}"
    if signed == "always" or (signed == "expanded" and year > 9999):
        return f"+{year:04d}"
    return f"{year:04d}"


def swatch_beat(epoch_seconds: int) -> int:
    """Return Swatch Internet Time (000-999), measured from UTC+01:00."""
    seconds = (epoch_seconds + SECONDS_PER_HOUR) % SECONDS_PER_DAY
    return seconds * 1000 // SECONDS_PER_DAY


def _unsupported_week_year(engine: FormatEngine, zi: ZonedInstant) -> str:
    raise UnsupportedPlaceholderError(
        "format code 'o' (ISO week-numbering year) is not supported"
    )


def _hour12(zi: ZonedInstant) -> int:
    return zi.hour % 12 or 12


_CODES: dict[str, Callable[[FormatEngine, ZonedInstant], str]] = {
    # Day
    "d": lambda e, z: f"{z.day:02d}",
    "D": lambda e, z: e.config.day_names[z.day_of_week % 7],
    "j": lambda e, z: str(z.day),
    "l": lambda e, z: e.config.day_names_full[z.day_of_week % 7],
    "N": lambda e, z: str(z.day_of_week),
    "S": lambda e, z: ordinal_suffix(z.day),
    "w": lambda e, z: str(z.day_of_week % 7),
    "z": lambda e, z: str(z.day_of_year - 1),
    # Week
    "W": lambda e, z: f"{z.week_of_year:02d}",
    # Month
    "F": lambda e, z: e.config.month_names_full[z.month - 1],
    "m": lambda e, z: f"{z.month:02d}",
    "M": lambda e, z: e.config.month_names[z.month - 1],
    "n": lambda e, z: str(z.month),
    "t": lambda e, z: str(z.days_in_month),
    # Year
    "L": lambda e, z: "1" if z.in_leap_year else "0",
    "o": _unsupported_week_year,
    "X": lambda e, z: format_year(z.year, signed="always"),
    "x": lambda e, z: format_year(z.year, signed="expanded"),
    "Y": lambda e, z: format_year(z.year),
    "y": lambda e, z: f"{z.year % 100:02d}",
    # Time
    "a": lambda e, z: "am" if z.hour < 12 else "pm",
    "A": lambda e, z: "AM" if z.hour < 12 else "PM",
    "B": lambda e, z: f"{swatch_beat(z.epoch_seconds):03d}",
    "g": lambda e, z: str(_hour12(z)),
    "G": lambda e, z: str(z.hour),
    "h": lambda e, z: f"{_hour12(z):02d}",
    "H": lambda e, z: f"{z.hour:02d}",
    "i": lambda e, z: f"{z.minute:02d}",
    "s": lambda e, z: f"{z.second:02d}",
    "u": lambda e, z: f"{z.millisecond * 1000 + z.microsecond:06d}",
    "v": lambda e, z: f"{z.millisecond:03d}",
    # Timezone
    "e": lambda e, z: z.timezone_id,
    "I": lambda e, z: "1" if z.is_dst else "0",
    "O": lambda e, z: format_offset(z.offset_seconds),
    "P": lambda e, z: format_offset(z.offset_seconds, ":"),
    "p": lambda e, z: "Z" if z.offset_seconds == 0 else format_offset(z.offset_seconds, ":"),
    "T": lambda e, z: z.zone_abbreviation,
    "Z": lambda e, z: str(z.offset_seconds),
    # Full date/time
    "c": lambda e, z: e.substitute(_ISO_PATTERN, z),
    "r": lambda e, z: e.substitute(_RFC2822_PATTERN, z),
    "U": lambda e, z: str(z.epoch_seconds),
}

SUPPORTED_CODES: frozenset[str] = frozenset(code for code in _CODES if code != "o")


class FormatEngine:
    """Interprets format patterns against a zoned instant.

    Args:
        config: Name tables and macros. If None, the process-wide
            configuration is read at each call.
    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> FormatConfig:
        return self._config if self._config is not None else get_config()

    def expand_macros(self, pattern: str, subject: Datetime | None = None) -> str:
        """Replace known ``[name]`` macros with their bodies (pass 1).

        Args:
            pattern: The pattern to expand.
            subject: The value passed to callable macro bodies. Callable
                macros are left unexpanded when it is None.
        """
        config = self.config

        def replace(match: re.Match[str]) -> str:
            body = config.lookup_macro(match.group(1))
            if body is None:
                return match.group(0)
            if callable(body):
                if subject is None:
                    return match.group(0)
                return escape_literal(body(subject))
            return body

        return _MACRO_PATTERN.sub(replace, pattern)

    def substitute(self, pattern: str, zi: ZonedInstant) -> str:
        """Replace active placeholder letters with their values (pass 2).

        Raises:
            UnsupportedPlaceholderError: If the pattern uses ``o``.
        """

        def replace(match: re.Match[str]) -> str:
            backslashes, letter = match.groups()
            prefix = "\\" * (len(backslashes) // 2)
            if len(backslashes) % 2:
                return prefix + letter
            code = _CODES.get(letter)
            if code is None:
                return prefix + letter
            return prefix + code(self, zi)

        return _PLACEHOLDER_PATTERN.sub(replace, pattern)

    def format(
        self,
        pattern: str,
        zi: ZonedInstant,
        subject: Datetime | None = None,
    ) -> str:
        """Expand macros, then substitute placeholders.

        Args:
            pattern: The format pattern.
            zi: The zoned instant supplying field values.
            subject: The Datetime being formatted, for callable macros.

        Returns:
            The formatted string.

        Raises:
            TypeError: If pattern is not a string.
            UnsupportedPlaceholderError: If the pattern uses ``o``.
        """
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")
        return self.substitute(self.expand_macros(pattern, subject), zi)


__all__ = [
    "FormatEngine",
    "SUPPORTED_CODES",
    "escape_literal",
    "format_offset",
    "format_year",
    "ordinal_suffix",
    "swatch_beat",
]
