"""Name tables and format macros.

This module provides FormatConfig, the localization and customization
tables read by the name getters (``get_day_name`` and friends) and by
``Datetime.format()``.

A process-wide configuration is created at import time. Lifecycle:

- ``get_config()`` returns the active configuration.
- ``set_config(config)`` installs a replacement.
- ``reset_config()`` restores the defaults.

The tables are plain mutable lists and dicts; edits are seen by the next
lookup. A Datetime constructed with ``config=`` uses that instance instead
of the process-wide one.

Examples:
    >>> cfg = get_config()
    >>> cfg.day_names[0]
    'Sun'
    >>> cfg.macros["mysql"]
    'Y-m-d H:i:s'
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from globaltime.core.datetime import Datetime

# A macro body is a pattern fragment, or a callable whose result is
# inserted as literal text.
MacroBody = Union[str, Callable[["Datetime"], str]]

DAY_NAMES: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
DAY_NAMES_FULL: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
MONTH_NAMES_FULL: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

TO_STRING_PATTERN = "D M d Y H:i:s \\U\\T\\CO (e)"


def _relative(value: Datetime) -> str:
    return value.relative_time()


def default_macros() -> dict[str, MacroBody]:
    """Return a fresh copy of the built-in macro table."""
    return {
        "mysql": "Y-m-d H:i:s",
        "rfc2822": "D, d M Y H:i:s O",
        "rfc7231": "D, d M Y H:i:s \\G\\M\\T",
        "atom": "Y-m-d\\TH:i:sP",
        "w3c": "Y-m-d\\TH:i:sP",
        "rfc3339": "Y-m-d\\TH:i:sP",
        "rfc3339_extended": "Y-m-d\\TH:i:s.vP",
        "iso8601": "Y-m-d\\TH:i:sO",
        "cookie": "l, d-M-Y H:i:s T",
        "rss": "D, d M Y H:i:s O",
        "tostring": TO_STRING_PATTERN,
        "html-datetime": "Y-m-d\\TH:i:s.vP",
        "relative": _relative,
    }


@dataclass
class FormatConfig:
    """Name tables and macros used for formatting.

    Attributes:
        day_names: Abbreviated day names, Sunday first (7 entries).
        month_names: Abbreviated month names, January first (12 entries).
        day_names_full: Full day names, Sunday first.
        month_names_full: Full month names, January first.
        macros: Macro bodies keyed by lower-case name.

    Examples:
        >>> dutch = FormatConfig(day_names=["zo", "ma", "di", "wo", "do", "vr", "za"])
        >>> dutch.day_names[1]
        'ma'
    """

    day_names: list[str] = field(default_factory=lambda: list(DAY_NAMES))
    month_names: list[str] = field(default_factory=lambda: list(MONTH_NAMES))
    day_names_full: list[str] = field(default_factory=lambda: list(DAY_NAMES_FULL))
    month_names_full: list[str] = field(default_factory=lambda: list(MONTH_NAMES_FULL))
    macros: dict[str, MacroBody] = field(default_factory=default_macros)

    def __post_init__(self) -> None:
        for name, size in (
            ("day_names", 7),
            ("month_names", 12),
            ("day_names_full", 7),
            ("month_names_full", 12),
        ):
            table = getattr(self, name)
            if len(table) != size:
                raise ValueError(f"{name} must have {size} entries, got {len(table)}")
        self.macros = {key.lower(): body for key, body in self.macros.items()}

    def lookup_macro(self, name: str) -> MacroBody | None:
        """Return the macro body for a name (case-insensitive), or None.

        Keys added to ``macros`` after construction may use any case.

        Examples:
            >>> config = FormatConfig()
            >>> config.macros["DayOnly"] = "d"
            >>> config.lookup_macro("dayonly")
            'd'
        """
        wanted = name.lower()
        body = self.macros.get(wanted)
        if body is not None:
            return body
        for key, candidate in self.macros.items():
            if key.lower() == wanted:
                return candidate
        return None

    def copy(self) -> FormatConfig:
        """Return an independent copy whose tables can be edited freely."""
        return dataclasses.replace(
            self,
            day_names=list(self.day_names),
            month_names=list(self.month_names),
            day_names_full=list(self.day_names_full),
            month_names_full=list(self.month_names_full),
            macros=dict(self.macros),
        )


_config = FormatConfig()


def get_config() -> FormatConfig:
    """Return the process-wide configuration."""
    return _config


def set_config(config: FormatConfig) -> None:
    """Install a process-wide configuration.

    Raises:
        TypeError: If config is not a FormatConfig.
    """
    global _config
    if not isinstance(config, FormatConfig):
        raise TypeError(f"expected FormatConfig, got {type(config).__name__}")
    _config = config


def reset_config() -> None:
    """Restore the default process-wide configuration."""
    global _config
    _config = FormatConfig()


__all__ = [
    "DAY_NAMES",
    "DAY_NAMES_FULL",
    "FormatConfig",
    "MONTH_NAMES",
    "MONTH_NAMES_FULL",
    "MacroBody",
    "TO_STRING_PATTERN",
    "default_macros",
    "get_config",
    "reset_config",
    "set_config",
]
