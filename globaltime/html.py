"""Rewriting ``<time>`` elements to a reader's timezone.

This module provides html_to_current_time, which takes element-like objects
(anything with ``get_attribute(name)`` and a writable ``text``), reads the
instant from each element's ``datetime`` attribute, and replaces its text
with that instant formatted in the element's timezone.

Attributes read per element:
    datetime            the instant, in any form the loose parser accepts
    data-iana-timezone  the timezone to display in (default: host zone)
    data-format         the format pattern (default: the to_string pattern)
    data-discord-style  a Discord style letter (t T d D f F R), as written
                        by to_html_discord_string; takes precedence over
                        data-format

Examples:
    >>> element = TimeElement({"datetime": "2025-04-18T00:00:00.000Z",
    ...                        "data-iana-timezone": "Asia/Tokyo"})
    >>> html_to_current_time([element])
    1
    >>> element.text
    'Fri Apr 18 2025 09:00:00 UTC+0900 (Asia/Tokyo)'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from globaltime.config import TO_STRING_PATTERN
from globaltime.core.datetime import DISCORD_STYLES, Datetime
from globaltime.errors import ParseError
from globaltime.units.timezone import host_timezone_id

logger = logging.getLogger(__name__)


class TimeElementLike(Protocol):
    """What html_to_current_time needs from an element."""

    text: str

    def get_attribute(self, name: str) -> Optional[str]: ...


@dataclass
class TimeElement:
    """A minimal in-memory ``<time>`` element.

    Attributes:
        attributes: Attribute values keyed by name.
        text: The element's display text.
    """

    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)


def html_to_current_time(
    elements: Iterable[TimeElementLike],
    *,
    default_timezone: str | None = None,
    default_pattern: str | None = None,
) -> int:
    """Rewrite the text of each element from its ``datetime`` attribute.

    Elements without a ``datetime`` attribute, or with one the loose parser
    cannot read, are skipped and left unchanged.

    Args:
        elements: Element-like objects.
        default_timezone: Zone for elements without ``data-iana-timezone``.
            Defaults to the host zone.
        default_pattern: Pattern for elements without ``data-format``.
            Defaults to the to_string pattern.

    Returns:
        The number of elements rewritten.

    Raises:
        InvalidTimezoneError: If an element names an unknown timezone.
    """
    fallback_zone = default_timezone or host_timezone_id()
    fallback_pattern = default_pattern or TO_STRING_PATTERN
    rewritten = 0
    for element in elements:
        stamp = element.get_attribute("datetime")
        if not stamp:
            logger.debug("skipping element without a datetime attribute")
            continue
        zone = element.get_attribute("data-iana-timezone") or fallback_zone
        style = element.get_attribute("data-discord-style")
        try:
            value = Datetime(stamp, zone)
        except ParseError:
            logger.warning("skipping element with unreadable datetime %r", stamp)
            continue
        if style in DISCORD_STYLES:
            element.text = value.discord_text(style)
        else:
            if style:
                logger.debug("ignoring unknown Discord style %r", style)
            pattern = element.get_attribute("data-format") or fallback_pattern
            element.text = value.format(pattern)
        rewritten += 1
    return rewritten


__all__ = ["TimeElement", "TimeElementLike", "html_to_current_time"]
