"""Fast path for absolute standard formats.

Before any natural-language rule runs, the whole trimmed input is tried
against a fixed, ordered list of templates (RFC3339 and the common
``YYYY-MM-DD[ HH:MM[:SS][ AM|PM]]`` shapes). The first template that fully
matches and yields a valid datetime wins. Templates without zone information
take the reference instant's zone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Pattern, Tuple

from chronal.arithmetic import parse_zone, to_24_hour

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n"

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_CLOCK = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
_CLOCK_MINUTES = r"(?P<hour>\d{2}):(?P<minute>\d{2})"
_CLOCK_12 = r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2}) (?P<meridiem>AM|PM)"
_CLOCK_12_MINUTES = r"(?P<hour>\d{1,2}):(?P<minute>\d{2}) (?P<meridiem>AM|PM)"
_FRACTION = r"\.(?P<fraction>\d{1,9})"
_ZONE = r"(?P<zone>Z|[+-]\d{2}:\d{2})"


@dataclass(frozen=True)
class Template:
    """One absolute format."""

    name: str
    pattern: Pattern[str]
    zoned: bool = False

    def build(self, text: str, reference: datetime) -> Optional[datetime]:
        """Parse ``text`` if it fully matches; raises ValueError on bad fields."""
        found = self.pattern.fullmatch(text)
        if found is None:
            return None

        parts = found.groupdict()
        hour = int(parts.get("hour") or 0)
        meridiem = parts.get("meridiem")
        if meridiem:
            if not 1 <= hour <= 12:
                raise ValueError(f"hour {hour} is not a 12-hour clock value")
            hour = to_24_hour(hour, meridiem)

        fraction = parts.get("fraction") or ""
        zone = parse_zone(parts.get("zone")) if self.zoned else reference.tzinfo

        return datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            hour,
            int(parts.get("minute") or 0),
            int(parts.get("second") or 0),
            int(fraction[:6].ljust(6, "0")),
            tzinfo=zone,
        )


STANDARD_TEMPLATES: Tuple[Template, ...] = (
    Template("rfc3339-fraction", re.compile(rf"{_DATE}T{_CLOCK}{_FRACTION}{_ZONE}"), zoned=True),
    Template("rfc3339", re.compile(rf"{_DATE}T{_CLOCK}{_ZONE}"), zoned=True),
    Template("rfc3339-minutes", re.compile(rf"{_DATE}T{_CLOCK_MINUTES}{_ZONE}"), zoned=True),
    Template("iso-local", re.compile(rf"{_DATE}T{_CLOCK}")),
    Template("datetime", re.compile(rf"{_DATE} {_CLOCK}")),
    Template("datetime-12h", re.compile(rf"{_DATE} {_CLOCK_12}")),
    Template("datetime-minutes", re.compile(rf"{_DATE} {_CLOCK_MINUTES}")),
    Template("datetime-12h-minutes", re.compile(rf"{_DATE} {_CLOCK_12_MINUTES}")),
    Template("date", re.compile(_DATE)),
)


@dataclass(frozen=True)
class StandardMatch:
    """Outcome of a successful fast-path parse."""

    time: datetime
    text: str
    index: int
    template: str


def parse_standard(text: str, reference: datetime) -> Optional[StandardMatch]:
    """Try the standard templates against the trimmed ``text``.

    Returns:
        The parsed instant and the trimmed span, or None when no template
        fully matches
    """
    trimmed = text.strip(WHITESPACE)
    if not trimmed:
        return None

    for template in STANDARD_TEMPLATES:
        try:
            moment = template.build(trimmed, reference)
        except ValueError as e:
            logger.debug(f"Template {template.name} rejected '{trimmed}': {e}")
            continue
        if moment is None:
            continue

        index = len(text) - len(text.lstrip(WHITESPACE))
        return StandardMatch(time=moment, text=trimmed, index=index, template=template.name)

    return None
