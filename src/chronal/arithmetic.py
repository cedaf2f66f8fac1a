"""Calendar arithmetic shared by the resolver and the rule catalogs.

Language packs only recognise words; turning a recognised weekday, meridiem,
two-digit year or zone designator into numbers happens here so every catalog
resolves them identically.
"""

from __future__ import annotations

import calendar
import re
from datetime import tzinfo
from typing import Optional

from dateutil import tz

DAYS_IN_WEEK = 7

WEEKDAY_MODIFIERS = ("this", "last", "past", "next")

_ZONE_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2}):(\d{2})$")


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    return calendar.monthrange(year, month)[1]


def to_24_hour(hour: int, meridiem: Optional[str]) -> int:
    """Convert a 12-hour clock value to 24-hour.

    PM adds 12 to hours below 12, AM maps 12 to 0. Every other combination,
    including a missing meridiem, keeps the hour as written.
    """
    if not meridiem:
        return hour

    marker = meridiem.strip().lower()[:1]
    if marker == "p" and hour < 12:
        return hour + 12
    if marker == "a" and hour == 12:
        return 0
    return hour


def weekday_delta(reference_weekday: int, target_weekday: int, modifier: str = "next") -> int:
    """Day offset from the reference to the requested weekday.

    Weekdays use ``datetime.weekday()`` numbering (Monday is 0).

    - ``next``: soonest occurrence strictly after the reference (1..7)
    - ``last``: occurrence strictly before the reference (-1..-7); on the
      named weekday itself this steps back a full week
    - ``this``/``past``: most recent occurrence on or before the reference
      (0..-6)
    """
    modifier = modifier.lower()
    if modifier not in WEEKDAY_MODIFIERS:
        raise ValueError(f"Unknown weekday modifier: {modifier!r}")

    if modifier == "next":
        return (target_weekday - reference_weekday - 1) % DAYS_IN_WEEK + 1
    if modifier == "last":
        return -((reference_weekday - target_weekday - 1) % DAYS_IN_WEEK + 1)
    return -((reference_weekday - target_weekday) % DAYS_IN_WEEK)


def expand_year(value: str, reference_year: int) -> int:
    """Expand a two-digit year into the reference's century."""
    year = int(value)
    if len(value) <= 2:
        year += reference_year // 100 * 100
    return year


def parse_zone(designator: Optional[str]) -> Optional[tzinfo]:
    """Turn ``Z`` or ``+HH:MM``/``-HH:MM`` into a fixed-offset tzinfo."""
    if not designator:
        return None

    if designator.upper() == "Z":
        return tz.tzutc()

    found = _ZONE_OFFSET_PATTERN.match(designator)
    if found is None:
        raise ValueError(f"Unrecognised zone designator: {designator!r}")

    sign, hours, minutes = found.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ValueError(f"Zone offset out of range: {designator!r}")

    seconds = int(hours) * 3600 + int(minutes) * 60
    return tz.tzoffset(None, -seconds if sign == "-" else seconds)
