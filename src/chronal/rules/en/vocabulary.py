"""English words for weekdays, months, amounts and units."""

from __future__ import annotations

from typing import Iterable, Optional

from dateutil.relativedelta import relativedelta

WEEKDAYS = {
    "monday": 0, "mon": 0,
    "tuesday": 1, "tues": 1, "tue": 1,
    "wednesday": 2, "wed": 2,
    "thursday": 3, "thurs": 3, "thur": 3, "thu": 3,
    "friday": 4, "fri": 4,
    "saturday": 5, "sat": 5,
    "sunday": 6, "sun": 6,
}

MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

# Month words that are also common English words or bare abbreviations.
# They only count as a month next to a day or a year.
AMBIGUOUS_MONTHS = frozenset({
    "jan", "feb", "mar", "march", "apr", "may", "jun", "jul",
    "aug", "sept", "sep", "oct", "nov", "dec",
})

NUMBER_WORDS = {
    "a": 1, "an": 1, "one": 1,
    "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12,
    "few": 3,
}

# Half of one unit, expressed in the next smaller unit
HALF_UNITS = {
    "second": None,
    "minute": relativedelta(seconds=30),
    "hour": relativedelta(minutes=30),
    "day": relativedelta(hours=12),
    "week": relativedelta(days=3, hours=12),
    "month": relativedelta(days=15),
    "year": relativedelta(months=6),
}

_UNIT_PREFIXES = (
    ("sec", "second"),
    ("min", "minute"),
    ("h", "hour"),
    ("d", "day"),
    ("w", "week"),
    ("mo", "month"),
    ("y", "year"),
)


def alternation(words: Iterable[str]) -> str:
    """Regex alternation of ``words``, longest first."""
    return "|".join(sorted(words, key=len, reverse=True))


UNIT = r"(?:seconds?|secs?|minutes?|mins?|hours?|hrs?|days?|weeks?|months?|years?)"

AMOUNT = rf"(?:\d+|half(?:\s+an?)?|(?:a\s+)?few|{alternation(NUMBER_WORDS)})"


def normalize_unit(word: str) -> Optional[str]:
    """Map a unit spelling (``mins``, ``hrs``, ...) to its singular name."""
    word = word.lower()
    for prefix, unit in _UNIT_PREFIXES:
        if word.startswith(prefix):
            return unit
    return None


def unit_delta(amount: str, unit: str) -> Optional[relativedelta]:
    """Offset for ``amount`` of ``unit``, or None if it cannot be expressed.

    >>> unit_delta("3", "days")
    relativedelta(days=+3)
    >>> unit_delta("half an", "hour")
    relativedelta(minutes=+30)
    """
    name = normalize_unit(unit)
    if name is None:
        return None

    words = amount.lower().split()
    if words[0] == "half":
        return HALF_UNITS[name]
    if words[0] == "a" and len(words) > 1:
        words = words[1:]

    word = words[0]
    count = int(word) if word.isdigit() else NUMBER_WORDS.get(word)
    if count is None:
        return None
    return relativedelta(**{f"{name}s": count})
