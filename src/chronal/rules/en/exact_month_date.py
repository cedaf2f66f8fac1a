"""Dates written with a month name.

Handles:
- February 23, 2019
- March 5th
- 23rd of February 2019
- 1 jan
- september

Short names and month words that double as English words ("may", "mar",
"march") need a day or a year beside them.
"""

from __future__ import annotations

import re
from datetime import datetime

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context
from chronal.rules.en.vocabulary import AMBIGUOUS_MONTHS, MONTHS, alternation


class ExactMonthDateRule(RegexRule):
    """Month, with day and year when given.

    The day is only range-checked against 1..31 here; a day the month does
    not have (april 31) is rejected when the context is resolved.
    """

    pattern = compile_pattern(rf"""
        (?<!\w)
        (?:(?P<day_before>[0-3]?\d)(?:st|nd|rd|th)?(?:\s+of)?\s+)?
        (?P<month>{alternation(MONTHS)})\.?
        (?:\s+(?P<day_after>[0-3]?\d)(?:st|nd|rd|th)?(?![\d:]))?
        (?:,?\s+(?P<year>[12]\d{{3}}))?
        (?!\w)
    """)

    def accept(self, found: "re.Match[str]") -> bool:
        if found.group("month").lower() not in AMBIGUOUS_MONTHS:
            return True
        return any(found.group(name) for name in ("day_before", "day_after", "year"))

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        captures = match.captures
        month = MONTHS[captures["month"].lower()]

        day_text = captures.get("day_before") or captures.get("day_after")
        day = int(day_text) if day_text else None
        if day is not None and not 1 <= day <= 31:
            return False

        year = int(captures["year"]) if captures.get("year") else None
        return context.assign(self.strategy, year=year, month=month, day=day)
