"""Weekday names with an optional modifier.

Handles:
- friday, on friday
- next tuesday, last monday, this sunday, past wed
- monday next week, thursday last week
"""

from __future__ import annotations

from datetime import datetime

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context
from chronal.rules.en.vocabulary import WEEKDAYS, alternation

WEEK_OFFSETS = {"this": 0, "last": -1, "past": -1, "next": 1}


class WeekdayRule(RegexRule):
    """Pick a weekday relative to the reference; a bare name means next.

    With a trailing ``<modifier> week`` the weekday is taken inside that
    calendar week (weeks start on Monday).
    """

    pattern = compile_pattern(rf"""
        (?<!\w)
        (?:on\s+)?
        (?:(?P<prefix>this|last|past|next)\s+)?
        (?P<weekday>{alternation(WEEKDAYS)})
        (?:\s+(?P<suffix>this|last|past|next)\s+week)?
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        captures = match.captures
        target = WEEKDAYS[captures["weekday"].lower()]
        suffix = captures.get("suffix")

        if suffix:
            return context.assign(self.strategy, weekday=target, week=WEEK_OFFSETS[suffix.lower()])

        modifier = (captures.get("prefix") or "next").lower()
        return context.assign(self.strategy, weekday=target, weekday_modifier=modifier)
