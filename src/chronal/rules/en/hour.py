"""Bare 12-hour clock times: 5pm, 11 a.m."""

from __future__ import annotations

from datetime import datetime

from chronal.arithmetic import to_24_hour
from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context


class HourRule(RegexRule):
    # Digits after ':' or '.' belong to a longer clock time
    pattern = compile_pattern(r"""
        (?<![\w:.])
        (?P<hour>\d{1,2})
        \s*
        (?P<meridiem>a\.m\.|p\.m\.|am|pm)
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        hour = int(match.captures["hour"])
        if not 1 <= hour <= 12:
            return False

        hour = to_24_hour(hour, match.captures["meridiem"])
        return context.assign(self.strategy, hour=hour, minute=0, second=0)
