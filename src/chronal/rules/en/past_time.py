"""Backward offsets: 2 hours ago, a week ago, half a year ago."""

from __future__ import annotations

from datetime import datetime

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context
from chronal.rules.en.vocabulary import AMOUNT, UNIT, unit_delta


class PastTimeRule(RegexRule):
    pattern = compile_pattern(rf"""
        (?<!\w)
        (?P<amount>{AMOUNT})
        \s*
        (?P<unit>{UNIT})
        \s+ago
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        delta = unit_delta(match.captures["amount"], match.captures["unit"])
        if delta is None:
            return False
        return context.shift(self.strategy, -delta)
