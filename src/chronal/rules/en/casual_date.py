"""Casual day references: now, today, tonight, tomorrow, yesterday."""

from __future__ import annotations

from datetime import datetime

from dateutil.relativedelta import relativedelta

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context

# Day offsets of the purely relative phrases
DAY_OFFSETS = {
    "tomorrow": 1,
    "tmr": 1,
    "yesterday": -1,
    "day after tomorrow": 2,
    "day before yesterday": -2,
}

NIGHT_HOUR = 23


class CasualDateRule(RegexRule):
    pattern = compile_pattern(r"""
        (?<!\w)
        (?P<phrase>
            (?:the\s+)?day\s+after\s+tomorrow
          | (?:the\s+)?day\s+before\s+yesterday
          | last\s+night
          | tonight
          | tomorrow
          | tmr
          | yesterday
          | today
          | now
        )
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        phrase = " ".join(match.captures["phrase"].lower().split())
        if phrase.startswith("the "):
            phrase = phrase[len("the "):]

        if phrase == "now":
            return context.assign(
                self.strategy,
                hour=reference.hour,
                minute=reference.minute,
                second=reference.second,
            )
        if phrase == "today":
            return context.assign(
                self.strategy,
                year=reference.year,
                month=reference.month,
                day=reference.day,
            )
        if phrase == "tonight":
            return context.assign(self.strategy, hour=NIGHT_HOUR, minute=0, second=0)
        if phrase == "last night":
            shifted = context.shift(self.strategy, relativedelta(days=-1))
            assigned = context.assign(self.strategy, hour=NIGHT_HOUR, minute=0, second=0)
            return shifted or assigned

        return context.shift(self.strategy, relativedelta(days=DAY_OFFSETS[phrase]))
