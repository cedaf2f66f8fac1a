"""Calendar periods relative to the reference: last week, next month, this year.

Each phrase resolves to the start of the period at midnight:
- week: Monday of the shifted week
- month: the 1st of the shifted month
- year: January 1st of the shifted year

The period start only fills fields other rules left unset, so an explicit
"march 5" next to "last year" survives. A week that comes with a weekday
("next week tuesday", "friday next week") keeps the weekday and the
reference time of day.
"""

from __future__ import annotations

import re
from datetime import datetime

from dateutil.relativedelta import relativedelta

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context
from chronal.rules.en.vocabulary import WEEKDAYS, alternation

PERIOD_OFFSETS = {"this": 0, "last": -1, "past": -1, "next": 1}

_WEEKDAY_WORD = re.compile(rf"(?<!\w)(?:{alternation(WEEKDAYS)})(?!\w)", re.IGNORECASE)


class RelativePeriodRule(RegexRule):
    pattern = compile_pattern(r"""
        (?<!\w)
        (?P<modifier>this|last|past|next)
        \s+
        (?P<period>week|month|year)
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        offset = PERIOD_OFFSETS[match.captures["modifier"].lower()]
        period = match.captures["period"].lower()

        if period == "year":
            owned = context.assign(self.strategy, year=reference.year + offset)
            context.default(month=1, day=1, hour=0, minute=0, second=0)
            return owned

        if period == "month":
            owned = bool(offset) and context.shift(self.strategy, relativedelta(months=offset))
            filled = context.default(day=1, hour=0, minute=0, second=0)
            return owned or filled

        owned = context.assign(self.strategy, week=offset)
        if _WEEKDAY_WORD.search(context.text) is None:
            context.default(hour=0, minute=0, second=0)
        return owned
