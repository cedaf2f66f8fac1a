"""Day-month-year dates written with separators.

Handles ``23/02``, ``23/02/2019``, ``23/2/19``, ``23.02.2019`` and
``23-02-2019``. Dotted and dashed forms need a year, so decimals such as
``1.5`` and ranges such as ``5-10`` are not read as dates. A day its month
lacks (``31/04/2024``) is written as-is and fails when the date resolves.
"""

from __future__ import annotations

from datetime import datetime

from chronal.arithmetic import expand_year
from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context


class SlashDMYRule(RegexRule):
    """Numeric day/month[/year] dates."""

    pattern = compile_pattern(r"""
        (?<![\w/.-])
        (?P<day>[0-3]?\d)
        (?:
            /(?P<month>[01]?\d)(?:/(?P<year>\d{4}|\d{2}))?
          | (?P<separator>[.-])(?P<separated_month>[01]?\d)(?P=separator)(?P<separated_year>\d{4}|\d{2})
        )
        (?![\w/-]|\.\d)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        captures = match.captures
        day = int(captures["day"])
        month = int(captures.get("month") or captures["separated_month"])
        year_text = captures.get("year") or captures.get("separated_year")

        # Not a day/month pair at all; a day the month lacks is left to resolution
        if not 1 <= month <= 12 or not 1 <= day <= 31:
            return False

        year = expand_year(year_text, reference.year) if year_text else None
        return context.assign(self.strategy, year=year, month=month, day=day)
