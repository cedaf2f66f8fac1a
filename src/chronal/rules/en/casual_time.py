"""Parts of the day: morning, noon, afternoon, evening."""

from __future__ import annotations

from datetime import datetime

from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context


class CasualTimeRule(RegexRule):
    """Set the hour configured in :class:`Options` for a part of the day."""

    pattern = compile_pattern(r"""
        (?<!\w)
        (?:this\s+)?
        (?P<period>morning|noon|afternoon|evening)
        (?!\w)
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        hour = getattr(options, match.captures["period"].lower())
        return context.assign(self.strategy, hour=hour, minute=0, second=0)
