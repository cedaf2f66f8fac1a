"""Clock times with minutes: 14:30, 2:25pm, 9:05:30 am."""

from __future__ import annotations

from datetime import datetime

from chronal.arithmetic import to_24_hour
from chronal.rules.base import Match, Options, RegexRule, compile_pattern
from chronal.rules.context import Context


class HourMinuteRule(RegexRule):
    # A sign in front means a zone offset such as -04:00
    pattern = compile_pattern(r"""
        (?<![\w:.+-])
        (?P<hour>[01]?\d|2[0-3])
        :(?P<minute>[0-5]\d)
        (?::(?P<second>[0-5]\d))?
        (?:\s*(?P<meridiem>a\.m\.|p\.m\.|am|pm))?
        (?![\w:])
    """)

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        captures = match.captures
        hour = int(captures["hour"])
        meridiem = captures.get("meridiem")
        if meridiem and not 1 <= hour <= 12:
            return False

        return context.assign(
            self.strategy,
            hour=to_24_hour(hour, meridiem),
            minute=int(captures["minute"]),
            second=int(captures.get("second") or 0),
        )
