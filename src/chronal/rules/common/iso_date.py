"""ISO 8601 dates embedded in free text.

Handles:
- 2026-01-16
- 2026-01-16 04:00:00
- 2026-01-16 04:00:00 AM
- 2020-05-22T15:55-04:00
- 2020-05-22T15:55:00Z

The standard-format fast path already covers inputs that consist of nothing
but an ISO timestamp. This rule finds them inside longer sentences.
"""

from __future__ import annotations

from datetime import datetime

from chronal.arithmetic import parse_zone, to_24_hour
from chronal.errors import MalformedFieldError
from chronal.rules.base import Match, Options, RegexRule, Strategy, compile_pattern
from chronal.rules.context import Context

ISO_DATETIME_PATTERN = compile_pattern(r"""
    (?<![\w-])
    (?P<year>[12]\d{3})-(?P<month>[01]\d)-(?P<day>[0-3]\d)
    (?:
        [T\s]+
        (?P<hour>\d{1,2}):(?P<minute>[0-5]\d)(?::(?P<second>[0-5]\d))?
        (?:\s*(?P<meridiem>a\.m\.|p\.m\.|am|pm|a\.|p\.|a|p)(?![a-z]))?
        (?P<zone>z|[+-]\d{1,2}:\d{2})?
    )?
    (?!\w)
""")


class ISODateRule(RegexRule):
    """Absolute ``YYYY-MM-DD`` dates with an optional time and zone."""

    pattern = ISO_DATETIME_PATTERN

    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        if self.strategy is not Strategy.OVERRIDE and context.is_set("year", "month", "day", "hour", "minute"):
            return False

        # The clustered text can carry a time part next to this rule's date.
        found = ISO_DATETIME_PATTERN.search(context.text)
        parts = found.groupdict() if found else dict(match.captures)

        year, month, day = int(parts["year"]), int(parts["month"]), int(parts["day"])
        if not 1 <= month <= 12 or day < 1:
            return False

        time_fields = {}
        if parts.get("hour") is not None:
            hour = int(parts["hour"])
            meridiem = parts.get("meridiem")
            if meridiem and not 1 <= hour <= 12:
                return False
            hour = to_24_hour(hour, meridiem)
            if hour > 23:
                return False
            time_fields = {
                "hour": hour,
                "minute": int(parts["minute"]),
                "second": int(parts.get("second") or 0),
            }

        try:
            zone = parse_zone(parts.get("zone"))
        except ValueError as e:
            logger.debug(f"Ignoring ISO date '{match.text}': {e}")
            return False

        context.assign(self.strategy, year=year, month=month, day=day)
        if time_fields:
            context.assign(self.strategy, **time_fields)
        else:
            context.default(hour=0, minute=0, second=0)
        if zone is not None:
            context.assign(self.strategy, location=zone)
        return True
    def apply(self, match: Match, context: Context, options: Options, reference: datetime) -> bool:
        if self.strategy is not Strategy.OVERRIDE and context.is_set("year", "month", "day", "hour", "minute"):
            return False

        # The clustered text can carry a time part next to this rule's date.
        found = ISO_DATETIME_PATTERN.search(context.text)
        parts = found.groupdict() if found else dict(match.captures)

        time_fields = {}
        if parts.get("hour") is not None:
            hour = int(parts["hour"])
            meridiem = parts.get("meridiem")
            if meridiem and not 1 <= hour <= 12:
                raise MalformedFieldError(
                    f"Hour {hour} cannot take a meridiem ({meridiem})",
                    details={"field": "hour", "value": hour, "text": context.text},
                )
            time_fields = {
                "hour": to_24_hour(hour, meridiem),
                "minute": int(parts["minute"]),
                "second": int(parts.get("second") or 0),
            }

        try:
            zone = parse_zone(parts.get("zone"))
        except ValueError as e:
            raise MalformedFieldError(
                str(e),
                details={"field": "location", "value": parts.get("zone"), "text": context.text},
            ) from e

        # Out-of-range components raise MalformedFieldError on write
        context.assign(self.strategy, year=int(parts["year"]), month=int(parts["month"]), day=int(parts["day"]))
        if time_fields:
            context.assign(self.strategy, **time_fields)
        else:
            context.default(hour=0, minute=0, second=0)
        if zone is not None:
            context.assign(self.strategy, location=zone)
        return True
