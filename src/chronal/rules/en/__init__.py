"""English rule catalog.

``ALL`` lists the rules in definition order, which is also their application
order when ``Options.match_by_order`` is set.
"""

from chronal.rules.base import Strategy
from chronal.rules.en.casual_date import CasualDateRule
from chronal.rules.en.casual_time import CasualTimeRule
from chronal.rules.en.deadline import DeadlineRule
from chronal.rules.en.exact_month_date import ExactMonthDateRule
from chronal.rules.en.hour import HourRule
from chronal.rules.en.hour_minute import HourMinuteRule
from chronal.rules.en.past_time import PastTimeRule
from chronal.rules.en.relative_period import RelativePeriodRule
from chronal.rules.en.weekday import WeekdayRule

ALL = (
    WeekdayRule(Strategy.OVERRIDE),
    CasualDateRule(Strategy.OVERRIDE),
    CasualTimeRule(Strategy.OVERRIDE),
    HourRule(Strategy.OVERRIDE),
    HourMinuteRule(Strategy.OVERRIDE),
    DeadlineRule(Strategy.OVERRIDE),
    PastTimeRule(Strategy.OVERRIDE),
    ExactMonthDateRule(Strategy.OVERRIDE),
    RelativePeriodRule(Strategy.OVERRIDE),
)

__all__ = [
    "ALL",
    "CasualDateRule",
    "CasualTimeRule",
    "DeadlineRule",
    "ExactMonthDateRule",
    "HourMinuteRule",
    "HourRule",
    "PastTimeRule",
    "RelativePeriodRule",
    "WeekdayRule",
]
