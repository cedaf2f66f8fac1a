"""Language-independent rules shared by every catalog."""

from chronal.rules.base import Strategy
from chronal.rules.common.iso_date import ISO_DATETIME_PATTERN, ISODateRule
from chronal.rules.common.slash_dmy import SlashDMYRule

ALL = (
    ISODateRule(Strategy.OVERRIDE),
    SlashDMYRule(Strategy.SKIP),
)

__all__ = ["ALL", "ISO_DATETIME_PATTERN", "ISODateRule", "SlashDMYRule"]
