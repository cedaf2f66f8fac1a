"""Rule abstraction shared by every language catalog.

A rule is anything that can locate its first candidate span in a text and
later apply itself to a parse :class:`~chronal.rules.context.Context`. The
engine only relies on that pair of capabilities (see :class:`Rule`); the
:class:`RegexRule` base class covers the common case of one compiled pattern.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Pattern, Protocol, runtime_checkable

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from chronal.rules.context import Context


# ---------------------------------------------------------------------------
# Strategy and Options
# ---------------------------------------------------------------------------


class Strategy(Enum):
    """How a rule resolves a write to a field that is already set."""

    OVERRIDE = "override"  # Always write the fields the rule owns
    MERGE = "merge"        # Combine with existing values (rule specific)
    SKIP = "skip"          # Decline if any target field is already set


class Options(BaseModel):
    """Per-parser tuning knobs.

    ``distance`` is the largest gap, in characters, between two matches that
    still belong to the same expression. ``match_by_order`` applies matches in
    rule definition order; when false they are applied in textual order.
    """

    distance: int = Field(5, ge=0, description="Clustering distance in characters")
    match_by_order: bool = Field(True, description="Apply rules in definition order")

    # Hours used by casual time-of-day words
    morning: int = Field(8, ge=0, le=23)
    noon: int = Field(12, ge=0, le=23)
    afternoon: int = Field(15, ge=0, le=23)
    evening: int = Field(18, ge=0, le=23)

    model_config = {"frozen": True}


DEFAULT_OPTIONS = Options()


# ---------------------------------------------------------------------------
# Match
# ---------------------------------------------------------------------------


Applier = Callable[["Match", "Context", Options, datetime], bool]


@dataclass(frozen=True)
class Match:
    """Span found by one rule in the source text."""

    left: int                               # Start offset (inclusive)
    right: int                              # End offset (exclusive)
    text: str
    captures: Mapping[str, Optional[str]] = field(default_factory=dict)
    order: int = 0                          # Discovery order, set by the parser
    applier: Optional[Applier] = field(default=None, compare=False, repr=False)

    def apply(self, context: "Context", options: Options, reference: datetime) -> bool:
        """Apply the owning rule to ``context``; returns whether a field was set."""
        if self.applier is None:
            raise TypeError(f"Match {self.text!r} has no applier")
        return self.applier(self, context, options, reference)

    def __str__(self) -> str:
        return self.text


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------


@runtime_checkable
class Rule(Protocol):
    """Capability pair every rule provides."""

    strategy: Strategy

    def find(self, text: str) -> Optional[Match]:
        """Return the leftmost match in ``text`` or None."""
        ...

    def apply(
        self,
        match: Match,
        context: "Context",
        options: Options,
        reference: datetime,
    ) -> bool:
        """Write fields into ``context``; return True if any were set."""
        ...


class RegexRule:
    """Rule backed by a single compiled regular expression.

    Subclasses set ``pattern`` and implement ``apply``. The match span is the
    whole regex match, so patterns express word boundaries with lookarounds
    rather than by consuming neighbouring characters.
    """

    pattern: Pattern[str]

    def __init__(self, strategy: Strategy = Strategy.OVERRIDE) -> None:
        self.strategy = strategy

    def find(self, text: str) -> Optional[Match]:
        for found in self.pattern.finditer(text):
            if found.start() == found.end() or not self.accept(found):
                continue
            return Match(
                left=found.start(),
                right=found.end(),
                text=found.group(0),
                captures=found.groupdict(),
                applier=self.apply,
            )
        return None

    def accept(self, found: "re.Match[str]") -> bool:
        """Whether a pattern hit is a real candidate; rejected hits are passed over."""
        return True

    def apply(
        self,
        match: Match,
        context: "Context",
        options: Options,
        reference: datetime,
    ) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.strategy.name})"


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a rule pattern case-insensitively with verbose syntax."""
    return re.compile(pattern, re.IGNORECASE | re.VERBOSE)
