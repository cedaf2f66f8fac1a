"""Parser orchestrating standard formats, rule matching and resolution.

A parse runs in five steps:
1. middleware transforms the input text
2. the standard-format fast path is tried on the whole trimmed text
3. every rule reports its leftmost match, tagged with discovery order
4. matches are clustered and the cluster is applied into a fresh Context
5. the Context is resolved against the reference instant

Usage:
    from chronal import english

    parser = english()
    result = parser.parse("call me next wednesday at 2:25pm", reference)
    if result is not None:
        print(result.time, result.text)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from chronal.clustering import application_order, cluster_matches
from chronal.errors import ChronalError, MiddlewareError, UnsupportedLanguageError
from chronal.rules import common, en
from chronal.rules.base import DEFAULT_OPTIONS, Match, Options, Rule
from chronal.rules.context import Context
from chronal.standard import parse_standard

logger = logging.getLogger(__name__)

Middleware = Callable[[str], str]


@dataclass(frozen=True)
class Result:
    """Temporal expression found in a text."""

    index: int        # Start offset of the expression
    text: str         # Expression text
    source: str       # Input text as given to parse()
    time: datetime    # Resolved absolute instant

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "index": self.index,
            "text": self.text,
            "source": self.source,
            "time": self.time.isoformat(),
        }


class Parser:
    """Resolve temporal expressions with an ordered set of rules.

    Rules, options and middleware may be changed between parses. Each parse
    works on a snapshot of them taken when it starts.
    """

    def __init__(
        self,
        options: Optional[Options] = None,
        rules: Iterable[Rule] = (),
        middleware: Iterable[Middleware] = (),
    ) -> None:
        self._options = options or DEFAULT_OPTIONS
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._middleware: Tuple[Middleware, ...] = tuple(middleware)

    @property
    def options(self) -> Options:
        return self._options

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def add_rules(self, *rules: Rule) -> None:
        """Append rules to the chain, keeping their order."""
        self._rules = self._rules + rules

    def use(self, *middleware: Middleware) -> None:
        """Append text transformations applied before matching."""
        self._middleware = self._middleware + middleware

    def set_options(self, options: Optional[Options]) -> None:
        """Replace the options; None restores the defaults."""
        self._options = options or DEFAULT_OPTIONS

    def parse(self, text: str, reference: Optional[datetime] = None) -> Optional[Result]:
        """Find and resolve the first temporal expression in ``text``.

        Args:
            text: Free text to search
            reference: Instant relative expressions are resolved against
                (defaults to the current local time)

        Returns:
            The result, or None when no expression is found

        Raises:
            MiddlewareError: A middleware step failed
            MalformedFieldError: The expression resolves to an invalid date
        """
        if reference is None:
            reference = datetime.now().astimezone()

        rules, options, middleware = self._rules, self._options, self._middleware
        source = text
        text = self._preprocess(text, middleware)

        standard = parse_standard(text, reference)
        if standard is not None:
            logger.debug(f"Standard format '{standard.template}' matched '{standard.text}'")
            return Result(index=standard.index, text=standard.text, source=source, time=standard.time)

        matches = self._find_matches(text, rules)
        cluster = cluster_matches(matches, options.distance)
        if cluster is None:
            logger.debug("No rule matched")
            return None

        context = Context(text=cluster.text(text))
        logger.debug(f"Cluster [{cluster.left}:{cluster.right}] '{context.text}' from {len(cluster.matches)} match(es)")

        applied = False
        for match in application_order(cluster.matches, options.match_by_order):
            ok = match.apply(context, options, reference)
            logger.debug(f"Applied '{match.text}' (order {match.order}): {ok}")
            applied = ok or applied

        if not applied:
            logger.debug(f"No rule set a field for '{context.text}'")
            return None

        return Result(index=cluster.left, text=context.text, source=source, time=context.time(reference))

    @staticmethod
    def _preprocess(text: str, middleware: Sequence[Middleware]) -> str:
        for step in middleware:
            try:
                text = step(text)
            except ChronalError:
                raise
            except Exception as e:
                name = getattr(step, "__name__", repr(step))
                raise MiddlewareError(
                    f"Middleware {name} failed: {e}",
                    details={"middleware": name},
                ) from e
        return text

    @staticmethod
    def _find_matches(text: str, rules: Sequence[Rule]) -> List[Match]:
        matches: List[Match] = []
        for rule in rules:
            found = rule.find(text)
            if found is not None:
                matches.append(replace(found, order=len(matches)))
        logger.debug(f"{len(matches)} of {len(rules)} rules matched")
        return matches


# ---------------------------------------------------------------------------
# Language presets
# ---------------------------------------------------------------------------

LANGUAGES: Dict[str, Tuple[Rule, ...]] = {
    "en": en.ALL,
}


def for_languages(languages: Iterable[str], options: Optional[Options] = None) -> Parser:
    """Build a parser from the union of the given languages' rules.

    Language rules come first, in the requested order, followed by the
    language-independent rules.
    """
    parser = Parser(options)
    for code in languages:
        try:
            rules = LANGUAGES[code.lower()]
        except KeyError:
            raise UnsupportedLanguageError(code) from None
        parser.add_rules(*rules)
    parser.add_rules(*common.ALL)
    return parser


def for_language(language: str, options: Optional[Options] = None) -> Parser:
    """Build a parser for a single language."""
    return for_languages([language], options)


def english(options: Optional[Options] = None) -> Parser:
    """English rules followed by the common ISO and day/month/year rules."""
    return for_language("en", options)


EN = english()


def parse(text: str, reference: Optional[datetime] = None) -> Optional[Result]:
    """Parse ``text`` with the shared English parser."""
    return EN.parse(text, reference)
