"""Resolve natural-language date and time expressions to absolute instants.

Usage:
    from chronal import english

    result = english().parse("call me next wednesday at 2:25pm", reference)
"""

from chronal.errors import (
    ChronalError,
    MalformedFieldError,
    MiddlewareError,
    ParseError,
    UnsupportedLanguageError,
)
from chronal.parser import (
    EN,
    LANGUAGES,
    Parser,
    Result,
    english,
    for_language,
    for_languages,
    parse,
)
from chronal.rules import DEFAULT_OPTIONS, Context, Match, Options, RegexRule, Rule, Strategy
from chronal.standard import parse_standard

__all__ = [
    "DEFAULT_OPTIONS",
    "EN",
    "LANGUAGES",
    "ChronalError",
    "Context",
    "MalformedFieldError",
    "Match",
    "MiddlewareError",
    "Options",
    "ParseError",
    "Parser",
    "RegexRule",
    "Result",
    "Rule",
    "Strategy",
    "UnsupportedLanguageError",
    "english",
    "for_language",
    "for_languages",
    "parse",
    "parse_standard",
]
