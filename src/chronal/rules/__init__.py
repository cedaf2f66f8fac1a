"""Rule primitives and the per-language rule catalogs.

Catalogs live in subpackages (``chronal.rules.en``, ``chronal.rules.common``)
and each exposes an ordered ``ALL`` tuple of ready-to-use rule instances.
"""

from chronal.rules.base import (
    DEFAULT_OPTIONS,
    Match,
    Options,
    RegexRule,
    Rule,
    Strategy,
    compile_pattern,
)
from chronal.rules.context import Context

__all__ = [
    "DEFAULT_OPTIONS",
    "Context",
    "Match",
    "Options",
    "RegexRule",
    "Rule",
    "Strategy",
    "compile_pattern",
]
