"""Grouping of independently found matches into one expression.

Every rule reports at most one match, anywhere in the text. The clusterer
keeps the run of matches that starts at the leftmost one and continues while
each next match begins within ``distance`` characters of the run's end. The
sweep is greedy and single-pass: the first match that is too far away ends
the expression, together with everything to its right.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import List, Optional, Sequence, Tuple

from chronal.rules.base import Match

logger = logging.getLogger(__name__)

_by_position = attrgetter("left", "order")
_by_order = attrgetter("order")


@dataclass(frozen=True)
class Cluster:
    """Matches judged to form a single temporal expression."""

    matches: Tuple[Match, ...]
    left: int
    right: int

    def text(self, source: str) -> str:
        return source[self.left:self.right]


def cluster_matches(matches: Sequence[Match], distance: int) -> Optional[Cluster]:
    """Select the leftmost cluster of ``matches``.

    Args:
        matches: Matches in any order, possibly overlapping
        distance: Largest allowed gap between the cluster end and the next
            match's left index

    Returns:
        The cluster, or None when there are no matches
    """
    if not matches:
        return None

    ordered = sorted(matches, key=_by_position)
    end = ordered[0].right
    kept = [ordered[0]]

    for candidate in ordered[1:]:
        if candidate.left > end + distance:
            logger.debug(
                f"Match '{candidate.text}' at {candidate.left} is beyond distance {distance} of {end}; "
                f"dropping it and {len(ordered) - len(kept) - 1} more"
            )
            break
        end = max(end, candidate.right)
        kept.append(candidate)

    return Cluster(matches=tuple(kept), left=ordered[0].left, right=end)


def application_order(matches: Sequence[Match], match_by_order: bool) -> List[Match]:
    """Sequence in which clustered matches are applied to the context.

    With ``match_by_order`` the rule definition order decides (the order tag
    assigned at discovery); otherwise matches apply left to right. Under
    OVERRIDE the last applied match wins, so this order is observable.
    """
    return sorted(matches, key=_by_order if match_by_order else _by_position)
