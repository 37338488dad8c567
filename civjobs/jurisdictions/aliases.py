"""Conversational county aliases used when reading free-text queries.

The table is an ordered tuple: the first alias that matches a query wins, so
definition order is the tie-break (for example "sb county" resolves through
"sb" to Santa Barbara before the San Bernardino entry is reached).
"""

import re
from typing import Optional, Pattern, Tuple

COUNTY_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("san diego", "san_diego"),
    ("san diego county", "san_diego"),
    ("sandiego", "san_diego"),
    ("sd", "san_diego"),

    ("ventura", "ventura"),
    ("ventura county", "ventura"),
    ("vc", "ventura"),

    ("los angeles", "los_angeles"),
    ("los angeles county", "los_angeles"),
    ("la", "los_angeles"),
    ("la county", "los_angeles"),

    ("santa barbara", "santa_barbara"),
    ("santa barbara county", "santa_barbara"),
    ("sb", "santa_barbara"),

    ("orange", "orange"),
    ("orange county", "orange"),
    ("oc", "orange"),

    ("kern", "kern"),
    ("kern county", "kern"),
    ("kn", "kern"),

    ("san bernardino", "san_bernardino"),
    ("san bernardino county", "san_bernardino"),
    ("sbc", "san_bernardino"),
    ("sb county", "san_bernardino"),
)


def _bounded(alias: str) -> Pattern[str]:
    return re.compile(rf"\b{re.escape(alias)}\b", re.IGNORECASE)


_ALIAS_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (_bounded(alias), key) for alias, key in COUNTY_ALIASES
)

_SINGLE_WORD_ALIASES = frozenset(alias for alias, _ in COUNTY_ALIASES if " " not in alias)


def find_jurisdiction(text: str) -> Optional[str]:
    """Canonical key of the first alias found in ``text`` as a whole word.

    Example:
        >>> find_jurisdiction("clerk jobs in LA")
        'los_angeles'
        >>> find_jurisdiction("clerk jobs in atlanta") is None
        True
    """
    for pattern, key in _ALIAS_PATTERNS:
        if pattern.search(text):
            return key
    return None


def is_alias_token(token: str) -> bool:
    """Whether a single query token is, by itself, a county alias."""
    return token.lower() in _SINGLE_WORD_ALIASES
