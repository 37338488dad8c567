"""Canonical jurisdiction keys and display names for raw source spellings.

Raw job and salary files spell the same county many ways ("SD County",
"sdcounty", "San Diego County"). Every spelling is reduced to one lowercase
key such as ``san_diego``; keys that are not in the override table are
derived mechanically and reported for operator review.
"""

import re
from types import MappingProxyType
from typing import Set

# Only truly odd raw spellings need an entry here; everything else falls
# through to the generated key.
JURISDICTION_OVERRIDES = MappingProxyType({
    "sdcounty": "san_diego",
    "kerncounty": "kern",
    "sanbernardino": "san_bernardino",
    "ventura": "ventura",
})

JURISDICTION_DISPLAY_NAMES = MappingProxyType({
    "san_bernardino": "San Bernardino County",
    "ventura": "Ventura County",
    "san_diego": "San Diego County",
    "kern": "Kern County",
})

_COUNTY_WORD = re.compile(r"\b(?:county|cty)\b")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _fallback_key(text: str) -> str:
    return _NON_ALNUM.sub("_", text).strip("_")


def _compact(text: str) -> str:
    return _NON_ALNUM.sub("", text)


def jurisdiction_display_name(key: str) -> str:
    """Human-readable name for a canonical key.

    Example:
        >>> jurisdiction_display_name("los_angeles")
        'Los Angeles'
    """
    known = JURISDICTION_DISPLAY_NAMES.get(key)
    if known:
        return known
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_") if word)


class JurisdictionCanonicalizer:
    """Maps raw jurisdiction strings to canonical keys.

    Lookup order against JURISDICTION_OVERRIDES:
    1. the lowercased, trimmed string
    2. the same with the words "county"/"cty" removed
    3. both of the above with every non-alphanumeric character removed

    Anything still unmatched gets a generated key (non-alphanumeric runs
    become ``_``) and the raw string is added to ``unseen_jurisdictions``.
    Canonicalization is idempotent: a canonical key maps to itself.
    """

    def __init__(self):
        self.unseen_jurisdictions: Set[str] = set()

    def canonicalize(self, raw: str) -> str:
        lower = raw.strip().lower()
        without_county = " ".join(_COUNTY_WORD.sub(" ", lower).split())

        for candidate in (lower, without_county, _compact(lower), _compact(without_county)):
            key = JURISDICTION_OVERRIDES.get(candidate)
            if key is not None:
                return key

        self.unseen_jurisdictions.add(raw)
        return _fallback_key(without_county)

    def display_name(self, key: str) -> str:
        return jurisdiction_display_name(key)


def canonicalize_jurisdiction(raw: str) -> str:
    """Canonicalize without keeping diagnostics."""
    return JurisdictionCanonicalizer().canonicalize(raw)
