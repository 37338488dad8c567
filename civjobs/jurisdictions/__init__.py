"""Jurisdiction canonicalization and query-time county aliases."""

from .aliases import COUNTY_ALIASES, find_jurisdiction, is_alias_token
from .canonical import (
    JURISDICTION_DISPLAY_NAMES,
    JURISDICTION_OVERRIDES,
    JurisdictionCanonicalizer,
    canonicalize_jurisdiction,
    jurisdiction_display_name,
)

__all__ = [
    "COUNTY_ALIASES",
    "JURISDICTION_DISPLAY_NAMES",
    "JURISDICTION_OVERRIDES",
    "JurisdictionCanonicalizer",
    "canonicalize_jurisdiction",
    "find_jurisdiction",
    "is_alias_token",
    "jurisdiction_display_name",
]
