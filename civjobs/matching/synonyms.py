"""Fixed synonym map used to widen full-text keyword recall."""

from types import MappingProxyType
from typing import List

_METEOROLOGY = ("meteorology", "meteorologist", "weather", "air quality")

SYNONYM_MAP = MappingProxyType({
    "meteorology": _METEOROLOGY,
    "weather": _METEOROLOGY,
    "sheriff": ("sheriff", "law enforcement", "deputy", "corrections"),
    "probation": ("probation", "parole", "community corrections"),
    "law_enforcement": ("law enforcement", "sheriff", "probation", "police"),
    "district_attorney": ("district attorney", "da", "prosecutor", "attorney"),
    "public_information": ("public information", "communications", "public relations", "pr"),
    "human_resources": ("human resources", "hr", "personnel"),
    "officer": ("officer", "official", "staff", "personnel"),
    "assistant": ("assistant", "deputy", "associate"),
    "chief": ("chief", "head", "lead", "principal", "senior"),
})

_RELATED_SUFFIX = "related"


def expand_keyword(word: str) -> List[str]:
    """All variants to search for when matching ``word`` against job text.

    A trailing "related" is stripped first ("weatherrelated" -> "weather").
    The result starts with the base form and the original word, followed by
    any mapped synonyms, without duplicates or empty strings.

    Example:
        >>> expand_keyword("probation")
        ['probation', 'parole', 'community corrections']
    """
    base = word[: -len(_RELATED_SUFFIX)] if word.endswith(_RELATED_SUFFIX) else word
    variants = (base, word, *SYNONYM_MAP.get(base, ()))
    # An empty base from a bare "related" would match every text.
    return list(dict.fromkeys(variant for variant in variants if variant))
