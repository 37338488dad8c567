"""Fixed word lists and patterns used by the query parser."""

import re
from typing import Pattern, Tuple

FILLER_WORDS = frozenset({
    "in", "at", "for", "the", "show", "me", "jobs", "job", "county", "above",
    "over", "greater", "than", "pay", "salary", "salaries", "hourly", "monthly",
})

QUESTION_WORDS = frozenset({
    "what", "where", "how", "who", "when", "why", "which", "are", "is", "can",
    "could", "would", "should", "do", "does",
})

JOB_TITLE_PREFIXES: Tuple[str, ...] = (
    "assistant", "associate", "senior", "chief", "director", "deputy",
)

# Tried in order; the first title pattern that matches is used.
JOB_TITLE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(
        r"\b(assistant chief \w+ officer|assistant sheriff|associate meteorologist"
        r"|assistant director[a-z ]+)\b",
        re.IGNORECASE,
    ),
    re.compile(rf"\b({'|'.join(JOB_TITLE_PREFIXES)})\s+(\w+(?:\s+\w+){{0,3}})\b", re.IGNORECASE),
)

# Multi-word concepts folded into a single token for the synonym map.
PHRASE_TOKENS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"law enforcement"), "law_enforcement"),
    (re.compile(r"district attorney"), "district_attorney"),
    (re.compile(r"public information"), "public_information"),
    (re.compile(r"human resources"), "human_resources"),
    (re.compile(r"probation officer"), "probation_officer"),
)

# First match only: "$50,000", "70k", "$25".
SALARY_AMOUNT = re.compile(r"\$?(\d[\d,]*k?|\d*\.?\d+k)", re.IGNORECASE)
SALARY_LITERAL = re.compile(r"\$?\d[\d,]*k?")

# Substring tests, checked in this order.
CADENCE_PATTERNS = (
    ("hourly", re.compile(r"hour|hr|hourly")),
    ("monthly", re.compile(r"month|monthly")),
    ("annual", re.compile(r"year|annually|annual|per year")),
)

NON_TOKEN_CHARS = re.compile(r"[^a-z0-9]")

MIN_KEYWORD_LENGTH = 2
