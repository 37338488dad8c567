"""Free-text query parsing into JobQuery criteria.

parse_job_query() runs these steps in order:
1. Jurisdiction: first county alias found as a whole word
2. Minimum salary: first amount such as "$25", "70k", or "$50,000"
3. Cadence: hourly / monthly / annual wording
4. Job title phrase ("assistant sheriff", "senior ..."), removed from the text
5. Keywords from the remaining text, minus salary literals, filler words,
   question words, and bare county aliases
6. Multi-word concepts folded into single tokens ("probation_officer")
7. Cleanup: drop jurisdiction words and short tokens, dedupe, None when empty

Jurisdiction detection and title extraction read overlapping text and are not
reconciled; the order above is authoritative.
"""

from typing import List, Optional, Tuple

from civjobs.domain.models import SalaryCadence
from civjobs.jurisdictions import find_jurisdiction, is_alias_token
from civjobs.logging import get_logger

from .models import JobQuery
from .vocabulary import (
    CADENCE_PATTERNS,
    FILLER_WORDS,
    JOB_TITLE_PATTERNS,
    MIN_KEYWORD_LENGTH,
    NON_TOKEN_CHARS,
    PHRASE_TOKENS,
    QUESTION_WORDS,
    SALARY_AMOUNT,
    SALARY_LITERAL,
)

logger = get_logger(__name__, component="query")


def parse_job_query(query: str) -> JobQuery:
    """Parse a free-text job search query.

    Example:
        >>> q = parse_job_query("assistant sheriff jobs in san diego over $70k")
        >>> q.jurisdiction, q.keywords, q.min_salary
        ('san_diego', ['assistant', 'sheriff'], 70000.0)
    """
    lowered = query.lower().strip()

    jurisdiction = find_jurisdiction(lowered)
    min_salary = extract_min_salary(lowered)
    salary_cadence = detect_cadence(lowered)

    job_title, remaining = extract_job_title(lowered)
    keywords = extract_keywords(remaining)
    if job_title:
        keywords = job_title.split() + keywords

    for pattern, token in PHRASE_TOKENS:
        if pattern.search(lowered):
            keywords.append(token)

    if jurisdiction:
        jurisdiction_words = set(jurisdiction.split("_"))
        keywords = [word for word in keywords if word not in jurisdiction_words]

    keywords = [word for word in keywords if len(word) >= MIN_KEYWORD_LENGTH]
    keywords = list(dict.fromkeys(word for word in keywords if word))

    parsed = JobQuery(
        keywords=keywords or None,
        jurisdiction=jurisdiction,
        min_salary=min_salary,
        salary_cadence=salary_cadence,
    )

    logger.debug(
        "Parsed job query",
        extra={
            "event": "query.parsed",
            "query": query,
            "keywords": parsed.keywords,
            "jurisdiction": parsed.jurisdiction,
            "min_salary": parsed.min_salary,
            "salary_cadence": parsed.salary_cadence.value if parsed.salary_cadence else None,
        },
    )
    return parsed


def extract_min_salary(text: str) -> Optional[float]:
    """First salary amount in ``text``; a trailing "k" multiplies by 1000.

    Only one amount is recognized, so "$20 to $30" yields 20.
    """
    match = SALARY_AMOUNT.search(text)
    if not match:
        return None

    literal = match.group(1).lower()
    if literal.endswith("k"):
        amount = float(literal[:-1].replace(",", "")) * 1000
    else:
        amount = float(literal.replace(",", ""))

    return amount if amount > 0 else None


def detect_cadence(text: str) -> Optional[SalaryCadence]:
    for cadence, pattern in CADENCE_PATTERNS:
        if pattern.search(text):
            return SalaryCadence(cadence)
    return None


def extract_job_title(text: str) -> Tuple[Optional[str], str]:
    """Find a job title phrase and return it with the rest of the text.

    Returns:
        (title, remaining_text); title is None when no pattern matches
    """
    for pattern in JOB_TITLE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0), text[: match.start()] + text[match.end():]
    return None, text


def extract_keywords(text: str) -> List[str]:
    """Split ``text`` into candidate keyword tokens, dropping noise words."""
    keywords = []
    for raw_token in SALARY_LITERAL.sub("", text).split():
        token = NON_TOKEN_CHARS.sub("", raw_token)
        if not token:
            continue
        if token in FILLER_WORDS or token in QUESTION_WORDS or is_alias_token(token):
            continue
        keywords.append(token)
    return keywords
