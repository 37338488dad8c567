"""Job matching over the canonical dataset.

This module provides:
- JobDataset: lazily loaded, read-only gold job records
- JobMatcher: jurisdiction, keyword, and salary filtering for a JobQuery
- MatchStrategy implementations evaluated in MATCH_STRATEGIES order
- expand_keyword: synonym expansion for full-text matching
"""

from .dataset import GOLD_JOBS_FILENAME, JobDataset
from .engine import (
    MATCH_STRATEGIES,
    FullTextMatchStrategy,
    JobMatcher,
    MatchStrategy,
    TitleMatchStrategy,
    filter_by_jurisdiction,
    filter_by_keywords,
    filter_jobs,
    meets_min_salary,
)
from .models import MatchOutcome
from .synonyms import SYNONYM_MAP, expand_keyword

__all__ = [
    "GOLD_JOBS_FILENAME",
    "JobDataset",
    "JobMatcher",
    "MatchOutcome",
    "MatchStrategy",
    "TitleMatchStrategy",
    "FullTextMatchStrategy",
    "MATCH_STRATEGIES",
    "filter_by_jurisdiction",
    "filter_by_keywords",
    "filter_jobs",
    "meets_min_salary",
    "SYNONYM_MAP",
    "expand_keyword",
]
