"""Job matching engine for evaluating the dataset against a parsed query.

Filters run in this order, each only when its criterion is present:
1. Jurisdiction: substring match on the space-normalized jurisdiction key
2. Keywords: the first strategy in MATCH_STRATEGIES that selects any job
   replaces the candidate set
3. Salary: at least one grade meets the threshold in the requested cadence
   (hourly when the query does not say)

Dataset order is preserved throughout; there is no relevance ranking.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, Tuple

from civjobs.domain.models import JobWithSalary, SalaryCadence
from civjobs.domain.salary import comparable_amount
from civjobs.logging import get_logger
from civjobs.logging.context import log_context
from civjobs.query.models import JobQuery

from .dataset import JobDataset
from .models import MatchOutcome
from .synonyms import expand_keyword

logger = get_logger(__name__, component="matching")

JOB_TITLE_PARTS: Tuple[str, ...] = (
    "assistant", "associate", "chief", "director", "sheriff", "meteorologist", "probation", "officer",
)

# Titles that match outright when every word is in both the title and the keywords.
COMPOSITE_TITLES: Tuple[Tuple[str, ...], ...] = (
    ("assistant", "sheriff"),
    ("assistant", "chief", "probation", "officer"),
)

MIN_TITLE_PART_OVERLAP = 2
MIN_FULL_TEXT_HITS = 2
DEFAULT_SALARY_CADENCE = SalaryCadence.HOURLY


def _normalize_jurisdiction(value: str) -> str:
    return value.replace("_", " ").lower()


class MatchStrategy(ABC):
    """Keyword strategy that selects jobs from a candidate set."""

    name: str = ""

    @abstractmethod
    def matches(self, job: JobWithSalary, keywords: Sequence[str]) -> bool:
        """Whether ``job`` satisfies ``keywords`` under this strategy."""

    def select(self, jobs: Iterable[JobWithSalary], keywords: Sequence[str]) -> List[JobWithSalary]:
        return [job for job in jobs if self.matches(job, keywords)]


class TitleMatchStrategy(MatchStrategy):
    """Lenient title match on well-known job title words.

    Title words are substring tests on the lowercased title; keyword words
    must be exact keyword tokens.
    """

    name = "title"

    def matches(self, job: JobWithSalary, keywords: Sequence[str]) -> bool:
        title = job.title.lower()
        keyword_set = set(keywords)

        for words in COMPOSITE_TITLES:
            if all(word in keyword_set and word in title for word in words):
                return True

        overlap = sum(1 for part in JOB_TITLE_PARTS if part in title and part in keyword_set)
        return overlap >= MIN_TITLE_PART_OVERLAP


class FullTextMatchStrategy(MatchStrategy):
    """Synonym-aware substring match over title and description.

    A keyword hits when any of its expansions occurs in the text. At least
    min(2, len(keywords)) keywords must hit, so a lone keyword only needs
    itself while longer queries need two hits.
    """

    name = "full_text"

    def matches(self, job: JobWithSalary, keywords: Sequence[str]) -> bool:
        if not keywords:
            return True
        text = f"{job.title} {job.description}".lower()
        hits = 0
        for keyword in keywords:
            if any(variant in text for variant in expand_keyword(keyword.lower())):
                hits += 1
        return hits >= min(MIN_FULL_TEXT_HITS, len(keywords))


# Evaluated in order; the first strategy that selects any job wins.
MATCH_STRATEGIES: Tuple[MatchStrategy, ...] = (TitleMatchStrategy(), FullTextMatchStrategy())


def filter_by_jurisdiction(jobs: Iterable[JobWithSalary], jurisdiction: str) -> List[JobWithSalary]:
    wanted = _normalize_jurisdiction(jurisdiction)
    return [job for job in jobs if wanted in _normalize_jurisdiction(job.jurisdiction)]


def filter_by_keywords(
    jobs: Sequence[JobWithSalary],
    keywords: Sequence[str],
    strategies: Sequence[MatchStrategy] = MATCH_STRATEGIES,
) -> Tuple[List[JobWithSalary], Optional[str]]:
    """Apply keyword strategies in order.

    Returns:
        (selected_jobs, strategy_name); the name is that of the last strategy
        tried when none selects anything
    """
    name = None
    for strategy in strategies:
        name = strategy.name
        selected = strategy.select(jobs, keywords)
        if selected:
            return selected, name
    return [], name


def meets_min_salary(
    job: JobWithSalary,
    min_salary: float,
    cadence: Optional[SalaryCadence] = None,
) -> bool:
    requested = cadence or DEFAULT_SALARY_CADENCE
    return any(comparable_amount(grade, requested) >= min_salary for grade in job.salary_grades)


def filter_jobs(
    jobs: Sequence[JobWithSalary],
    query: JobQuery,
    strategies: Sequence[MatchStrategy] = MATCH_STRATEGIES,
) -> MatchOutcome:
    """Run every applicable filter over ``jobs``; an empty query keeps everything."""
    candidates = list(jobs)
    outcome = MatchOutcome()

    if query.jurisdiction:
        candidates = filter_by_jurisdiction(candidates, query.jurisdiction)
    outcome.jurisdiction_candidates = len(candidates)

    if query.keywords:
        candidates, outcome.strategy = filter_by_keywords(candidates, query.keywords, strategies)
    outcome.keyword_candidates = len(candidates)

    if query.min_salary is not None:
        candidates = [
            job for job in candidates if meets_min_salary(job, query.min_salary, query.salary_cadence)
        ]

    outcome.jobs = candidates
    return outcome


class JobMatcher:
    """Searches a JobDataset with parsed queries.

    The matcher never mutates the dataset and holds no per-query state, so a
    single instance can serve concurrent searches.
    """

    def __init__(
        self,
        dataset: JobDataset,
        strategies: Sequence[MatchStrategy] = MATCH_STRATEGIES,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize JobMatcher.

        Args:
            dataset: Canonical job dataset to search
            strategies: Keyword strategies in evaluation order
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.dataset = dataset
        self.strategies = tuple(strategies)
        self.logger = logger_instance or logger

    def search(self, query: JobQuery) -> List[JobWithSalary]:
        return self.evaluate(query).jobs

    def filter_jobs(self, jobs: Sequence[JobWithSalary], query: JobQuery) -> List[JobWithSalary]:
        """Apply this matcher's filters to ``jobs`` instead of the dataset."""
        return filter_jobs(jobs, query, self.strategies).jobs

    def evaluate(self, query: JobQuery) -> MatchOutcome:
        with log_context(query_id=uuid.uuid4().hex[:12]):
            jobs = self.dataset.jobs
            outcome = filter_jobs(jobs, query, self.strategies)

            self.logger.info(
                f"Found {len(outcome.jobs)} job(s)" if outcome.jobs else "No jobs found for these parameters",
                extra={
                    "event": "matching.search.completed",
                    "dataset_size": len(jobs),
                    "jurisdiction_candidates": outcome.jurisdiction_candidates,
                    "keyword_candidates": outcome.keyword_candidates,
                    "strategy": outcome.strategy,
                    "result_count": len(outcome.jobs),
                },
            )
            for position, job in enumerate(outcome.jobs, 1):
                self.logger.debug(
                    f"[{position}] {job.title} ({job.jurisdiction}, {job.code})",
                    extra={"event": "matching.search.result", "job_id": job.job_id},
                )
            return outcome
