"""Data models for the matching engine."""

from dataclasses import dataclass, field
from typing import List, Optional

from civjobs.domain.models import JobWithSalary


@dataclass
class MatchOutcome:
    """Result of running a JobQuery against the dataset.

    Attributes:
        jobs: Matching jobs in dataset order
        strategy: Name of the keyword strategy that produced the candidates,
            or None when the query had no keywords
        jurisdiction_candidates: Jobs left after the jurisdiction filter
        keyword_candidates: Jobs left after the keyword filter
    """

    jobs: List[JobWithSalary] = field(default_factory=list)
    strategy: Optional[str] = None
    jurisdiction_candidates: int = 0
    keyword_candidates: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.jobs

    def __len__(self) -> int:
        return len(self.jobs)
