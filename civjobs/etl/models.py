"""Data models for ETL run tracking and reporting."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class EtlRunResult:
    """
    Summary of one bronze -> silver -> gold run.

    Attributes:
        run_id: Identifier attached to every log record of the run
        raw_job_count: Job records read from bronze
        raw_salary_row_count: Salary rows read from bronze
        skipped_job_count: Raw jobs rejected by validation
        skipped_salary_row_count: Salary rows without jurisdiction or job code
        salary_entry_count: Keys in the silver salary table
        job_count: Gold jobs written
        jobs_with_salary_count: Gold jobs with at least one salary grade
        unseen_jurisdictions: Raw jurisdiction strings that fell through to a
            generated key, sorted
        output_paths: Written file per dataset name
        run_started_at: UTC timestamp when the run began
        run_finished_at: UTC timestamp when the run completed
        duration_seconds: Wall time for the run
    """

    run_id: str
    raw_job_count: int = 0
    raw_salary_row_count: int = 0
    skipped_job_count: int = 0
    skipped_salary_row_count: int = 0
    salary_entry_count: int = 0
    job_count: int = 0
    jobs_with_salary_count: int = 0
    unseen_jurisdictions: List[str] = field(default_factory=list)
    output_paths: Dict[str, Path] = field(default_factory=dict)
    run_started_at: Optional[datetime] = None
    run_finished_at: Optional[datetime] = None
    duration_seconds: float = 0.0

    @property
    def had_unseen_jurisdictions(self) -> bool:
        return bool(self.unseen_jurisdictions)

    def summary(self) -> str:
        """One-line, human-readable outcome for the CLI."""
        return (
            f"Bronze->Silver->Gold complete: {self.job_count} jobs, "
            f"{self.salary_entry_count} salary entries "
            f"({self.jobs_with_salary_count} jobs with salary)"
        )
