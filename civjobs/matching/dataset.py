"""Read-only, lazily loaded view of the gold job dataset."""

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, Optional, Tuple

from pydantic import ValidationError

from civjobs.domain.models import JobWithSalary
from civjobs.logging import get_logger

logger = get_logger(__name__, component="dataset")

GOLD_JOBS_FILENAME = "jobs_with_salary.json"


class JobDataset:
    """Canonical JobWithSalary records, loaded at most once per instance.

    The first access to ``jobs`` reads the gold file under a lock; concurrent
    first callers wait for that single load. The loaded tuple is never
    mutated or reloaded, so a new process (or a new JobDataset) is needed to
    pick up fresh ETL output.

    Load problems never raise: a missing or unparsable file yields an empty
    dataset, and individual invalid records are skipped. Both are logged.
    """

    def __init__(self, path: Path, logger_instance: Optional[logging.Logger] = None):
        """Initialize JobDataset.

        Args:
            path: Path to jobs_with_salary.json
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.path = Path(path)
        self.logger = logger_instance or logger
        self._jobs: Optional[Tuple[JobWithSalary, ...]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_gold_dir(cls, gold_dir: Path) -> "JobDataset":
        return cls(Path(gold_dir) / GOLD_JOBS_FILENAME)

    @classmethod
    def from_jobs(cls, jobs: Iterable[JobWithSalary]) -> "JobDataset":
        """Build an already-loaded dataset from in-memory jobs."""
        dataset = cls(Path("<memory>"))
        dataset._jobs = tuple(jobs)
        return dataset

    @property
    def is_loaded(self) -> bool:
        return self._jobs is not None

    @property
    def jobs(self) -> Tuple[JobWithSalary, ...]:
        if self._jobs is None:
            with self._lock:
                if self._jobs is None:
                    self._jobs = self._load()
        return self._jobs

    def __len__(self) -> int:
        return len(self.jobs)

    def get(self, job_id: str) -> Optional[JobWithSalary]:
        """Find a job by its ``jurisdiction|code`` id."""
        for job in self.jobs:
            if job.job_id == job_id:
                return job
        return None

    def _load(self) -> Tuple[JobWithSalary, ...]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(
                f"Failed to load job dataset from {self.path}: {e}",
                extra={
                    "event": "dataset.load.failed",
                    "path": str(self.path),
                    "error_type": type(e).__name__,
                },
            )
            return ()

        if not isinstance(records, list):
            self.logger.error(
                f"Job dataset {self.path} does not contain a JSON array",
                extra={"event": "dataset.load.failed", "path": str(self.path)},
            )
            return ()

        jobs = []
        skipped = 0
        for index, record in enumerate(records):
            try:
                jobs.append(JobWithSalary.model_validate(record))
            except ValidationError as e:
                skipped += 1
                self.logger.warning(
                    f"Skipping invalid job record #{index}: {e.error_count()} validation error(s)",
                    extra={"event": "dataset.record.invalid", "index": index},
                )

        self.logger.info(
            f"Loaded {len(jobs)} jobs",
            extra={
                "event": "dataset.loaded",
                "path": str(self.path),
                "job_count": len(jobs),
                "skipped_count": skipped,
            },
        )
        return tuple(jobs)
