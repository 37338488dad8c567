"""Bronze to silver to gold normalization.

This module implements the transformation logic that:
1. Turns raw salary rows into a ``jurisdiction|code`` -> grades table
2. Canonicalizes raw job descriptions and extracts keyword snippets
3. Joins jobs with their salary grades (gold layer)
4. Derives the lightweight search index from the gold jobs

All steps are pure in-memory transformations; reading and writing files is
the runner's job.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Union

from pydantic import ValidationError

from civjobs.domain.models import (
    JOB_CODE_WIDTH,
    MAX_SALARY_GRADE,
    Job,
    JobWithSalary,
    RawJob,
    RawSalaryRow,
    SalaryGrade,
    SearchIndexEntry,
    make_job_id,
)
from civjobs.domain.salary import build_salary_grade
from civjobs.jurisdictions import JurisdictionCanonicalizer
from civjobs.logging import get_logger

logger = get_logger(__name__, component="etl")

SalaryTable = Dict[str, List[SalaryGrade]]

SECTION_PHRASES = (
    "knowledge of",
    "skills and abilities",
    "ability to",
    "required",
    "experience",
    "education",
    "certification",
    "license",
)
SECTION_SNIPPET_LENGTH = 100

_LIST_ITEM = re.compile(r"^(?:\d+\.|[•⁃-])\s")
_SECTION_PATTERNS = tuple(re.compile(re.escape(phrase), re.IGNORECASE) for phrase in SECTION_PHRASES)


def pad_job_code(code: Any) -> str:
    """Left-pad a job code with zeros; longer codes are left alone.

    Example:
        >>> pad_job_code(" 123 ")
        '00123'
    """
    return str(code).strip().rjust(JOB_CODE_WIDTH, "0")


def extract_keywords(description: str) -> List[str]:
    """Pull descriptive snippets out of a job description.

    Kept, in this order and without duplicates:
    - every numbered ("1. ") or bulleted ("•", "⁃", "-") line, trimmed
    - for each section phrase, the first 100 characters starting at its
      first case-insensitive occurrence, cut at the next line break

    Snippets keep the casing of the description; matching lowercases text
    at search time instead.
    """
    snippets = []

    for line in description.splitlines():
        stripped = line.strip()
        if _LIST_ITEM.match(stripped):
            snippets.append(stripped)

    for pattern in _SECTION_PATTERNS:
        match = pattern.search(description)
        if match:
            window = description[match.start(): match.start() + SECTION_SNIPPET_LENGTH]
            snippets.append(window.split("\n", 1)[0].strip())

    return list(dict.fromkeys(snippet for snippet in snippets if snippet))


class EtlNormalizer:
    """Normalizes bronze records into canonical silver and gold records.

    Responsibilities:
    - Canonicalize jurisdictions and pad job codes consistently for salaries and jobs
    - Drop unusable salary cells and rows
    - Skip raw jobs that fail validation, with a warning per record
    - Track raw jurisdiction strings that only resolved to a generated key

    One instance is meant to serve a single run so its diagnostics describe
    exactly that run.
    """

    def __init__(
        self,
        canonicalizer: Optional[JurisdictionCanonicalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize EtlNormalizer.

        Args:
            canonicalizer: Jurisdiction canonicalizer (a fresh one by default)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.canonicalizer = canonicalizer or JurisdictionCanonicalizer()
        self.logger = logger_instance or logger
        self.skipped_salary_rows = 0
        self.skipped_jobs = 0

    @property
    def unseen_jurisdictions(self) -> Set[str]:
        return self.canonicalizer.unseen_jurisdictions

    def normalize_salaries(self, rows: Iterable[Union[RawSalaryRow, Mapping[str, Any]]]) -> SalaryTable:
        """Build the silver salary table.

        Rows without a jurisdiction or job code are skipped. Grades 1-14 are
        read in order; rows that yield no valid grade are left out of the
        table entirely. A later row with the same key replaces an earlier one.

        Returns:
            Mapping of ``jurisdiction|code`` to its ordered grade list
        """
        table: SalaryTable = {}
        self.skipped_salary_rows = 0

        for index, row in enumerate(rows):
            try:
                salary_row = row if isinstance(row, RawSalaryRow) else RawSalaryRow.model_validate(row)
            except ValidationError as e:
                self.skipped_salary_rows += 1
                self.logger.warning(
                    f"Skipping invalid salary row #{index}: {e.error_count()} validation error(s)",
                    extra={"event": "etl.salary_row.invalid", "index": index},
                )
                continue

            if not (salary_row.jurisdiction or "").strip() or not (salary_row.job_code or "").strip():
                self.skipped_salary_rows += 1
                continue

            jurisdiction = self.canonicalizer.canonicalize(salary_row.jurisdiction)
            key = make_job_id(jurisdiction, pad_job_code(salary_row.job_code))

            grades = []
            for grade in range(1, MAX_SALARY_GRADE + 1):
                salary_grade = build_salary_grade(grade, salary_row.grade_cell(grade))
                if salary_grade is not None:
                    grades.append(salary_grade)

            if grades:
                table[key] = grades

        self.logger.info(
            f"Normalized salaries into {len(table)} entries",
            extra={
                "event": "etl.salaries.normalized",
                "salary_entry_count": len(table),
                "skipped_row_count": self.skipped_salary_rows,
            },
        )
        return table

    def normalize_job(self, raw_job: RawJob) -> Job:
        jurisdiction = self.canonicalizer.canonicalize(raw_job.jurisdiction)
        description = raw_job.description.strip()
        return Job(
            jurisdiction=jurisdiction,
            jurisdiction_display=self.canonicalizer.display_name(jurisdiction),
            code=pad_job_code(raw_job.code),
            title=raw_job.title.strip(),
            description=description,
            keywords=extract_keywords(description),
        )

    def normalize_jobs(self, raw_jobs: Iterable[Union[RawJob, Mapping[str, Any]]]) -> List[Job]:
        """Build the silver job list, preserving input order."""
        jobs = []
        self.skipped_jobs = 0

        for index, record in enumerate(raw_jobs):
            try:
                raw_job = record if isinstance(record, RawJob) else RawJob.model_validate(record)
            except ValidationError as e:
                self.skipped_jobs += 1
                self.logger.warning(
                    f"Skipping invalid job record #{index}: {e.error_count()} validation error(s)",
                    extra={"event": "etl.job.invalid", "index": index},
                )
                continue

            jobs.append(self.normalize_job(raw_job))

        self.logger.info(
            f"Normalized {len(jobs)} jobs",
            extra={
                "event": "etl.jobs.normalized",
                "job_count": len(jobs),
                "skipped_count": self.skipped_jobs,
            },
        )
        return jobs

    def join(self, jobs: Iterable[Job], salary_table: Mapping[str, List[SalaryGrade]]) -> List[JobWithSalary]:
        """Attach salary grades to each job; jobs without an entry get []."""
        return [
            JobWithSalary(
                **job.model_dump(),
                salary_grades=list(salary_table.get(job.job_id, ())),
            )
            for job in jobs
        ]

    def build_search_index(self, gold_jobs: Iterable[JobWithSalary]) -> List[SearchIndexEntry]:
        return [
            SearchIndexEntry(
                id=job.job_id,
                title_tokens=job.title.lower().split(),
                jurisdiction=job.jurisdiction,
                jurisdiction_display=job.jurisdiction_display,
                has_salary=job.has_salary,
            )
            for job in gold_jobs
        ]
