"""Domain models for civjobs."""

from .models import (
    Job,
    JobWithSalary,
    RawJob,
    RawSalaryRow,
    SalaryCadence,
    SalaryGrade,
    SearchIndexEntry,
    make_job_id,
)
from .salary import amount_to_annual, build_salary_grade, parse_amount

__all__ = [
    "Job",
    "JobWithSalary",
    "RawJob",
    "RawSalaryRow",
    "SalaryCadence",
    "SalaryGrade",
    "SearchIndexEntry",
    "make_job_id",
    "amount_to_annual",
    "build_salary_grade",
    "parse_amount",
]
