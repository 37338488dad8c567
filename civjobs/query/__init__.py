"""Natural-language query parsing."""

from .models import JobQuery
from .parser import (
    detect_cadence,
    extract_job_title,
    extract_keywords,
    extract_min_salary,
    parse_job_query,
)

__all__ = [
    "JobQuery",
    "parse_job_query",
    "detect_cadence",
    "extract_job_title",
    "extract_keywords",
    "extract_min_salary",
]
