"""Core domain models for jobs, salary grades, and the search index.

This module defines the data structures used throughout the application:
- RawJob / RawSalaryRow: bronze records as they appear in the source files
- SalaryGrade: one step of a job code's pay scale
- Job / JobWithSalary: canonical (silver / gold) job records
- SearchIndexEntry: lightweight per-job index record

Canonical models serialize with camelCase field names (``jurisdictionDisplay``,
``salaryGrades``, ``titleTokens``, ``hasSalary``) and accept either spelling
on input.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_SALARY_GRADE = 14
JOB_CODE_WIDTH = 5


def make_job_id(jurisdiction: str, code: str) -> str:
    """Identity key shared by salary rows, gold jobs, and the search index."""
    return f"{jurisdiction}|{code}"


def _coerce_code(value: Any) -> Any:
    """Spreadsheet exports sometimes store job codes as numbers."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class SalaryCadence(str, Enum):
    """Pay period a salary figure refers to."""

    HOURLY = "hourly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class RawJob(BaseModel):
    """Job description record from ``job_descriptions.raw.json``."""

    jurisdiction: str = Field(..., min_length=1, description="Free-text jurisdiction")
    code: str = Field(..., min_length=1, description="Job code, possibly missing leading zeros")
    title: str = Field(..., description="Job title")
    description: str = Field("", description="Full job description text")

    @field_validator("jurisdiction", mode="before")
    @classmethod
    def strip_jurisdiction(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        return _coerce_code(v)

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, v: Any) -> Any:
        return "" if v is None else v


class RawSalaryRow(BaseModel):
    """Salary table row from ``salaries.raw.json``.

    Grade cells are kept as extra fields named ``"Salary grade 1"`` through
    ``"Salary grade 14"``; read them with grade_cell().
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    jurisdiction: Optional[str] = Field(None, alias="Jurisdiction")
    job_code: Optional[str] = Field(None, alias="Job Code")

    @field_validator("job_code", mode="before")
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        return _coerce_code(v)

    def grade_cell(self, grade: int) -> Any:
        """Raw cell value for ``grade`` (1-based), or None when the column is absent."""
        return (self.model_extra or {}).get(f"Salary grade {grade}")


class SalaryGrade(BaseModel):
    """One step within a job code's pay scale.

    The cadence is inferred during ETL from the amount, so it describes how
    the figure was interpreted rather than what the source asserted.
    """

    model_config = ConfigDict(frozen=True)

    grade: int = Field(..., ge=1, le=MAX_SALARY_GRADE)
    amount: float = Field(..., gt=0)
    cadence: SalaryCadence
    currency: str = "USD"


class Job(BaseModel):
    """Normalized job description (silver layer)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    jurisdiction: str = Field(..., description="Canonical jurisdiction key")
    jurisdiction_display: str = Field(..., alias="jurisdictionDisplay")
    code: str = Field(..., description="Zero-padded job code")
    title: str
    description: str
    keywords: List[str] = Field(default_factory=list, description="Extracted phrase snippets")

    @property
    def job_id(self) -> str:
        return make_job_id(self.jurisdiction, self.code)

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class JobWithSalary(Job):
    """Job joined with its salary grades (gold layer)."""

    salary_grades: List[SalaryGrade] = Field(default_factory=list, alias="salaryGrades")

    @property
    def has_salary(self) -> bool:
        return bool(self.salary_grades)


class SearchIndexEntry(BaseModel):
    """Derived, read-only index record for one gold job."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title_tokens: List[str] = Field(..., alias="titleTokens")
    jurisdiction: str
    jurisdiction_display: str = Field(..., alias="jurisdictionDisplay")
    has_salary: bool = Field(..., alias="hasSalary")

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
