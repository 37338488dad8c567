"""Structured search criteria parsed from a free-text query."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from civjobs.domain.models import SalaryCadence


class JobQuery(BaseModel):
    """Search criteria; every unset field means "no constraint".

    ``keywords`` is None rather than an empty list so callers can tell "no
    keyword constraint" apart from "nothing survived filtering".
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    keywords: Optional[List[str]] = Field(None, description="Lowercase tokens, ordered, unique")
    jurisdiction: Optional[str] = Field(None, description="Canonical jurisdiction key")
    min_salary: Optional[float] = Field(None, gt=0, alias="minSalary")
    salary_cadence: Optional[SalaryCadence] = Field(None, alias="salaryCadence")

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Lowercase, drop blanks and duplicates; collapse an empty list to None."""
        if v is None:
            return None
        cleaned = []
        for keyword in v:
            token = keyword.strip().lower()
            if token and token not in cleaned:
                cleaned.append(token)
        return cleaned or None

    @property
    def is_empty(self) -> bool:
        return (
            self.keywords is None
            and self.jurisdiction is None
            and self.min_salary is None
            and self.salary_cadence is None
        )

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
