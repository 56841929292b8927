"""Data models and types for the resume parser."""

from enum import Enum
from typing import Any, Dict, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, Field


MAX_EXPERIENCE_YEARS = 50


class EducationCategory(Enum):
    """Normalized degree levels, in reporting order."""
    BACHELORS = "Bachelor's Degree"
    MASTERS = "Master's Degree"
    PHD = "PhD"
    DIPLOMA = "Diploma"
    CERTIFICATION = "Certification"
    HIGH_SCHOOL = "High School"


class DateRange(NamedTuple):
    """A span of calendar years taken from a resume line."""
    start: int
    end: int

    @property
    def years(self) -> int:
        return self.end - self.start


class ParsedResume(BaseModel):
    """Structured candidate record recovered from resume text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    skills: Tuple[str, ...] = ()
    education: str = ""
    experience_years: int = Field(
        default=0, ge=0, le=MAX_EXPERIENCE_YEARS, alias="experienceYears"
    )
    linkedin: str = ""
    github: str = ""
    languages: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ResumeScore(BaseModel):
    """Heuristic quality score computed over a parsed resume."""

    model_config = ConfigDict(frozen=True)

    total_score: int = 0
    skills_score: int = 0
    experience_score: int = 0
    grammar_score: int = 0
    completeness_score: int = 0
    skill_match_percentage: int = 0
    matched_skills: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
