from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

DegreeLevel = Literal["Associate", "Bachelor", "Master", "Doctorate", "Unknown"]
ExperienceLevel = Literal["entry", "mid", "senior", "executive"]


class ContactInfo(BaseModel):
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    location: str | None = None


class GPA(BaseModel):
    gpa: float = Field(ge=0.0)
    scale: float = Field(default=4.0, gt=0.0)


class EducationInfo(BaseModel):
    degrees: list[str] = Field(default_factory=list)
    majors: list[str] = Field(default_factory=list)
    gpa: GPA | None = None
    graduation_year: int | None = None
    institutions: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)

    @property
    def has_education(self) -> bool:
        return bool(self.degrees or self.institutions)


class DateRange(BaseModel):
    start: date
    end: date

    @property
    def months(self) -> int:
        return (self.end.year - self.start.year) * 12 + (self.end.month - self.start.month)


class EmploymentGap(BaseModel):
    start: date
    end: date
    months: int
    years: float


class ExperienceSummary(BaseModel):
    date_ranges: list[DateRange] = Field(default_factory=list)
    total_years: float = 0.0
    stated_years: int = 0
    gaps: list[EmploymentGap] = Field(default_factory=list)
    level: ExperienceLevel = "entry"


class CandidateProfile(BaseModel):
    """Descriptive facts about a candidate; not used for scoring."""

    contact: ContactInfo = Field(default_factory=ContactInfo)
    education: EducationInfo = Field(default_factory=EducationInfo)
    experience: ExperienceSummary = Field(default_factory=ExperienceSummary)
