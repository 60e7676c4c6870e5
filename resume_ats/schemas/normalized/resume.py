from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SectionName = Literal[
    "header",
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
    "certifications",
    "achievements",
    "unknown",
]
FeedbackSeverity = Literal["high", "medium", "low"]


class Section(BaseModel):
    name: SectionName
    content: str = ""
    ordinal_position: int = Field(ge=0)


class ExperienceEntry(BaseModel):
    title_line: str
    bullets: list[str] = Field(default_factory=list)


class SectionFeedback(BaseModel):
    type: str
    severity: FeedbackSeverity
    message: str
