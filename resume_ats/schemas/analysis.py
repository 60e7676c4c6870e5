from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_ats.core.config import ScoreWeights

InsightType = Literal["critical", "warning", "improvement", "optimization"]
Priority = Literal["high", "medium", "low"]
Importance = Literal["required", "preferred"]
Impact = Literal["high", "medium", "low"]
ChecklistPriority = Literal["critical", "important", "optional"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Insight(BaseModel):
    type: InsightType
    category: str
    message: str
    suggestion: str
    priority: Priority


class ChecklistSection(BaseModel):
    priority: ChecklistPriority
    title: str
    items: list[str] = Field(default_factory=list)


class ScoreBreakdown(BaseModel):
    skill_match: float = Field(ge=0.0, le=1.0)
    required_match: float = Field(ge=0.0, le=1.0)
    demonstration: float = Field(ge=0.0, le=1.0)
    structure: float = Field(ge=0.0, le=1.0)
    metrics: float = Field(ge=0.0, le=1.0)
    weights: ScoreWeights
    weighted_sum: float
    score: int = Field(ge=0, le=100)


class StrongMatch(_CamelModel):
    skill: str
    matched_as: str | None = None
    in_skills_section: bool = False
    demonstrated: bool = False
    importance: Importance


class PartialMatch(_CamelModel):
    skill: str
    matched_as: str | None = None
    similarity: int = Field(ge=0, le=100)
    importance: Importance


class MissingSkill(_CamelModel):
    skill: str
    importance: Importance
    impact: Impact


class SectionFeedbackSummary(_CamelModel):
    has_skills_section: bool = False
    has_experience_section: bool = False
    has_metrics: bool = False
    skill_count: int = 0
    sections: list[str] = Field(default_factory=list)


class AnalysisResult(_CamelModel):
    ats_score: int = Field(ge=0, le=100)
    strong_matches: list[StrongMatch] = Field(default_factory=list)
    partial_matches: list[PartialMatch] = Field(default_factory=list)
    missing_skills: list[MissingSkill] = Field(default_factory=list)
    section_feedback: SectionFeedbackSummary = Field(default_factory=SectionFeedbackSummary)
    insights: list[Insight] = Field(default_factory=list)
    checklist: list[ChecklistSection] = Field(default_factory=list)
    score_breakdown: ScoreBreakdown | None = Field(default=None, exclude=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump the public camelCase result consumed by the request layer."""
        return self.model_dump(mode="json", by_alias=True)
