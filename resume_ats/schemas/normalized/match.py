from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MatchCategory = Literal["strong", "partial", "missing"]


class MatchRecord(BaseModel):
    jd_term: str
    resume_term: str | None = None
    similarity_score: float = Field(ge=0.0, le=1.0)
    category: MatchCategory
    is_required: bool
    is_preferred: bool = False
    weight: float = Field(ge=0.0)
    in_skills_section: bool = False
    in_experience: bool = False
    typo_correction: bool = False

    @property
    def importance(self) -> str:
        return "required" if self.is_required else "preferred"
