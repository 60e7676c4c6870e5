from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Term(BaseModel):
    """A weighted job-description term. Immutable once weighted."""

    model_config = ConfigDict(frozen=True)

    raw_text: str
    normalized_text: str
    weight: float = Field(ge=0.0)
    is_required: bool = False
    is_preferred: bool = False
    frequency: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_importance(self) -> "Term":
        if self.is_required and self.is_preferred:
            raise ValueError("a term cannot be both required and preferred")
        return self

    @property
    def importance(self) -> str:
        return "required" if self.is_required else "preferred"
