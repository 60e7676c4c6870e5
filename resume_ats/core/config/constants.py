from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, model_validator

from .scoring import get_scoring_value


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MatchThresholds(_Frozen):
    strong: float
    partial: float
    typo_tolerant: float
    default_typo: float

    @model_validator(mode="after")
    def _check_order(self) -> "MatchThresholds":
        if not 0.0 <= self.partial <= self.strong <= 1.0:
            raise ValueError("thresholds must satisfy 0 <= partial <= strong <= 1")
        return self


class ImpactThresholds(_Frozen):
    high: float
    medium: float


class WeightingFactors(_Frozen):
    context_window: int
    base_weight_fallback: float
    required_multiplier: float
    preferred_multiplier: float
    frequency_multiplier: float
    frequency_cutoff: int
    generic_multiplier: float


class ScoreWeights(_Frozen):
    skill_match: float
    required_match: float
    demonstration: float
    structure: float
    metrics: float

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoreWeights":
        total = sum(self.model_dump().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"score weights must sum to 1.0, got {total}")
        return self


class SubScoreFactors(_Frozen):
    skill_match_floor: float
    skill_match_empty: float
    partial_credit: float
    required_match_floor: float
    required_partial_credit: float


class StructureWeights(_Frozen):
    skills: float
    experience: float
    summary: float


class ScoreCalibration(_Frozen):
    multiplier: float
    floor: float
    strong_bonus_rate: float
    strong_bonus_cap: float
    partial_bonus_rate: float
    partial_bonus_cap: float
    structure_bonus: float
    metrics_bonus: float


class InsightLimits(_Frozen):
    min_action_verbs: int
    min_explicit_skills: int


MATCH_THRESHOLDS = MatchThresholds.model_validate(get_scoring_value("matching.thresholds"))
IMPACT_THRESHOLDS = ImpactThresholds.model_validate(get_scoring_value("matching.impact"))
WEIGHTING_FACTORS = WeightingFactors.model_validate(get_scoring_value("weighting"))
SCORE_WEIGHTS = ScoreWeights.model_validate(get_scoring_value("score.weights"))
SUB_SCORE_FACTORS = SubScoreFactors.model_validate(get_scoring_value("score.sub_scores"))
STRUCTURE_WEIGHTS = StructureWeights.model_validate(get_scoring_value("score.structure_sections"))
SCORE_CALIBRATION = ScoreCalibration.model_validate(get_scoring_value("score.calibration"))
INSIGHT_LIMITS = InsightLimits.model_validate(get_scoring_value("insights"))
