from __future__ import annotations

import logging
import math

from resume_ats.core.config import (
    SCORE_CALIBRATION,
    SCORE_WEIGHTS,
    STRUCTURE_WEIGHTS,
    SUB_SCORE_FACTORS,
)
from resume_ats.features.resume_features import ResumeFeatures
from resume_ats.features.skill_pipeline import MatchResult
from resume_ats.schemas.analysis import ScoreBreakdown

logger = logging.getLogger(__name__)

_MIN_SCORE = 0
_MAX_SCORE = 100


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def skill_match_score(match_result: MatchResult) -> float:
    factors = SUB_SCORE_FACTORS
    total = match_result.total
    if total == 0:
        return factors.skill_match_empty
    raw = (len(match_result.strong) + factors.partial_credit * len(match_result.partial)) / total
    return _clamp(raw, factors.skill_match_floor, 1.0)


def required_match_score(match_result: MatchResult) -> float:
    """Share of required terms covered; 1.0 when the JD requires nothing."""
    factors = SUB_SCORE_FACTORS
    total_required = sum(1 for record in match_result.records if record.is_required)
    if total_required == 0:
        return 1.0
    required_strong = sum(1 for record in match_result.strong if record.is_required)
    required_partial = sum(1 for record in match_result.partial if record.is_required)
    raw = (required_strong + factors.required_partial_credit * required_partial) / total_required
    return _clamp(raw, factors.required_match_floor, 1.0)


def demonstration_score(match_result: MatchResult) -> float:
    if not match_result.strong:
        return 0.0
    demonstrated = sum(1 for record in match_result.strong if record.in_experience)
    return demonstrated / len(match_result.strong)


def structure_score(resume: ResumeFeatures) -> float:
    """Weighted section presence over the sections the resume defines at all."""
    weights = STRUCTURE_WEIGHTS.model_dump()
    achievable = sum(weight for name, weight in weights.items() if name in resume.sections)
    if achievable == 0:
        return 0.0
    earned = sum(weight for name, weight in weights.items() if resume.has_section(name))
    return _clamp(earned / achievable, 0.0, 1.0)


def metrics_score(resume: ResumeFeatures) -> float:
    return 1.0 if resume.has_metrics else 0.0


def calculate_ats_score(match_result: MatchResult, resume: ResumeFeatures) -> ScoreBreakdown:
    """Combine the sub-scores into the 0-100 ATS score.

    Order: weighted sum, x100, calibration multiplier, floor, additive
    bonuses, round, clamp. The floor only applies once some term was parsed
    from either document.
    """
    calibration = SCORE_CALIBRATION
    weights = SCORE_WEIGHTS

    skill_match = skill_match_score(match_result)
    required_match = required_match_score(match_result)
    demonstration = demonstration_score(match_result)
    structure = structure_score(resume)
    metrics = metrics_score(resume)

    weighted_sum = (
        skill_match * weights.skill_match
        + required_match * weights.required_match
        + demonstration * weights.demonstration
        + structure * weights.structure
        + metrics * weights.metrics
    )

    score = weighted_sum * 100 * calibration.multiplier
    if match_result.total > 0 or resume.resume_terms:
        score = max(score, calibration.floor)

    strong_count = len(match_result.strong)
    partial_count = len(match_result.partial)
    if strong_count:
        score += min(calibration.strong_bonus_cap, strong_count * calibration.strong_bonus_rate)
    if partial_count:
        score += min(calibration.partial_bonus_cap, partial_count * calibration.partial_bonus_rate)
    if resume.has_skills_section and resume.has_experience_section:
        score += calibration.structure_bonus
    if resume.has_metrics:
        score += calibration.metrics_bonus

    final = int(_clamp(_round_half_up(score), _MIN_SCORE, _MAX_SCORE))
    logger.debug(
        "ats_score_calculated weighted_sum=%.4f raw=%.2f final=%s",
        weighted_sum,
        score,
        final,
    )
    return ScoreBreakdown(
        skill_match=skill_match,
        required_match=required_match,
        demonstration=demonstration,
        structure=structure,
        metrics=metrics,
        weights=weights,
        weighted_sum=weighted_sum,
        score=final,
    )
