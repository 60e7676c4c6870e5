from .constants import (
    IMPACT_THRESHOLDS,
    INSIGHT_LIMITS,
    MATCH_THRESHOLDS,
    SCORE_CALIBRATION,
    SCORE_WEIGHTS,
    STRUCTURE_WEIGHTS,
    SUB_SCORE_FACTORS,
    WEIGHTING_FACTORS,
    MatchThresholds,
    ScoreWeights,
)
from .scoring import ScoringConfigError, get_scoring_config, get_scoring_value
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "ScoringConfigError",
    "get_scoring_config",
    "get_scoring_value",
    "MatchThresholds",
    "ScoreWeights",
    "MATCH_THRESHOLDS",
    "IMPACT_THRESHOLDS",
    "WEIGHTING_FACTORS",
    "SCORE_WEIGHTS",
    "SUB_SCORE_FACTORS",
    "STRUCTURE_WEIGHTS",
    "SCORE_CALIBRATION",
    "INSIGHT_LIMITS",
]
