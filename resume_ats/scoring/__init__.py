from .calculator import (
    calculate_ats_score,
    demonstration_score,
    metrics_score,
    required_match_score,
    skill_match_score,
    structure_score,
)

__all__ = [
    "calculate_ats_score",
    "skill_match_score",
    "required_match_score",
    "demonstration_score",
    "structure_score",
    "metrics_score",
]
