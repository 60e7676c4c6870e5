from .fuzzy import (
    FuzzyMatch,
    autocorrect_skill,
    dice_coefficient,
    edit_similarity,
    find_best_match,
    find_best_match_with_typo_tolerance,
    get_skill_variations,
)

__all__ = [
    "FuzzyMatch",
    "autocorrect_skill",
    "dice_coefficient",
    "edit_similarity",
    "find_best_match",
    "find_best_match_with_typo_tolerance",
    "get_skill_variations",
]
