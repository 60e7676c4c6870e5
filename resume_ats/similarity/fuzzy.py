from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import re

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from resume_ats.core.config import MATCH_THRESHOLDS
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

_WHITESPACE = re.compile(r"\s+")
_AUTOCORRECT_MAX_DISTANCE = 1
# Shorter terms sit within one edit of too many unrelated words.
_AUTOCORRECT_MIN_FUZZY_LENGTH = 4


@dataclass(frozen=True, slots=True)
class FuzzyMatch:
    match: str | None
    score: float
    corrected: bool = False


def _bigrams(value: str) -> Counter[str]:
    return Counter(value[index : index + 2] for index in range(len(value) - 1))


def dice_coefficient(left: str, right: str) -> float:
    """Sørensen–Dice coefficient over character bigrams, ignoring whitespace.

    Bigram bags ignore word order, so reordered or partially overlapping
    multi-word phrases still score well.
    """
    first = _WHITESPACE.sub("", left or "")
    second = _WHITESPACE.sub("", right or "")
    if first == second:
        return 1.0 if first else 0.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    overlap = sum((first_bigrams & second_bigrams).values())
    return (2.0 * overlap) / (len(first) + len(second) - 2)


def edit_similarity(left: str, right: str) -> float:
    longest = max(len(left), len(right))
    if longest == 0:
        return 1.0
    return 1.0 - (Levenshtein.distance(left, right) / longest)


def autocorrect_skill(term: str, taxonomy: TaxonomyProvider | None = None) -> tuple[str, bool]:
    """Snap a term to a known spelling: exact typo lookup, then edit distance <= 1."""
    provider = taxonomy or get_default_taxonomy_provider()
    lowered = (term or "").strip().lower()
    if not lowered:
        return term, False

    exact = provider.lookup_typo(lowered)
    if exact is not None:
        return exact, exact != lowered

    keys = provider.typo_keys
    if keys and len(lowered) >= _AUTOCORRECT_MIN_FUZZY_LENGTH:
        nearest = process.extractOne(
            lowered,
            keys,
            scorer=Levenshtein.distance,
            score_cutoff=_AUTOCORRECT_MAX_DISTANCE,
        )
        if nearest is not None:
            corrected = provider.lookup_typo(nearest[0]) or nearest[0]
            return corrected, corrected != lowered

    return term, False


def find_best_match(
    target: str,
    candidates: list[str],
    taxonomy: TaxonomyProvider | None = None,
) -> FuzzyMatch:
    """Plain matcher: canonical equality, else bigram similarity. No autocorrect."""
    if not candidates:
        return FuzzyMatch(match=None, score=0.0)

    provider = taxonomy or get_default_taxonomy_provider()
    normalized_target = provider.normalize_skill(target)

    best = FuzzyMatch(match=None, score=-1.0)
    for candidate in candidates:
        normalized_candidate = provider.normalize_skill(candidate)
        if normalized_target == normalized_candidate:
            score = 1.0
        else:
            score = dice_coefficient(normalized_target, normalized_candidate)
        if score > best.score:
            best = FuzzyMatch(match=candidate, score=score)
    return best


def find_best_match_with_typo_tolerance(
    target: str,
    candidates: list[str],
    threshold: float = MATCH_THRESHOLDS.default_typo,
    taxonomy: TaxonomyProvider | None = None,
) -> FuzzyMatch:
    """Typo-tolerant matcher.

    The target and every candidate go through autocorrect first. Each
    candidate then scores the larger of bigram similarity and normalized edit
    similarity; exact equality short-circuits to 1.0. The earliest candidate
    wins ties. ``match`` is None when the best score is below ``threshold``;
    ``corrected`` reports whether autocorrection changed the target or the
    winning candidate.
    """
    if not candidates:
        return FuzzyMatch(match=None, score=0.0, corrected=False)

    provider = taxonomy or get_default_taxonomy_provider()
    corrected_target, target_changed = autocorrect_skill(target, provider)
    needle = corrected_target.lower()

    best_candidate: str | None = None
    best_score = -1.0
    best_changed = False
    for candidate in candidates:
        hay = candidate.lower()
        candidate_changed = False
        if needle == hay:
            score = 1.0
        else:
            corrected_candidate, candidate_changed = autocorrect_skill(hay, provider)
            if candidate_changed and corrected_candidate.lower() == needle:
                score = 1.0
            else:
                candidate_changed = False
                score = max(dice_coefficient(needle, hay), edit_similarity(needle, hay))
        if score > best_score:
            best_candidate, best_score, best_changed = candidate, score, candidate_changed

    matched = best_candidate if best_score >= threshold else None
    return FuzzyMatch(
        match=matched,
        score=best_score,
        corrected=target_changed or (matched is not None and best_changed),
    )


def get_skill_variations(skill: str) -> list[str]:
    """Spelling variants of a skill: suffix stems and punctuation/space swaps."""
    base = (skill or "").strip().lower()
    if not base:
        return []

    variations: list[str] = [base]

    def add(value: str) -> None:
        if value and value not in variations:
            variations.append(value)

    for suffix in ("ing", "ed", "es", "s", "er", "or"):
        if base.endswith(suffix) and len(base) > len(suffix) + 1:
            add(base[: -len(suffix)])
    if base.endswith("y"):
        add(base[:-1] + "ies")
    if "." in base:
        add(base.replace(".", ""))
    if "-" in base:
        add(base.replace("-", " "))
        add(base.replace("-", ""))
    if " " in base:
        add(_WHITESPACE.sub("", base))
        add(_WHITESPACE.sub("-", base))
    return variations
