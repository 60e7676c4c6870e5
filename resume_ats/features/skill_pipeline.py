from __future__ import annotations

import logging
from dataclasses import dataclass, field

from resume_ats.core.config import MATCH_THRESHOLDS
from resume_ats.core.errors import contained
from resume_ats.schemas.normalized import MatchCategory, MatchRecord, Term
from resume_ats.similarity import find_best_match, find_best_match_with_typo_tolerance
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .jd_features import JDAnalysis
from .resume_features import ResumeFeatures

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchResult:
    strong: list[MatchRecord] = field(default_factory=list)
    partial: list[MatchRecord] = field(default_factory=list)
    missing: list[MatchRecord] = field(default_factory=list)

    @property
    def records(self) -> list[MatchRecord]:
        return self.strong + self.partial + self.missing

    @property
    def total(self) -> int:
        return len(self.strong) + len(self.partial) + len(self.missing)

    def add(self, record: MatchRecord) -> None:
        if record.category == "strong":
            self.strong.append(record)
        elif record.category == "partial":
            self.partial.append(record)
        else:
            self.missing.append(record)


def classify_similarity(score: float) -> MatchCategory:
    if score >= MATCH_THRESHOLDS.strong:
        return "strong"
    if score >= MATCH_THRESHOLDS.partial:
        return "partial"
    return "missing"


def _appears_in_bullets(term: str, bullets: list[str]) -> bool:
    needle = term.lower()
    return any(needle in bullet.lower() for bullet in bullets)


def match_term(
    term: Term,
    resume: ResumeFeatures,
    explicit_skills: set[str],
    taxonomy: TaxonomyProvider,
) -> MatchRecord:
    """Classify one weighted JD term against the resume terms."""
    candidates = resume.resume_terms
    best = find_best_match_with_typo_tolerance(
        term.normalized_text,
        candidates,
        threshold=MATCH_THRESHOLDS.typo_tolerant,
        taxonomy=taxonomy,
    )
    if best.match is None:
        best = find_best_match(term.normalized_text, candidates, taxonomy=taxonomy)

    score = min(1.0, max(0.0, best.score))
    category = classify_similarity(score)
    matched = best.match if category != "missing" else None

    in_skills = False
    in_experience = False
    if category == "strong" and matched is not None:
        in_skills = taxonomy.normalize_skill(matched) in explicit_skills
        in_experience = _appears_in_bullets(matched, resume.experience_bullets)

    return MatchRecord(
        jd_term=term.normalized_text,
        resume_term=matched,
        similarity_score=score,
        category=category,
        is_required=term.is_required,
        is_preferred=term.is_preferred,
        weight=term.weight,
        in_skills_section=in_skills,
        in_experience=in_experience,
        typo_correction=best.corrected and matched is not None,
    )


def missing_record(term: Term) -> MatchRecord:
    return MatchRecord(
        jd_term=term.normalized_text,
        similarity_score=0.0,
        category="missing",
        is_required=term.is_required,
        is_preferred=term.is_preferred,
        weight=term.weight,
    )


def build_match_result(
    jd: JDAnalysis,
    resume: ResumeFeatures,
    taxonomy: TaxonomyProvider | None = None,
) -> MatchResult:
    """Every JD term lands in exactly one of strong, partial or missing."""
    provider = taxonomy or get_default_taxonomy_provider()
    explicit_skills = {provider.normalize_skill(skill) for skill in resume.explicit_skills}

    result = MatchResult()
    for term in jd.terms:
        record = contained(
            "match_term",
            missing_record(term),
            match_term,
            term,
            resume,
            explicit_skills,
            provider,
        )
        result.add(record)

    logger.info(
        "ats_match_complete strong=%s partial=%s missing=%s",
        len(result.strong),
        len(result.partial),
        len(result.missing),
    )
    return result
