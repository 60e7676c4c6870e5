from __future__ import annotations

import logging
import re
from collections import Counter

from pydantic import BaseModel, Field

from resume_ats.core.config import WEIGHTING_FACTORS
from resume_ats.core.errors import contained, safe_count
from resume_ats.normalize.utils import normalize_text
from resume_ats.profile.experience import extract_years_of_experience
from resume_ats.schemas.normalized import Term
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .term_extractor import extract_phrases, extract_skills
from .term_rules import is_generic_word

logger = logging.getLogger(__name__)

REQUIRED_INDICATORS = ("required", "must have", "mandatory", "essential", "must be", "need to")
PREFERRED_INDICATORS = ("preferred", "nice to have", "bonus", "plus", "desired", "ideal")

_INDICATOR_PATTERNS: tuple[tuple[bool, re.Pattern[str]], ...] = tuple(
    (required, re.compile(rf"\b{re.escape(indicator)}\b"))
    for required, indicators in ((True, REQUIRED_INDICATORS), (False, PREFERRED_INDICATORS))
    for indicator in indicators
)
_TOKEN_EDGE = "()[]{}\"'."
# Sentence ends, semicolons and line breaks close a clause; "node.js" does not.
_CLAUSE_BOUNDARY = re.compile(r"[.!?;](?=\s|$)|\n")


class JDAnalysis(BaseModel):
    skills: list[str] = Field(default_factory=list)
    phrases: list[str] = Field(default_factory=list)
    terms: list[Term] = Field(default_factory=list)
    years_required: int = 0

    @property
    def required_terms(self) -> list[Term]:
        return [term for term in self.terms if term.is_required]

    @property
    def preferred_terms(self) -> list[Term]:
        return [term for term in self.terms if term.is_preferred]


def clause_bounds(text: str, start: int, end: int) -> tuple[int, int]:
    """Return the span of the clause holding ``text[start:end]``."""
    clause_start, clause_end = 0, len(text)
    for match in _CLAUSE_BOUNDARY.finditer(text):
        if match.end() <= start:
            clause_start = match.end()
        elif match.start() >= end:
            clause_end = match.start()
            break
    return clause_start, clause_end


def _indicator_verdict(context: str) -> bool | None:
    found = {required for required, pattern in _INDICATOR_PATTERNS if pattern.search(context)}
    if True in found:
        return True
    if False in found:
        return False
    return None


def classify_importance(term: str, jd_text: str, window: int | None = None) -> bool:
    """Return True when ``term`` reads as required, False when preferred.

    The clause holding the first occurrence is read first; only when it has
    no indicator does the character window around the term decide. In both,
    a requirement indicator beats a preference one. Without any indicator
    the term is required.
    """
    size = WEIGHTING_FACTORS.context_window if window is None else window
    lowered_text = jd_text.lower()
    lowered_term = term.lower()
    index = lowered_text.find(lowered_term)
    if index == -1:
        return True
    term_end = index + len(lowered_term)

    clause_start, clause_end = clause_bounds(lowered_text, index, term_end)
    verdict = _indicator_verdict(lowered_text[clause_start:clause_end])
    if verdict is None:
        start = max(0, index - size)
        end = min(len(lowered_text), term_end + size)
        verdict = _indicator_verdict(lowered_text[start:end])
    return True if verdict is None else verdict


def _token_counts(jd_text: str) -> Counter[str]:
    tokens = (token.strip(_TOKEN_EDGE) for token in normalize_text(jd_text).lower().split(" "))
    return Counter(token for token in tokens if token)


def term_frequency(term: str, counts: Counter[str], normalized_jd: str) -> float:
    """Occurrences of ``term`` over the total token count of the JD."""
    total = sum(counts.values())
    if not total:
        return 0.0
    lowered = term.lower()
    if " " in lowered:
        occurrences = safe_count(lowered, normalized_jd)
    else:
        occurrences = counts.get(lowered, 0)
    return min(1.0, occurrences / total)


def weigh_term(
    raw_term: str,
    jd_text: str,
    counts: Counter[str],
    normalized_jd: str,
    taxonomy: TaxonomyProvider,
) -> Term:
    factors = WEIGHTING_FACTORS
    base = term_frequency(raw_term, counts, normalized_jd) or factors.base_weight_fallback
    is_required = classify_importance(raw_term, jd_text)
    frequency = safe_count(raw_term, jd_text)

    weight = base
    if is_required:
        weight *= factors.required_multiplier
    else:
        weight *= factors.preferred_multiplier
    if frequency > factors.frequency_cutoff:
        weight *= factors.frequency_multiplier
    if is_generic_word(raw_term):
        weight *= factors.generic_multiplier

    return Term(
        raw_text=raw_term,
        normalized_text=taxonomy.normalize_skill(raw_term),
        weight=weight,
        is_required=is_required,
        is_preferred=not is_required,
        frequency=frequency,
    )


def dedupe_terms(terms: list[Term]) -> list[Term]:
    seen: set[str] = set()
    unique: list[Term] = []
    for term in terms:
        if term.normalized_text in seen:
            continue
        seen.add(term.normalized_text)
        unique.append(term)
    return unique


def analyze_job_description(
    jd_text: str | None,
    taxonomy: TaxonomyProvider | None = None,
) -> JDAnalysis:
    """Extract, weight and rank the job description's terms.

    Weighting: term-frequency base, x3 required or x1.5 preferred, x1.3 when
    the term occurs more than twice, x0.3 for generic words. Terms are then
    deduplicated by normalized form (first wins) and stably sorted by weight.
    """
    text = jd_text if isinstance(jd_text, str) else ""
    if not text.strip():
        return JDAnalysis()
    provider = taxonomy or get_default_taxonomy_provider()

    skills = contained("jd_skill_extraction", [], extract_skills, text, provider)
    phrases = contained("jd_phrase_extraction", [], extract_phrases, text, provider)
    normalized_jd = normalize_text(text).lower()
    counts = _token_counts(text)

    weighted: list[Term] = []
    for raw_term in skills + phrases:
        term = contained("jd_term_weighting", None, weigh_term, raw_term, text, counts, normalized_jd, provider)
        if term is not None:
            weighted.append(term)

    terms = sorted(dedupe_terms(weighted), key=lambda term: term.weight, reverse=True)
    analysis = JDAnalysis(
        skills=skills,
        phrases=phrases,
        terms=terms,
        years_required=contained("jd_years_required", 0, extract_years_of_experience, text),
    )
    logger.info(
        "ats_jd_analyzed terms=%s required=%s preferred=%s",
        len(analysis.terms),
        len(analysis.required_terms),
        len(analysis.preferred_terms),
    )
    return analysis
