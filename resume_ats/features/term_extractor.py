from __future__ import annotations

import re

from resume_ats.normalize.utils import normalize_text
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .term_rules import (
    GENERIC_WORDS,
    KNOWN_SKILLS,
    STOP_WORDS,
    TermContext,
    evaluate_term,
)

_CLAUSE_SPLIT = re.compile(r"[,;:|\n•·▪●()]|(?<=[.!?])\s+")
_TOKEN_EDGE = "()[]{}\"'"
_DIGIT = re.compile(r"\d")
_TECH_PUNCTUATION = re.compile(r"[.+#/]")
_WHITESPACE = re.compile(r"\s+")
_PHRASE_MIN_TOKENS = 2
_PHRASE_MAX_TOKENS = 4

COMPOUND_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:web|mobile|cloud|software|application|data)\s+(?:development|engineering|architecture|applications?)\b"),
    re.compile(r"\b(?:machine|artificial|deep)\s+(?:learning|intelligence)\b"),
    re.compile(r"\bnatural\s+language\s+processing\b"),
    re.compile(r"\b(?:full|front|back)[\s-]?(?:stack|end)\b"),
    re.compile(r"\b(?:mern|mean)\s+stack\b"),
    re.compile(r"\b(?:agile|scrum|devops|ci/cd)\s+(?:development|methodology|methodologies|practices)\b"),
    re.compile(r"\b(?:rest|restful|graphql)\s+(?:api|apis|services)\b"),
    re.compile(r"\b(?:relational|nosql|sql)\s+databases?\b"),
)


def _clauses(text: str) -> list[str]:
    return [clause for clause in _CLAUSE_SPLIT.split(text) if clause and clause.strip()]


def _clean_token(token: str) -> str:
    cleaned = token.strip(_TOKEN_EDGE)
    cleaned = cleaned.lstrip("-/")
    while cleaned.endswith(".") and len(cleaned) > 1:
        cleaned = cleaned[:-1]
    return cleaned


def _tokens(clause: str) -> list[str]:
    tokens = (_clean_token(token) for token in normalize_text(clause).split(" "))
    return [token for token in tokens if token]


def _dedupe(terms: list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for term in terms:
        if term not in seen:
            seen.add(term)
            ordered.append(term)
    return ordered


def _phrase_eligible(token: str) -> bool:
    lowered = token.lower()
    if lowered in STOP_WORDS or lowered in GENERIC_WORDS:
        return False
    return (
        token[:1].isupper()
        or bool(_DIGIT.search(token))
        or bool(_TECH_PUNCTUATION.search(token))
        or lowered in KNOWN_SKILLS
    )


def extract_skills(text: str | None, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Single-token technical terms, lower-cased, in order of first appearance."""
    if not text:
        return []
    provider = taxonomy or get_default_taxonomy_provider()

    accepted: list[str] = []
    verdicts: dict[str, bool] = {}
    for clause in _clauses(text):
        for token in _tokens(clause):
            if token not in verdicts:
                context = TermContext(
                    term=token,
                    source_text=text,
                    canonical=provider.normalize_skill(token),
                )
                verdict, _ = evaluate_term(context)
                verdicts[token] = verdict == "accept"
            if verdicts[token]:
                accepted.append(token.lower())
    return _dedupe(accepted)


def extract_compound_terms(text: str | None) -> list[str]:
    if not text:
        return []
    lowered = normalize_text(text).lower()
    found: list[tuple[int, str]] = []
    for pattern in COMPOUND_PATTERNS:
        for match in pattern.finditer(lowered):
            found.append((match.start(), _WHITESPACE.sub(" ", match.group(0))))
    found.sort(key=lambda item: item[0])
    return _dedupe([term for _, term in found])


def extract_phrases(text: str | None, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Multi-word terms: capitalised/technical token runs, then compound patterns.

    A run is a maximal sequence of eligible tokens inside one clause; only runs
    of two to four tokens become candidates, and each candidate still has to
    pass the term rules.
    """
    if not text:
        return []
    provider = taxonomy or get_default_taxonomy_provider()

    phrases: list[str] = []
    for clause in _clauses(text):
        run: list[str] = []
        for token in _tokens(clause) + [""]:
            if token and _phrase_eligible(token):
                run.append(token)
                continue
            if _PHRASE_MIN_TOKENS <= len(run) <= _PHRASE_MAX_TOKENS:
                phrase = " ".join(run)
                context = TermContext(
                    term=phrase,
                    source_text=text,
                    canonical=provider.normalize_skill(phrase),
                    is_phrase=True,
                )
                verdict, _ = evaluate_term(context)
                if verdict == "accept":
                    phrases.append(phrase.lower())
            run = []

    phrases.extend(extract_compound_terms(text))
    return _dedupe(phrases)


def extract_terms(text: str | None, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Skills followed by phrases, deduplicated, all lower-cased."""
    return _dedupe(extract_skills(text, taxonomy) + extract_phrases(text, taxonomy))
