from __future__ import annotations

import re

from resume_ats.schemas.normalized import ExperienceEntry

from .utils import is_bullet_like, strip_bullet_prefix

_YEAR_RE = re.compile(r"\d{4}")
_JOB_ROLE_WORDS = (
    "engineer",
    "developer",
    "manager",
    "analyst",
    "designer",
    "consultant",
    "specialist",
    "lead",
    "senior",
    "junior",
)
_TITLE_SEPARATORS = ("|", "–", "—")
_SKILL_SPLIT_RE = re.compile(r"[,;|\n•·▪●*]")
_SKILL_LABEL_RE = re.compile(r"^[^:]+:\s*")
_SKILL_MAX_LENGTH = 50

_METRIC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d+(?:\.\d+)?\s?%"),
    re.compile(r"[$€£]\s?\d[\d,]*(?:\.\d+)?"),
    re.compile(r"\d+\+?\s*(?:users?|customers?|clients?|projects?)\b", re.IGNORECASE),
    re.compile(r"\b\d+(?:\.\d+)?x\b", re.IGNORECASE),
    re.compile(r"\bby\s+\d+", re.IGNORECASE),
    re.compile(r"\d+\s*(?:thousand|million|billion)\b", re.IGNORECASE),
)

ACTION_VERBS = frozenset(
    {
        "accelerated", "achieved", "analyzed", "architected", "automated",
        "built", "collaborated", "configured", "coordinated", "created",
        "decreased", "delivered", "deployed", "designed", "developed",
        "drove", "engineered", "established", "implemented", "improved",
        "increased", "integrated", "launched", "led", "maintained",
        "managed", "mentored", "migrated", "optimized", "orchestrated",
        "owned", "refactored", "reduced", "resolved", "scaled",
        "shipped", "spearheaded", "streamlined", "supported", "tested",
        "wrote", "build", "develop", "design", "implement", "lead",
        "manage", "optimize", "deploy", "automate", "architect",
        "building", "developing", "designing", "implementing", "leading",
        "managing", "optimizing", "deploying", "automating", "architecting",
    }
)
_WORD_RE = re.compile(r"[A-Za-z]+")


def is_job_title_line(line: str) -> bool:
    if _YEAR_RE.search(line):
        return True
    lowered = line.lower()
    if any(word in lowered for word in _JOB_ROLE_WORDS):
        return True
    return any(separator in line for separator in _TITLE_SEPARATORS)


def parse_experience_section(experience_text: str | None) -> list[ExperienceEntry]:
    """Group experience lines into job entries with their bullet points.

    Bullets that appear before the first title line have no entry to attach
    to and are dropped.
    """
    if not experience_text:
        return []

    entries: list[ExperienceEntry] = []
    current: ExperienceEntry | None = None

    for raw_line in experience_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if is_job_title_line(line):
            if current is not None:
                entries.append(current)
            current = ExperienceEntry(title_line=line, bullets=[])
        elif current is not None and is_bullet_like(line):
            bullet = strip_bullet_prefix(line)
            if bullet:
                current.bullets.append(bullet)

    if current is not None:
        entries.append(current)
    return entries


def parse_skills_section(skills_text: str | None) -> list[str]:
    if not skills_text:
        return []

    skills: list[str] = []
    seen: set[str] = set()
    for line in skills_text.splitlines():
        line = strip_bullet_prefix(line) if is_bullet_like(line) else line
        for part in _SKILL_SPLIT_RE.split(line):
            cleaned = _SKILL_LABEL_RE.sub("", part.strip()).strip().lower()
            if len(cleaned) <= 1 or len(cleaned) >= _SKILL_MAX_LENGTH:
                continue
            if cleaned in seen:
                continue
            seen.add(cleaned)
            skills.append(cleaned)
    return skills


def find_metrics(text: str | None) -> list[str]:
    if not text:
        return []
    found: list[str] = []
    for pattern in _METRIC_PATTERNS:
        for match in pattern.finditer(text):
            snippet = match.group(0).strip()
            if snippet not in found:
                found.append(snippet)
    return found


def has_quantifiable_metrics(text: str | None) -> bool:
    if not text:
        return False
    return any(pattern.search(text) for pattern in _METRIC_PATTERNS)


def extract_action_verbs(text: str | None) -> list[str]:
    """Return every action-verb occurrence, in reading order."""
    if not text:
        return []
    return [word.lower() for word in _WORD_RE.findall(text) if word.lower() in ACTION_VERBS]
