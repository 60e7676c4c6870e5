from __future__ import annotations

import re
from datetime import date

from resume_ats.schemas.profile import GPA, DegreeLevel, EducationInfo

_DEGREE_FULL_RE = re.compile(
    r"\b(?:Bachelor(?:'s)?|Master(?:'s)?|Doctor(?:ate)?|Associate(?:'s)?)"
    r"(?:[ \t]+of)?(?:[ \t]+(?:Science|Arts|Engineering|Business|Technology|Fine Arts|Applied Science))?"
    r"(?:[ \t]+in[ \t]+[\w ,&]+)?",
    re.IGNORECASE,
)
# Abbreviations are case-sensitive so "be" or "ms" in prose do not count.
_DEGREE_ABBREVIATION_RE = re.compile(
    r"\b(?:B\.S\.|B\.A\.|M\.S\.|M\.A\.|Ph\.?D\.?|PhD|MBA|BBA|BCA|MCA|BTech|MTech|BSc|MSc|BS|BA|MS|MA|BE)(?![\w.])"
)
_MAJOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:major(?:ed)?|specialization|concentration|field of study)(?:[ \t]+in)?[ \t]*:?[ \t]*([\w ,&]+)", re.IGNORECASE),
    re.compile(r"\b(?:Bachelor|Master|PhD)[ \t]+(?:of[ \t]+)?(?:Science|Arts)[ \t]+in[ \t]+([\w ,&]+)", re.IGNORECASE),
    re.compile(r"\b(?:BS|BA|MS|MA)[ \t]+in[ \t]+([\w ,&]+)"),
)
_GPA_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bGPA\s*:?\s*(\d+(?:\.\d+)?)\s*(?:/\s*(\d+(?:\.\d+)?))?", re.IGNORECASE),
    re.compile(r"\bgrade\s+point\s+average\s*:?\s*(\d+(?:\.\d+)?)\s*(?:/\s*(\d+(?:\.\d+)?))?", re.IGNORECASE),
)
_GRADUATION_RE = re.compile(r"\b(?:graduated?|graduation|class of)\s*:?\s*(\d{4})\b", re.IGNORECASE)
_YEAR_RANGE_RE = re.compile(r"\b((?:19|20)\d{2})\s*[-–—]\s*((?:19|20)\d{2}|present|current)\b", re.IGNORECASE)
_INSTITUTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:[A-Z][\w&.'-]*[ \t]+)+(?:University|College|Institute|School|Academy)\b"),
    re.compile(r"\b(?:University|College|Institute)[ \t]+of[ \t]+[A-Z]\w*(?:[ \t]+[A-Z]\w*)*"),
)
_CERTIFICATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:AWS[ \t]+Certified[\w \t-]*|Certified[ \t]+[\w \t]+|PMP|CISSP|CompTIA[\w \t+]*|CCNA|CCNP|CPA|CFA|Six[ \t]+Sigma[\w \t]*)",
    ),
)
_DEGREE_LEVEL_PATTERNS: tuple[tuple[DegreeLevel, re.Pattern[str]], ...] = (
    ("Associate", re.compile(r"\b(?:ASSOCIATE|AS|AA)\b")),
    ("Bachelor", re.compile(r"\b(?:BACHELOR|BSC|BBA|BTECH|BCA|BS|BA|BE|B\.S|B\.A)\b")),
    ("Master", re.compile(r"\b(?:MASTER|MSC|MBA|MTECH|MCA|MS|MA|ME|M\.S|M\.A)\b")),
    ("Doctorate", re.compile(r"\b(?:DOCTORATE|DOCTOR|PHD|PH\.D)\b")),
)
DEGREE_RANKS: dict[DegreeLevel, int] = {
    "Unknown": 0,
    "Associate": 1,
    "Bachelor": 2,
    "Master": 3,
    "Doctorate": 4,
}
_MIN_GRADUATION_YEAR = 1950
_GRADUATION_LOOKAHEAD = 4


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def extract_degrees(text: str) -> list[str]:
    found = [match.group(0).strip(" ,") for match in _DEGREE_FULL_RE.finditer(text or "")]
    found.extend(match.group(0) for match in _DEGREE_ABBREVIATION_RE.finditer(text or ""))
    return _unique(found)


def extract_majors(text: str) -> list[str]:
    majors: list[str] = []
    for pattern in _MAJOR_PATTERNS:
        for match in pattern.finditer(text or ""):
            major = re.sub(r"\d{4}", "", match.group(1)).strip().rstrip(",.").strip()
            if 3 < len(major) < 100:
                majors.append(major)
    return _unique(majors)


def extract_gpa(text: str) -> GPA | None:
    for pattern in _GPA_PATTERNS:
        match = pattern.search(text or "")
        if match:
            scale = float(match.group(2)) if match.group(2) else 4.0
            return GPA(gpa=float(match.group(1)), scale=scale or 4.0)
    return None


def extract_graduation_year(text: str, today: date | None = None) -> int | None:
    """Latest plausible graduation year; a range contributes its end year."""
    latest_allowed = (today or date.today()).year + _GRADUATION_LOOKAHEAD
    years = [int(match.group(1)) for match in _GRADUATION_RE.finditer(text or "")]
    for match in _YEAR_RANGE_RE.finditer(text or ""):
        end = match.group(2)
        years.append(int(end) if end.isdigit() else int(match.group(1)))
    plausible = [year for year in years if _MIN_GRADUATION_YEAR <= year <= latest_allowed]
    return max(plausible) if plausible else None


def extract_institutions(text: str) -> list[str]:
    institutions: list[str] = []
    for pattern in _INSTITUTION_PATTERNS:
        institutions.extend(match.group(0).strip() for match in pattern.finditer(text or ""))
    return _unique(institutions)


def extract_certifications(text: str) -> list[str]:
    certifications: list[str] = []
    for pattern in _CERTIFICATION_PATTERNS:
        certifications.extend(match.group(0).strip() for match in pattern.finditer(text or ""))
    return _unique(certifications)


def classify_degree_level(degree: str) -> DegreeLevel:
    upper = (degree or "").upper()
    for level, pattern in _DEGREE_LEVEL_PATTERNS:
        if pattern.search(upper):
            return level
    return "Unknown"


def meets_education_requirement(resume_degree: str, required_degree: str) -> bool:
    resume_rank = DEGREE_RANKS[classify_degree_level(resume_degree)]
    required_rank = DEGREE_RANKS[classify_degree_level(required_degree)]
    return resume_rank >= required_rank


def extract_education_info(text: str, today: date | None = None) -> EducationInfo:
    return EducationInfo(
        degrees=extract_degrees(text),
        majors=extract_majors(text),
        gpa=extract_gpa(text),
        graduation_year=extract_graduation_year(text, today),
        institutions=extract_institutions(text),
        certifications=extract_certifications(text),
    )
