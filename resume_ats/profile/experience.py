from __future__ import annotations

import re
from datetime import date

from resume_ats.schemas.profile import DateRange, EmploymentGap, ExperienceLevel, ExperienceSummary

_YEARS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\s*-\s*(\d+)\s*years?\s*(?:of\s*)?(?:experience|exp)\b", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)\b", re.IGNORECASE),
    re.compile(r"minimum\s*(?:of\s*)?(\d+)\s*years?", re.IGNORECASE),
    re.compile(r"at\s+least\s+(\d+)\s*years?", re.IGNORECASE),
)
_OPEN_END = r"present|current|now"
_DATE_RANGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"([A-Za-z]+\.?\s+\d{{4}})\s*[-–—]\s*([A-Za-z]+\.?\s+\d{{4}}|{_OPEN_END})", re.IGNORECASE),
    re.compile(rf"(\d{{1,2}}/\d{{4}})\s*[-–—]\s*(\d{{1,2}}/\d{{4}}|{_OPEN_END})", re.IGNORECASE),
    re.compile(rf"\b(\d{{4}})\s*[-–—]\s*(\d{{4}}|{_OPEN_END})\b", re.IGNORECASE),
)
_OPEN_END_RE = re.compile(rf"^(?:{_OPEN_END})$", re.IGNORECASE)
_MONTH_YEAR_RE = re.compile(r"^([A-Za-z]+)\.?\s+(\d{4})$")
_NUMERIC_MONTH_RE = re.compile(r"^(\d{1,2})/(\d{4})$")
_YEAR_ONLY_RE = re.compile(r"^\d{4}$")

MONTHS = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6, "jul": 7, "july": 7,
    "aug": 8, "august": 8, "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}
LEVEL_PATTERNS: tuple[tuple[ExperienceLevel, re.Pattern[str]], ...] = (
    ("entry", re.compile(r"\bentry[\s-]level\b|\bjunior\b|\bgraduate\b|\bintern\b|\bfresher\b|\b0-2\s*years", re.IGNORECASE)),
    ("mid", re.compile(r"\bmid[\s-]level\b|\bintermediate\b|\b3-5\s*years|\b4-6\s*years", re.IGNORECASE)),
    ("senior", re.compile(r"\bsenior\b|\blead\b|\bprincipal\b|\bexpert\b|\b[5-7]\+\s*years", re.IGNORECASE)),
    ("executive", re.compile(r"\bdirector\b|\bvp\b|\bvice\s+president\b|\bc-level\b|\bchief\b|\bhead\s+of\b", re.IGNORECASE)),
)
GAP_THRESHOLD_MONTHS = 3


def extract_years_of_experience(text: str) -> int:
    """Largest stated years-of-experience figure; a range counts as its upper bound."""
    years: list[int] = []
    for pattern in _YEARS_PATTERNS:
        for match in pattern.finditer(text or ""):
            groups = [group for group in match.groups() if group]
            years.append(int(groups[-1]))
    return max(years) if years else 0


def parse_date(value: str) -> date | None:
    cleaned = (value or "").strip()
    if not cleaned:
        return None
    numeric = _NUMERIC_MONTH_RE.match(cleaned)
    if numeric:
        month = int(numeric.group(1))
        return date(int(numeric.group(2)), month, 1) if 1 <= month <= 12 else None
    if _YEAR_ONLY_RE.match(cleaned):
        return date(int(cleaned), 1, 1)
    named = _MONTH_YEAR_RE.match(cleaned)
    if named:
        month = MONTHS.get(named.group(1).lower())
        if month is not None:
            return date(int(named.group(2)), month, 1)
    return None


def months_between(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def extract_date_ranges(text: str, today: date | None = None) -> list[DateRange]:
    """Employment date ranges, line by line. Open-ended ranges end at ``today``."""
    reference = today or date.today()
    ranges: list[DateRange] = []
    for line in (text or "").splitlines():
        claimed: list[tuple[int, int]] = []
        for pattern in _DATE_RANGE_PATTERNS:
            for match in pattern.finditer(line):
                start_index, end_index = match.span()
                if any(start_index < taken_end and end_index > taken_start for taken_start, taken_end in claimed):
                    continue
                start = parse_date(match.group(1))
                end_text = match.group(2)
                end = reference if _OPEN_END_RE.match(end_text) else parse_date(end_text)
                if start is None or end is None:
                    continue
                claimed.append((start_index, end_index))
                ranges.append(DateRange(start=start, end=end))
    return ranges


def calculate_total_experience(text: str, today: date | None = None) -> float:
    total_months = sum(
        max(0, date_range.months) for date_range in extract_date_ranges(text, today)
    )
    return round(total_months / 12, 1)


def detect_employment_gaps(text: str, today: date | None = None) -> list[EmploymentGap]:
    ranges = sorted(extract_date_ranges(text, today), key=lambda item: item.start)
    gaps: list[EmploymentGap] = []
    for current, following in zip(ranges, ranges[1:]):
        gap_months = months_between(current.end, following.start)
        if gap_months > GAP_THRESHOLD_MONTHS:
            gaps.append(
                EmploymentGap(
                    start=current.end,
                    end=following.start,
                    months=gap_months,
                    years=round(gap_months / 12, 1),
                )
            )
    return gaps


def extract_experience_level(text: str, today: date | None = None) -> ExperienceLevel:
    for level, pattern in LEVEL_PATTERNS:
        if pattern.search(text or ""):
            return level

    years = calculate_total_experience(text, today)
    if years < 3:
        return "entry"
    if years < 6:
        return "mid"
    if years < 10:
        return "senior"
    return "executive"


def summarize_experience(text: str, today: date | None = None) -> ExperienceSummary:
    return ExperienceSummary(
        date_ranges=extract_date_ranges(text, today),
        total_years=calculate_total_experience(text, today),
        stated_years=extract_years_of_experience(text),
        gaps=detect_employment_gaps(text, today),
        level=extract_experience_level(text, today),
    )
