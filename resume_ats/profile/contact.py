from __future__ import annotations

import re

from resume_ats.schemas.profile import ContactInfo

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\+\d{1,3}\s?\d{3}\s?\d{3}\s?\d{4}"),
    re.compile(r"\+\d{2}\s?\d{5}\s?\d{5}"),
    re.compile(r"\(\d{3}\)\s*\d{3}[-.\s]?\d{4}"),
    re.compile(r"\d{3}[-.\s]\d{3}[-.\s]\d{4}"),
    re.compile(r"\b\d{10}\b"),
)
_LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+/?", re.IGNORECASE)
_GITHUB_RE = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[\w-]+/?", re.IGNORECASE)
_WEBSITE_RE = re.compile(
    r"(?:https?://)?(?:www\.)?[\w-]+\.(?:com|net|org|io|dev|me|co)\b(?:/[\w\-._~:/?#\[\]@!$&'()*+,;=]*)?",
    re.IGNORECASE,
)
_SOCIAL_DOMAINS = ("linkedin.com", "github.com", "twitter.com", "facebook.com", "instagram.com")
_LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]*[A-Z]{2}[ \t]*\d{5}"),
    re.compile(r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]*[A-Z]{2}\b"),
    re.compile(r"[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]*[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*"),
)
_NON_DIGIT = re.compile(r"\D")
_SIMPLE_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def extract_emails(text: str) -> list[str]:
    return _unique(_EMAIL_RE.findall(text or ""))


def extract_phone_numbers(text: str) -> list[str]:
    """Phone numbers in several formats; a match nested inside an earlier one is skipped."""
    claimed: list[tuple[int, int]] = []
    phones: list[str] = []
    for pattern in _PHONE_PATTERNS:
        for match in pattern.finditer(text or ""):
            start, end = match.span()
            if any(start < taken_end and end > taken_start for taken_start, taken_end in claimed):
                continue
            claimed.append((start, end))
            phones.append(match.group(0))
    return _unique(phones)


def extract_linkedin_url(text: str) -> str | None:
    match = _LINKEDIN_RE.search(text or "")
    return match.group(0) if match else None


def extract_github_url(text: str) -> str | None:
    match = _GITHUB_RE.search(text or "")
    return match.group(0) if match else None


def extract_website_url(text: str) -> str | None:
    without_emails = _EMAIL_RE.sub(" ", text or "")
    for match in _WEBSITE_RE.finditer(without_emails):
        url = match.group(0)
        if not any(domain in url.lower() for domain in _SOCIAL_DOMAINS):
            return url
    return None


def extract_location(text: str) -> str | None:
    for pattern in _LOCATION_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(0)
    return None


def extract_contact_info(text: str) -> ContactInfo:
    return ContactInfo(
        emails=extract_emails(text),
        phones=extract_phone_numbers(text),
        linkedin=extract_linkedin_url(text),
        github=extract_github_url(text),
        website=extract_website_url(text),
        location=extract_location(text),
    )


def validate_email(email: str) -> bool:
    return bool(_SIMPLE_EMAIL_RE.match(email or ""))


def validate_phone_number(phone: str) -> bool:
    digits = _NON_DIGIT.sub("", phone or "")
    return 10 <= len(digits) <= 15


def format_phone_number(phone: str) -> str:
    digits = _NON_DIGIT.sub("", phone or "")
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return phone
