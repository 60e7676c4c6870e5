from __future__ import annotations

import logging

from resume_ats.schemas.normalized import Section, SectionFeedback, SectionName

from .utils import normalize_line

logger = logging.getLogger(__name__)

SECTION_HEADERS: dict[SectionName, tuple[str, ...]] = {
    "skills": (
        "skills",
        "technical skills",
        "core competencies",
        "technologies",
        "expertise",
        "proficiencies",
    ),
    "experience": (
        "experience",
        "work experience",
        "professional experience",
        "employment history",
        "work history",
        "career",
    ),
    "education": ("education", "academic background", "qualifications", "degrees"),
    "projects": ("projects", "personal projects", "key projects", "portfolio"),
    "certifications": ("certifications", "certificates", "licenses", "credentials"),
    "summary": ("summary", "professional summary", "objective", "profile", "about"),
    "achievements": ("achievements", "awards", "honors", "accomplishments"),
}

_HEADER_MAX_LENGTH = 50
_SENTENCE_PUNCTUATION = (".", ",", ";", "!", "?")
_INITIAL_SECTION: SectionName = "header"


def _looks_like_header(line: str) -> bool:
    return len(line) < _HEADER_MAX_LENGTH and not any(mark in line for mark in _SENTENCE_PUNCTUATION)


def detect_section_header(line: str) -> SectionName | None:
    """Return the section a header line opens, or None for content lines."""
    lowered = normalize_line(line).lower()
    if not lowered:
        return None

    for section_name, headers in SECTION_HEADERS.items():
        if any(lowered == header or lowered.startswith(f"{header}:") for header in headers):
            return section_name

    if not _looks_like_header(line.strip()):
        return None
    for section_name, headers in SECTION_HEADERS.items():
        if any(header in lowered for header in headers):
            return section_name
    return None


def detect_sections(resume_text: str | None) -> dict[str, Section]:
    """Split resume text into named zones, in order of first appearance.

    Lines before the first recognised header belong to ``header``. A section
    with no content lines is not recorded.
    """
    if not resume_text:
        return {}

    contents: dict[str, list[str]] = {}
    current: SectionName = _INITIAL_SECTION
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            contents[current] = list(buffer)

    for raw_line in resume_text.splitlines():
        stripped = raw_line.strip()
        if not stripped:
            continue
        detected = detect_section_header(stripped)
        if detected is not None:
            flush()
            current = detected
            buffer = []
            continue
        buffer.append(stripped)

    flush()

    return {
        name: Section(name=name, content="\n".join(lines), ordinal_position=position)
        for position, (name, lines) in enumerate(contents.items())
    }


def apply_structure_fallback(
    sections: dict[str, Section], resume_text: str
) -> tuple[dict[str, Section], bool]:
    """Treat an unstructured resume as both skills and experience content.

    Only applies when at most one section was detected, so poor formatting
    alone does not produce "no skills section" penalties.
    """
    if len(sections) > 1:
        return sections, False

    patched = dict(sections)
    text = resume_text or ""
    for name in ("experience", "skills"):
        position = patched[name].ordinal_position if name in patched else len(patched)
        patched[name] = Section(name=name, content=text, ordinal_position=position)
    logger.info("ats_section_fallback_applied detected=%s", len(sections))
    return patched, True


def analyze_section_order(section_names: list[str]) -> list[SectionFeedback]:
    feedback: list[SectionFeedback] = []

    if "skills" in section_names and "experience" in section_names:
        skills_index = section_names.index("skills")
        experience_index = section_names.index("experience")
        if skills_index > experience_index + 1:
            feedback.append(
                SectionFeedback(
                    type="section_order",
                    severity="medium",
                    message="Consider moving Skills section closer to the top for better ATS visibility",
                )
            )

    if "summary" not in section_names:
        feedback.append(
            SectionFeedback(
                type="missing_section",
                severity="low",
                message="Adding a professional summary can improve ATS matching",
            )
        )

    return feedback
