from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from resume_ats.core.errors import contained
from resume_ats.normalize.normalize_resume import (
    extract_action_verbs,
    find_metrics,
    parse_experience_section,
    parse_skills_section,
)
from resume_ats.normalize.sections import (
    analyze_section_order,
    apply_structure_fallback,
    detect_sections,
)
from resume_ats.schemas.normalized import ExperienceEntry, Section, SectionFeedback
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .term_extractor import extract_terms

logger = logging.getLogger(__name__)

_MIN_RESUME_TERM_LENGTH = 2


class ResumeFeatures(BaseModel):
    sections: dict[str, Section] = Field(default_factory=dict)
    fallback_applied: bool = False
    resume_terms: list[str] = Field(default_factory=list)
    explicit_skills: list[str] = Field(default_factory=list)
    experience_entries: list[ExperienceEntry] = Field(default_factory=list)
    metrics: list[str] = Field(default_factory=list)
    action_verbs: list[str] = Field(default_factory=list)
    section_feedback: list[SectionFeedback] = Field(default_factory=list)

    @property
    def section_names(self) -> list[str]:
        return list(self.sections)

    def section_text(self, name: str) -> str:
        section = self.sections.get(name)
        return section.content if section is not None else ""

    def has_section(self, name: str) -> bool:
        return bool(self.section_text(name).strip())

    @property
    def has_skills_section(self) -> bool:
        return self.has_section("skills")

    @property
    def has_experience_section(self) -> bool:
        return self.has_section("experience")

    @property
    def has_metrics(self) -> bool:
        return bool(self.metrics)

    @property
    def experience_bullets(self) -> list[str]:
        return [bullet for entry in self.experience_entries for bullet in entry.bullets]


def collect_resume_terms(
    resume_text: str,
    explicit_skills: list[str],
    taxonomy: TaxonomyProvider,
) -> list[str]:
    """Normalized, deduplicated resume terms longer than two characters.

    Explicitly listed skills are appended after the extracted terms so a
    plain lower-case skills list still counts.
    """
    extracted = extract_terms(resume_text, taxonomy)
    terms: list[str] = []
    seen: set[str] = set()
    for raw in extracted + explicit_skills:
        normalized = taxonomy.normalize_skill(raw)
        if len(normalized) <= _MIN_RESUME_TERM_LENGTH or normalized in seen:
            continue
        seen.add(normalized)
        terms.append(normalized)
    return terms


def build_resume_features(
    resume_text: str | None,
    taxonomy: TaxonomyProvider | None = None,
) -> ResumeFeatures:
    text = resume_text if isinstance(resume_text, str) else ""
    if not text.strip():
        return ResumeFeatures(section_feedback=analyze_section_order([]))
    provider = taxonomy or get_default_taxonomy_provider()

    detected = contained("resume_sections", {}, detect_sections, text)
    sections, fallback_applied = apply_structure_fallback(detected, text)
    section_names = list(sections)

    experience_text = sections["experience"].content if "experience" in sections else ""
    skills_text = sections["skills"].content if "skills" in sections else ""

    explicit_skills = contained("resume_skills_parse", [], parse_skills_section, skills_text)
    features = ResumeFeatures(
        sections=sections,
        fallback_applied=fallback_applied,
        resume_terms=contained(
            "resume_term_extraction", [], collect_resume_terms, text, explicit_skills, provider
        ),
        explicit_skills=explicit_skills,
        experience_entries=contained("resume_experience_parse", [], parse_experience_section, experience_text),
        metrics=contained("resume_metrics", [], find_metrics, experience_text),
        action_verbs=contained("resume_action_verbs", [], extract_action_verbs, experience_text),
        section_feedback=contained("resume_section_order", [], analyze_section_order, section_names),
    )
    logger.info(
        "ats_resume_normalized sections=%s terms=%s explicit_skills=%s entries=%s fallback=%s",
        len(features.sections),
        len(features.resume_terms),
        len(features.explicit_skills),
        len(features.experience_entries),
        features.fallback_applied,
    )
    return features
