from __future__ import annotations

import logging
from datetime import date

from resume_ats.core.config import IMPACT_THRESHOLDS
from resume_ats.core.errors import AnalysisInputError, contained
from resume_ats.features.jd_features import JDAnalysis, analyze_job_description
from resume_ats.features.resume_features import ResumeFeatures, build_resume_features
from resume_ats.features.skill_pipeline import MatchResult, build_match_result, missing_record
from resume_ats.insights import build_checklist, generate_insights
from resume_ats.normalize.sections import detect_sections
from resume_ats.profile.contact import extract_contact_info
from resume_ats.profile.education import extract_education_info
from resume_ats.profile.experience import summarize_experience
from resume_ats.schemas.analysis import (
    AnalysisResult,
    Impact,
    MissingSkill,
    PartialMatch,
    SectionFeedbackSummary,
    StrongMatch,
)
from resume_ats.schemas.normalized import MatchRecord
from resume_ats.schemas.profile import CandidateProfile, ContactInfo, EducationInfo, ExperienceSummary
from resume_ats.scoring import calculate_ats_score
from resume_ats.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

logger = logging.getLogger(__name__)


def _impact(weight: float) -> Impact:
    if weight > IMPACT_THRESHOLDS.high:
        return "high"
    if weight > IMPACT_THRESHOLDS.medium:
        return "medium"
    return "low"


def _strong(record: MatchRecord) -> StrongMatch:
    return StrongMatch(
        skill=record.jd_term,
        matched_as=record.resume_term,
        in_skills_section=record.in_skills_section,
        demonstrated=record.in_experience,
        importance=record.importance,
    )


def _partial(record: MatchRecord) -> PartialMatch:
    return PartialMatch(
        skill=record.jd_term,
        matched_as=record.resume_term,
        similarity=round(record.similarity_score * 100),
        importance=record.importance,
    )


def _missing(record: MatchRecord) -> MissingSkill:
    return MissingSkill(
        skill=record.jd_term,
        importance=record.importance,
        impact=_impact(record.weight),
    )


def _section_summary(resume: ResumeFeatures) -> SectionFeedbackSummary:
    return SectionFeedbackSummary(
        has_skills_section=resume.has_skills_section,
        has_experience_section=resume.has_experience_section,
        has_metrics=resume.has_metrics,
        skill_count=len(resume.explicit_skills),
        sections=resume.section_names,
    )


def _all_missing(jd: JDAnalysis) -> MatchResult:
    return MatchResult(missing=[missing_record(term) for term in jd.terms])


def analyze(
    resume_text: str | None,
    job_description_text: str | None,
    taxonomy: TaxonomyProvider | None = None,
) -> AnalysisResult:
    """Score a resume against a job description.

    Never raises for ordinary text: empty or unstructured input produces a
    degenerate but well-formed result. The call is stateless, so it can run
    concurrently from any number of threads.
    """
    provider = taxonomy or get_default_taxonomy_provider()

    jd = contained("jd_analysis", JDAnalysis(), analyze_job_description, job_description_text, provider)
    resume = contained("resume_features", ResumeFeatures(), build_resume_features, resume_text, provider)
    match_result = contained("match", _all_missing(jd), build_match_result, jd, resume, provider)
    insights = contained("insights", [], generate_insights, match_result, resume)
    breakdown = calculate_ats_score(match_result, resume)

    result = AnalysisResult(
        ats_score=breakdown.score,
        strong_matches=[_strong(record) for record in match_result.strong],
        partial_matches=[_partial(record) for record in match_result.partial],
        missing_skills=[_missing(record) for record in match_result.missing],
        section_feedback=_section_summary(resume),
        insights=insights,
        checklist=build_checklist(insights),
        score_breakdown=breakdown,
    )
    logger.info(
        "ats_analysis_complete score=%s strong=%s partial=%s missing=%s insights=%s",
        result.ats_score,
        len(result.strong_matches),
        len(result.partial_matches),
        len(result.missing_skills),
        len(result.insights),
    )
    return result


def analyze_strict(
    resume_text: str | None,
    job_description_text: str | None,
    taxonomy: TaxonomyProvider | None = None,
) -> AnalysisResult:
    """Like :func:`analyze`, but rejects missing or blank input up front."""
    if not isinstance(resume_text, str) or not resume_text.strip():
        raise AnalysisInputError("resume_text is required")
    if not isinstance(job_description_text, str) or not job_description_text.strip():
        raise AnalysisInputError("job_description_text is required")
    return analyze(resume_text, job_description_text, taxonomy)


def build_candidate_profile(resume_text: str | None, today: date | None = None) -> CandidateProfile:
    """Contact, education and experience facts from a resume; independent of scoring."""
    text = resume_text if isinstance(resume_text, str) else ""
    sections = contained("profile_sections", {}, detect_sections, text)

    def section_text(name: str) -> str:
        section = sections.get(name)
        return section.content if section is not None else ""

    contact_text = section_text("header") or text
    education_text = section_text("education") or text
    experience_text = section_text("experience") or text

    return CandidateProfile(
        contact=contained("profile_contact", ContactInfo(), extract_contact_info, contact_text),
        education=contained("profile_education", EducationInfo(), extract_education_info, education_text, today),
        experience=contained("profile_experience", ExperienceSummary(), summarize_experience, experience_text, today),
    )
