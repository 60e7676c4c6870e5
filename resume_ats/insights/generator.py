from __future__ import annotations

import logging
from typing import Callable

from resume_ats.core.config import INSIGHT_LIMITS
from resume_ats.features.resume_features import ResumeFeatures
from resume_ats.features.skill_pipeline import MatchResult
from resume_ats.schemas.analysis import Insight, Priority

logger = logging.getLogger(__name__)

InsightRule = Callable[[MatchResult, ResumeFeatures], list[Insight]]

PRIORITY_ORDER: dict[Priority, int] = {"high": 0, "medium": 1, "low": 2}

_SECTION_SUGGESTIONS = {
    "section_order": "Reorder sections to: Summary → Skills → Experience → Education → Projects",
    "missing_section": "Add a 2-3 line professional summary at the top that mirrors the job title and key skills",
}


def missing_required_skills(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    return [
        Insight(
            type="critical",
            category="missing_skill",
            message=f'"{record.jd_term}" is required but not found in resume',
            suggestion=f'Add "{record.jd_term}" to your skills section and demonstrate it with project examples',
            priority="high",
        )
        for record in match_result.missing
        if record.is_required
    ]


def undemonstrated_skills(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    return [
        Insight(
            type="warning",
            category="undemonstrated_skill",
            message=f'"{record.jd_term}" is listed in skills but not demonstrated in experience',
            suggestion=f"Add project or work examples showing your experience with {record.jd_term}",
            priority="medium",
        )
        for record in match_result.strong
        if record.in_skills_section and not record.in_experience
    ]


def missing_metrics(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    if resume.has_metrics:
        return []
    return [
        Insight(
            type="improvement",
            category="missing_metrics",
            message="No quantifiable metrics found in experience section",
            suggestion='Add measurable achievements (e.g., "Improved performance by 40%", "Managed team of 5")',
            priority="high",
        )
    ]


def section_order(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    return [
        Insight(
            type="optimization",
            category=feedback.type,
            message=feedback.message,
            suggestion=_SECTION_SUGGESTIONS.get(feedback.type, _SECTION_SUGGESTIONS["section_order"]),
            priority="high" if feedback.severity == "high" else "medium",
        )
        for feedback in resume.section_feedback
    ]


def weak_action_verbs(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    if "experience" not in resume.sections:
        return []
    if len(resume.action_verbs) >= INSIGHT_LIMITS.min_action_verbs:
        return []
    return [
        Insight(
            type="improvement",
            category="weak_verbs",
            message="Limited use of strong action verbs in experience section",
            suggestion="Use impactful verbs like: developed, implemented, optimized, architected, led, managed",
            priority="medium",
        )
    ]


def required_partial_matches(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    insights: list[Insight] = []
    for record in match_result.partial:
        if not record.is_required:
            continue
        percent = round(record.similarity_score * 100)
        insights.append(
            Insight(
                type="warning",
                category="partial_match",
                message=(
                    f'"{record.jd_term}" partially matches "{record.resume_term}" ({percent}% similarity)'
                ),
                suggestion=f'Consider using the exact term "{record.jd_term}" for better ATS matching',
                priority="medium",
            )
        )
    return insights


def sparse_skills(match_result: MatchResult, resume: ResumeFeatures) -> list[Insight]:
    if len(resume.explicit_skills) >= INSIGHT_LIMITS.min_explicit_skills:
        return []
    return [
        Insight(
            type="improvement",
            category="sparse_skills",
            message="Skills section appears sparse or missing",
            suggestion="Add a dedicated Skills section with 8-15 relevant technical skills",
            priority="high",
        )
    ]


INSIGHT_RULES: tuple[InsightRule, ...] = (
    missing_required_skills,
    undemonstrated_skills,
    missing_metrics,
    section_order,
    weak_action_verbs,
    required_partial_matches,
    sparse_skills,
)


def generate_insights(
    match_result: MatchResult,
    resume: ResumeFeatures,
    rules: tuple[InsightRule, ...] = INSIGHT_RULES,
) -> list[Insight]:
    """Run every rule in order, then stable-sort by priority."""
    insights: list[Insight] = []
    for rule in rules:
        insights.extend(rule(match_result, resume))
    ordered = sorted(insights, key=lambda insight: PRIORITY_ORDER[insight.priority])
    logger.info("ats_insights_generated count=%s", len(ordered))
    return ordered
