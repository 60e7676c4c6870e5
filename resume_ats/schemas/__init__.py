from .analysis import (
    AnalysisResult,
    ChecklistSection,
    Insight,
    MissingSkill,
    PartialMatch,
    ScoreBreakdown,
    SectionFeedbackSummary,
    StrongMatch,
)
from .normalized import (
    ExperienceEntry,
    MatchRecord,
    Section,
    SectionFeedback,
    Term,
)
from .profile import (
    CandidateProfile,
    ContactInfo,
    EducationInfo,
    ExperienceSummary,
)

__all__ = [
    "CandidateProfile",
    "ContactInfo",
    "EducationInfo",
    "ExperienceSummary",
    "AnalysisResult",
    "ChecklistSection",
    "Insight",
    "MissingSkill",
    "PartialMatch",
    "ScoreBreakdown",
    "SectionFeedbackSummary",
    "StrongMatch",
    "ExperienceEntry",
    "MatchRecord",
    "Section",
    "SectionFeedback",
    "Term",
]
