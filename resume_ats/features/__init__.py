from .jd_features import JDAnalysis, analyze_job_description, classify_importance
from .resume_features import ResumeFeatures, build_resume_features
from .skill_pipeline import MatchResult, build_match_result, classify_similarity
from .term_extractor import extract_compound_terms, extract_phrases, extract_skills, extract_terms
from .term_rules import TERM_RULES, TermContext, TermRule, evaluate_term

__all__ = [
    "JDAnalysis",
    "analyze_job_description",
    "classify_importance",
    "ResumeFeatures",
    "build_resume_features",
    "MatchResult",
    "build_match_result",
    "classify_similarity",
    "extract_skills",
    "extract_phrases",
    "extract_compound_terms",
    "extract_terms",
    "TERM_RULES",
    "TermContext",
    "TermRule",
    "evaluate_term",
]
