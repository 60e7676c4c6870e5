from .jd import Term
from .match import MatchCategory, MatchRecord
from .resume import ExperienceEntry, Section, SectionFeedback, SectionName

__all__ = [
    "Term",
    "Section",
    "SectionName",
    "SectionFeedback",
    "ExperienceEntry",
    "MatchCategory",
    "MatchRecord",
]
