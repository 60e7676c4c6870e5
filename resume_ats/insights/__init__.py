from .checklist import CHECKLIST_BUCKETS, build_checklist
from .generator import INSIGHT_RULES, PRIORITY_ORDER, generate_insights

__all__ = [
    "CHECKLIST_BUCKETS",
    "build_checklist",
    "INSIGHT_RULES",
    "PRIORITY_ORDER",
    "generate_insights",
]
