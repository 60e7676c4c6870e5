from __future__ import annotations

from resume_ats.schemas.analysis import ChecklistPriority, ChecklistSection, Insight, Priority

CHECKLIST_BUCKETS: tuple[tuple[Priority, ChecklistPriority, str], ...] = (
    ("high", "critical", "Critical Improvements"),
    ("medium", "important", "Recommended Improvements"),
    ("low", "optional", "Additional Suggestions"),
)


def build_checklist(insights: list[Insight]) -> list[ChecklistSection]:
    """Group suggestions by priority; empty buckets are left out."""
    checklist: list[ChecklistSection] = []
    for priority, bucket, title in CHECKLIST_BUCKETS:
        items = [insight.suggestion for insight in insights if insight.priority == priority]
        if items:
            checklist.append(ChecklistSection(priority=bucket, title=title, items=items))
    return checklist
