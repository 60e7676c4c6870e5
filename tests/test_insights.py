import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.resume_features import ResumeFeatures  # noqa: E402
from resume_ats.features.skill_pipeline import MatchResult  # noqa: E402
from resume_ats.insights import build_checklist, generate_insights  # noqa: E402
from resume_ats.schemas.analysis import Insight  # noqa: E402
from resume_ats.schemas.normalized import MatchRecord, Section, SectionFeedback  # noqa: E402


def _match_result():
    return MatchResult(
        strong=[
            MatchRecord(
                jd_term="docker",
                resume_term="docker",
                similarity_score=1.0,
                category="strong",
                is_required=True,
                weight=3.0,
                in_skills_section=True,
                in_experience=False,
            )
        ],
        partial=[
            MatchRecord(
                jd_term="tensorflow",
                resume_term="tensorboard",
                similarity_score=0.53,
                category="partial",
                is_required=True,
                weight=3.0,
            )
        ],
        missing=[
            MatchRecord(
                jd_term="terraform",
                similarity_score=0.0,
                category="missing",
                is_required=True,
                weight=3.0,
            ),
            MatchRecord(
                jd_term="rust",
                similarity_score=0.0,
                category="missing",
                is_required=False,
                is_preferred=True,
                weight=1.5,
            ),
        ],
    )


def _resume(**overrides):
    values = dict(
        sections={
            "experience": Section(name="experience", content="Engineer 2020\n- Built things", ordinal_position=0),
            "skills": Section(name="skills", content="Docker, Python", ordinal_position=1),
        },
        explicit_skills=["docker", "python"],
        action_verbs=["built"],
        metrics=[],
        section_feedback=[
            SectionFeedback(
                type="missing_section",
                severity="low",
                message="Adding a professional summary can improve ATS matching",
            )
        ],
    )
    values.update(overrides)
    return ResumeFeatures(**values)


class InsightGeneratorTests(unittest.TestCase):
    def test_rules_fire_and_sort_by_priority(self):
        insights = generate_insights(_match_result(), _resume())

        self.assertEqual(
            [insight.category for insight in insights],
            [
                "missing_skill",
                "missing_metrics",
                "sparse_skills",
                "undemonstrated_skill",
                "missing_section",
                "weak_verbs",
                "partial_match",
            ],
        )
        self.assertEqual(
            [insight.priority for insight in insights],
            ["high", "high", "high", "medium", "medium", "medium", "medium"],
        )

    def test_section_feedback_priority_is_high_or_medium(self):
        for severity, expected in (("low", "medium"), ("medium", "medium"), ("high", "high")):
            feedback = SectionFeedback(type="section_order", severity=severity, message="Sections out of order")
            insights = generate_insights(MatchResult(), _resume(section_feedback=[feedback]))
            section = [insight for insight in insights if insight.category == "section_order"]
            self.assertEqual([insight.priority for insight in section], [expected], severity)

    def test_messages(self):
        insights = {insight.category: insight for insight in generate_insights(_match_result(), _resume())}

        self.assertEqual(insights["missing_skill"].message, '"terraform" is required but not found in resume')
        self.assertEqual(insights["missing_skill"].type, "critical")
        self.assertEqual(
            insights["partial_match"].message,
            '"tensorflow" partially matches "tensorboard" (53% similarity)',
        )
        self.assertEqual(
            insights["undemonstrated_skill"].message,
            '"docker" is listed in skills but not demonstrated in experience',
        )

    def test_preferred_missing_terms_do_not_raise_critical_insights(self):
        insights = generate_insights(_match_result(), _resume())
        self.assertFalse(any("rust" in insight.message for insight in insights))

    def test_satisfied_resume_has_no_quality_insights(self):
        resume = _resume(
            metrics=["40%"],
            action_verbs=["built", "led", "designed", "shipped", "scaled"],
            explicit_skills=["docker", "python", "go", "sql", "aws"],
            section_feedback=[],
        )
        insights = generate_insights(MatchResult(), resume)
        self.assertEqual(insights, [])

    def test_weak_verbs_need_an_experience_section(self):
        resume = _resume(sections={}, action_verbs=[])
        categories = [insight.category for insight in generate_insights(MatchResult(), resume)]
        self.assertNotIn("weak_verbs", categories)


class ChecklistTests(unittest.TestCase):
    def test_buckets_follow_priority(self):
        checklist = build_checklist(generate_insights(_match_result(), _resume()))

        self.assertEqual([section.priority for section in checklist], ["critical", "important"])
        self.assertEqual(
            [section.title for section in checklist],
            ["Critical Improvements", "Recommended Improvements"],
        )
        self.assertEqual([len(section.items) for section in checklist], [3, 4])
        self.assertEqual(
            checklist[1].items[1],
            "Add a 2-3 line professional summary at the top that mirrors the job title and key skills",
        )

    def test_low_priority_insights_go_to_optional_bucket(self):
        insight = Insight(
            type="optimization",
            category="formatting",
            message="Consider a consistent date format",
            suggestion="Use one date format throughout",
            priority="low",
        )
        checklist = build_checklist([insight])
        self.assertEqual([section.priority for section in checklist], ["optional"])
        self.assertEqual(checklist[0].title, "Additional Suggestions")

    def test_empty_buckets_are_omitted(self):
        insight = Insight(
            type="critical",
            category="missing_skill",
            message='"go" is required but not found in resume',
            suggestion='Add "go" to your skills section and demonstrate it with project examples',
            priority="high",
        )
        checklist = build_checklist([insight])
        self.assertEqual(len(checklist), 1)
        self.assertEqual(checklist[0].items, [insight.suggestion])
        self.assertEqual(build_checklist([]), [])


if __name__ == "__main__":
    unittest.main()
