import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.jd_features import JDAnalysis  # noqa: E402
from resume_ats.features.resume_features import ResumeFeatures  # noqa: E402
from resume_ats.features.skill_pipeline import build_match_result, classify_similarity  # noqa: E402
from resume_ats.schemas.normalized import ExperienceEntry, Term  # noqa: E402


def _term(name, required=True, weight=3.0):
    return Term(
        raw_text=name,
        normalized_text=name,
        weight=weight,
        is_required=required,
        is_preferred=not required,
    )


class ThresholdTests(unittest.TestCase):
    def test_boundaries(self):
        self.assertEqual(classify_similarity(1.0), "strong")
        self.assertEqual(classify_similarity(0.65), "strong")
        self.assertEqual(classify_similarity(0.649), "partial")
        self.assertEqual(classify_similarity(0.45), "partial")
        self.assertEqual(classify_similarity(0.449), "missing")
        self.assertEqual(classify_similarity(0.0), "missing")


class MatchEngineTests(unittest.TestCase):
    def setUp(self):
        self.resume = ResumeFeatures(
            resume_terms=["python", "kuberntes", "tensorboard"],
            explicit_skills=["Python", "kuberntes"],
            experience_entries=[
                ExperienceEntry(title_line="Engineer 2020", bullets=["Built services using Python"]),
            ],
        )

    def test_every_term_lands_in_exactly_one_bucket(self):
        jd = JDAnalysis(
            terms=[
                _term("python"),
                _term("kubernetes"),
                _term("tensorflow"),
                _term("terraform", required=False, weight=1.5),
            ]
        )
        result = build_match_result(jd, self.resume)

        self.assertEqual(result.total, 4)
        self.assertEqual([record.jd_term for record in result.strong], ["python", "kubernetes"])
        self.assertEqual([record.jd_term for record in result.partial], ["tensorflow"])
        self.assertEqual([record.jd_term for record in result.missing], ["terraform"])

    def test_strong_match_flags(self):
        result = build_match_result(JDAnalysis(terms=[_term("python")]), self.resume)
        record = result.strong[0]

        self.assertEqual(record.resume_term, "python")
        self.assertEqual(record.similarity_score, 1.0)
        self.assertTrue(record.in_skills_section)
        self.assertTrue(record.in_experience)
        self.assertFalse(record.typo_correction)

    def test_typo_in_resume_counts_as_strong(self):
        result = build_match_result(JDAnalysis(terms=[_term("kubernetes")]), self.resume)
        record = result.strong[0]

        self.assertEqual(record.resume_term, "kuberntes")
        self.assertTrue(record.typo_correction)
        self.assertFalse(record.in_experience)

    def test_partial_match_uses_plain_matcher(self):
        result = build_match_result(JDAnalysis(terms=[_term("tensorflow")]), self.resume)
        record = result.partial[0]

        self.assertEqual(record.resume_term, "tensorboard")
        self.assertAlmostEqual(record.similarity_score, 10 / 19)
        self.assertFalse(record.in_skills_section)

    def test_missing_match_has_no_resume_term(self):
        result = build_match_result(JDAnalysis(terms=[_term("terraform")]), self.resume)
        record = result.missing[0]

        self.assertIsNone(record.resume_term)
        self.assertTrue(record.is_required)
        self.assertEqual(record.importance, "required")

    def test_empty_resume_misses_everything(self):
        result = build_match_result(JDAnalysis(terms=[_term("python")]), ResumeFeatures())
        self.assertEqual(len(result.missing), 1)
        self.assertEqual(result.missing[0].similarity_score, 0.0)


if __name__ == "__main__":
    unittest.main()
