import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.similarity.fuzzy import (  # noqa: E402
    autocorrect_skill,
    dice_coefficient,
    edit_similarity,
    find_best_match,
    find_best_match_with_typo_tolerance,
    get_skill_variations,
)


class SimilaritySignalTests(unittest.TestCase):
    def test_dice_coefficient(self):
        self.assertEqual(dice_coefficient("react", "react"), 1.0)
        self.assertEqual(dice_coefficient("", ""), 0.0)
        self.assertEqual(dice_coefficient("a", "b"), 0.0)
        self.assertAlmostEqual(dice_coefficient("night", "nacht"), 0.25)

    def test_dice_ignores_whitespace(self):
        self.assertEqual(dice_coefficient("machine learning", "machinelearning"), 1.0)

    def test_edit_similarity(self):
        self.assertAlmostEqual(edit_similarity("kitten", "sitting"), 1 - 3 / 7)
        self.assertEqual(edit_similarity("", ""), 1.0)


class AutocorrectTests(unittest.TestCase):
    def test_exact_typo_lookup(self):
        self.assertEqual(autocorrect_skill("Pyhton"), ("python", True))
        self.assertEqual(autocorrect_skill("python"), ("python", False))

    def test_one_edit_from_a_known_spelling(self):
        self.assertEqual(autocorrect_skill("kubernetess"), ("kubernetes", True))

    def test_short_terms_are_not_fuzzily_corrected(self):
        self.assertEqual(autocorrect_skill("gin"), ("gin", False))


class BestMatchTests(unittest.TestCase):
    def test_typo_in_resume_is_a_full_match(self):
        result = find_best_match_with_typo_tolerance("kubernetes", ["docker", "kuberntes"])
        self.assertEqual(result.match, "kuberntes")
        self.assertEqual(result.score, 1.0)
        self.assertTrue(result.corrected)

    def test_exact_match_is_not_a_correction(self):
        result = find_best_match_with_typo_tolerance("python", ["python", "pyton"])
        self.assertEqual(result.match, "python")
        self.assertEqual(result.score, 1.0)
        self.assertFalse(result.corrected)

    def test_threshold_and_earliest_candidate_wins_ties(self):
        below = find_best_match_with_typo_tolerance("abcd", ["abce", "abcf"])
        self.assertIsNone(below.match)
        self.assertAlmostEqual(below.score, 0.75)

        above = find_best_match_with_typo_tolerance("abcd", ["abce", "abcf"], threshold=0.7)
        self.assertEqual(above.match, "abce")

    def test_no_candidates(self):
        result = find_best_match_with_typo_tolerance("python", [])
        self.assertIsNone(result.match)
        self.assertEqual(result.score, 0.0)
        self.assertEqual(find_best_match("python", []).score, 0.0)

    def test_plain_matcher_uses_canonical_forms(self):
        result = find_best_match("ReactJS", ["vue", "react"])
        self.assertEqual(result.match, "react")
        self.assertEqual(result.score, 1.0)

        partial = find_best_match("tensorflow", ["tensorboard"])
        self.assertAlmostEqual(partial.score, 10 / 19)

    def test_skill_variations(self):
        variations = get_skill_variations("node.js")
        self.assertEqual(variations[0], "node.js")
        self.assertIn("nodejs", variations)
        self.assertIn("full stack", get_skill_variations("full-stack"))
        self.assertEqual(get_skill_variations(""), [])


if __name__ == "__main__":
    unittest.main()
