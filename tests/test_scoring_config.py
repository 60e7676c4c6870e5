import unittest
import sys
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.config import (  # noqa: E402
    IMPACT_THRESHOLDS,
    MATCH_THRESHOLDS,
    SCORE_CALIBRATION,
    SCORE_WEIGHTS,
    MatchThresholds,
    ScoreWeights,
    get_scoring_config,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("matching.thresholds.strong"), 0.65)
        self.assertEqual(get_scoring_value("score.calibration.floor"), 20)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("matching.unknown.key", 7), 7)
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")
        self.assertIsNone(get_scoring_value("matching.thresholds.strong.deeper"))

    def test_named_match_thresholds(self):
        self.assertEqual(MATCH_THRESHOLDS.strong, 0.65)
        self.assertEqual(MATCH_THRESHOLDS.partial, 0.45)
        self.assertEqual(MATCH_THRESHOLDS.typo_tolerant, 0.70)
        self.assertEqual(MATCH_THRESHOLDS.default_typo, 0.80)
        self.assertEqual(IMPACT_THRESHOLDS.high, 0.5)
        self.assertEqual(IMPACT_THRESHOLDS.medium, 0.2)

    def test_score_weights_sum_to_one(self):
        self.assertAlmostEqual(sum(SCORE_WEIGHTS.model_dump().values()), 1.0)
        self.assertEqual(SCORE_WEIGHTS.skill_match, 0.55)
        self.assertEqual(SCORE_CALIBRATION.multiplier, 1.4)

    def test_weights_that_do_not_sum_to_one_are_rejected(self):
        with self.assertRaises(ValidationError):
            ScoreWeights(
                skill_match=0.5,
                required_match=0.5,
                demonstration=0.5,
                structure=0.0,
                metrics=0.0,
            )

    def test_partial_threshold_cannot_exceed_strong(self):
        with self.assertRaises(ValidationError):
            MatchThresholds(strong=0.4, partial=0.5, typo_tolerant=0.7, default_typo=0.8)

    def test_constants_are_frozen(self):
        with self.assertRaises(ValidationError):
            MATCH_THRESHOLDS.strong = 0.1


if __name__ == "__main__":
    unittest.main()
