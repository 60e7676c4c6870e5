import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.normalize_resume import (  # noqa: E402
    extract_action_verbs,
    find_metrics,
    has_quantifiable_metrics,
    parse_experience_section,
    parse_skills_section,
)
from resume_ats.normalize.utils import (  # noqa: E402
    is_bullet_like,
    normalize_text,
    strip_bullet_prefix,
)


class TextNormalizerTests(unittest.TestCase):
    def test_non_text_input_yields_empty_string(self):
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(123), "")
        self.assertEqual(normalize_text(""), "")

    def test_keeps_technical_punctuation_only(self):
        raw = "Node.js,  C++ & C#!\n(REST)/APIs"
        self.assertEqual(normalize_text(raw), "Node.js C++ C# (REST)/APIs")

    def test_bullet_helpers(self):
        self.assertTrue(is_bullet_like("• Built APIs"))
        self.assertTrue(is_bullet_like("3. Led migration"))
        self.assertFalse(is_bullet_like("Software Engineer"))
        self.assertEqual(strip_bullet_prefix("- Built APIs"), "Built APIs")
        self.assertEqual(strip_bullet_prefix("3. Led migration"), "Led migration")


class ResumeParsingTests(unittest.TestCase):
    def test_experience_bullets_attach_to_latest_title(self):
        text = (
            "Software Engineer | Acme | 2020 - 2023\n"
            "- Built APIs\n"
            "* Reduced latency by 40%\n"
            "Not a bullet line\n"
            "Data Analyst, Beta 2018\n"
            "1. Wrote reports\n"
        )

        entries = parse_experience_section(text)
        self.assertEqual(len(entries), 2)
        self.assertEqual(entries[0].bullets, ["Built APIs", "Reduced latency by 40%"])
        self.assertEqual(entries[1].title_line, "Data Analyst, Beta 2018")
        self.assertEqual(entries[1].bullets, ["Wrote reports"])

    def test_experience_parse_of_empty_text(self):
        self.assertEqual(parse_experience_section(""), [])
        self.assertEqual(parse_experience_section(None), [])

    def test_skills_split_strip_labels_and_dedupe(self):
        text = "Languages: Python, Go; JavaScript | SQL\n• Docker\nPython"
        self.assertEqual(
            parse_skills_section(text),
            ["python", "go", "javascript", "sql", "docker"],
        )

    def test_skills_drop_fragments_by_length(self):
        skills = parse_skills_section("R, " + "x" * 60 + ", Rust")
        self.assertEqual(skills, ["rust"])

    def test_metric_patterns(self):
        self.assertTrue(has_quantifiable_metrics("Improved latency by 40%"))
        self.assertTrue(has_quantifiable_metrics("Saved $1.2M in hosting"))
        self.assertTrue(has_quantifiable_metrics("Served 500 users daily"))
        self.assertTrue(has_quantifiable_metrics("Made builds 3x faster"))
        self.assertTrue(has_quantifiable_metrics("Processed 2 million events"))
        self.assertFalse(has_quantifiable_metrics("Managed the platform team"))
        self.assertFalse(has_quantifiable_metrics(None))
        self.assertIn("40%", find_metrics("Improved latency by 40%"))

    def test_action_verbs_keep_every_occurrence(self):
        text = "Built APIs and led migration. Designed things, built more."
        self.assertEqual(extract_action_verbs(text), ["built", "led", "designed", "built"])


if __name__ == "__main__":
    unittest.main()
