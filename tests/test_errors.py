import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.config import settings  # noqa: E402
from resume_ats.core.errors import contained, safe_count, safe_search  # noqa: E402
from resume_ats.core.logging_config import clip_for_log, configure_logging  # noqa: E402


def _explode(_value):
    raise RuntimeError("boom")


class ContainedStepTests(unittest.TestCase):
    def test_returns_result_on_success(self):
        self.assertEqual(contained("double", 0, lambda value: value * 2, 21), 42)

    def test_failure_returns_fallback_and_logs(self):
        with self.assertLogs("resume_ats.core.errors", level="WARNING") as captured:
            result = contained("explode", [], _explode, "text")

        self.assertEqual(result, [])
        self.assertIn("step=explode", captured.output[0])


class SafePatternTests(unittest.TestCase):
    def test_count_treats_term_literally(self):
        self.assertEqual(safe_count("c++", "C++ and c++ and C"), 2)
        self.assertEqual(safe_count("", "anything"), 0)

    def test_invalid_pattern_is_no_match(self):
        with self.assertLogs("resume_ats.core.errors", level="WARNING"):
            self.assertFalse(safe_search("(", "text with ( paren"))
        self.assertTrue(safe_search(r"\bgo\b", "we use go daily"))


class LogClippingTests(unittest.TestCase):
    def test_long_text_is_clipped(self):
        text = "x" * (settings.log_message_max_chars + 10)
        clipped = clip_for_log(text)
        self.assertEqual(len(clipped), settings.log_message_max_chars + 3)
        self.assertTrue(clipped.endswith("..."))

    def test_newlines_are_flattened(self):
        self.assertEqual(clip_for_log("a\nb"), "a b")
        self.assertEqual(clip_for_log(None), "")

    def test_configure_logging_accepts_level_names(self):
        configure_logging("WARNING")
        configure_logging()


if __name__ == "__main__":
    unittest.main()
