import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.sections import (  # noqa: E402
    analyze_section_order,
    apply_structure_fallback,
    detect_section_header,
    detect_sections,
)

RESUME = (
    "Jane Doe\n"
    "SUMMARY\n"
    "Backend engineer focused on reliable services.\n"
    "Technical Skills:\n"
    "Python, AWS, Docker\n"
    "EXPERIENCE\n"
    "Software Engineer | Acme Corp | 2020 - 2023\n"
    "- Built services using Python\n"
)


class SectionDetectorTests(unittest.TestCase):
    def test_header_detection(self):
        self.assertEqual(detect_section_header("Technical Skills"), "skills")
        self.assertEqual(detect_section_header("Skills: Python, Go"), "skills")
        self.assertEqual(detect_section_header("EXPERIENCE"), "experience")
        self.assertEqual(detect_section_header("Professional Summary"), "summary")
        self.assertIsNone(detect_section_header("My experience includes building things."))
        self.assertIsNone(detect_section_header("Python, AWS, Docker"))

    def test_sections_in_order_of_appearance(self):
        sections = detect_sections(RESUME)
        self.assertEqual(list(sections), ["header", "summary", "skills", "experience"])
        self.assertEqual([section.ordinal_position for section in sections.values()], [0, 1, 2, 3])
        self.assertEqual(sections["skills"].content, "Python, AWS, Docker")
        self.assertIn("- Built services using Python", sections["experience"].content)

    def test_header_without_content_is_not_recorded(self):
        sections = detect_sections("SKILLS\nEXPERIENCE\nEngineer 2020\n")
        self.assertEqual(list(sections), ["experience"])

    def test_empty_text_has_no_sections(self):
        self.assertEqual(detect_sections(""), {})
        self.assertEqual(detect_sections(None), {})

    def test_fallback_for_unstructured_text(self):
        text = "Python developer with AWS experience building APIs."
        sections, applied = apply_structure_fallback(detect_sections(text), text)

        self.assertTrue(applied)
        self.assertEqual(list(sections), ["header", "experience", "skills"])
        self.assertEqual(sections["skills"].content, text)
        self.assertEqual(sections["experience"].content, text)

    def test_fallback_not_applied_to_structured_resume(self):
        detected = detect_sections(RESUME)
        sections, applied = apply_structure_fallback(detected, RESUME)
        self.assertFalse(applied)
        self.assertEqual(sections, detected)

    def test_section_order_feedback(self):
        feedback = analyze_section_order(["header", "experience", "education", "skills"])
        self.assertEqual([item.type for item in feedback], ["section_order", "missing_section"])
        self.assertEqual([item.severity for item in feedback], ["medium", "low"])

        self.assertEqual(analyze_section_order(["summary", "skills", "experience"]), [])
        self.assertEqual(analyze_section_order(["summary", "experience", "skills"]), [])


if __name__ == "__main__":
    unittest.main()
