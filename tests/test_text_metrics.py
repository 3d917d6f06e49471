import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.features.text_metrics import (  # noqa: E402
    assess_formatting,
    build_text_metrics,
    detect_sections,
    extract_bullets,
)


class TextMetricsTests(unittest.TestCase):
    def test_empty_text_yields_zero_counts_and_no_risks(self):
        metrics = build_text_metrics("")
        self.assertEqual(metrics.word_count, 0)
        self.assertEqual(metrics.char_count, 0)
        self.assertEqual(metrics.bullets, [])
        self.assertFalse(any(metrics.sections.model_dump().values()))
        self.assertEqual(metrics.formatting_risk, 100)
        self.assertEqual(metrics.formatting_risks, {})

    def test_counts_words_and_characters(self):
        metrics = build_text_metrics("Built   APIs\nfor payments")
        self.assertEqual(metrics.word_count, 4)
        self.assertEqual(metrics.char_count, len("Built   APIs\nfor payments"))

    def test_bullet_lines_keep_order_and_strip_glyphs(self):
        text = "Experience\n- Built the billing API\n• Led a migration\n1. Shipped search\nplain sentence line"
        self.assertEqual(
            extract_bullets(text),
            ["Built the billing API", "Led a migration", "Shipped search"],
        )

    def test_year_without_punctuation_is_not_a_bullet(self):
        self.assertEqual(extract_bullets("5 years in fintech"), [])

    def test_section_detection_is_case_insensitive_and_anywhere(self):
        sections = detect_sections("PROFESSIONAL SUMMARY\nTechnical Skills\nwork history below\nEDUCATION")
        self.assertTrue(sections.summary)
        self.assertTrue(sections.skills)
        self.assertTrue(sections.experience)
        self.assertTrue(sections.education)
        self.assertFalse(sections.projects)
        self.assertFalse(sections.certifications)
        self.assertFalse(sections.achievements)

    def test_formatting_penalties_accumulate(self):
        text = "Name | Role | | Team\n[icon] contact\nPage 2 of 3"
        score, risks = assess_formatting(text)
        self.assertEqual(score, 100 - 20 - 15 - 10)
        self.assertEqual(set(risks), {"hasTables", "hasImages", "hasPageNumbers"})

    def test_column_like_layout_is_flagged(self):
        text = "Python          Docker\nReact           Kubernetes\nSummary"
        score, risks = assess_formatting(text)
        self.assertEqual(score, 85)
        self.assertIn("hasColumns", risks)

    def test_clean_text_keeps_full_formatting_score(self):
        score, risks = assess_formatting("Summary\nSkills: Python, SQL\nExperience\n- Built services")
        self.assertEqual(score, 100)
        self.assertEqual(risks, {})


if __name__ == "__main__":
    unittest.main()
