import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.services.ats_service import (  # noqa: E402
    bullet_score,
    consistency_score,
    keyword_score,
    length_score,
    score_ats,
)

STRONG_RESUME = (PROJECT_ROOT / "tests" / "fixtures" / "resumes" / "strong_resume.txt").read_text(encoding="utf-8")
WEAK_RESUME = "Sam Lee\nI write code and fix bugs for a small shop in town.\nI like Python and long walks."


class AtsScorerTests(unittest.TestCase):
    def test_strong_resume_scores_at_least_eighty(self):
        report = score_ats(STRONG_RESUME)
        self.assertGreaterEqual(report.ats_score, 80)
        self.assertIn("Overall strong ATS compatibility", report.strengths)
        self.assertIn("Includes quantifiable metrics and achievements", report.strengths)
        self.assertEqual(report.critical_fixes, [])
        for name in ("summary", "skills", "experience", "education"):
            self.assertTrue(getattr(report.detected_sections, name), msg=name)
        self.assertEqual(report.subscores.sections, 100.0)
        self.assertFalse(any(key.startswith("missing") for key in report.risks))

    def test_metrics_block(self):
        report = score_ats(STRONG_RESUME)
        words = len(STRONG_RESUME.split())
        self.assertEqual(report.metrics.word_count, words)
        self.assertEqual(report.metrics.char_count, len(STRONG_RESUME))
        self.assertEqual(report.metrics.estimated_pages, math.ceil(words / 500))

    def test_resume_without_required_sections(self):
        report = score_ats(WEAK_RESUME)
        self.assertFalse(any(report.detected_sections.model_dump().values()))
        self.assertIn("Add a professional summary section at the top", report.critical_fixes)
        self.assertIn("Create a dedicated skills section listing key technologies", report.critical_fixes)
        self.assertIn("Add more bullet points to describe achievements (aim for 8-12)", report.critical_fixes)
        self.assertIn("missingSummary", report.risks)
        self.assertIn("missingSkills", report.risks)
        self.assertIn("missingExperience", report.risks)
        self.assertIn("tooShort", report.risks)
        self.assertLess(report.ats_score, 60)

    def test_formatting_risks_surface_in_report(self):
        report = score_ats("Summary\nName | Role | | Team\n[image] logo")
        self.assertIn("hasTables", report.risks)
        self.assertIn("hasImages", report.risks)
        self.assertIn("Remove tables - convert to plain text format", report.critical_fixes)
        self.assertIn("Remove images and icons - use text instead", report.critical_fixes)
        self.assertEqual(report.subscores.formatting, 65.0)

    def test_empty_text_returns_well_formed_report(self):
        report = score_ats("")
        self.assertGreaterEqual(report.ats_score, 0)
        self.assertLessEqual(report.ats_score, 100)
        self.assertEqual(report.metrics.word_count, 0)
        self.assertEqual(report.metrics.estimated_pages, 0)

    def test_score_stays_in_range_for_odd_inputs(self):
        samples = [
            "   ",
            "⭐⭐⭐ 📈 | | | page 1 of 9",
            "achieved improved increased " * 50,
            "- 100% $5 10 users\n" * 200,
            "word " * 1500,
        ]
        for text in samples:
            with self.subTest(text=text[:30]):
                report = score_ats(text)
                self.assertGreaterEqual(report.ats_score, 0)
                self.assertLessEqual(report.ats_score, 100)

    def test_long_resume_is_flagged(self):
        report = score_ats("word " * 1300)
        self.assertIn("tooLong", report.risks)
        self.assertIn("Consider condensing to 1-2 pages for better ATS compatibility", report.suggestions)

    def test_half_point_blend_rounds_up(self):
        # sections 25 + bullets 6 + length 7.5 + formatting 10 + consistency 10
        self.assertEqual(score_ats("Summary Skills Experience Education").ats_score, 59)
        self.assertEqual(score_ats("").ats_score, 34)

    def test_risk_ids_serialize_as_camel_case(self):
        record = score_ats(WEAK_RESUME + "\n[image] logo").to_record()
        self.assertEqual(
            set(record["risks"]),
            {"missingSummary", "missingSkills", "missingExperience", "hasImages", "tooShort"},
        )

    def test_identical_input_gives_identical_report(self):
        self.assertEqual(score_ats(STRONG_RESUME), score_ats(STRONG_RESUME))

    def test_length_bands(self):
        cases = {0: 50, 299: 50, 300: 80, 399: 80, 400: 100, 800: 100, 801: 70, 1200: 70, 1201: 40}
        for words, expected in cases.items():
            with self.subTest(words=words):
                self.assertEqual(length_score(words), expected)

    def test_keyword_score_density_bands(self):
        self.assertEqual(keyword_score("", 0), 0)
        text = "improved " + "word " * 199
        self.assertAlmostEqual(keyword_score(text, 200), 50 / 16 + 30)
        dense = "achieved improved increased " + "word " * 97
        self.assertAlmostEqual(keyword_score(dense, 100), 3 / 16 * 50 + 50)

    def test_bullet_score(self):
        self.assertEqual(bullet_score([]), 30)
        self.assertAlmostEqual(bullet_score(["Increased revenue by 25%"]), 82.0)
        self.assertAlmostEqual(bullet_score(["Answered phones"] * 10), 20.0)

    def test_consistency_penalties(self):
        self.assertEqual(consistency_score("Joined 2020-01-15, left 01/15/2021"), 85)
        mixed = "Experience\nI work on tools, develop services and manage releases. I created one."
        self.assertEqual(consistency_score(mixed), 90)
        self.assertEqual(consistency_score("Experience\nI worked on tools and created services."), 100)


if __name__ == "__main__":
    unittest.main()
