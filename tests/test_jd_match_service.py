import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.core.rounding import round_half_up  # noqa: E402
from interview_coach.services.jd_match_service import (  # noqa: E402
    experience_alignment,
    score_jd_match,
    skill_overlap_ratio,
    tailored_summary,
)

FIXTURES = PROJECT_ROOT / "tests" / "fixtures"
STRONG_RESUME = (FIXTURES / "resumes" / "strong_resume.txt").read_text(encoding="utf-8")
BACKEND_JD = (FIXTURES / "jobs" / "backend_engineer.txt").read_text(encoding="utf-8")


class JdMatchScorerTests(unittest.TestCase):
    def test_empty_job_description_is_neutral(self):
        report = score_jd_match(STRONG_RESUME, "")
        self.assertEqual(report.match_score, 50)
        self.assertEqual(report.keyword_stats.total_jd_keywords, 0)
        self.assertEqual(report.keyword_stats.match_percentage, 0)
        self.assertEqual(report.matched_keywords, [])
        self.assertEqual(report.missing_keywords, [])

    def test_self_match_is_full_score(self):
        report = score_jd_match(STRONG_RESUME, STRONG_RESUME)
        self.assertEqual(report.match_score, 100)
        self.assertEqual(report.missing_keywords, [])
        self.assertEqual(report.keyword_stats.match_percentage, 100)

    def test_resume_against_backend_job(self):
        report = score_jd_match(STRONG_RESUME, BACKEND_JD)
        self.assertGreaterEqual(report.match_score, 0)
        self.assertLessEqual(report.match_score, 100)
        self.assertIn("python", report.matched_keywords)
        self.assertIn("azure", report.missing_keywords)
        self.assertIn("spark", report.missing_keywords)

        stats = report.keyword_stats
        self.assertEqual(stats.matched_count + stats.missing_count, stats.total_jd_keywords)
        self.assertEqual(stats.match_percentage, round_half_up(stats.matched_count / stats.total_jd_keywords * 100))
        self.assertLessEqual(len(report.matched_keywords), 20)
        self.assertLessEqual(len(report.missing_keywords), 20)

    def test_recommended_edits(self):
        edits = score_jd_match(STRONG_RESUME, BACKEND_JD).recommended_edits
        self.assertTrue(edits[0].startswith("Add these keywords from the job description: "))
        skills_edit = next(edit for edit in edits if edit.startswith("Consider adding these technical skills"))
        self.assertIn("azure", skills_edit)
        self.assertIn("machine learning", skills_edit)
        self.assertIn("Highlight leadership experience if applicable", edits)
        self.assertNotIn("Emphasize teamwork and collaboration examples", edits)

    def test_teamwork_prompt_when_resume_never_mentions_team(self):
        edits = score_jd_match("Solo developer shipping Python tools.", "Join our team of Python developers.").recommended_edits
        self.assertIn("Emphasize teamwork and collaboration examples", edits)

    def test_experience_alignment_bands(self):
        jd = "Requires 5 years of experience"
        self.assertEqual(experience_alignment("anything", "no years mentioned"), 0.5)
        self.assertEqual(experience_alignment("no number here", jd), 0.3)
        self.assertEqual(experience_alignment("5 years experience", jd), 1.0)
        self.assertEqual(experience_alignment("6 yrs of exp", jd), 0.8)
        self.assertEqual(experience_alignment("7+ years of experience", jd), 0.6)
        self.assertEqual(experience_alignment("2 years of experience", jd), 0.4)
        self.assertEqual(experience_alignment("12 years of experience", jd), 0.2)

    def test_skill_overlap_ratio(self):
        self.assertEqual(skill_overlap_ratio("python", "no dictionary skills here"), 0.5)
        self.assertEqual(skill_overlap_ratio("python only", "python and docker"), 0.5)
        self.assertEqual(skill_overlap_ratio("python and docker", "python and docker"), 1.0)
        self.assertEqual(skill_overlap_ratio("sql", "postgresql"), 1.0)

    def test_tailored_summary_reuses_resume_summary(self):
        report = score_jd_match(STRONG_RESUME, BACKEND_JD)
        self.assertTrue(report.tailored_summary.startswith("Backend software engineer with 6 years of experience"))
        self.assertIn("Proficient in", report.tailored_summary)
        self.assertLessEqual(len(report.tailored_summary), 500)

    def test_tailored_summary_falls_back_to_opening_text(self):
        resume = "Jamie Fox builds data tools in Python.\n" + "x" * 400
        summary = tailored_summary(resume, "python", ["python"], ["python"])
        self.assertTrue(summary.startswith("Jamie Fox builds data tools in Python."))
        self.assertLessEqual(len(summary), 500)

    def test_score_range_for_odd_inputs(self):
        pairs = [("", ""), ("", BACKEND_JD), ("asdf", "AWS AWS GCP"), ("💥" * 50, "Python " * 300)]
        for resume, jd in pairs:
            with self.subTest(resume=resume[:10], jd=jd[:10]):
                score = score_jd_match(resume, jd).match_score
                self.assertGreaterEqual(score, 0)
                self.assertLessEqual(score, 100)


if __name__ == "__main__":
    unittest.main()
