import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.services.ats_service import score_ats  # noqa: E402
from interview_coach.services.jd_match_service import score_jd_match  # noqa: E402
from interview_coach.services.resume_service import readiness, scan_resume  # noqa: E402

FIXTURES = PROJECT_ROOT / "tests" / "fixtures"
STRONG_RESUME = (FIXTURES / "resumes" / "strong_resume.txt").read_text(encoding="utf-8")
BACKEND_JD = (FIXTURES / "jobs" / "backend_engineer.txt").read_text(encoding="utf-8")
WEAK_RESUME = "Sam Lee\nI write code and fix bugs for a small shop in town.\nI like Python and long walks."


class ResumeScanTests(unittest.TestCase):
    def test_readiness_bands(self):
        self.assertEqual(readiness(80), "ready")
        self.assertEqual(readiness(79.5), "almost-ready")
        self.assertEqual(readiness(60), "almost-ready")
        self.assertEqual(readiness(59.9), "not-ready")

    def test_strong_resume_without_job_description(self):
        report = scan_resume(STRONG_RESUME)
        self.assertEqual(report.ready_status, "ready")
        self.assertIsNone(report.match_score)
        self.assertEqual(report.missing_keywords, [])
        self.assertTrue(report.ready_message.startswith("Your resume has good ATS compatibility"))
        self.assertEqual(report.ats_score, score_ats(STRONG_RESUME).ats_score)

    def test_blank_job_description_is_ignored(self):
        self.assertIsNone(scan_resume(STRONG_RESUME, "   \n").match_score)

    def test_weak_resume_is_not_ready(self):
        report = scan_resume(WEAK_RESUME)
        self.assertEqual(report.ready_status, "not-ready")
        self.assertEqual(
            report.ready_message,
            "Your resume needs significant improvements. Focus on the critical fixes below.",
        )
        self.assertEqual(report.improvements[0], report.critical_fixes[0])
        self.assertLessEqual(len(report.improvements), 15)

    def test_job_description_adds_match_data(self):
        report = scan_resume(STRONG_RESUME, BACKEND_JD)
        jd_report = score_jd_match(STRONG_RESUME, BACKEND_JD)
        self.assertEqual(report.match_score, jd_report.match_score)
        self.assertIn("azure", report.missing_keywords)
        self.assertEqual(report.ready_status, readiness((report.ats_score + report.match_score) / 2))
        self.assertLessEqual(len(report.improvements), 15)

    def test_record_uses_camel_case_keys(self):
        record = scan_resume(STRONG_RESUME, BACKEND_JD).to_record()
        for key in ("atsScore", "criticalFixes", "detectedSections", "matchScore", "missingKeywords", "readyStatus"):
            self.assertIn(key, record)
        self.assertIn("wordCount", record["metrics"])


if __name__ == "__main__":
    unittest.main()
