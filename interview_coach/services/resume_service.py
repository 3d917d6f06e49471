from __future__ import annotations

import logging

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.schemas.reports import ReadyStatus, ResumeScanReport
from interview_coach.services.ats_service import score_ats
from interview_coach.services.jd_match_service import score_jd_match

logger = logging.getLogger(__name__)

_READY_MESSAGES: dict[bool, dict[ReadyStatus, str]] = {
    True: {
        "ready": "Your resume is ready! It has strong ATS compatibility and matches well with the job description.",
        "almost-ready": "Your resume is almost ready. Consider making a few improvements for better results.",
        "not-ready": "Your resume needs improvements. Focus on the critical fixes and missing keywords below.",
    },
    False: {
        "ready": "Your resume has good ATS compatibility. For better results, add a job description to get keyword matching.",
        "almost-ready": "Your resume is decent but could be improved. Address the suggestions below.",
        "not-ready": "Your resume needs significant improvements. Focus on the critical fixes below.",
    },
}


def readiness(score: float) -> ReadyStatus:
    if score >= float(get_scoring_value("readiness.ready_score", 80)):
        return "ready"
    if score >= float(get_scoring_value("readiness.almost_ready_score", 60)):
        return "almost-ready"
    return "not-ready"


def scan_resume(resume_text: str, jd_text: str | None = None) -> ResumeScanReport:
    """ATS scan, merged with job-description matching when a JD is supplied."""
    ats = score_ats(resume_text)
    improvements = [*ats.critical_fixes, *ats.suggestions]
    missing_keywords: list[str] = []
    match_score: int | None = None

    has_jd = bool(jd_text and jd_text.strip())
    if has_jd:
        jd_report = score_jd_match(resume_text, jd_text or "")
        match_score = jd_report.match_score
        missing_keywords = jd_report.missing_keywords
        improvements.extend(jd_report.recommended_edits)
        combined = (ats.ats_score + jd_report.match_score) / 2
    else:
        combined = float(ats.ats_score)

    status = readiness(combined)
    logger.info(
        "resume_scanned ats_score=%s match_score=%s ready_status=%s",
        ats.ats_score,
        match_score,
        status,
    )
    return ResumeScanReport(
        **ats.model_dump(),
        match_score=match_score,
        missing_keywords=missing_keywords[: int(get_scoring_value("readiness.missing_keywords_limit", 20))],
        improvements=improvements[: int(get_scoring_value("readiness.improvements_limit", 15))],
        ready_status=status,
        ready_message=_READY_MESSAGES[has_jd][status],
    )
