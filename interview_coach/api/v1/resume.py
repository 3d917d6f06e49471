from fastapi import APIRouter, Request

from interview_coach.core.rate_limit import rate_limit
from interview_coach.schemas.reports import JdMatchReport, ResumeScanReport
from interview_coach.schemas.requests import AtsScanRequest, JdMatchRequest
from interview_coach.services.jd_match_service import score_jd_match
from interview_coach.services.resume_service import scan_resume

router = APIRouter()


@router.post("/resume/ats-scan", response_model=ResumeScanReport)
@rate_limit()
async def resume_ats_scan(request: Request, payload: AtsScanRequest):
    _ = request
    return scan_resume(payload.resume_text, payload.jd_text)


@router.post("/resume/jd-match", response_model=JdMatchReport)
@rate_limit()
async def resume_jd_match(request: Request, payload: JdMatchRequest):
    _ = request
    return score_jd_match(payload.resume_text, payload.jd_text)
