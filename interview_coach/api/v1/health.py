from fastapi import APIRouter

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.rules import RULES_VERSION

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the scoring engine.")
async def health_check():
    return {
        "status": "healthy",
        "rulesVersion": RULES_VERSION,
        "scoringVersion": get_scoring_value("version"),
    }
