from contextlib import asynccontextmanager
import logging

from interview_coach.ai.factory import get_evaluator
from interview_coach.core.config import settings
from interview_coach.core.config.scoring import get_scoring_config
from interview_coach.rules import RULES_VERSION
from interview_coach.services.evaluation_service import AnswerScoringPipeline

logger = logging.getLogger(__name__)


def build_pipeline() -> AnswerScoringPipeline:
    return AnswerScoringPipeline(
        get_evaluator(),
        timeout_s=settings.evaluator_timeout_s,
        concurrency=settings.evaluation_concurrency,
    )


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    app.state.pipeline = build_pipeline()
    logger.info(
        "scoring_engine_ready rules_version=%s scoring_version=%s evaluator=%s",
        RULES_VERSION,
        config.get("version"),
        type(app.state.pipeline.evaluator).__name__ if app.state.pipeline.evaluator else "fallback",
    )
    yield
