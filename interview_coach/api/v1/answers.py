from fastapi import APIRouter, Request

from interview_coach.core.config import settings
from interview_coach.core.lifespan import build_pipeline
from interview_coach.core.rate_limit import rate_limit
from interview_coach.schemas.assessment import AssessmentRequest, AssessmentResult
from interview_coach.schemas.evaluation import AnswerEvaluation
from interview_coach.schemas.requests import AnswerEvaluationRequest
from interview_coach.services.assessment_service import complete_assessment
from interview_coach.services.evaluation_service import AnswerScoringPipeline

router = APIRouter()


def _pipeline(request: Request) -> AnswerScoringPipeline:
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        pipeline = build_pipeline()
        request.app.state.pipeline = pipeline
    return pipeline


@router.post("/answers/evaluate", response_model=AnswerEvaluation)
@rate_limit()
async def answers_evaluate(request: Request, payload: AnswerEvaluationRequest):
    return await _pipeline(request).score_answer(
        payload.question_text,
        payload.answer_text,
        question_type=payload.question_type,
        coach_mode=payload.coach_mode,
    )


@router.post("/assessments/complete", response_model=AssessmentResult)
@rate_limit(settings.batch_rate_limit)
async def assessments_complete(request: Request, payload: AssessmentRequest):
    return await complete_assessment(payload, _pipeline(request))
