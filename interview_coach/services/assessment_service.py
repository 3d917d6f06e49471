from __future__ import annotations

import logging
from collections import OrderedDict

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.core.rounding import round_half_up
from interview_coach.schemas.assessment import (
    AssessmentRecommendation,
    AssessmentRequest,
    AssessmentResult,
    AssessmentSummary,
    ScoredAnswer,
    SkillHighlight,
    SkillScore,
)
from interview_coach.schemas.requests import AnswerEvaluationRequest
from interview_coach.services.evaluation_service import AnswerScoringPipeline

logger = logging.getLogger(__name__)


def calculate_skill_scores(scored: list[ScoredAnswer]) -> list[SkillScore]:
    """Aggregate overall answer scores per domain, in first-seen order."""
    by_domain: OrderedDict[str, list[float]] = OrderedDict()
    for item in scored:
        by_domain.setdefault(item.domain or "General", []).append(item.evaluation.scores.overall)

    results: list[SkillScore] = []
    for domain, values in by_domain.items():
        average = sum(values) / len(values)
        results.append(
            SkillScore(
                skill=domain,
                value=max(0, min(100, round_half_up(average * 10))),
                average_score=average,
                max_score=max(values),
                min_score=min(values),
                count=len(values),
            )
        )
    return results


def generate_recommendations(
    skill_scores: list[SkillScore], improvement_area: SkillScore | None
) -> list[AssessmentRecommendation]:
    recommendations: list[AssessmentRecommendation] = []
    weak_skill = int(get_scoring_value("assessment.weak_skill_value", 60))
    weak_average = int(get_scoring_value("assessment.weak_average_value", 70))

    if improvement_area is not None and improvement_area.value < weak_skill:
        recommendations.append(
            AssessmentRecommendation(
                priority="high",
                skill=improvement_area.skill,
                action=(
                    f"Focus on improving your {improvement_area.skill} skills. "
                    "Consider taking courses or practicing more in this area."
                ),
            )
        )

    if skill_scores:
        average = sum(score.value for score in skill_scores) / len(skill_scores)
        if average < weak_average:
            recommendations.append(
                AssessmentRecommendation(
                    priority="medium",
                    skill="Overall",
                    action=(
                        "Continue practicing across all skill domains. "
                        "Regular practice will help improve your overall performance."
                    ),
                )
            )

    recommendations.append(
        AssessmentRecommendation(
            priority="low",
            skill="Practice",
            action="Take more assessments to track your progress over time and identify areas of improvement.",
        )
    )
    return recommendations


def build_summary(role: str, skill_scores: list[SkillScore], total: int, answered: int) -> AssessmentSummary:
    if not skill_scores:
        return AssessmentSummary(
            role=role,
            overall_score=0,
            completion_rate=0,
            recommendations=generate_recommendations([], None),
        )

    top = skill_scores[0]
    weakest = skill_scores[0]
    for score in skill_scores[1:]:
        if score.value > top.value:
            top = score
        if score.value < weakest.value:
            weakest = score

    average = sum(score.value for score in skill_scores) / len(skill_scores)
    return AssessmentSummary(
        role=role,
        overall_score=round_half_up(average),
        completion_rate=round_half_up(answered / total * 100) if total else 0,
        top_skill=SkillHighlight(name=top.skill, score=top.value),
        improvement_area=SkillHighlight(name=weakest.skill, score=weakest.value),
        skill_breakdown=skill_scores,
        recommendations=generate_recommendations(skill_scores, weakest),
    )


async def complete_assessment(
    request: AssessmentRequest,
    pipeline: AnswerScoringPipeline,
    *,
    concurrency: int | None = None,
) -> AssessmentResult:
    answers = request.answers
    evaluations = await pipeline.score_batch(
        [
            AnswerEvaluationRequest(
                question_text=answer.question_text,
                answer_text=answer.answer,
                question_type=answer.question_type,
            )
            for answer in answers
        ],
        concurrency=concurrency,
    )
    scored = [
        ScoredAnswer(question_id=answer.question_id, domain=answer.domain, evaluation=evaluation)
        for answer, evaluation in zip(answers, evaluations)
    ]

    answered = sum(1 for answer in answers if answer.answer.strip())
    summary = build_summary(request.role, calculate_skill_scores(scored), len(answers), answered)
    logger.info(
        "assessment_completed assessment_id=%s answers=%s overall=%s",
        request.assessment_id,
        len(answers),
        summary.overall_score,
    )
    return AssessmentResult(assessment_id=request.assessment_id, summary=summary, evaluations=scored)
