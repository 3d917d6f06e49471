from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Sequence

from pydantic import ValidationError

from interview_coach.ai.types import Evaluator
from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.features.answer_quality import classify_answer
from interview_coach.schemas.evaluation import (
    SUBSCORE_FIELDS,
    AnswerEvaluation,
    CoachMode,
    EvaluationScore,
    EvaluatorReply,
    QualityVerdict,
    QuestionType,
)
from interview_coach.schemas.requests import AnswerEvaluationRequest
from interview_coach.services.fallback_scorer import FallbackHeuristicScorer, invalid_evaluation

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _clamp(value: float) -> float:
    return max(0.0, min(10.0, float(value)))


def _relevance_caps() -> list[tuple[float, float]]:
    raw = get_scoring_value("evaluation.relevance_caps", [[2, 2], [4, 4]]) or []
    return sorted((float(threshold), float(ceiling)) for threshold, ceiling in raw)


def apply_relevance_cap(scores: EvaluationScore) -> EvaluationScore:
    """Bound overall by relevance: relevance <= 2 caps at 2, relevance <= 4 caps at 4.

    Idempotent; applying it to already capped scores returns them unchanged.
    """
    for threshold, ceiling in _relevance_caps():
        if scores.relevance <= threshold:
            if scores.overall > ceiling:
                return scores.model_copy(update={"overall": ceiling})
            return scores
    return scores


def _malformed_evaluation(raw_text: str, verdict: QualityVerdict) -> AnswerEvaluation:
    neutral = float(get_scoring_value("evaluation.malformed_score", 5.0))
    return AnswerEvaluation(
        scores=EvaluationScore.uniform(neutral),
        feedback=raw_text.strip(),
        verdict=verdict,
        source="evaluator",
    )


def _resolve_scores(reply: EvaluatorReply) -> EvaluationScore:
    present = [getattr(reply, name) for name in SUBSCORE_FIELDS if getattr(reply, name) is not None]
    if reply.overall is not None:
        overall = reply.overall
    elif present:
        overall = sum(present) / len(present)
    else:
        overall = float(get_scoring_value("evaluation.malformed_score", 5.0))
    overall = _clamp(overall)

    # A subscore the evaluator omitted inherits overall, so a missing relevance never caps.
    subscores = {
        name: _clamp(getattr(reply, name)) if getattr(reply, name) is not None else overall
        for name in SUBSCORE_FIELDS
    }
    return EvaluationScore(overall=overall, **subscores)


def parse_evaluator_reply(raw: Any, verdict: QualityVerdict | None = None) -> AnswerEvaluation:
    """Map an evaluator reply onto the canonical evaluation record.

    Accepts a mapping or text containing a JSON object. Anything that cannot
    be read as an object becomes a neutral score with the raw text as
    feedback. Never raises.
    """
    verdict = verdict or QualityVerdict.valid()
    payload: Any = raw
    if isinstance(raw, (bytes, bytearray)):
        payload = raw.decode("utf-8", errors="replace")
    if isinstance(payload, str):
        match = _JSON_OBJECT_RE.search(payload)
        if match is None:
            return _malformed_evaluation(payload, verdict)
        try:
            payload = json.loads(match.group(0))
        except json.JSONDecodeError:
            logger.warning("evaluator_reply_unparseable chars=%s", len(raw))
            return _malformed_evaluation(str(raw), verdict)

    if not isinstance(payload, Mapping):
        return _malformed_evaluation("" if payload is None else str(payload), verdict)

    try:
        reply = EvaluatorReply.model_validate(dict(payload))
    except ValidationError as exc:
        logger.warning("evaluator_reply_invalid errors=%s", exc.error_count())
        return _malformed_evaluation(json.dumps(dict(payload), default=str), verdict)

    return AnswerEvaluation(
        scores=_resolve_scores(reply),
        feedback=reply.feedback,
        strengths=reply.strengths,
        improvements=reply.improvements,
        verdict=verdict,
        source="evaluator",
    )


class AnswerScoringPipeline:
    """Score interview answers: classify, evaluate (or fall back), cap.

    The evaluator is optional. When it is missing, raises, or exceeds
    ``timeout_s`` the deterministic fallback scorer handles that one answer.
    Relevance caps apply to every source.
    """

    def __init__(
        self,
        evaluator: Evaluator | None = None,
        *,
        timeout_s: float | None = None,
        concurrency: int | None = None,
        fallback: FallbackHeuristicScorer | None = None,
    ):
        self.evaluator = evaluator
        self.timeout_s = float(
            timeout_s if timeout_s is not None else get_scoring_value("evaluation.timeout_s", 30)
        )
        self.concurrency = max(
            1, int(concurrency if concurrency is not None else get_scoring_value("evaluation.concurrency", 5))
        )
        self.fallback = fallback or FallbackHeuristicScorer()

    async def score_answer(
        self,
        question_text: str,
        answer_text: str,
        *,
        question_type: QuestionType = "behavioral",
        coach_mode: CoachMode = "friendly",
    ) -> AnswerEvaluation:
        question = question_text if isinstance(question_text, str) else ""
        answer = answer_text if isinstance(answer_text, str) else ""

        verdict = classify_answer(answer, question)
        if not verdict.is_valid:
            logger.info("answer_rejected reason=%s", verdict.reason)
            return invalid_evaluation(verdict)

        evaluation = await self._ask_evaluator(question, answer, coach_mode, verdict)
        if evaluation is None:
            evaluation = self.fallback.evaluate(question, answer, question_type, verdict=verdict)

        return evaluation.model_copy(update={"scores": apply_relevance_cap(evaluation.scores)})

    async def _ask_evaluator(
        self,
        question_text: str,
        answer_text: str,
        coach_mode: CoachMode,
        verdict: QualityVerdict,
    ) -> AnswerEvaluation | None:
        if self.evaluator is None:
            return None
        try:
            raw = await asyncio.wait_for(
                self.evaluator.evaluate(question_text, answer_text, coach_mode),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError:
            logger.warning("evaluator_timeout timeout_s=%s", self.timeout_s)
            return None
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            logger.warning("evaluator_failed error=%s: %s", type(exc).__name__, exc)
            return None
        return parse_evaluator_reply(raw, verdict)

    async def score_batch(
        self,
        items: Sequence[AnswerEvaluationRequest],
        *,
        concurrency: int | None = None,
    ) -> list[AnswerEvaluation]:
        """Score many answers with at most ``concurrency`` evaluator calls in flight.

        Results keep input order; a failure on one item only affects that item.
        """
        semaphore = asyncio.Semaphore(max(1, concurrency or self.concurrency))

        async def _score(item: AnswerEvaluationRequest) -> AnswerEvaluation:
            async with semaphore:
                return await self.score_answer(
                    item.question_text,
                    item.answer_text,
                    question_type=item.question_type,
                    coach_mode=item.coach_mode,
                )

        return list(await asyncio.gather(*(_score(item) for item in items)))
