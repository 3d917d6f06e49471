from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .base import CamelModel

QuestionType = Literal["behavioral", "technical", "system-design", "general"]
CoachMode = Literal["friendly", "strict", "faang", "hr"]
InvalidReason = Literal["too_short", "random_pattern", "gibberish", "off_topic"]
EvaluationSource = Literal["evaluator", "fallback", "classifier"]

SUBSCORE_FIELDS: tuple[str, ...] = ("clarity", "structure", "relevance", "confidence")


class QualityVerdict(CamelModel):
    status: Literal["valid", "invalid"]
    reason: InvalidReason | None = None
    score_cap: float | None = Field(default=None, ge=0.0, le=10.0)
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status == "valid"

    @classmethod
    def valid(cls) -> "QualityVerdict":
        return cls(status="valid")

    @classmethod
    def invalid(cls, reason: InvalidReason, message: str, score_cap: float = 0.0) -> "QualityVerdict":
        return cls(status="invalid", reason=reason, score_cap=score_cap, message=message)


class EvaluationScore(CamelModel):
    overall: float = Field(ge=0.0, le=10.0)
    clarity: float = Field(ge=0.0, le=10.0)
    structure: float = Field(ge=0.0, le=10.0)
    relevance: float = Field(ge=0.0, le=10.0)
    confidence: float = Field(ge=0.0, le=10.0)

    @classmethod
    def uniform(cls, value: float) -> "EvaluationScore":
        return cls(overall=value, clarity=value, structure=value, relevance=value, confidence=value)


class AnswerEvaluation(CamelModel):
    scores: EvaluationScore
    feedback: str
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    verdict: QualityVerdict
    source: EvaluationSource
    is_invalid: bool = False


def _coerce_score(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class EvaluatorReply(BaseModel):
    """Inbound evaluator payload; the one place legacy key spellings are accepted."""

    model_config = ConfigDict(extra="ignore")

    overall: float | None = Field(default=None, validation_alias=AliasChoices("overall", "score", "overallScore", "overall_score"))
    clarity: float | None = Field(default=None, validation_alias=AliasChoices("clarity", "clarityScore", "clarity_score"))
    structure: float | None = Field(default=None, validation_alias=AliasChoices("structure", "structureScore", "structure_score"))
    relevance: float | None = Field(default=None, validation_alias=AliasChoices("relevance", "relevanceScore", "relevance_score"))
    confidence: float | None = Field(default=None, validation_alias=AliasChoices("confidence", "confidenceScore", "confidence_score"))
    feedback: str = Field(default="", validation_alias=AliasChoices("feedback", "feedbackText", "feedback_text"))
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)

    @field_validator("overall", "clarity", "structure", "relevance", "confidence", mode="before")
    @classmethod
    def _numeric_or_missing(cls, value: Any) -> float | None:
        return _coerce_score(value)

    @field_validator("feedback", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("strengths", "improvements", mode="before")
    @classmethod
    def _text_list(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        return [str(item).strip() for item in value if str(item).strip()]
