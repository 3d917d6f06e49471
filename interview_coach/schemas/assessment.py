from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CamelModel
from .evaluation import AnswerEvaluation, QuestionType

Priority = Literal["high", "medium", "low"]


class AssessmentAnswer(CamelModel):
    question_id: str = Field(min_length=1, max_length=200)
    question_text: str = Field(default="Skill assessment question", max_length=5000)
    answer: str = Field(default="", max_length=20000)
    domain: str = Field(default="General", max_length=120)
    question_type: QuestionType = "technical"


class AssessmentRequest(CamelModel):
    assessment_id: str | None = Field(default=None, max_length=200)
    role: str = Field(min_length=1, max_length=200)
    answers: list[AssessmentAnswer] = Field(default_factory=list, max_length=100)


class ScoredAnswer(CamelModel):
    question_id: str
    domain: str
    evaluation: AnswerEvaluation


class SkillScore(CamelModel):
    skill: str
    value: int = Field(ge=0, le=100)
    average_score: float = Field(ge=0.0, le=10.0)
    max_score: float = Field(ge=0.0, le=10.0)
    min_score: float = Field(ge=0.0, le=10.0)
    count: int = Field(ge=1)


class SkillHighlight(CamelModel):
    name: str
    score: int = Field(ge=0, le=100)


class AssessmentRecommendation(CamelModel):
    priority: Priority
    skill: str
    action: str


class AssessmentSummary(CamelModel):
    role: str
    overall_score: int = Field(ge=0, le=100)
    completion_rate: int = Field(ge=0, le=100)
    top_skill: SkillHighlight | None = None
    improvement_area: SkillHighlight | None = None
    skill_breakdown: list[SkillScore] = Field(default_factory=list)
    recommendations: list[AssessmentRecommendation] = Field(default_factory=list)


class AssessmentResult(CamelModel):
    assessment_id: str | None = None
    summary: AssessmentSummary
    evaluations: list[ScoredAnswer] = Field(default_factory=list)
