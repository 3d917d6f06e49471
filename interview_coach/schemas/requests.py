from __future__ import annotations

from pydantic import Field

from .base import CamelModel
from .evaluation import CoachMode, QuestionType


class AtsScanRequest(CamelModel):
    resume_text: str = Field(default="", max_length=50000)
    jd_text: str | None = Field(default=None, max_length=50000)


class JdMatchRequest(CamelModel):
    resume_text: str = Field(default="", max_length=50000)
    jd_text: str = Field(default="", max_length=50000)


class AnswerEvaluationRequest(CamelModel):
    question_text: str = Field(default="", max_length=5000)
    answer_text: str = Field(default="", max_length=20000)
    question_type: QuestionType = "behavioral"
    coach_mode: CoachMode = "friendly"
