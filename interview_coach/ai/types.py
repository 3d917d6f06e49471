from typing import Any, Mapping, Protocol, Union

from interview_coach.schemas.evaluation import CoachMode

EvaluatorOutput = Union[Mapping[str, Any], str]


class EvaluatorError(RuntimeError):
    def __init__(self, message: str, *, code: str = "evaluator_unavailable"):
        super().__init__(message)
        self.code = code


class Evaluator(Protocol):
    async def evaluate(
        self, question_text: str, answer_text: str, coach_mode: CoachMode
    ) -> EvaluatorOutput: ...
