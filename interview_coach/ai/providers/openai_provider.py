from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

from openai import AsyncOpenAI

from interview_coach.ai.prompts import build_evaluation_prompt, persona_for
from interview_coach.ai.types import EvaluatorError, EvaluatorOutput

logger = logging.getLogger(__name__)


class OpenAIEvaluator:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.3,
        max_output_tokens: int = 800,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise EvaluatorError("OPENAI_API_KEY is missing", code="evaluator_not_configured")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    @property
    def model(self) -> str:
        return self._model

    async def evaluate(self, question_text: str, answer_text: str, coach_mode: str) -> EvaluatorOutput:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": persona_for(coach_mode)},
                {"role": "user", "content": build_evaluation_prompt(question_text, answer_text, coach_mode)},
            ],
            temperature=self._temperature,
            max_tokens=self._max_output_tokens,
            response_format={"type": "json_object"},
        )
        content = (response.choices[0].message.content or "").strip()
        if not content:
            raise EvaluatorError("evaluator returned an empty reply", code="evaluator_empty_reply")

        try:
            payload: Any = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("openai_evaluator_non_json model=%s chars=%s", self._model, len(content))
            return content
        if not isinstance(payload, dict):
            return content
        return payload
