import logging
from typing import Optional

from interview_coach.ai.config import load_ai_config
from interview_coach.ai.providers.openai_provider import OpenAIEvaluator
from interview_coach.ai.types import Evaluator, EvaluatorError
from interview_coach.core.config import settings

logger = logging.getLogger(__name__)


def get_evaluator(timeout_s: Optional[float] = None) -> Optional[Evaluator]:
    """Build the configured evaluator, or None so callers use the fallback scorer."""
    if not settings.evaluator_enabled:
        logger.info("evaluator_disabled reason=config")
        return None

    cfg = load_ai_config()
    if cfg.provider != "openai":
        logger.warning("evaluator_disabled reason=unsupported_provider provider=%s", cfg.provider)
        return None

    try:
        return OpenAIEvaluator(
            model=cfg.model,
            timeout_s=timeout_s if timeout_s is not None else settings.evaluator_timeout_s,
            temperature=cfg.temperature,
            max_output_tokens=cfg.max_output_tokens,
        )
    except EvaluatorError as exc:
        logger.warning("evaluator_disabled reason=%s: %s", exc.code, exc)
        return None
