from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from interview_coach.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-route limit; falls back to ``RATE_LIMIT``. A no-op when limiting is disabled."""
    if not settings.rate_limit_enabled:
        def passthrough(func):
            return func

        return passthrough
    return limiter.limit(limit or settings.rate_limit)
