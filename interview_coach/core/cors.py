from __future__ import annotations

from typing import Any

from interview_coach.core.config import settings

# The API only reads JSON bodies; preflight needs OPTIONS.
_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
_ALLOWED_HEADERS = ["Content-Type", "Authorization", "X-Request-ID"]


def cors_options() -> dict[str, Any]:
    """Keyword arguments for ``CORSMiddleware`` built from settings."""
    regex = (settings.cors_allow_origin_regex or "").strip()
    return {
        "allow_origins": list(settings.cors_allowed_origins),
        "allow_origin_regex": regex or None,
        "allow_credentials": False,
        "allow_methods": _ALLOWED_METHODS,
        "allow_headers": _ALLOWED_HEADERS,
        "max_age": 600,
    }
