from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_PACKAGED_PATH = Path(__file__).with_name("scoring.yaml")
_REQUIRED_SECTIONS = ("ats", "jd_match", "answer_quality", "evaluation", "fallback")

_cache: dict[str, Any] | None = None


def scoring_config_path() -> Path:
    """``SCORING_CONFIG_PATH`` when set, else the scoring.yaml shipped with the package."""
    override = (os.getenv("SCORING_CONFIG_PATH") or "").strip()
    return Path(override) if override else _PACKAGED_PATH


def _load(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    missing = [name for name in _REQUIRED_SECTIONS if not isinstance(parsed.get(name), dict)]
    if missing:
        raise RuntimeError(f"Invalid scoring config '{path}': missing sections {', '.join(missing)}.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Weights, bands and thresholds for every scorer, loaded once per process."""
    global _cache
    if _cache is None:
        path = scoring_config_path()
        _cache = _load(path)
        logger.info("scoring_config_loaded path=%s version=%s", path, _cache.get("version"))
    return _cache


def reset_scoring_config() -> None:
    """Drop the cached config so the next lookup reads the file again."""
    global _cache
    _cache = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Nested lookup by dot path, e.g. ``ats.weights.sections``; ``default`` when absent."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
