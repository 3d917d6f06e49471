from __future__ import annotations

import logging
import math

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.core.rounding import round_half_up
from interview_coach.features.text_metrics import TextMetrics, build_text_metrics
from interview_coach.rules import lexicon, patterns
from interview_coach.schemas.reports import AtsReport, AtsSubscores, DocumentMetrics, SectionMap

logger = logging.getLogger(__name__)

SECTION_RISK_MESSAGES: dict[str, str] = {
    "summary": "No summary/profile section found",
    "skills": "No skills section found",
    "experience": "No experience section found",
}
LENGTH_RISK_MESSAGES: dict[str, str] = {
    "tooLong": "Resume exceeds 2 pages - may be too long for ATS",
    "tooShort": "Resume is very short - may lack detail",
}

_DEFAULT_WEIGHTS: dict[str, float] = {
    "sections": 0.25,
    "keywords": 0.20,
    "bullets": 0.20,
    "length": 0.15,
    "formatting": 0.10,
    "consistency": 0.10,
}


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _ats_int(key: str, default: int) -> int:
    return int(get_scoring_value(f"ats.{key}", default))


def _ats_float(key: str, default: float) -> float:
    return float(get_scoring_value(f"ats.{key}", default))


def section_score(sections: SectionMap) -> float:
    present = sum(1 for name in lexicon.REQUIRED_SECTIONS if getattr(sections, name))
    return present / len(lexicon.REQUIRED_SECTIONS) * 100


def keyword_score(text: str, word_count: int) -> float:
    found = sum(1 for pattern in patterns.ACHIEVEMENT_VERB_PATTERNS.values() if pattern.search(text))
    score = found / len(lexicon.ACHIEVEMENT_VERBS) * _ats_float("keywords.base_points", 50)

    density = found / word_count * 100 if word_count else 0.0
    density_min = _ats_float("keywords.density_min", 2.0)
    density_max = _ats_float("keywords.density_max", 5.0)
    if density_min <= density <= density_max:
        score += _ats_float("keywords.good_density_bonus", 50)
    elif 0 < density < density_min:
        score += _ats_float("keywords.low_density_bonus", 30)
    return _clamp(score)


def _has_action_verb(bullet: str) -> bool:
    lowered = bullet.lower()
    return any(verb in lowered for verb in lexicon.BULLET_ACTION_VERBS)


def bullet_score(bullets: list[str]) -> float:
    if not bullets:
        return _ats_float("bullets.no_bullets_score", 30)

    total = len(bullets)
    action_ratio = sum(1 for bullet in bullets if _has_action_verb(bullet)) / total
    metric_ratio = sum(1 for bullet in bullets if patterns.METRIC_RE.search(bullet)) / total
    count_points = _ats_float("bullets.count_points", 20)
    count_bonus = min(count_points, total / _ats_float("bullets.target_count", 10) * count_points)

    score = (
        _ats_float("bullets.action_points", 40) * action_ratio
        + _ats_float("bullets.metric_points", 40) * metric_ratio
        + count_bonus
    )
    return _clamp(score)


def length_score(word_count: int) -> float:
    ideal_min = _ats_int("length.ideal_min", 400)
    ideal_max = _ats_int("length.ideal_max", 800)
    short_min = _ats_int("length.short_min", 300)
    long_max = _ats_int("length.long_max", 1200)

    if ideal_min <= word_count <= ideal_max:
        return _ats_float("length.ideal_score", 100)
    if short_min <= word_count < ideal_min:
        return _ats_float("length.short_score", 80)
    if ideal_max < word_count <= long_max:
        return _ats_float("length.long_score", 70)
    if word_count > long_max:
        return _ats_float("length.too_long_score", 40)
    return _ats_float("length.too_short_score", 50)


def _mixed_tense(text: str) -> bool:
    header = patterns.EXPERIENCE_HEADER_RE.search(text)
    if header is None:
        return False
    window = text[header.start(): header.start() + _ats_int("consistency.experience_window_chars", 500)]
    past_count = len(patterns.PAST_TENSE_RE.findall(window))
    present_count = len(patterns.PRESENT_TENSE_RE.findall(window))
    return past_count > 0 and present_count > past_count


def consistency_score(text: str) -> float:
    score = 100.0
    formats_seen = sum(1 for pattern in patterns.DATE_FORMAT_PATTERNS if pattern.search(text))
    if formats_seen > 1:
        score -= _ats_float("consistency.date_format_penalty", 15)
    if _mixed_tense(text):
        score -= _ats_float("consistency.tense_penalty", 10)
    return _clamp(score)


def identify_risks(metrics: TextMetrics) -> dict[str, str]:
    risks: dict[str, str] = {}
    for name, message in SECTION_RISK_MESSAGES.items():
        if not getattr(metrics.sections, name):
            risks[f"missing{name.title()}"] = message
    risks.update(metrics.formatting_risks)

    if metrics.word_count > _ats_int("length.long_max", 1200):
        risks["tooLong"] = LENGTH_RISK_MESSAGES["tooLong"]
    elif metrics.word_count < _ats_int("length.short_min", 300):
        risks["tooShort"] = LENGTH_RISK_MESSAGES["tooShort"]
    return risks


def _strengths(metrics: TextMetrics, has_metrics: bool, ats_score: int) -> list[str]:
    strengths: list[str] = []
    if metrics.sections.summary:
        strengths.append("Has a professional summary section")
    if metrics.sections.skills:
        strengths.append("Includes a dedicated skills section")
    if metrics.sections.experience:
        strengths.append("Contains detailed experience section")
    bullet_count = len(metrics.bullets)
    if bullet_count >= _ats_int("feedback.bullet_strength_count", 8):
        strengths.append(f"Well-structured with {bullet_count} bullet points")
    if has_metrics:
        strengths.append("Includes quantifiable metrics and achievements")
    if ats_score >= _ats_int("feedback.strong_score", 80):
        strengths.append("Overall strong ATS compatibility")
    return strengths


def _critical_fixes(metrics: TextMetrics, risks: dict[str, str], has_metrics: bool) -> list[str]:
    fixes: list[str] = []
    if not metrics.sections.summary:
        fixes.append("Add a professional summary section at the top")
    if not metrics.sections.skills:
        fixes.append("Create a dedicated skills section listing key technologies")
    if "hasTables" in risks:
        fixes.append("Remove tables - convert to plain text format")
    if "hasImages" in risks:
        fixes.append("Remove images and icons - use text instead")
    if len(metrics.bullets) < _ats_int("feedback.bullet_fix_count", 5):
        fixes.append("Add more bullet points to describe achievements (aim for 8-12)")
    if not has_metrics:
        fixes.append("Add quantifiable metrics (percentages, numbers, timeframes) to achievements")
    return fixes


def _suggestions(metrics: TextMetrics, bullets: float) -> list[str]:
    suggestions: list[str] = []
    if bullets < _ats_float("feedback.weak_bullet_score", 70):
        suggestions.append("Start bullet points with strong action verbs (achieved, improved, developed)")
        suggestions.append('Include specific metrics: "Increased revenue by 25%" instead of "Increased revenue"')
    if metrics.sections.experience and not metrics.sections.projects:
        suggestions.append("Consider adding a projects section to highlight key work")
    if not metrics.sections.certifications:
        suggestions.append("Add certifications section if you have relevant credentials")
    if metrics.word_count > _ats_int("feedback.condense_word_count", 800):
        suggestions.append("Consider condensing to 1-2 pages for better ATS compatibility")
    return suggestions


def _weights() -> dict[str, float]:
    configured = get_scoring_value("ats.weights", {}) or {}
    return {name: float(configured.get(name, default)) for name, default in _DEFAULT_WEIGHTS.items()}


def score_ats(text: str) -> AtsReport:
    """Grade a resume's applicant-tracking-system friendliness.

    The score is a fixed linear blend of six 0-100 subscores (sections,
    achievement keywords, bullets, length, formatting, consistency). Empty or
    blank text yields a low but well-formed report.
    """
    content = text if isinstance(text, str) else ""
    metrics = build_text_metrics(content)

    subscores = AtsSubscores(
        sections=section_score(metrics.sections),
        keywords=keyword_score(content, metrics.word_count),
        bullets=bullet_score(metrics.bullets),
        length=length_score(metrics.word_count),
        formatting=float(metrics.formatting_risk),
        consistency=consistency_score(content),
    )
    weights = _weights()
    blended = sum(getattr(subscores, name) * weight for name, weight in weights.items())
    ats_score = int(_clamp(round_half_up(blended)))

    has_metrics = bool(patterns.METRIC_RE.search(content))
    risks = identify_risks(metrics)
    words_per_page = max(1, _ats_int("words_per_page", 500))

    logger.debug(
        "ats_scored score=%s words=%s bullets=%s risks=%s",
        ats_score,
        metrics.word_count,
        len(metrics.bullets),
        ",".join(sorted(risks)),
    )

    return AtsReport(
        ats_score=ats_score,
        strengths=_strengths(metrics, has_metrics, ats_score),
        critical_fixes=_critical_fixes(metrics, risks, has_metrics),
        suggestions=_suggestions(metrics, subscores.bullets),
        detected_sections=metrics.sections,
        risks=risks,
        metrics=DocumentMetrics(
            word_count=metrics.word_count,
            char_count=metrics.char_count,
            estimated_pages=math.ceil(metrics.word_count / words_per_page),
        ),
        subscores=subscores,
    )
