from __future__ import annotations

import logging
from typing import Any

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.core.rounding import round_half_up
from interview_coach.features.keyword_index import extract_keywords, extract_skills, skills_overlap
from interview_coach.rules import patterns
from interview_coach.schemas.reports import JdMatchReport, KeywordStats

logger = logging.getLogger(__name__)


def _jd_value(key: str, default: Any) -> Any:
    return get_scoring_value(f"jd_match.{key}", default)


def _normalized(text: str) -> str:
    return " ".join(text.lower().split())


def partition_keywords(jd_keywords: list[str], resume_text: str) -> tuple[list[str], list[str]]:
    haystack = _normalized(resume_text)
    matched: list[str] = []
    missing: list[str] = []
    for keyword in jd_keywords:
        (matched if keyword in haystack else missing).append(keyword)
    return matched, missing


def skill_overlap_ratio(resume_text: str, jd_text: str) -> float:
    jd_skills = extract_skills(jd_text)
    if not jd_skills:
        return float(_jd_value("skill_overlap_neutral", 0.5))
    resume_skills = extract_skills(resume_text)
    covered = [
        skill for skill in jd_skills if any(skills_overlap(skill, own) for own in resume_skills)
    ]
    return len(covered) / len(jd_skills)


def missing_skills(resume_text: str, jd_text: str) -> list[str]:
    resume_skills = extract_skills(resume_text)
    return [
        skill
        for skill in extract_skills(jd_text)
        if not any(skills_overlap(skill, own) for own in resume_skills)
    ]


def years_of_experience(text: str) -> int | None:
    match = patterns.YEARS_OF_EXPERIENCE_RE.search(text or "")
    if match is None:
        return None
    return int(match.group(1))


def experience_alignment(resume_text: str, jd_text: str) -> float:
    jd_years = years_of_experience(jd_text)
    if not jd_years:
        return float(_jd_value("experience.jd_unknown", 0.5))
    resume_years = years_of_experience(resume_text)
    if not resume_years:
        return float(_jd_value("experience.resume_unknown", 0.3))

    diff = abs(resume_years - jd_years)
    bands = _jd_value("experience.bands", [[0, 1.0], [1, 0.8], [2, 0.6], [3, 0.4]])
    for max_diff, value in bands:
        if diff <= max_diff:
            return float(value)
    return float(_jd_value("experience.beyond", 0.2))


def match_score(total_keywords: int, matched_count: int, resume_text: str, jd_text: str) -> int:
    if total_keywords == 0:
        return int(_jd_value("neutral_score", 50))
    weights = _jd_value("weights", {}) or {}
    score = (
        matched_count / total_keywords * float(weights.get("keywords", 60))
        + skill_overlap_ratio(resume_text, jd_text) * float(weights.get("skills", 20))
        + experience_alignment(resume_text, jd_text) * float(weights.get("experience", 20))
    )
    return max(0, min(100, round_half_up(score)))


def recommended_edits(missing_keywords: list[str], resume_text: str, jd_text: str) -> list[str]:
    top_n = int(_jd_value("recommendation_top_n", 5))
    edits: list[str] = []
    if missing_keywords:
        edits.append(
            "Add these keywords from the job description: " + ", ".join(missing_keywords[:top_n])
        )
    skills = missing_skills(resume_text, jd_text)
    if skills:
        edits.append("Consider adding these technical skills: " + ", ".join(skills[:top_n]))

    jd_lower = jd_text.lower()
    resume_lower = resume_text.lower()
    if "lead" in jd_lower and "lead" not in resume_lower:
        edits.append("Highlight leadership experience if applicable")
    if "team" in jd_lower and "team" not in resume_lower:
        edits.append("Emphasize teamwork and collaboration examples")
    return edits


def _jd_requirements(jd_lower: str) -> set[str]:
    requirements: set[str] = set()
    if "lead" in jd_lower or "manage" in jd_lower:
        requirements.add("leadership")
    if "team" in jd_lower or "collaborat" in jd_lower:
        requirements.add("teamwork")
    return requirements


def _base_summary(resume_text: str) -> str:
    match = patterns.SUMMARY_SECTION_RE.search(resume_text)
    if match is not None:
        window = resume_text[match.start(): match.end() + int(_jd_value("summary_section_chars", 300))]
        newline = window.find("\n")
        body = window[newline + 1:] if newline >= 0 else window
        if body.strip():
            return body
    return resume_text[: int(_jd_value("summary_fallback_chars", 200))].replace("\n", " ")


def tailored_summary(
    resume_text: str,
    jd_text: str,
    matched_keywords: list[str],
    matched_skills: list[str],
) -> str:
    """Assemble a summary from the resume's own words plus matched terms.

    Pure string assembly: nothing is generated that the resume does not
    already support.
    """
    top_n = int(_jd_value("recommendation_top_n", 5))
    summary = " ".join(_base_summary(resume_text).split())

    clauses: list[str] = []
    if matched_keywords:
        clauses.append(f"Proficient in {', '.join(matched_keywords[:top_n])}.")
    if matched_skills:
        clauses.append(f"Hands-on with {', '.join(matched_skills[:top_n])}.")

    requirements = _jd_requirements(jd_text.lower())
    resume_lower = resume_text.lower()
    if "leadership" in requirements and "lead" in resume_lower:
        clauses.append("Demonstrated leadership experience.")
    if "teamwork" in requirements and "team" in resume_lower:
        clauses.append("Strong collaborator with proven teamwork skills.")

    tailored = " ".join(part for part in [summary, *clauses] if part)
    return tailored[: int(_jd_value("summary_max_chars", 500))]


def score_jd_match(resume_text: str, jd_text: str) -> JdMatchReport:
    """Score how well a resume covers a job description (0-100)."""
    resume = resume_text if isinstance(resume_text, str) else ""
    jd = jd_text if isinstance(jd_text, str) else ""

    jd_keywords = extract_keywords(jd, limit=int(_jd_value("keyword_limit", 50)))
    matched, missing = partition_keywords(jd_keywords, resume)
    score = match_score(len(jd_keywords), len(matched), resume, jd)

    resume_skills = extract_skills(resume)
    matched_skills = [
        skill for skill in extract_skills(jd) if any(skills_overlap(skill, own) for own in resume_skills)
    ]
    report_limit = int(_jd_value("report_limit", 20))
    total = len(jd_keywords)

    logger.debug(
        "jd_match_scored score=%s jd_keywords=%s matched=%s",
        score,
        total,
        len(matched),
    )

    return JdMatchReport(
        match_score=score,
        matched_keywords=matched[:report_limit],
        missing_keywords=missing[:report_limit],
        recommended_edits=recommended_edits(missing, resume, jd),
        tailored_summary=tailored_summary(resume, jd, matched, matched_skills),
        keyword_stats=KeywordStats(
            total_jd_keywords=total,
            matched_count=len(matched),
            missing_count=len(missing),
            match_percentage=round_half_up(len(matched) / total * 100) if total else 0,
        ),
    )
