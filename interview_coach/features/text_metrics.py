from __future__ import annotations

from pydantic import BaseModel, Field

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.rules import lexicon, patterns
from interview_coach.schemas.reports import SectionMap

FORMATTING_RISK_MESSAGES: dict[str, str] = {
    "hasTables": "Tables detected - may cause parsing issues",
    "hasImages": "Images/icons detected - ATS cannot read these",
    "hasPageNumbers": "Page numbers detected - may indicate header/footer issues",
    "hasColumns": "Column-like formatting detected - may not parse correctly",
}


class TextMetrics(BaseModel):
    word_count: int = 0
    char_count: int = 0
    bullets: list[str] = Field(default_factory=list)
    sections: SectionMap = Field(default_factory=SectionMap)
    formatting_risk: int = Field(default=100, ge=0, le=100)
    formatting_risks: dict[str, str] = Field(default_factory=dict)


def count_words(text: str) -> int:
    return len((text or "").split())


def extract_bullets(text: str) -> list[str]:
    return [match.group(1).strip() for match in patterns.BULLET_LINE_RE.finditer(text or "")]


def detect_sections(text: str) -> SectionMap:
    content = text or ""
    found = {
        name: bool(patterns.SECTION_PATTERNS[name].search(content))
        for name in lexicon.SECTION_NAMES
    }
    return SectionMap(**found)


def _column_like(text: str) -> bool:
    lines = text.split("\n")
    column_lines = sum(1 for line in lines if patterns.COLUMN_GAP_RE.search(line))
    ratio = float(get_scoring_value("ats.formatting.column_line_ratio", 0.3))
    return column_lines > len(lines) * ratio


def assess_formatting(text: str) -> tuple[int, dict[str, str]]:
    """Return the formatting score (100 = clean) and the flagged risks."""
    content = text or ""
    score = 100
    risks: dict[str, str] = {}
    if not content.strip():
        return score, risks

    checks = (
        ("hasTables", patterns.TABLE_RE, "ats.formatting.table_penalty", 20),
        ("hasImages", patterns.IMAGE_RE, "ats.formatting.image_penalty", 15),
        ("hasPageNumbers", patterns.PAGE_NUMBER_RE, "ats.formatting.page_number_penalty", 10),
    )
    for risk_id, pattern, penalty_key, default_penalty in checks:
        if pattern.search(content):
            score -= int(get_scoring_value(penalty_key, default_penalty))
            risks[risk_id] = FORMATTING_RISK_MESSAGES[risk_id]

    if _column_like(content):
        score -= int(get_scoring_value("ats.formatting.column_penalty", 15))
        risks["hasColumns"] = FORMATTING_RISK_MESSAGES["hasColumns"]

    return max(0, score), risks


def build_text_metrics(text: str) -> TextMetrics:
    content = text or ""
    formatting_risk, formatting_risks = assess_formatting(content)
    return TextMetrics(
        word_count=count_words(content),
        char_count=len(content),
        bullets=extract_bullets(content),
        sections=detect_sections(content),
        formatting_risk=formatting_risk,
        formatting_risks=formatting_risks,
    )
