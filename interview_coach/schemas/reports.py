from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CamelModel

ReadyStatus = Literal["ready", "almost-ready", "not-ready"]


class SectionMap(CamelModel):
    summary: bool = False
    skills: bool = False
    experience: bool = False
    projects: bool = False
    education: bool = False
    certifications: bool = False
    achievements: bool = False


class DocumentMetrics(CamelModel):
    word_count: int = Field(default=0, ge=0)
    char_count: int = Field(default=0, ge=0)
    estimated_pages: int = Field(default=0, ge=0)


class AtsSubscores(CamelModel):
    sections: float = Field(ge=0.0, le=100.0)
    keywords: float = Field(ge=0.0, le=100.0)
    bullets: float = Field(ge=0.0, le=100.0)
    length: float = Field(ge=0.0, le=100.0)
    formatting: float = Field(ge=0.0, le=100.0)
    consistency: float = Field(ge=0.0, le=100.0)


class AtsReport(CamelModel):
    """ATS result. ``risks`` is keyed by camelCase risk ids such as ``missingSummary`` or ``hasTables``."""

    ats_score: int = Field(ge=0, le=100)
    strengths: list[str] = Field(default_factory=list)
    critical_fixes: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    detected_sections: SectionMap = Field(default_factory=SectionMap)
    risks: dict[str, str] = Field(default_factory=dict)
    metrics: DocumentMetrics = Field(default_factory=DocumentMetrics)
    subscores: AtsSubscores


class KeywordStats(CamelModel):
    total_jd_keywords: int = Field(default=0, ge=0)
    matched_count: int = Field(default=0, ge=0)
    missing_count: int = Field(default=0, ge=0)
    match_percentage: int = Field(default=0, ge=0, le=100)


class JdMatchReport(CamelModel):
    match_score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list, max_length=20)
    missing_keywords: list[str] = Field(default_factory=list, max_length=20)
    recommended_edits: list[str] = Field(default_factory=list)
    tailored_summary: str = Field(default="", max_length=500)
    keyword_stats: KeywordStats = Field(default_factory=KeywordStats)


class ResumeScanReport(AtsReport):
    """ATS report enriched with job-description keywords and a readiness verdict."""

    match_score: int | None = Field(default=None, ge=0, le=100)
    missing_keywords: list[str] = Field(default_factory=list, max_length=20)
    improvements: list[str] = Field(default_factory=list, max_length=15)
    ready_status: ReadyStatus
    ready_message: str
