from __future__ import annotations

import re

from .lexicon import ACHIEVEMENT_VERBS, PAST_TENSE_VERBS, PRESENT_TENSE_VERBS

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
BULLET_LINE_RE = re.compile(
    rf"^[ \t]*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))[ \t]+(.+)$",
    re.MULTILINE,
)

SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "summary": re.compile(r"(summary|profile|objective|about|overview)", re.IGNORECASE),
    "skills": re.compile(r"(skills|technical skills|competencies|expertise)", re.IGNORECASE),
    "experience": re.compile(
        r"(experience|work history|employment|professional experience)", re.IGNORECASE
    ),
    "projects": re.compile(r"(projects|project experience|key projects)", re.IGNORECASE),
    "education": re.compile(r"(education|academic|qualifications|degree)", re.IGNORECASE),
    "certifications": re.compile(r"(certifications|certificates|certified)", re.IGNORECASE),
    "achievements": re.compile(r"(achievements|awards|honors|recognition)", re.IGNORECASE),
}

METRIC_RE = re.compile(
    r"(\d+%|\$\d+|\d+\s*(years?|months?|days?|hours?|users?|customers?|%|times?|x))",
    re.IGNORECASE,
)

TABLE_RE = re.compile(r"\|\s*\||\+-+\+")
IMAGE_RE = re.compile(
    r"\[image\]|\[icon\]|[\U0001F300-\U0001FAFF]|[☀-➿]|⭐",
    re.IGNORECASE,
)
PAGE_NUMBER_RE = re.compile(r"page \d+ of \d+|confidential|page \d+", re.IGNORECASE)
COLUMN_GAP_RE = re.compile(r"\s{5,}")

DATE_FORMAT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\d{4}-\d{2}-\d{2}"),
    re.compile(r"\d{2}/\d{2}/\d{4}"),
    re.compile(r"\d{2}-\d{2}-\d{4}"),
    re.compile(r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\w*\s+\d{4}", re.IGNORECASE),
)

EXPERIENCE_HEADER_RE = re.compile(r"experience|work history", re.IGNORECASE)
PAST_TENSE_RE = re.compile(rf"\b(?:{'|'.join(PAST_TENSE_VERBS)})\b", re.IGNORECASE)
PRESENT_TENSE_RE = re.compile(rf"\b(?:{'|'.join(PRESENT_TENSE_VERBS)})s?\b", re.IGNORECASE)

ACHIEVEMENT_VERB_PATTERNS: dict[str, re.Pattern[str]] = {
    verb: re.compile(rf"\b{verb}\w*\b", re.IGNORECASE) for verb in ACHIEVEMENT_VERBS
}

YEARS_OF_EXPERIENCE_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE
)

KEYWORD_CLEAN_RE = re.compile(r"[^\w\s-]")
TITLE_CASE_PHRASE_RE = re.compile(r"\b[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*\b")
ACRONYM_RE = re.compile(r"\b[A-Z]{2,}\b")
SKILL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(java|python|javascript|typescript|react|node|sql|aws|docker|kubernetes|git|agile|scrum)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(machine learning|data science|cloud computing|web development|software engineering)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(api|rest|graphql|microservices|ci/cd|devops)\b", re.IGNORECASE),
)
SUMMARY_SECTION_RE = re.compile(r"(summary|profile|objective)", re.IGNORECASE)

# Throwaway answers: echo words, filler, keyboard noise.
RANDOM_ANSWER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^(asdf|qwerty|test|random|hello|hi|yes|no|ok|okay|lorem|ipsum|dummy|sample|example)[\s.,!]*$",
        re.IGNORECASE,
    ),
    re.compile(r"^(\w+)(?:[\s.,!]+\1)+[\s.,!]*$", re.IGNORECASE),
    re.compile(r"^[a-z]\s+[a-z]\s+[a-z]\s+[a-z]\b", re.IGNORECASE),
    re.compile(r"^(lorem|ipsum|dolor|sit|amet)\b", re.IGNORECASE),
    re.compile(r"^[0-9\s]+$"),
    re.compile(r"^[^a-z0-9]+$", re.IGNORECASE),
    re.compile(r"([a-z0-9])\1{7,}", re.IGNORECASE),
    re.compile(r"[^a-z0-9\s]{8,}", re.IGNORECASE),
    re.compile(r"^(.)\1{3,}\s+(.)\2{3,}", re.IGNORECASE),
)

ANSWER_TOKEN_SPLIT_RE = re.compile(r"[\s.,;:!?]+")
NON_LETTER_RE = re.compile(r"[^a-z]", re.IGNORECASE)
# "y" counts as a vowel in the three gibberish regexes below, so "python" or
# "system" are not flagged. Words with a y-free run of 3+ consonants ("rhythm") still are.
VOWEL_RE = re.compile(r"[aeiouy]", re.IGNORECASE)
CONSONANT_CLUSTER_RE = re.compile(r"[bcdfghjklmnpqrstvwxz]{3,}", re.IGNORECASE)
CONSONANT_SANDWICH_RE = re.compile(
    r"^[bcdfghjklmnpqrstvwxz]{3,}[aeiouy][bcdfghjklmnpqrstvwxz]{3,}$", re.IGNORECASE
)
QUESTION_KEYWORD_STRIP = ".,;:!?\"'()[]{}"

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PUNCTUATION_RE = re.compile(r"[.!?]")
CAPITAL_RE = re.compile(r"[A-Z]")
