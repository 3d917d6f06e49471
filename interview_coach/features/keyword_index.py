from __future__ import annotations

import re
from collections import Counter
from functools import lru_cache

from interview_coach.rules import lexicon, patterns


def normalize_phrase(phrase: str) -> str:
    return re.sub(r"\s+", " ", (phrase or "").strip().lower())


def _frequent_words(text: str, min_len: int = 3, min_count: int = 2) -> list[str]:
    cleaned = patterns.KEYWORD_CLEAN_RE.sub(" ", text.lower())
    words = [
        word
        for word in cleaned.split()
        if len(word) >= min_len and word not in lexicon.STOP_WORDS
    ]
    counts = Counter(words)
    return [word for word, count in counts.items() if count >= min_count]


def extract_keywords(text: str, limit: int = 50) -> list[str]:
    """Salient terms of a document, in discovery order.

    Frequent words come first, then Title-Case phrases, acronyms and finally
    hits of the fixed skill patterns. Duplicates keep their first position.
    """
    content = text or ""
    if not content.strip():
        return []

    candidates: list[str] = []
    candidates.extend(_frequent_words(content))
    candidates.extend(match.group(0) for match in patterns.TITLE_CASE_PHRASE_RE.finditer(content))
    candidates.extend(patterns.ACRONYM_RE.findall(content))
    for pattern in patterns.SKILL_PATTERNS:
        candidates.extend(match.group(0) for match in pattern.finditer(content))

    keywords: dict[str, None] = {}
    for candidate in candidates:
        keyword = normalize_phrase(candidate)
        if keyword:
            keywords.setdefault(keyword, None)
    return list(keywords)[:limit]


@lru_cache(maxsize=None)
def _skill_pattern(skill: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![a-z0-9]){re.escape(skill)}(?![a-z0-9])")


def extract_skills(text: str) -> list[str]:
    """Dictionary skills mentioned in the text, in dictionary order."""
    lowered = (text or "").lower()
    if not lowered.strip():
        return []
    return [skill for skill in lexicon.SKILL_DICTIONARY if _skill_pattern(skill).search(lowered)]


def skills_overlap(left: str, right: str) -> bool:
    return left in right or right in left
