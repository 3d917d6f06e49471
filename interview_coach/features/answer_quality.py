from __future__ import annotations

import logging
from typing import Any

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.rules import lexicon, patterns
from interview_coach.schemas.evaluation import InvalidReason, QualityVerdict

logger = logging.getLogger(__name__)

REASON_MESSAGES: dict[InvalidReason, str] = {
    "too_short": "Answer is too short or empty",
    "random_pattern": "Answer appears to be random text",
    "gibberish": "Answer appears to be random text or gibberish",
    "off_topic": "Answer does not address the question",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _score_cap() -> float:
    return float(get_scoring_value("answer_quality.score_cap", 0.0))


def _invalid(reason: InvalidReason) -> QualityVerdict:
    return QualityVerdict.invalid(reason, REASON_MESSAGES[reason], score_cap=_score_cap())


def matches_random_pattern(text: str) -> bool:
    return any(pattern.search(text) for pattern in patterns.RANDOM_ANSWER_PATTERNS)


def contains_throwaway_phrase(text: str) -> bool:
    normalized = " ".join(text.lower().split())
    max_chars = int(get_scoring_value("answer_quality.random_phrase_max_chars", 100))
    for phrase in lexicon.THROWAWAY_PHRASES:
        if phrase not in normalized:
            continue
        if len(normalized) < max_chars or normalized.count(phrase) >= 2:
            return True
    return False


def _is_gibberish_token(word: str) -> bool:
    if len(word) < 4:
        return False
    vowel_count = len(patterns.VOWEL_RE.findall(word))
    if len(word) > 5 and vowel_count == 0:
        return True
    if len(word) > 4 and patterns.CONSONANT_CLUSTER_RE.search(word):
        return True
    return len(word) > 6 and bool(patterns.CONSONANT_SANDWICH_RE.match(word))


def count_word_kinds(text: str) -> tuple[int, int]:
    """Return (real_word_count, gibberish_word_count) for the text."""
    real_words = 0
    gibberish_words = 0
    for token in patterns.ANSWER_TOKEN_SPLIT_RE.split(text.lower()):
        word = patterns.NON_LETTER_RE.sub("", token)
        if not word:
            continue
        if word in lexicon.COMMON_WORDS:
            real_words += 1
        elif _is_gibberish_token(word):
            gibberish_words += 1
    return real_words, gibberish_words


def looks_like_gibberish(text: str) -> bool:
    real_words, gibberish_words = count_word_kinds(text)
    if real_words == 0 and gibberish_words > 0:
        return True

    total = real_words + gibberish_words
    ratio = float(get_scoring_value("answer_quality.gibberish_ratio", 0.6))
    if total > 0 and gibberish_words / total > ratio:
        return True

    short_chars = int(get_scoring_value("answer_quality.short_gibberish_chars", 50))
    if len(text) < short_chars and gibberish_words >= 2 and real_words == 0:
        return True

    words = text.split()
    min_words = int(get_scoring_value("answer_quality.nonsense_min_words", 5))
    avg_len = float(get_scoring_value("answer_quality.nonsense_avg_word_len", 2.5))
    if len(words) > min_words and sum(len(word) for word in words) / len(words) < avg_len:
        return True
    return False


def question_keywords(question: str, limit: int | None = None) -> list[str]:
    min_len = int(get_scoring_value("answer_quality.question_keyword_min_len", 5))
    if limit is None:
        limit = int(get_scoring_value("answer_quality.question_keyword_limit", 8))
    keywords: list[str] = []
    for raw in question.lower().split():
        word = raw.strip(patterns.QUESTION_KEYWORD_STRIP)
        if len(word) >= min_len:
            keywords.append(word)
    return keywords[:limit]


def is_off_topic(text: str, question: str, max_chars: int) -> bool:
    if len(text) >= max_chars:
        return False
    keywords = question_keywords(question)
    if not keywords:
        return False
    lowered = text.lower()
    return not any(keyword in lowered for keyword in keywords)


def classify_answer(
    answer: Any,
    question: Any = "",
    *,
    off_topic_max_chars: int | None = None,
) -> QualityVerdict:
    """Classify an interview answer as valid or as one of the invalid kinds.

    Checks run in a fixed order and the first hit wins: too short, throwaway
    pattern, gibberish, off topic. A too-short answer that is itself a
    throwaway pattern ("asdf") reports ``random_pattern`` so the caller can
    show the more specific reason. Never raises.
    """
    text = _as_text(answer).strip()
    question_text = _as_text(question).strip()

    min_chars = int(get_scoring_value("answer_quality.min_chars", 10))
    if len(text) < min_chars:
        if text and matches_random_pattern(text):
            return _invalid("random_pattern")
        return _invalid("too_short")

    if matches_random_pattern(text) or contains_throwaway_phrase(text):
        return _invalid("random_pattern")

    if looks_like_gibberish(text):
        return _invalid("gibberish")

    if off_topic_max_chars is None:
        off_topic_max_chars = int(get_scoring_value("answer_quality.off_topic_max_chars", 100))
    if question_text and is_off_topic(text, question_text, off_topic_max_chars):
        return _invalid("off_topic")

    return QualityVerdict.valid()
