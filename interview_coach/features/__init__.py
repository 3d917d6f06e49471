from .answer_quality import classify_answer, count_word_kinds, looks_like_gibberish, question_keywords
from .keyword_index import extract_keywords, extract_skills, normalize_phrase, skills_overlap
from .text_metrics import TextMetrics, assess_formatting, build_text_metrics, detect_sections, extract_bullets

__all__ = [
    "TextMetrics",
    "build_text_metrics",
    "assess_formatting",
    "detect_sections",
    "extract_bullets",
    "extract_keywords",
    "extract_skills",
    "normalize_phrase",
    "skills_overlap",
    "classify_answer",
    "count_word_kinds",
    "looks_like_gibberish",
    "question_keywords",
]
