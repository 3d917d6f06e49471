"""Word tables used by the scoring engine.

Every table is a plain immutable constant so it can be inspected and tested on
its own. Bump ``RULES_VERSION`` in ``interview_coach.rules`` when any of them
changes, since scores are expected to be reproducible per version.
"""

from __future__ import annotations

SECTION_NAMES: tuple[str, ...] = (
    "summary",
    "skills",
    "experience",
    "projects",
    "education",
    "certifications",
    "achievements",
)

# Sections counted towards the ATS section score.
REQUIRED_SECTIONS: tuple[str, ...] = ("summary", "skills", "experience", "education")

ACHIEVEMENT_VERBS: tuple[str, ...] = (
    "achieved", "improved", "increased", "decreased", "managed", "led",
    "developed", "created", "implemented", "designed", "optimized",
    "collaborated", "delivered", "executed", "analyzed", "resolved",
)

BULLET_ACTION_VERBS: tuple[str, ...] = ACHIEVEMENT_VERBS + (
    "built", "launched", "reduced", "enhanced", "streamlined",
)

PAST_TENSE_VERBS: tuple[str, ...] = (
    "worked", "developed", "managed", "led", "created", "built", "achieved",
)

PRESENT_TENSE_VERBS: tuple[str, ...] = (
    "work", "develop", "manage", "lead", "create", "build", "achieve",
)

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "should", "could", "may", "might", "must", "can", "this", "that",
    "these", "those", "i", "you", "he", "she", "it", "we", "they",
    "what", "which", "who", "whom", "whose", "where", "when", "why",
    "how", "all", "each", "every", "both", "few", "more", "most",
    "other", "some", "such", "no", "nor", "not", "only", "own", "same",
    "so", "than", "too", "very", "just", "about", "into", "through",
    "during", "including", "against", "among", "throughout", "despite",
})

SKILL_DICTIONARY: tuple[str, ...] = (
    "java", "python", "javascript", "typescript", "react", "angular", "vue",
    "node", "express", "sql", "postgresql", "mysql", "mongodb", "redis",
    "aws", "azure", "gcp", "docker", "kubernetes", "git", "jenkins",
    "agile", "scrum", "machine learning", "data science", "ai", "nlp",
    "rest", "graphql", "microservices", "ci/cd", "devops", "terraform",
    "ansible", "linux", "unix", "html", "css", "sass", "less",
)

# Roughly the most frequent English words; membership marks a token as real.
COMMON_WORDS: frozenset[str] = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for", "not", "on", "with",
    "he", "as", "you", "do", "at", "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what", "so", "up", "out", "if",
    "about", "who", "get", "which", "go", "me", "when", "make", "can", "like", "time", "no", "just", "him",
    "know", "take", "people", "into", "year", "your", "good", "some", "could", "them", "see", "other", "than",
    "then", "now", "look", "only", "come", "its", "over", "think", "also", "back", "after", "use", "two",
    "how", "our", "work", "first", "well", "way", "even", "new", "want", "because", "any", "these", "give",
    "day", "most", "us", "is", "are", "was", "were", "been", "has", "had", "did", "does", "doing", "done",
})

THROWAWAY_PHRASES: tuple[str, ...] = (
    "asdf", "qwerty", "test test", "random random", "hello hello",
    "lorem ipsum", "dummy text", "sample answer", "just testing",
)

STAR_KEYWORDS: dict[str, tuple[str, ...]] = {
    "situation": ("situation", "context", "background", "when", "where"),
    "task": ("task", "goal", "objective", "challenge", "problem"),
    "action": ("action", "did", "implemented", "created", "developed", "worked"),
    "result": ("result", "outcome", "achieved", "learned", "impact", "improved"),
}

TECHNICAL_TERMS: tuple[str, ...] = (
    "algorithm", "complexity", "optimize", "efficient", "data structure", "design", "scale", "system",
)

IMPLEMENTATION_TERMS: tuple[str, ...] = ("code", "implement", "function")

EXAMPLE_MARKERS: tuple[str, ...] = ("example", "for instance", "specifically", "such as", "like when")

METRIC_MARKERS: tuple[str, ...] = ("percent", "%", "number", "increased", "decreased", "improved")

ANSWER_ACTION_VERBS: tuple[str, ...] = ("achieved", "implemented", "created", "developed", "solved", "improved")

PROBLEM_SOLVING_MARKERS: tuple[str, ...] = ("problem", "challenge", "issue", "obstacle", "difficulty", "overcame")

INVALID_ANSWER_FEEDBACK = (
    "This answer appears to be random text or does not address the question. "
    "Please provide a relevant, detailed response that directly answers the question."
)

INVALID_ANSWER_IMPROVEMENTS: tuple[str, ...] = (
    "Provide a detailed answer that directly addresses the question",
    "Include specific examples and explanations",
    "Ensure your answer is relevant to the topic asked",
)
