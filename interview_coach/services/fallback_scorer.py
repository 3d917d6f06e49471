from __future__ import annotations

import logging
from dataclasses import dataclass, field

from interview_coach.core.config.scoring import get_scoring_value
from interview_coach.features.answer_quality import classify_answer
from interview_coach.rules import lexicon, patterns
from interview_coach.schemas.evaluation import (
    AnswerEvaluation,
    EvaluationScore,
    QualityVerdict,
    QuestionType,
)

logger = logging.getLogger(__name__)

_QUESTION_TYPE_ADVICE: dict[str, str] = {
    "behavioral": "For behavioral questions, focus on specific situations, your actions, and measurable outcomes.",
    "technical": "For technical questions, explain your approach, time/space complexity considerations, and trade-offs.",
    "system-design": "For system design, discuss scalability, reliability, and key architectural decisions.",
}


def invalid_evaluation(verdict: QualityVerdict) -> AnswerEvaluation:
    """Zero-score evaluation for an answer the classifier rejected."""
    cap = verdict.score_cap if verdict.score_cap is not None else 0.0
    return AnswerEvaluation(
        scores=EvaluationScore.uniform(cap),
        feedback=lexicon.INVALID_ANSWER_FEEDBACK,
        strengths=[],
        improvements=list(lexicon.INVALID_ANSWER_IMPROVEMENTS),
        verdict=verdict,
        source="classifier",
        is_invalid=True,
    )


def _clamp(value: float, low: float = 0.0, high: float = 10.0) -> float:
    return max(low, min(high, value))


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(needle in text for needle in needles)


@dataclass
class AnswerSignals:
    char_count: int
    word_count: int
    sentence_count: int
    action_verb_count: int
    punctuated: bool
    capitalized: bool
    star_components: dict[str, bool] = field(default_factory=dict)

    @property
    def star_count(self) -> int:
        return sum(1 for present in self.star_components.values() if present)


def collect_signals(answer_text: str) -> AnswerSignals:
    text = answer_text.strip()
    lowered = text.lower()
    sentences = [part for part in patterns.SENTENCE_SPLIT_RE.split(text) if part.strip()]
    return AnswerSignals(
        char_count=len(text),
        word_count=len(text.split()),
        sentence_count=len(sentences),
        action_verb_count=sum(1 for verb in lexicon.ANSWER_ACTION_VERBS if verb in lowered),
        punctuated=bool(patterns.PUNCTUATION_RE.search(text)),
        capitalized=bool(patterns.CAPITAL_RE.search(text)),
        star_components={
            component: _contains_any(lowered, keywords)
            for component, keywords in lexicon.STAR_KEYWORDS.items()
        },
    )


class FallbackHeuristicScorer:
    """Additive rule-based scorer used when no external evaluator answers.

    Starts from a base score and adds or subtracts fixed bonuses for length,
    sentence count, STAR coverage (behavioral), technical vocabulary
    (technical and system-design), examples, metrics, action verbs,
    problem-solving language and basic punctuation. Identical input always
    yields identical output.
    """

    def __init__(self, *, base_score: float | None = None, sub_score_ceiling: float | None = None):
        self.base_score = float(
            base_score if base_score is not None else get_scoring_value("fallback.base", 4.0)
        )
        self.sub_score_ceiling = float(
            sub_score_ceiling
            if sub_score_ceiling is not None
            else get_scoring_value("fallback.sub_score_ceiling", 8.0)
        )

    def evaluate(
        self,
        question_text: str,
        answer_text: str,
        question_type: QuestionType = "behavioral",
        *,
        verdict: QualityVerdict | None = None,
    ) -> AnswerEvaluation:
        if verdict is None:
            verdict = classify_answer(answer_text, question_text)
        if not verdict.is_valid:
            return invalid_evaluation(verdict)

        signals = collect_signals(answer_text or "")
        lowered = (answer_text or "").strip().lower()
        score = self.base_score
        strengths: list[str] = []
        improvements: list[str] = []

        score += self._length_points(signals, strengths, improvements)
        score += self._structure_points(signals, strengths, improvements)
        if question_type == "behavioral":
            score += self._star_points(signals, strengths, improvements)
        if question_type in ("technical", "system-design"):
            score += self._technical_points(lowered, strengths, improvements)
        score += self._content_points(lowered, signals, question_type, strengths, improvements)

        if signals.punctuated and signals.capitalized:
            score += 0.5
            strengths.append("Clear writing with proper punctuation")
        else:
            improvements.append("Improve grammar and punctuation for better clarity")

        score = _clamp(round(score, 1))
        if not strengths:
            strengths.append("Clear communication")
        if not improvements:
            improvements.append("Continue practicing to refine your answers")

        return AnswerEvaluation(
            scores=self.derive_scores(score, signals),
            feedback=self.feedback_text(score, signals, question_type),
            strengths=strengths,
            improvements=improvements,
            verdict=verdict,
            source="fallback",
        )

    def derive_scores(self, score: float, signals: AnswerSignals) -> EvaluationScore:
        ceiling = self.sub_score_ceiling
        detailed_chars = int(get_scoring_value("fallback.length.detailed_chars", 200))

        clarity = min(ceiling, score + 1) if signals.char_count > detailed_chars and signals.punctuated else score
        structure = min(ceiling, score + 0.5) if signals.sentence_count > 5 else score - 0.5
        relevance = min(ceiling, score + 0.5) if signals.word_count > 50 else score - 1
        confidence = min(ceiling, score + 0.5) if signals.action_verb_count >= 3 else score

        return EvaluationScore(
            overall=score,
            clarity=_clamp(clarity),
            structure=_clamp(structure),
            relevance=_clamp(relevance),
            confidence=_clamp(confidence),
        )

    def _length_points(self, signals: AnswerSignals, strengths: list[str], improvements: list[str]) -> float:
        length = signals.char_count
        if length > int(get_scoring_value("fallback.length.comprehensive_chars", 300)):
            strengths.append("Comprehensive and detailed answer")
            return 2.0
        if length > int(get_scoring_value("fallback.length.detailed_chars", 200)):
            strengths.append("Good level of detail")
            return 1.5
        if length > int(get_scoring_value("fallback.length.adequate_chars", 100)):
            strengths.append("Adequate length")
            return 0.5
        if length < int(get_scoring_value("fallback.length.brief_chars", 50)):
            improvements.append("Answer is too brief. Aim for at least 100-200 words with specific examples")
            return -1.0
        improvements.append("Consider expanding your answer with more detail and context")
        return 0.0

    def _structure_points(self, signals: AnswerSignals, strengths: list[str], improvements: list[str]) -> float:
        if signals.sentence_count > 5:
            strengths.append("Well-structured with multiple points")
            return 0.5
        if signals.sentence_count < 3:
            improvements.append("Break down your answer into clearer sections or bullet points")
            return -0.5
        return 0.0

    def _star_points(self, signals: AnswerSignals, strengths: list[str], improvements: list[str]) -> float:
        star_count = signals.star_count
        if star_count == 4:
            strengths.append("Excellent STAR method structure - covers Situation, Task, Action, and Result")
            return 2.0
        if star_count == 3:
            strengths.append("Good STAR structure - covers most components")
            improvements.append("Ensure you clearly address all STAR components (Situation, Task, Action, Result)")
            return 1.0
        if star_count == 2:
            improvements.append(
                "Structure your answer using the STAR method: Situation (context), Task (goal), "
                "Action (what you did), Result (outcome)"
            )
            return 0.5
        improvements.append("Use the STAR method: Describe the Situation, Task, Action you took, and Result achieved")
        return -0.5

    def _technical_points(self, lowered: str, strengths: list[str], improvements: list[str]) -> float:
        points = 0.0
        if _contains_any(lowered, lexicon.TECHNICAL_TERMS):
            points += 1.0
            strengths.append("Uses appropriate technical terminology")
        else:
            improvements.append("Include relevant technical terms and concepts")
        if _contains_any(lowered, lexicon.IMPLEMENTATION_TERMS):
            points += 0.5
            strengths.append("Mentions implementation details")
        return points

    def _content_points(
        self,
        lowered: str,
        signals: AnswerSignals,
        question_type: str,
        strengths: list[str],
        improvements: list[str],
    ) -> float:
        points = 0.0
        if _contains_any(lowered, lexicon.EXAMPLE_MARKERS):
            points += 1.0
            strengths.append("Includes concrete examples and specifics")
        else:
            improvements.append("Add specific examples or scenarios to illustrate your points")

        if _contains_any(lowered, lexicon.METRIC_MARKERS):
            points += 0.5
            strengths.append("Includes quantifiable results or metrics")
        elif question_type == "behavioral":
            improvements.append("Include specific numbers or metrics to quantify your impact")

        if signals.action_verb_count >= 3:
            points += 0.5
            strengths.append("Demonstrates proactive approach with action-oriented language")

        if _contains_any(lowered, lexicon.PROBLEM_SOLVING_MARKERS):
            points += 0.5
            strengths.append("Addresses challenges and problem-solving")
        return points

    def feedback_text(self, score: float, signals: AnswerSignals, question_type: str) -> str:
        behavioral = question_type == "behavioral"
        parts: list[str] = []
        if score >= 8:
            parts.append(
                "Excellent answer! Your response demonstrates strong understanding and clear communication."
            )
            if behavioral:
                parts.append("You've effectively used the STAR method and provided concrete examples.")
            parts.append("Continue building on these strengths.")
        elif score >= 6:
            parts.append("Good answer with solid fundamentals.")
            if signals.char_count < 200:
                parts.append("Consider adding more detail and specific examples to strengthen your response.")
            if behavioral and not signals.star_components.get("result"):
                parts.append("Make sure to clearly articulate the results and impact of your actions.")
            parts.append("With a bit more refinement, this could be an outstanding answer.")
        else:
            parts.append("Your answer shows understanding but needs more development.")
            if signals.char_count < 100:
                parts.append("Significantly expand your answer with more detail.")
            if behavioral:
                parts.append(
                    "Structure your response using the STAR method: describe the Situation, Task, Action, and Result."
                )
            parts.append("Include specific examples and quantify your impact where possible.")

        advice = _QUESTION_TYPE_ADVICE.get(question_type)
        if advice:
            parts.append(advice)
        return " ".join(parts)
