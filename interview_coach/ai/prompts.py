from __future__ import annotations

COACH_PERSONAS: dict[str, str] = {
    "friendly": "You are a supportive mentor providing encouraging feedback.",
    "strict": "You are a rigorous interviewer providing critical, no-nonsense feedback.",
    "faang": "You are a FAANG-level interviewer expecting excellence and depth.",
    "hr": "You are an HR interviewer focusing on soft skills and cultural fit.",
}

EVALUATION_RULES = """CRITICAL EVALUATION RULES:
1. If the answer is random text, gibberish, completely irrelevant, or does not address the question AT ALL, give an overall score of 0-1.
2. If the answer is very short (less than 20 words) and does not address the question, give an overall score of 0-2.
3. Relevance is CRITICAL: answers that do not relate to the question must receive a relevance score of 0-1.
4. Only give scores above 5 if the answer meaningfully attempts to address the question AND is relevant.
5. If the answer is irrelevant, return no strengths and explain in the feedback that it does not address the question."""

REPLY_SCHEMA = """Return ONLY a JSON object with this shape:
{
  "overall": <number 0-10, strict about relevance>,
  "clarity": <number 0-10 for clarity and communication>,
  "structure": <number 0-10 for organization and structure>,
  "relevance": <number 0-10 for relevance to the question>,
  "confidence": <number 0-10 for confidence and assertiveness>,
  "feedback": "<feedback explaining the score>",
  "strengths": ["<strength>", ...],
  "improvements": ["<improvement>", ...]
}"""

CONSIDERATIONS = """Consider, only when the answer is relevant:
- Technical accuracy (for technical questions)
- Clarity and communication
- Problem-solving approach
- Completeness of the answer
- STAR method structure (for behavioral questions)
- Confidence and assertiveness"""


def persona_for(coach_mode: str) -> str:
    return COACH_PERSONAS.get(coach_mode, COACH_PERSONAS["friendly"])


def build_evaluation_prompt(question_text: str, answer_text: str, coach_mode: str = "friendly") -> str:
    return "\n\n".join(
        [
            persona_for(coach_mode),
            "Evaluate the following interview answer STRICTLY.",
            f"QUESTION:\n{question_text.strip()}",
            f"ANSWER:\n{answer_text.strip()}",
            EVALUATION_RULES,
            REPLY_SCHEMA,
            CONSIDERATIONS,
        ]
    )
