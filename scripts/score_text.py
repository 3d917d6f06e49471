from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.services.evaluation_service import AnswerScoringPipeline  # noqa: E402
from interview_coach.services.jd_match_service import score_jd_match  # noqa: E402
from interview_coach.services.resume_service import scan_resume  # noqa: E402


def _read(path: str | None) -> str | None:
    if not path:
        return None
    return Path(path).read_text(encoding="utf-8", errors="replace")


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a resume or an interview answer and print the JSON report.")
    parser.add_argument("--resume", help="Plain-text resume file")
    parser.add_argument("--jd", help="Plain-text job description file")
    parser.add_argument("--question", help="Interview question text")
    parser.add_argument("--answer", help="Plain-text answer file")
    parser.add_argument(
        "--question-type",
        default="behavioral",
        choices=["behavioral", "technical", "system-design", "general"],
    )
    parser.add_argument("--jd-only", action="store_true", help="Print only the job-description match report")
    args = parser.parse_args()

    resume_text = _read(args.resume)
    jd_text = _read(args.jd)
    answer_text = _read(args.answer)

    if answer_text is not None:
        # Offline run: no evaluator, deterministic fallback scoring only.
        pipeline = AnswerScoringPipeline(None)
        report = asyncio.run(
            pipeline.score_answer(args.question or "", answer_text, question_type=args.question_type)
        )
    elif resume_text is not None and args.jd_only:
        report = score_jd_match(resume_text, jd_text or "")
    elif resume_text is not None:
        report = scan_resume(resume_text, jd_text)
    else:
        parser.error("either --resume or --answer is required")

    print(json.dumps(report.to_record(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
