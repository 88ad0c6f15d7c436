"""
CLI Assessment — Creator Burnout Quiz from the Command Line
============================================================

Examples::

    # Interactive quiz
    python scripts/run_assessment.py

    # Answers from a file (YAML or JSON mapping of question id -> answer)
    python scripts/run_assessment.py --answers answers.yaml

    # Capture the lead in the SQLite store
    python scripts/run_assessment.py --answers answers.yaml \
        --email you@example.com --db data/leads.db
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_PROJECT_ROOT))

from creator_burnout.capture import InMemoryLeadSink, LeadStore
from creator_burnout.core import (
    AssessmentError,
    Explainer,
    QuestionKind,
    QuizSession,
    ValidationError,
)
from creator_burnout.utils.helpers import apply_log_level, ensure_dir, load_config, setup_logging

logger = setup_logging()


def _ask(session: QuizSession) -> None:
    """Prompt for each question until the quiz is fully answered."""
    while not session.responses.is_complete():
        question = session.current_question
        position, total, percent = session.progress()
        print(f"\n  Question {position} of {total}  ({percent}%)")
        print(f"  {question.prompt}")

        if question.kind is QuestionKind.RANGE:
            hint = f"{question.min}-{question.max}"
            print(f"    scale: {' | '.join(question.labels)}")
        else:
            for i, option in enumerate(question.options, start=1):
                print(f"    {i}. {option}")
            hint = "number or label"

        raw = input(f"  > ({hint}, 'b' to go back): ").strip()
        if raw.lower() == "b":
            try:
                previous = session.go_back()
            except AssessmentError as e:
                print(f"  ! {e}")
                continue
            raw = input(f"  {previous.prompt}\n  > new answer: ").strip()
            question = previous

        if question.kind is QuestionKind.CHOICE and raw.isdigit():
            idx = int(raw) - 1
            if 0 <= idx < len(question.options):
                raw = question.options[idx]

        try:
            session.record_answer(question.id, question.coerce(raw))
        except ValidationError as e:
            print(f"  ! {e}")
            continue
        session.advance()


def _load_answers(session: QuizSession, path: str) -> None:
    with open(path, "r", encoding="utf-8") as f:
        answers = yaml.safe_load(f) or {}
    # Answers must form a catalog prefix; request_results() names the rest.
    for question in session.catalog:
        if question.id not in answers:
            break
        session.record_answer(question.id, question.coerce(answers[question.id]))


def main() -> None:
    parser = argparse.ArgumentParser(description="Creator Burnout Assessment — CLI")
    parser.add_argument("--answers", type=str, default=None,
                        help="YAML/JSON file mapping question id to answer")
    parser.add_argument("--email", type=str, default=None,
                        help="Contact email to capture the result under")
    parser.add_argument("--db", type=str, default=None,
                        help="SQLite lead store (default: keep leads in memory)")
    parser.add_argument("--config", type=str, default=None, help="Alternate config file")
    args = parser.parse_args()

    config = load_config(args.config)
    apply_log_level(config)

    sink = LeadStore(args.db) if args.db else InMemoryLeadSink()
    session = QuizSession(sink, config)
    session.start()

    try:
        if args.answers:
            _load_answers(session, args.answers)
        else:
            _ask(session)
        result = session.request_results()
    except AssessmentError as e:
        logger.error("Assessment failed: %s", e)
        sys.exit(1)

    explanation = Explainer().explain(result)

    # --- Print results --------------------------------------------------
    print("\n" + "=" * 62)
    print("  CREATOR BURNOUT ASSESSMENT")
    print("=" * 62)
    print(f"  Burnout Score    : {result.score}/100  ({result.score_band})")
    print(f"  #1 Time Waster   : {result.top_factor}")
    print(f"  Daily hours      : {result.stats['daily_hours']}h")
    print(f"  Platforms        : {result.stats['platform_count']}")
    print(f"  Revenue streams  : {result.stats['revenue_streams']}")
    print("-" * 62)

    print("\n  Time leaks:")
    for dim, detail in result.diagnostic_details.items():
        print(f"    [{dim.upper():>10s}] {detail}")

    print("\n  Factor breakdown:")
    for name, value in explanation["factor_breakdown"]:
        print(f"    {value:>4d}  {name}")

    print("\n  Action plan:")
    for item in explanation["action_plan"]:
        print(f"    - {item}")

    print("\n  " + explanation["disclaimer"])
    print("=" * 62)

    if args.email:
        try:
            session.submit_contact(args.email)
        except AssessmentError as e:
            logger.error("Lead capture failed: %s", e)
            sys.exit(2)
        print(f"\n  Your personalized action plan is on its way to {session.contact_id}")

    # Save JSON
    out = ensure_dir(_PROJECT_ROOT / "output") / "last_assessment.json"
    out.write_text(result.to_json(), encoding="utf-8")
    logger.info("JSON saved to %s", out)


if __name__ == "__main__":
    main()
