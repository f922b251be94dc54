"""
Command-line interface for article-quiz

Generate a quiz from an article, take it in the terminal, list the
provider's models, or get a headline and keywords for an article.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Config
from .errors import EmbeddingUnavailable
from .factory import build_assistant, build_generator, build_grader
from .providers import ProviderError, get_provider, pick_model
from .quiz.generator import GeneratedQuiz
from .quiz.grader import AnswerGrader
from .quiz.schema import MultipleChoice, TrueFalse
from .quiz.session import QuizSession, SessionPhase


def read_article(source: str) -> str:
    """Read article text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def format_quiz(quiz: GeneratedQuiz) -> str:
    """Format generated questions for terminal output."""
    lines = []
    number = 0
    for question in quiz.true_false + quiz.multiple_choice + quiz.fill_blank:
        number += 1
        lines.append(f"{number}. [{question.kind.value}] {question.question}")
        if isinstance(question, MultipleChoice):
            for i, option in enumerate(question.options, start=1):
                lines.append(f"     {i}) {option}")
        lines.append(f"     Answer: {question.correct_text}")
    if not lines:
        lines.append("No questions could be generated.")
    return "\n".join(lines)


def format_results(session: QuizSession) -> str:
    """Format graded results for terminal output."""
    lines = [
        "",
        "=" * 60,
        f"You got {session.score} of {session.total} correct",
        "=" * 60,
    ]
    for number, result in enumerate(session.results, start=1):
        mark = "\033[92m✓\033[0m" if result.is_correct else "\033[91m✗\033[0m"
        lines.append(f"\n{mark} {number}. {result.question}")
        lines.append(f"    Your answer:    {result.user_answer or '(none)'}")
        lines.append(f"    Correct answer: {result.correct_answer}")
    return "\n".join(lines)


def _parse_reply(question, reply: str):
    """Turn terminal input into an answer value, or None if unusable."""
    if isinstance(question, TrueFalse):
        lowered = reply.lower()
        if lowered in ("t", "true", "y", "yes"):
            return True
        if lowered in ("f", "false", "n", "no"):
            return False
        return None
    if isinstance(question, MultipleChoice):
        if reply.isdigit() and 1 <= int(reply) <= len(question.options):
            return question.options[int(reply) - 1]
        return None
    return reply


def run_session(session: QuizSession, read=input, write=print):
    """
    Drive a session from the terminal.

    Enter an answer to move on, an empty line to skip, ':b' to go back,
    ':s' to submit and ':q' to quit. EOFError from `read` propagates.
    """
    write(f"\n{session.total} questions. Commands: :b back, :s submit, :q quit\n")
    session.begin()

    while session.phase == SessionPhase.IN_PROGRESS:
        question = session.current_question
        if question is None:
            session.submit()
            break

        write(f"Question {session.index + 1}/{session.total}: {question.question}")
        if isinstance(question, MultipleChoice):
            for i, option in enumerate(question.options, start=1):
                write(f"  {i}) {option}")
        elif isinstance(question, TrueFalse):
            write("  (true/false)")
        if session.current_answer is not None:
            write(f"  Current answer: {session.current_answer}")

        reply = read("> ").strip()
        if reply == ":q":
            return
        if reply == ":s":
            session.submit()
        elif reply == ":b":
            session.previous()
            if session.phase == SessionPhase.START:
                write("  Back at the start; starting over.")
                session.begin()
        elif not reply:
            session.next()
        else:
            value = _parse_reply(question, reply)
            if value is None:
                write("  Not a valid answer for this question.")
                continue
            session.record_answer(session.index, value)
            session.next()

    if session.phase == SessionPhase.RESULT:
        write(format_results(session))


def check_embeddings(grader: AnswerGrader) -> bool:
    """Warn on stderr when fill-in-the-blank answers cannot be scored."""
    try:
        grader.comparator.similarity("check", "check")
    except (EmbeddingUnavailable, ValueError) as e:
        print(
            f"Warning: fill-in-the-blank answers will be marked wrong ({e}).\n"
            "Install local embeddings with: pip install 'article-quiz[local]'",
            file=sys.stderr,
        )
        return False
    return True


async def list_models(cfg: Config) -> list:
    provider = get_provider(cfg.models.provider)
    models = await provider.list_models()
    return sorted(models)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="article-quiz",
        description="Generate and grade self-assessment quizzes from articles",
        epilog=(
            "Example: article-quiz take notes.txt\n"
            "Fill-in-the-blank grading uses local embeddings by default; "
            "install them with: pip install 'article-quiz[local]'"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--mock", action="store_true", help="Use mock AI and embeddings (no network)")
    parser.add_argument("--provider", help="LLM provider (groq, openai, claude, mock)")
    parser.add_argument("--model", help="Model ID (default: provider default)")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More logging (-vv for debug)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser("generate", help="Generate quiz questions")
    generate_parser.add_argument("article", help="Path to article text, or '-' for stdin")
    generate_parser.add_argument("--json", action="store_true", help="Output questions as JSON")

    take_parser = subparsers.add_parser("take", help="Generate a quiz and take it")
    take_parser.add_argument("article", help="Path to article text, or '-' for stdin")

    summarize_parser = subparsers.add_parser("summarize", help="Suggest a headline and keywords")
    summarize_parser.add_argument("article", help="Path to article text, or '-' for stdin")
    summarize_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("models", help="List models offered by the provider")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config.offline_mode() if args.mock else Config()
    if args.provider:
        cfg.models.provider = args.provider
    if args.model:
        cfg.models.model = args.model

    if args.command == "models":
        try:
            models = asyncio.run(list_models(cfg))
        except ProviderError as e:
            print(f"Could not list models: {e}", file=sys.stderr)
            sys.exit(1)
        chosen = pick_model(models, args.model, cfg.models.PROVIDER_DEFAULTS.get(cfg.models.provider, ""))
        for model in models:
            marker = "*" if model == chosen else " "
            print(f"{marker} {model}")
        return

    try:
        article = read_article(args.article)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read article: {e}", file=sys.stderr)
        sys.exit(1)
    if not article.strip():
        print("Article is empty", file=sys.stderr)
        sys.exit(1)

    if args.command == "summarize":
        summary = asyncio.run(build_assistant(cfg).summarize(article))
        if args.json:
            print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(summary.title)
            print(", ".join(summary.keywords))
        return

    generator = build_generator(cfg)
    quiz = asyncio.run(generator.generate_quiz(article))

    if args.command == "generate":
        if args.json:
            print(json.dumps(quiz.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(format_quiz(quiz))
        return

    if quiz.total == 0:
        print("No questions could be generated.", file=sys.stderr)
        sys.exit(1)

    grader = build_grader(cfg)
    check_embeddings(grader)
    try:
        run_session(quiz.to_session(grader))
    except EOFError:
        print("\nInput closed before the quiz was finished", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
