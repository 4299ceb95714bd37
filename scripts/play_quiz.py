from __future__ import annotations

import argparse
import asyncio
import random
from typing import Callable

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.game.questions.errors import LoadError
from app.game.questions.store import QuestionStore
from app.game.questions.types import QuestionRecord
from app.game.sessions.errors import (
    InvalidAnswerOptionError,
    InvalidJumpTargetError,
    QuizCompleteError,
)
from app.game.sessions.presentation import LOAD_FAILED_MESSAGE, QuizScreen, build_screen
from app.game.sessions.service import QuizSession

HELP_TEXT = "Commands: a <option key> (answer) | n (next) | g <number> (go to) | r (shuffle & reset) | q (quit)"


def _parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Play the quiz in the terminal.")
    parser.add_argument("--source", default=settings.quiz_data_source, help="Question file path or URL.")
    parser.add_argument("--seed", type=int, default=settings.quiz_shuffle_seed)
    return parser.parse_args()


def render_screen(screen: QuizScreen) -> str:
    lines = [screen.heading]
    lines.extend(f"  [{option.state}] {option.label}" for option in screen.options)
    if screen.feedback:
        lines.append(screen.feedback)
    if screen.topic:
        lines.append(screen.topic)
    if screen.next_visible and screen.next_label:
        lines.append(f"n -> {screen.next_label}")
    return "\n".join(lines)


def handle_command(session: QuizSession, command: str) -> str | None:
    """Apply one command to the session; returns an error message for rejected input."""
    verb, _, argument = command.strip().partition(" ")
    lowered = verb.lower()
    try:
        if lowered == "n":
            session.advance()
        elif lowered == "r":
            session.restart()
        elif lowered == "g":
            if not argument.strip().isdigit():
                return "Usage: g <question number>"
            session.jump(int(argument) - 1)
        elif lowered == "a":
            if not argument.strip():
                return "Usage: a <option key>"
            session.answer(argument.strip())
        else:
            return HELP_TEXT
    except InvalidAnswerOptionError:
        return f"Unknown option: {argument.strip()}"
    except InvalidJumpTargetError:
        return f"No question number {argument.strip()}"
    except QuizCompleteError:
        return "The quiz is complete. Use r to shuffle and play again."
    return None


def play(session: QuizSession, *, read: Callable[[str], str], write: Callable[[str], None]) -> None:
    write(HELP_TEXT)
    write(render_screen(build_screen(session)))
    while True:
        command = read("> ")
        if command.strip().lower() == "q":
            return
        error = handle_command(session, command)
        write(error if error is not None else render_screen(build_screen(session)))


async def _load(source: str) -> tuple[QuestionRecord, ...]:
    settings = get_settings()
    store = QuestionStore(
        source,
        timeout_seconds=settings.quiz_data_timeout_seconds,
        strict_correct_text=settings.quiz_strict_correct_text,
    )
    return await store.load()


def main() -> int:
    args = _parse_args()
    configure_logging("WARNING", json_logs=False)
    try:
        questions = asyncio.run(_load(args.source))
    except LoadError:
        print(LOAD_FAILED_MESSAGE)  # noqa: T201
        return 1

    session = QuizSession(rng=random.Random(args.seed))
    session.start(questions)
    try:
        play(session, read=input, write=print)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
