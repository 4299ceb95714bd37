from __future__ import annotations

import random

from app.game.sessions.presentation import build_screen
from app.game.sessions.service import QuizSession
from app.game.sessions.types import SessionState
from scripts.play_quiz import HELP_TEXT, handle_command, play, render_screen
from tests.game.quiz_fixtures import _question, _three_questions


def _session() -> QuizSession:
    session = QuizSession(rng=random.Random(2))
    session.start(_three_questions())
    return session


def _correct_key(session: QuizSession) -> str:
    return _three_questions()[session.order[session.position]].correct_key


def test_handle_command_answers_and_advances() -> None:
    session = _session()

    assert handle_command(session, f"a {_correct_key(session)}") is None
    assert session.state is SessionState.ANSWERED

    assert handle_command(session, "n") is None
    assert session.position == 1
    assert session.answered is False


def test_handle_command_jumps_by_question_number() -> None:
    session = _session()

    assert handle_command(session, "g 3") is None
    assert session.position == 2

    assert handle_command(session, "g 9") == "No question number 9"
    assert handle_command(session, "g x") == "Usage: g <question number>"
    assert session.position == 2


def test_handle_command_reports_unknown_option_and_complete_quiz() -> None:
    session = _session()
    assert handle_command(session, "a Z") == "Unknown option: Z"

    for _ in range(3):
        handle_command(session, "n")
    assert session.state is SessionState.COMPLETE
    assert handle_command(session, "a A") == "The quiz is complete. Use r to shuffle and play again."
    assert handle_command(session, "g 1") == "The quiz is complete. Use r to shuffle and play again."

    assert handle_command(session, "r") is None
    assert session.state is SessionState.UNANSWERED


def test_render_screen_lists_options_and_feedback() -> None:
    session = _session()
    handle_command(session, f"a {_correct_key(session)}")

    rendered = render_screen(build_screen(session))

    assert rendered.startswith("Q1: ")
    assert "Correct!" in rendered
    assert "Topic: " in rendered
    assert "n -> Next Question" in rendered


def test_play_stops_on_quit() -> None:
    session = _session()
    commands = iter([f"a {_correct_key(session)}", "n", "q"])
    output: list[str] = []

    play(session, read=lambda prompt: next(commands), write=output.append)

    assert output[0] == HELP_TEXT
    assert output[-1].startswith("Q2: ")


def test_handle_command_answers_keys_that_look_like_commands() -> None:
    session = QuizSession(rng=random.Random(4))
    session.start(
        [
            _question(
                "Letters",
                correct_key="N",
                options={"N": "north", "R": "river", "G": "gate", "Q": "quay"},
            )
        ]
    )

    assert handle_command(session, "a N") is None
    assert session.current().result.is_correct is True
    assert handle_command(session, "a") == "Usage: a <option key>"
