from __future__ import annotations

import random

from app.game.sessions.presentation import (
    FINISH_LABEL,
    LOAD_FAILED_MESSAGE,
    NEXT_LABEL,
    RESTART_HINT,
    build_load_failed_screen,
    build_screen,
)
from app.game.sessions.service import QuizSession
from tests.game.quiz_fixtures import _three_questions


def _session() -> QuizSession:
    session = QuizSession(rng=random.Random(11))
    session.start(_three_questions())
    return session


def _record(session: QuizSession):
    return _three_questions()[session.order[session.position]]


def test_unanswered_screen_shows_enabled_default_options() -> None:
    session = _session()
    record = _record(session)

    screen = build_screen(session)

    assert screen.kind == "question"
    assert screen.heading == f"Q1: {record.prompt}"
    assert [(option.key, option.text) for option in screen.options] == list(record.options)
    assert [option.label for option in screen.options] == [f"{key}: {text}" for key, text in record.options]
    assert {option.state for option in screen.options} == {"default"}
    assert all(option.enabled for option in screen.options)
    assert screen.feedback == ""
    assert screen.feedback_tone == "none"
    assert screen.topic is None
    assert screen.next_visible is False
    assert [entry.selected for entry in screen.navigation] == [True, False, False]


def test_correct_answer_screen() -> None:
    session = _session()
    record = _record(session)
    session.answer(record.correct_key)

    screen = build_screen(session)

    states = {option.key: option.state for option in screen.options}
    assert states[record.correct_key] == "correct"
    assert all(state == "disabled" for key, state in states.items() if key != record.correct_key)
    assert not any(option.enabled for option in screen.options)
    assert screen.feedback == "Correct!"
    assert screen.feedback_tone == "correct"
    assert screen.topic == f"Topic: {record.category}"
    assert screen.next_visible is True
    assert screen.next_label == NEXT_LABEL


def test_wrong_answer_screen_highlights_both_keys() -> None:
    session = _session()
    record = _record(session)
    wrong_key = next(key for key in record.option_keys if key != record.correct_key)
    session.answer(wrong_key)

    screen = build_screen(session)

    states = {option.key: option.state for option in screen.options}
    assert states[wrong_key] == "wrong"
    assert states[record.correct_key] == "correct"
    assert screen.feedback == f"Wrong. Correct answer: {record.correct_text}"
    assert screen.feedback_tone == "wrong"


def test_last_question_offers_finish_label() -> None:
    session = _session()
    session.jump(2)
    session.answer(_record(session).correct_key)

    screen = build_screen(session)

    assert screen.next_label == FINISH_LABEL
    assert [entry.selected for entry in screen.navigation] == [False, False, True]


def test_complete_screen() -> None:
    session = _session()
    for _ in range(3):
        session.advance()

    screen = build_screen(session)

    assert screen.kind == "complete"
    assert screen.heading == "Quiz Complete! You've finished all 3 questions."
    assert screen.feedback == RESTART_HINT
    assert screen.options == ()
    assert screen.topic is None
    assert screen.next_visible is False
    assert screen.navigation == ()


def test_load_failed_screen() -> None:
    screen = build_load_failed_screen()
    assert screen.kind == "load_failed"
    assert screen.heading == LOAD_FAILED_MESSAGE
    assert screen.navigation == ()
