from __future__ import annotations

from dataclasses import dataclass, field

from app.game.sessions.service import QuizSession
from app.game.sessions.types import AnswerResult, NavigationEntry, QuestionView, SessionState

LOAD_FAILED_MESSAGE = "Failed to load quiz questions. Please try refreshing."
CORRECT_FEEDBACK = "Correct!"
RESTART_HINT = 'Click "Shuffle & Reset" to play again!'
NEXT_LABEL = "Next Question"
FINISH_LABEL = "Finish Quiz"

OPTION_DEFAULT = "default"
OPTION_CORRECT = "correct"
OPTION_WRONG = "wrong"
OPTION_DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class OptionView:
    key: str
    text: str
    label: str
    state: str = OPTION_DEFAULT
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class QuizScreen:
    kind: str
    heading: str
    question_number: int | None = None
    total_questions: int | None = None
    options: tuple[OptionView, ...] = ()
    feedback: str = ""
    feedback_tone: str = "none"
    topic: str | None = None
    next_label: str | None = None
    next_visible: bool = False
    navigation: tuple[NavigationEntry, ...] = field(default_factory=tuple)


def _option_state(key: str, result: AnswerResult | None) -> str:
    if result is None:
        return OPTION_DEFAULT
    if key == result.correct_key:
        return OPTION_CORRECT
    if key == result.wrong_key:
        return OPTION_WRONG
    return OPTION_DISABLED


def _build_options(view: QuestionView) -> tuple[OptionView, ...]:
    return tuple(
        OptionView(
            key=key,
            text=text,
            label=f"{key}: {text}",
            state=_option_state(key, view.result),
            enabled=not view.answered,
        )
        for key, text in view.options
    )


def feedback_message(result: AnswerResult) -> str:
    if result.is_correct:
        return CORRECT_FEEDBACK
    return f"Wrong. Correct answer: {result.correct_text}"


def build_question_screen(view: QuestionView, navigation: tuple[NavigationEntry, ...]) -> QuizScreen:
    result = view.result
    return QuizScreen(
        kind="question",
        heading=f"Q{view.question_number}: {view.prompt}",
        question_number=view.question_number,
        total_questions=view.total_questions,
        options=_build_options(view),
        feedback=feedback_message(result) if result is not None else "",
        feedback_tone=("correct" if result.is_correct else "wrong") if result is not None else "none",
        topic=f"Topic: {result.category}" if result is not None else None,
        next_label=FINISH_LABEL if view.is_last else NEXT_LABEL,
        next_visible=view.answered,
        navigation=navigation,
    )


def build_complete_screen(total_questions: int) -> QuizScreen:
    return QuizScreen(
        kind="complete",
        heading=f"Quiz Complete! You've finished all {total_questions} questions.",
        total_questions=total_questions,
        feedback=RESTART_HINT,
    )


def build_load_failed_screen() -> QuizScreen:
    return QuizScreen(kind="load_failed", heading=LOAD_FAILED_MESSAGE)


def build_screen(session: QuizSession) -> QuizScreen:
    if session.state is SessionState.COMPLETE:
        return build_complete_screen(session.total_questions)
    return build_question_screen(session.current(), session.navigation())
