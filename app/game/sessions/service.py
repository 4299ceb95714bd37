from __future__ import annotations

import random
from typing import Sequence

import structlog

from app.game.questions.types import QuestionRecord
from app.game.sessions.errors import (
    EmptyQuestionSetError,
    InvalidAnswerOptionError,
    InvalidJumpTargetError,
    QuizCompleteError,
    SessionNotStartedError,
)
from app.game.sessions.types import (
    AnswerResult,
    NavigationEntry,
    QuestionView,
    QuizComplete,
    SessionState,
)

logger = structlog.get_logger(__name__)


def shuffled_order(size: int, *, rng: random.Random) -> tuple[int, ...]:
    order = list(range(size))
    # Fisher-Yates: every permutation is equally likely.
    rng.shuffle(order)
    return tuple(order)


class QuizSession:
    """Sequencing, answer evaluation and navigation over one shuffled pass of the questions.

    The object is owned by its caller; `start` replaces the whole state with a
    fresh permutation, every other operation moves within it.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._questions: tuple[QuestionRecord, ...] = ()
        self._order: tuple[int, ...] = ()
        self._position = 0
        self._answered = False
        self._result: AnswerResult | None = None
        self._started = False

    @property
    def order(self) -> tuple[int, ...]:
        return self._order

    @property
    def position(self) -> int:
        return self._position

    @property
    def answered(self) -> bool:
        return self._answered

    @property
    def total_questions(self) -> int:
        return len(self._order)

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def state(self) -> SessionState:
        self._ensure_started()
        if self._position >= len(self._order):
            return SessionState.COMPLETE
        return SessionState.ANSWERED if self._answered else SessionState.UNANSWERED

    def start(self, questions: Sequence[QuestionRecord]) -> QuestionView:
        if not questions:
            raise EmptyQuestionSetError
        self._questions = tuple(questions)
        self._order = shuffled_order(len(self._questions), rng=self._rng)
        self._position = 0
        self._reset_answer()
        self._started = True
        logger.info("quiz_session_started", total_questions=len(self._order))
        return self.current()

    def restart(self) -> QuestionView:
        self._ensure_started()
        return self.start(self._questions)

    def navigation(self) -> tuple[NavigationEntry, ...]:
        self._ensure_started()
        return tuple(
            NavigationEntry(
                position=position,
                label=f"Question {position + 1}",
                selected=position == self._position,
            )
            for position in range(len(self._order))
        )

    def current(self) -> QuestionView:
        question = self._current_question()
        return QuestionView(
            position=self._position,
            question_number=self._position + 1,
            total_questions=len(self._order),
            prompt=question.prompt,
            options=question.options,
            is_last=self._position == len(self._order) - 1,
            answered=self._answered,
            result=self._result,
        )

    def answer(self, option_key: str) -> AnswerResult:
        question = self._current_question()
        if self._result is not None:
            logger.info("quiz_answer_ignored", position=self._position, option_key=option_key)
            return self._result
        if not question.has_option(option_key):
            raise InvalidAnswerOptionError(option_key)

        is_correct = option_key == question.correct_key
        self._result = AnswerResult(
            position=self._position,
            selected_key=option_key,
            is_correct=is_correct,
            correct_key=question.correct_key,
            correct_text=question.correct_text,
            category=question.category,
            wrong_key=None if is_correct else option_key,
        )
        self._answered = True
        logger.info(
            "quiz_answer_recorded",
            position=self._position,
            is_correct=is_correct,
            category=question.category,
        )
        return self._result

    def advance(self) -> QuestionView | QuizComplete:
        if self.state is SessionState.COMPLETE:
            raise QuizCompleteError
        self._position += 1
        self._reset_answer()
        if self._position == len(self._order):
            logger.info("quiz_completed", total_questions=len(self._order))
            return QuizComplete(total_questions=len(self._order))
        return self.current()

    def jump(self, target_position: int) -> QuestionView:
        if self.state is SessionState.COMPLETE:
            raise QuizCompleteError
        if not 0 <= target_position < len(self._order):
            raise InvalidJumpTargetError(target_position)
        self._position = target_position
        self._reset_answer()
        logger.info("quiz_question_jumped", position=target_position)
        return self.current()

    def _current_question(self) -> QuestionRecord:
        if self.state is SessionState.COMPLETE:
            raise QuizCompleteError
        return self._questions[self._order[self._position]]

    def _reset_answer(self) -> None:
        self._answered = False
        self._result = None

    def _ensure_started(self) -> None:
        if not self._started:
            raise SessionNotStartedError
