from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionState(str, Enum):
    UNANSWERED = "UNANSWERED"
    ANSWERED = "ANSWERED"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True, slots=True)
class AnswerResult:
    position: int
    selected_key: str
    is_correct: bool
    correct_key: str
    correct_text: str
    category: str
    wrong_key: str | None = None


@dataclass(frozen=True, slots=True)
class QuestionView:
    position: int
    question_number: int
    total_questions: int
    prompt: str
    options: tuple[tuple[str, str], ...]
    is_last: bool
    answered: bool = False
    result: AnswerResult | None = None


@dataclass(frozen=True, slots=True)
class QuizComplete:
    total_questions: int


@dataclass(frozen=True, slots=True)
class NavigationEntry:
    position: int
    label: str
    selected: bool = False
