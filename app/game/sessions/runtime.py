from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import structlog

from app.game.questions.errors import LoadError
from app.game.questions.store import QuestionStore
from app.game.sessions.service import QuizSession

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class QuizRuntime:
    """Owner of the question store and the one quiz session served by the app."""

    store: QuestionStore
    shuffle_seed: int | None = None
    session: QuizSession | None = None
    load_error: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.session is not None

    async def bootstrap(self) -> None:
        try:
            questions = await self.store.load()
        except LoadError as exc:
            self.load_error = str(exc)
            logger.error("quiz_load_failed", source=self.store.source or "bundled", error=str(exc))
            return

        self.session = QuizSession(rng=random.Random(self.shuffle_seed))
        self.session.start(questions)


def build_quiz_runtime(settings: Any) -> QuizRuntime:
    store = QuestionStore(
        settings.quiz_data_source,
        timeout_seconds=settings.quiz_data_timeout_seconds,
        strict_correct_text=settings.quiz_strict_correct_text,
    )
    return QuizRuntime(store=store, shuffle_seed=settings.quiz_shuffle_seed)
