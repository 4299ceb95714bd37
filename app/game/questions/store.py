from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from app.game.questions.errors import LoadError
from app.game.questions.types import QuestionRecord

logger = structlog.get_logger(__name__)

BUNDLED_QUIZ_DATA_PATH = Path(__file__).resolve().parent / "data" / "quiz_data.json"
_HTTP_SCHEMES = ("http://", "https://")


class QuestionPayload(BaseModel):
    question: str
    options: dict[str, str] = Field(min_length=1)
    correct_answer_key: str
    correct_answer_text: str = ""
    category: str = ""


_PAYLOAD_ADAPTER = TypeAdapter(list[QuestionPayload])


def _is_url(source: str) -> bool:
    return source.lower().startswith(_HTTP_SCHEMES)


def _to_record(payload: QuestionPayload) -> QuestionRecord:
    return QuestionRecord(
        prompt=payload.question,
        options=tuple(payload.options.items()),
        correct_key=payload.correct_answer_key,
        correct_text=payload.correct_answer_text,
        category=payload.category,
    )


def _record_problem(record: QuestionRecord) -> str | None:
    option_text = record.option_text(record.correct_key)
    if option_text is None:
        return "correct_key_not_in_options"
    if option_text != record.correct_text:
        return "correct_text_mismatch"
    return None


def parse_questions(raw: Any, *, strict_correct_text: bool = False) -> tuple[QuestionRecord, ...]:
    try:
        payloads = _PAYLOAD_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise LoadError(f"question payload has an unexpected shape: {exc.error_count()} error(s)") from exc
    if not payloads:
        raise LoadError("question payload contains no questions")

    records: list[QuestionRecord] = []
    for index, payload in enumerate(payloads):
        record = _to_record(payload)
        problem = _record_problem(record)
        if problem is not None:
            if strict_correct_text:
                raise LoadError(f"question #{index + 1}: {problem}")
            logger.warning(
                "quiz_question_record_inconsistent",
                question_index=index,
                problem=problem,
                correct_key=record.correct_key,
            )
        records.append(record)
    return tuple(records)


class QuestionStore:
    """Holds the question list; populated by a single `load()` and never mutated afterwards."""

    def __init__(
        self,
        source: str = "",
        *,
        timeout_seconds: float = 5.0,
        strict_correct_text: bool = False,
    ) -> None:
        self.source = source.strip()
        self.timeout_seconds = timeout_seconds
        self.strict_correct_text = strict_correct_text
        self._questions: tuple[QuestionRecord, ...] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._questions is not None

    @property
    def questions(self) -> tuple[QuestionRecord, ...]:
        if self._questions is None:
            raise LoadError("questions have not been loaded")
        return self._questions

    async def load(self) -> tuple[QuestionRecord, ...]:
        if self._questions is not None:
            return self._questions

        if _is_url(self.source):
            raw = await self._fetch_url(self.source)
        else:
            raw = await self._read_file(Path(self.source) if self.source else BUNDLED_QUIZ_DATA_PATH)

        questions = parse_questions(raw, strict_correct_text=self.strict_correct_text)
        self._questions = questions
        logger.info("quiz_questions_loaded", source=self.source or "bundled", total=len(questions))
        return questions

    async def _fetch_url(self, url: str) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            raise LoadError(f"question source answered with status {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise LoadError(f"question source is unreachable: {exc.__class__.__name__}") from exc
        except ValueError as exc:
            raise LoadError("question source returned invalid JSON") from exc

    async def _read_file(self, path: Path) -> Any:
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise LoadError(f"question file is not readable: {path.name}") from exc
        try:
            return json.loads(content)
        except ValueError as exc:
            raise LoadError(f"question file holds invalid JSON: {path.name}") from exc
