from __future__ import annotations

from dataclasses import asdict

import structlog
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.api.routes.quiz_models import AnswerRequest, JumpRequest, QuizScreenResponse
from app.game.sessions.errors import (
    InvalidAnswerOptionError,
    InvalidJumpTargetError,
    QuizCompleteError,
)
from app.game.sessions.presentation import QuizScreen, build_load_failed_screen, build_screen
from app.game.sessions.runtime import QuizRuntime
from app.game.sessions.service import QuizSession

router = APIRouter(prefix="/quiz", tags=["quiz"])
logger = structlog.get_logger(__name__)


class QuizUnavailableError(Exception):
    pass


def _runtime(request: Request) -> QuizRuntime:
    return request.app.state.quiz_runtime


def _session(request: Request) -> QuizSession:
    session = _runtime(request).session
    if session is None:
        raise QuizUnavailableError
    return session


def _to_response(screen: QuizScreen) -> QuizScreenResponse:
    return QuizScreenResponse.model_validate(asdict(screen))


def quiz_unavailable_response(request: Request, exc: Exception) -> JSONResponse:
    del request, exc
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=_to_response(build_load_failed_screen()).model_dump(),
    )


@router.get("", response_model=QuizScreenResponse)
async def get_quiz(request: Request) -> QuizScreenResponse:
    return _to_response(build_screen(_session(request)))


@router.post("/restart", response_model=QuizScreenResponse)
async def restart_quiz(request: Request) -> QuizScreenResponse:
    session = _session(request)
    session.restart()
    return _to_response(build_screen(session))


@router.post("/answer", response_model=QuizScreenResponse)
async def answer_question(payload: AnswerRequest, request: Request) -> QuizScreenResponse:
    session = _session(request)
    try:
        session.answer(payload.option_key)
    except InvalidAnswerOptionError as exc:
        raise HTTPException(status_code=422, detail={"code": "E_INVALID_OPTION"}) from exc
    except QuizCompleteError as exc:
        raise HTTPException(status_code=409, detail={"code": "E_QUIZ_COMPLETE"}) from exc
    return _to_response(build_screen(session))


@router.post("/next", response_model=QuizScreenResponse)
async def next_question(request: Request) -> QuizScreenResponse:
    session = _session(request)
    try:
        session.advance()
    except QuizCompleteError as exc:
        raise HTTPException(status_code=409, detail={"code": "E_QUIZ_COMPLETE"}) from exc
    return _to_response(build_screen(session))


@router.post("/jump", response_model=QuizScreenResponse)
async def jump_to_question(payload: JumpRequest, request: Request) -> QuizScreenResponse:
    session = _session(request)
    try:
        session.jump(payload.position)
    except InvalidJumpTargetError as exc:
        logger.warning("quiz_jump_rejected", position=payload.position, total=session.total_questions)
        raise HTTPException(status_code=422, detail={"code": "E_INVALID_POSITION"}) from exc
    except QuizCompleteError as exc:
        raise HTTPException(status_code=409, detail={"code": "E_QUIZ_COMPLETE"}) from exc
    return _to_response(build_screen(session))
