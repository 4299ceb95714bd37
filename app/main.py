from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.routes.health import router as health_router
from app.api.routes.quiz import QuizUnavailableError, quiz_unavailable_response
from app.api.routes.quiz import router as quiz_router
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.game.sessions.runtime import build_quiz_runtime


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    await app.state.quiz_runtime.bootstrap()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.app_env != "dev")

    docs_enabled = settings.enable_openapi_docs
    app = FastAPI(
        title="Quiz Runner API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=_lifespan,
    )
    app.state.quiz_runtime = build_quiz_runtime(settings)
    app.add_exception_handler(QuizUnavailableError, quiz_unavailable_response)
    app.include_router(health_router)
    app.include_router(quiz_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
