"""moodjournal FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moodjournal.api import health, hello
from moodjournal.core.config import settings
from moodjournal.core.errors import MoodJournalError
from moodjournal.db.base import Base
from moodjournal.db.session import engine
from moodjournal.models import Bye, Hello  # noqa: F401 - register for create_all

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the tables on SQLite; other databases are migrated with Alembic."""
    if engine.dialect.name == "sqlite":
        Base.metadata.create_all(bind=engine)
        logger.info("sqlite_schema_ready url=%s", engine.url)
    yield


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"statusCode": status_code, "data": None, "message": message},
    )


@app.exception_handler(MoodJournalError)
async def handle_mood_journal_error(request: Request, exc: MoodJournalError) -> JSONResponse:
    logger.info("request_rejected path=%s error=%s", request.url.path, type(exc).__name__)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error path=%s", request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


app.include_router(health.router)
app.include_router(hello.router)


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("moodjournal.main:app", host="0.0.0.0", port=8000, log_level="debug" if settings.debug else "info")
