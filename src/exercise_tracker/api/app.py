"""FastAPI application factory."""

import logging
from pathlib import Path
from typing import TypeVar

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exercise_tracker.api.models import (
    ExercisePayload,
    ExerciseResponse,
    LogResponse,
    UserPayload,
    UserResponse,
)
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_cors_origins
from exercise_tracker.containers import AppContainer
from exercise_tracker.errors import TrackerError, ValidationError
from exercise_tracker.services.exercises import LogQuery

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_FORM_CONTENT_TYPES = frozenset(
    {"application/x-www-form-urlencoded", "multipart/form-data"}
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Exercise Tracker")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(
        request: Request, exc: TrackerError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/users")
    async def create_user(request: Request) -> UserResponse:
        """Create a user from a username."""
        state_container: AppContainer = request.app.state.container
        payload = await _read_payload(request, UserPayload)
        user = state_container.user_service.create_user(payload.username)
        return UserResponse.from_record(user)

    @app.get("/api/users")
    async def list_users(request: Request) -> list[UserResponse]:
        """Return every user."""
        state_container: AppContainer = request.app.state.container
        return [
            UserResponse.from_record(user)
            for user in state_container.user_service.list_users()
        ]

    @app.post("/api/users/{user_id}/exercises")
    async def add_exercise(user_id: str, request: Request) -> ExerciseResponse:
        """Append an exercise to a user's log."""
        state_container: AppContainer = request.app.state.container
        # The user lookup runs first so an unknown id wins over a bad body.
        state_container.user_service.get_user(user_id)
        payload = await _read_payload(request, ExercisePayload)
        user, entry = state_container.exercise_service.add_exercise(
            user_id,
            description=payload.description,
            duration=payload.duration,
            date_value=payload.date,
        )
        return ExerciseResponse.from_entry(user, entry)

    @app.get("/api/users/{user_id}/logs")
    async def get_log(
        user_id: str,
        request: Request,
        from_date: str | None = Query(default=None, alias="from"),
        to_date: str | None = Query(default=None, alias="to"),
        limit: str | None = None,
    ) -> LogResponse:
        """Return a user's exercise log filtered by from, to and limit."""
        state_container: AppContainer = request.app.state.container
        exercise_log = state_container.exercise_service.get_log(
            user_id, LogQuery(from_date=from_date, to_date=to_date, limit=limit)
        )
        return LogResponse.from_log(exercise_log)

    public_dir = container.settings.public_dir
    if public_dir and Path(public_dir).is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")

    return app


async def _read_payload(
    request: Request, model: type[PayloadT]
) -> PayloadT:
    """Parse a JSON or form body into the given payload model."""
    header = request.headers.get("content-type", "")
    content_type = header.split(";")[0].strip().lower()
    raw: object
    if content_type == "application/json":
        try:
            raw = await request.json()
        except ValueError as exc:
            raise ValidationError("malformed JSON body") from exc
        if not isinstance(raw, dict):
            raise ValidationError("request body must be an object")
    elif content_type in _FORM_CONTENT_TYPES:
        form = await request.form()
        raw = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        raw = {}
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError("invalid request body") from exc
