"""Pydantic models for request and response payloads."""

from pydantic import BaseModel, ConfigDict

from exercise_tracker.domain.dates import format_calendar_date
from exercise_tracker.domain.models import ExerciseEntry, ExerciseLog, UserRecord


class UserPayload(BaseModel):
    """Body of a user creation request."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = None


class ExercisePayload(BaseModel):
    """Body of an exercise creation request."""

    model_config = ConfigDict(extra="ignore")

    description: str | None = None
    duration: str | float | None = None
    date: str | None = None


class UserResponse(BaseModel):
    """Public view of a user."""

    id: str
    username: str

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(id=user.id, username=user.username)


class ExerciseResponse(BaseModel):
    """A newly logged exercise together with its owner."""

    username: str
    description: str
    duration: int | float
    date: str
    id: str

    @classmethod
    def from_entry(cls, user: UserRecord, entry: ExerciseEntry) -> "ExerciseResponse":
        return cls(
            username=user.username,
            description=entry.description,
            duration=entry.duration,
            date=format_calendar_date(entry.date),
            id=user.id,
        )


class LogItem(BaseModel):
    """One entry of an exercise log."""

    description: str
    duration: int | float
    date: str


class LogResponse(BaseModel):
    """A user's filtered exercise log."""

    username: str
    count: int
    id: str
    log: list[LogItem]

    @classmethod
    def from_log(cls, exercise_log: ExerciseLog) -> "LogResponse":
        return cls(
            username=exercise_log.user.username,
            count=exercise_log.count,
            id=exercise_log.user.id,
            log=[
                LogItem(
                    description=entry.description,
                    duration=entry.duration,
                    date=format_calendar_date(entry.date),
                )
                for entry in exercise_log.entries
            ],
        )
