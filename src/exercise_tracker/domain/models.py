"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserRecord:
    """Represents a user held in the store."""

    id: str
    username: str


@dataclass(frozen=True)
class ExerciseEntry:
    """A single logged exercise owned by one user."""

    description: str
    duration: int | float
    date: date


@dataclass(frozen=True)
class ExerciseLog:
    """A user's exercise entries after log filtering."""

    user: UserRecord
    entries: list[ExerciseEntry]

    @property
    def count(self) -> int:
        return len(self.entries)
