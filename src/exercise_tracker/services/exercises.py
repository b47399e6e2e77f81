"""Exercise logging service."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from exercise_tracker.domain.dates import parse_calendar_date
from exercise_tracker.domain.models import ExerciseEntry, ExerciseLog, UserRecord
from exercise_tracker.errors import FormatError, ValidationError
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Storage interface for exercise entries."""

    def append_entry(self, user_id: str, entry: ExerciseEntry) -> None:
        """Append an entry to the end of a user's log."""

    def list_entries(self, user_id: str) -> list[ExerciseEntry]:
        """Return a user's entries in insertion order."""


@dataclass(frozen=True)
class LogQuery:
    """Raw filter values for a log request, as received from the caller."""

    from_date: str | None = None
    to_date: str | None = None
    limit: str | None = None


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ExerciseService:
    """Service that validates, stores and filters exercise entries."""

    user_service: UserService
    repository: ExerciseRepository
    clock: Callable[[], datetime] = field(default=_utc_now)
    timezone: str = "UTC"

    def add_exercise(
        self,
        user_id: str,
        description: str | None,
        duration: str | float | None,
        date_value: str | None = None,
    ) -> tuple[UserRecord, ExerciseEntry]:
        """Validate and append an exercise entry to a user's log."""
        user = self.user_service.get_user(user_id)
        if not description or _is_blank(duration):
            raise ValidationError("description and duration required")
        parsed_duration = _parse_duration(duration)
        if parsed_duration is None:
            raise FormatError("duration must be a number")
        if date_value:
            entry_date = parse_calendar_date(date_value)
            if entry_date is None:
                raise FormatError("invalid date")
        else:
            entry_date = self._today()

        entry = ExerciseEntry(
            description=description, duration=parsed_duration, date=entry_date
        )
        self.repository.append_entry(user.id, entry)
        logger.info("Logged exercise for user %s on %s", user.id, entry_date)
        return user, entry

    def get_log(self, user_id: str, query: LogQuery | None = None) -> ExerciseLog:
        """Return a user's entries narrowed by from, then to, then limit."""
        user = self.user_service.get_user(user_id)
        resolved = query or LogQuery()
        entries = self.repository.list_entries(user.id)

        start = parse_calendar_date(resolved.from_date) if resolved.from_date else None
        if start is not None:
            entries = [entry for entry in entries if entry.date >= start]
        end = parse_calendar_date(resolved.to_date) if resolved.to_date else None
        if end is not None:
            entries = [entry for entry in entries if entry.date <= end]
        limit = _parse_limit(resolved.limit)
        if limit is not None:
            entries = entries[:limit]

        return ExerciseLog(user=user, entries=entries)

    def _today(self) -> date:
        return self.clock().astimezone(ZoneInfo(self.timezone)).date()


def _is_blank(value: str | float | None) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_number(value: str | float) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_duration(value: str | float) -> int | float | None:
    number = _parse_number(value)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def _parse_limit(raw: str | None) -> int | None:
    if not raw:
        return None
    number = _parse_number(raw)
    if number is None or number < 0:
        return None
    return int(number)
