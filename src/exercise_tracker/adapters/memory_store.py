"""In-process store for users and their exercise entries."""

from collections.abc import Callable
from dataclasses import dataclass, field
from threading import Lock
from uuid import uuid4

from exercise_tracker.domain.models import ExerciseEntry, UserRecord


def _new_id() -> str:
    return uuid4().hex


@dataclass
class InMemoryStore:
    """Holds users and their exercise logs for the lifetime of the process.

    Implements both the user and the exercise repository interfaces. One lock
    guards both maps so a user and its log are always created together.
    """

    id_factory: Callable[[], str] = field(default=_new_id)
    _users: dict[str, UserRecord] = field(default_factory=dict)
    _entries: dict[str, list[ExerciseEntry]] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def create_user(self, username: str) -> UserRecord:
        """Store a new user with an empty exercise log."""
        with self._lock:
            user_id = self.id_factory()
            while user_id in self._users:
                user_id = self.id_factory()
            user = UserRecord(id=user_id, username=username)
            self._users[user_id] = user
            self._entries[user_id] = []
            return user

    def get_user(self, user_id: str) -> UserRecord | None:
        with self._lock:
            return self._users.get(user_id)

    def list_users(self) -> list[UserRecord]:
        with self._lock:
            return list(self._users.values())

    def append_entry(self, user_id: str, entry: ExerciseEntry) -> None:
        """Append an entry; the user must already exist."""
        with self._lock:
            if user_id not in self._users:
                raise KeyError(user_id)
            self._entries[user_id].append(entry)

    def list_entries(self, user_id: str) -> list[ExerciseEntry]:
        """Return a copy of a user's entries in insertion order."""
        with self._lock:
            return list(self._entries.get(user_id, []))
