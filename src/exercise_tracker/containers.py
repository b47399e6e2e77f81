"""Dependency container wiring for the application."""

from dataclasses import dataclass

from exercise_tracker.adapters.memory_store import InMemoryStore
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryStore
    user_service: UserService
    exercise_service: ExerciseService


def build_container(
    settings: Settings | None = None, store: InMemoryStore | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or InMemoryStore()
    user_service = UserService(resolved_store)
    exercise_service = ExerciseService(
        user_service=user_service,
        repository=resolved_store,
        timezone=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        user_service=user_service,
        exercise_service=exercise_service,
    )
