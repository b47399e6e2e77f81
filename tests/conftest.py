"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.adapters.memory_store import InMemoryStore
from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer, build_container
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.users import UserService

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=UTC)


@dataclass
class SequentialIds:
    """Deterministic id factory for tests."""

    issued: list[str] = field(default_factory=list)

    def __call__(self) -> str:
        value = f"user-{len(self.issued) + 1}"
        self.issued.append(value)
        return value


def fixed_clock(now: datetime = FIXED_NOW) -> Callable[[], datetime]:
    return lambda: now


@pytest.fixture
def settings() -> Settings:
    return Settings(
        port=3000,
        timezone="UTC",
        public_dir=None,
        cors_allow_origins="*",
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_service(store: InMemoryStore) -> UserService:
    return UserService(store)


@pytest.fixture
def exercise_service(
    store: InMemoryStore, user_service: UserService
) -> ExerciseService:
    return ExerciseService(
        user_service=user_service, repository=store, clock=fixed_clock()
    )


@pytest.fixture
def container(settings: Settings, store: InMemoryStore) -> AppContainer:
    built = build_container(settings, store=store)
    built.exercise_service.clock = fixed_clock()
    return built


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
