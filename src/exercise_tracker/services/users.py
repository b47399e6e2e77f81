"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from exercise_tracker.domain.models import UserRecord
from exercise_tracker.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Storage interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record with an empty exercise log."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in creation order."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, username: str | None) -> UserRecord:
        """Create a user, rejecting a missing or blank username."""
        if username is None or not username.strip():
            raise ValidationError("username required")
        user = self.repository.create_user(username)
        logger.info("Created user %s", user.id)
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every stored user."""
        return self.repository.list_users()

    def get_user(self, user_id: str) -> UserRecord:
        """Return a user or raise NotFoundError."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("unknown _id")
        return user
