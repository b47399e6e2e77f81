"""Tests for user service."""

import pytest

from exercise_tracker.adapters.memory_store import InMemoryStore
from exercise_tracker.errors import NotFoundError, ValidationError
from exercise_tracker.services.users import UserService


def test_create_user_returns_username_and_new_id(user_service: UserService) -> None:
    first = user_service.create_user("alice")
    second = user_service.create_user("alice")

    assert first.username == "alice"
    assert second.username == "alice"
    assert first.id != second.id


@pytest.mark.parametrize("username", [None, "", "   "])
def test_create_user_rejects_missing_username(
    user_service: UserService, username: str | None
) -> None:
    with pytest.raises(ValidationError, match="username required"):
        user_service.create_user(username)

    assert user_service.list_users() == []


def test_list_users_is_stable_and_side_effect_free(
    user_service: UserService,
) -> None:
    alice = user_service.create_user("alice")
    bob = user_service.create_user("bob")

    assert user_service.list_users() == [alice, bob]
    assert user_service.list_users() == [alice, bob]


def test_get_user_unknown_id_raises(user_service: UserService) -> None:
    with pytest.raises(NotFoundError, match="unknown _id"):
        user_service.get_user("missing")


def test_create_user_initializes_empty_log(store: InMemoryStore) -> None:
    user = UserService(store).create_user("carol")

    assert store.list_entries(user.id) == []
