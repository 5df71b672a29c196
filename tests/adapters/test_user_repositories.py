"""Both UserRepository implementations run through the same contract tests."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from carfinder.adapters.in_memory_user_repository import InMemoryUserRepository
from carfinder.adapters.postgres_user_repository import PostgresUserRepository
from carfinder.domain.errors import ConflictError
from carfinder.ports.user_repository import UserRepository


@pytest.fixture(params=["memory", "sql"])
def repository(request: pytest.FixtureRequest) -> UserRepository:
    if request.param == "memory":
        return InMemoryUserRepository()
    session: Session = request.getfixturevalue("session")
    return PostgresUserRepository(session=session)


def test_add_assigns_id_and_keeps_fields(repository: UserRepository) -> None:
    user = repository.add("jdoe", "hash", first_name="Jane", last_name="Doe")

    assert user.id > 0
    assert (user.username, user.password_hash, user.first_name, user.last_name) == (
        "jdoe",
        "hash",
        "Jane",
        "Doe",
    )
    assert repository.get(user.id) == user
    assert repository.get_by_username("jdoe") == user


def test_lookups_miss_with_none(repository: UserRepository) -> None:
    assert repository.get(999) is None
    assert repository.get_by_username("nobody") is None


def test_usernames_are_unique(repository: UserRepository) -> None:
    repository.add("jdoe", "hash")

    with pytest.raises(ConflictError) as exc_info:
        repository.add("jdoe", "other-hash")

    assert exc_info.value.context == {"field": "username"}


def test_repository_is_usable_after_conflict(repository: UserRepository) -> None:
    repository.add("jdoe", "hash")
    with pytest.raises(ConflictError):
        repository.add("jdoe", "hash")

    other = repository.add("asmith", "hash")

    assert repository.get_by_username("asmith") == other


def test_delete(repository: UserRepository) -> None:
    user = repository.add("jdoe", "hash")

    assert repository.delete(user.id) is True
    assert repository.get(user.id) is None
    assert repository.delete(user.id) is False


def test_in_memory_ids_are_never_reused() -> None:
    repository = InMemoryUserRepository()
    first = repository.add("a", "hash")
    repository.delete(first.id)

    second = repository.add("b", "hash")

    assert second.id != first.id


def test_new_users_get_a_session_nonce(repository: UserRepository) -> None:
    first = repository.add("jdoe", "hash")
    second = repository.add("asmith", "hash")

    assert len(first.session_nonce) == 32
    assert first.session_nonce != second.session_nonce


def test_revoke_sessions_rotates_nonce(repository: UserRepository) -> None:
    user = repository.add("jdoe", "hash")

    assert repository.revoke_sessions(user.id) is True

    reloaded = repository.get(user.id)
    assert reloaded is not None
    assert reloaded.session_nonce != user.session_nonce
    assert reloaded.username == "jdoe"


def test_revoke_sessions_of_missing_user(repository: UserRepository) -> None:
    assert repository.revoke_sessions(999) is False
