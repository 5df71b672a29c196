from __future__ import annotations

import dataclasses
import itertools
import threading

from carfinder.domain.errors import ConflictError
from carfinder.domain.user import User, new_session_nonce
from carfinder.ports.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Process-local user store used when no database is configured.

    Ids come from a monotonically increasing counter and are never reused,
    so a deleted user's id cannot be picked up by a later registration.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        return next((user for user in self._users.values() if user.username == username), None)

    def add(
        self,
        username: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        with self._lock:
            if self.get_by_username(username) is not None:
                raise ConflictError("Username already exists", field="username")
            user = User(
                id=next(self._ids),
                username=username,
                password_hash=password_hash,
                first_name=first_name,
                last_name=last_name,
                session_nonce=new_session_nonce(),
            )
            self._users[user.id] = user
            return user

    def revoke_sessions(self, user_id: int) -> bool:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return False
            self._users[user_id] = dataclasses.replace(user, session_nonce=new_session_nonce())
            return True

    def delete(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
