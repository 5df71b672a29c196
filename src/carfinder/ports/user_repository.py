from __future__ import annotations

from abc import ABC, abstractmethod

from carfinder.domain.user import User


class UserRepository(ABC):
    """
    Port for account persistence.

    Usernames are unique. Implementations raise ConflictError when asked to
    add a username that already exists.
    """

    @abstractmethod
    def get(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def add(
        self,
        username: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """Persist a new user and return it with its assigned id and a fresh session nonce."""
        ...

    @abstractmethod
    def revoke_sessions(self, user_id: int) -> bool:
        """Give the user a new session nonce. Returns False if no such user exists."""
        ...

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user. Returns False if no such user existed."""
        ...
